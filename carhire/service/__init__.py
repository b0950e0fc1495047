"""
.. autoclasstree:: carhire.service

The service layer for the system. Acts as the internal API.
Each interface (the REST API, tests, the command line) should use
the service layer to implement their logic.

The service layer implements the use cases for the system, such
that they may be reused by any program that needs to access it.
It is designed to represent the business logic.

All of the managers are synchronous: a call reads, checks and writes
the store without yielding to the event loop, so no two calls interleave.
"""

from .errors import ServiceError, ValidationFailed, NotFound, NotAuthorized, AlreadyBooked
from .manager.customer_manager import CustomerManager
from .manager.reservation_manager import ReservationManager
from .manager.vehicle_manager import VehicleManager
