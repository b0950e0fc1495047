"""
The models package contains all the records kept by the server.

.. autoclasstree:: carhire.models
"""

from .customer import Customer
from .identity import Identity
from .reservation import Reservation
from .vehicle import Vehicle
