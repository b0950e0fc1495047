"""
Reservation Manager
===================

Handles the creation and cancellation of reservations.

A reservation books a vehicle for a customer. Reservations are stored
under the id of the vehicle, so a vehicle is either free (no reservation
stored) or reserved (exactly one reservation stored).

Bookings are refused when the vehicle's ``is_booked`` flag is set. That
flag belongs to the vehicle's owner: making or cancelling a reservation
does not change it.

Responsibilities
----------------

- make a reservation
- get the reservation for a vehicle
- cancel a reservation
"""

from carhire import logger
from carhire.models import Reservation
from carhire.service.clock import Clock, utcnow
from carhire.service.errors import AlreadyBooked, NotFound
from carhire.service.manager.customer_manager import CustomerManager
from carhire.service.manager.vehicle_manager import VehicleManager
from carhire.store import Storage


class ReservationManager:

    def __init__(
        self, storage: Storage,
        vehicle_manager: VehicleManager, customer_manager: CustomerManager,
        clock: Clock = utcnow
    ):
        self._reservations = storage.reservations
        self._vehicle_manager = vehicle_manager
        self._customer_manager = customer_manager
        self._clock = clock

    def reserve(self, car_id: int, customer_id: int) -> Reservation:
        """
        Reserves a vehicle for a customer, replacing any reservation
        already stored for the vehicle.

        :raises NotFound: If either the vehicle or the customer does not exist.
        :raises AlreadyBooked: If the vehicle is flagged as booked.
        """
        vehicle = self._vehicle_manager.find(car_id)
        customer = self._customer_manager.find(customer_id)

        if vehicle is None or customer is None:
            raise NotFound("Car or customer not found for reservation")

        if vehicle.is_booked:
            logger.info("Refused reservation of booked vehicle %s", car_id)
            raise AlreadyBooked(f"Car with id={car_id} is already booked.")

        reservation = Reservation(car_id=car_id, customer_id=customer_id, reservation_time=self._clock())
        self._reservations.insert(car_id, reservation)
        logger.info("Vehicle %s reserved for customer %s", car_id, customer_id)
        return reservation

    def get(self, car_id: int) -> Reservation:
        """:raises NotFound: If the vehicle has no reservation."""
        reservation = self._reservations.get(car_id)
        if reservation is None:
            raise NotFound(f"a reservation for car_id={car_id} not found")
        return reservation

    def cancel(self, car_id: int):
        """
        Cancels the reservation for a vehicle.

        :raises NotFound: If the vehicle has no reservation.
        """
        if self._reservations.remove(car_id) is None:
            raise NotFound(f"a reservation for car_id={car_id} not found")
        logger.info("Reservation for vehicle %s cancelled", car_id)
