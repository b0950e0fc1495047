from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Reservation:
    """
    A booking of a vehicle by a customer. Reservations are keyed by the
    vehicle, so there is at most one per vehicle, and are never modified.
    """

    car_id: int
    customer_id: int
    reservation_time: datetime

    def serialize(self, router):
        return {
            "car_id": self.car_id,
            "car_url": router["vehicle"].url_for(id=str(self.car_id)).path,
            "customer_id": self.customer_id,
            "customer_url": router["customer"].url_for(id=str(self.customer_id)).path,
            "reservation_time": self.reservation_time,
        }
