"""
Reservation Related Views
--------------------------------

Handles making, fetching, and cancelling reservations.
Reservations are addressed by the id of the reserved vehicle.
"""
from http import HTTPStatus

from carhire.serializer import JSendStatus, JSendSchema, expects, returns
from carhire.serializer.models import ReservationSchema, ReservationRequestSchema
from carhire.views.base import BaseView
from carhire.views.decorators import match_ids, handles_errors


class ReservationsView(BaseView):
    """
    Reserves a vehicle for a customer.
    """
    url = "/reservations"

    @handles_errors
    @expects(ReservationRequestSchema())
    @returns(JSendSchema.of(reservation=ReservationSchema()), HTTPStatus.CREATED)
    async def post(self):
        reservation = self.reservation_manager.reserve(
            self.request["data"]["car_id"],
            self.request["data"]["customer_id"]
        )
        return {
            "status": JSendStatus.SUCCESS,
            "data": {"reservation": reservation.serialize(self.request.app.router)}
        }


class ReservationView(BaseView):
    """
    Gets or cancels the reservation of a single vehicle.
    """
    url = "/reservations/{car_id}"
    name = "reservation"

    @handles_errors
    @match_ids(car_id="car_id")
    @returns(JSendSchema.of(reservation=ReservationSchema()))
    async def get(self, car_id: int):
        reservation = self.reservation_manager.get(car_id)
        return {
            "status": JSendStatus.SUCCESS,
            "data": {"reservation": reservation.serialize(self.request.app.router)}
        }

    @handles_errors
    @match_ids(car_id="car_id")
    @returns(cancelled=(None, HTTPStatus.NO_CONTENT))
    async def delete(self, car_id: int):
        self.reservation_manager.cancel(car_id)
        return "cancelled", None
