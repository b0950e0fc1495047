"""
Vehicle Related Views
-------------------------

Handles all the vehicle CRUD. Vehicles may be read by anyone,
but only updated or deleted by the caller that added them.
"""
from http import HTTPStatus

from marshmallow import fields

from carhire.serializer import JSendStatus, JSendSchema, expects, returns, Many
from carhire.serializer.models import VehicleSchema
from carhire.views.base import BaseView
from carhire.views.decorators import match_ids, handles_errors


class VehiclesView(BaseView):
    """
    Gets the vehicles, or adds a new vehicle.
    """
    url = "/vehicles"

    @returns(JSendSchema.of(vehicles=Many(VehicleSchema())))
    async def get(self):
        """Gets all the vehicles from the system, ordered by id."""
        return {
            "status": JSendStatus.SUCCESS,
            "data": {"vehicles": [
                vehicle.serialize(self.request.app.router) for vehicle in self.vehicle_manager.get_all()
            ]}
        }

    @handles_errors
    @expects(None)
    @returns(JSendSchema.of(vehicle=VehicleSchema()), HTTPStatus.CREATED)
    async def post(self):
        """Adds a vehicle owned by the caller."""
        vehicle = self.vehicle_manager.add(self.request["data"], caller=self.caller)
        return {
            "status": JSendStatus.SUCCESS,
            "data": {"vehicle": vehicle.serialize(self.request.app.router)}
        }


class VehicleView(BaseView):
    """
    Gets, updates, or deletes a single vehicle.
    """
    url = "/vehicles/{id}"
    name = "vehicle"

    @handles_errors
    @match_ids(vehicle_id="id")
    @returns(JSendSchema.of(vehicle=VehicleSchema()))
    async def get(self, vehicle_id: int):
        vehicle = self.vehicle_manager.get(vehicle_id)
        return {
            "status": JSendStatus.SUCCESS,
            "data": {"vehicle": vehicle.serialize(self.request.app.router)}
        }

    @handles_errors
    @match_ids(vehicle_id="id")
    @expects(None)
    @returns(JSendSchema.of(vehicle=VehicleSchema()))
    async def put(self, vehicle_id: int):
        """Replaces the details of a vehicle. Only the owner may do this."""
        vehicle = self.vehicle_manager.update(vehicle_id, self.request["data"], caller=self.caller)
        return {
            "status": JSendStatus.SUCCESS,
            "data": {"vehicle": vehicle.serialize(self.request.app.router)}
        }

    @handles_errors
    @match_ids(vehicle_id="id")
    @returns(JSendSchema.of(vehicle=VehicleSchema()))
    async def delete(self, vehicle_id: int):
        """Deletes a vehicle, returning it. Only the owner may do this."""
        vehicle = self.vehicle_manager.delete(vehicle_id, caller=self.caller)
        return {
            "status": JSendStatus.SUCCESS,
            "data": {"vehicle": vehicle.serialize(self.request.app.router)}
        }


class VehicleBookedView(BaseView):
    url = "/vehicles/{id}/booked"

    @handles_errors
    @match_ids(vehicle_id="id")
    @returns(JSendSchema.of(is_booked=fields.Boolean()))
    async def get(self, vehicle_id: int):
        return {
            "status": JSendStatus.SUCCESS,
            "data": {"is_booked": self.vehicle_manager.is_booked(vehicle_id)}
        }
