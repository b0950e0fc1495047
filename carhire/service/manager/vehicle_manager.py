"""
Vehicle Manager
===============

Handles the creation, updating, and removal of vehicles.

Every vehicle is owned by the caller that added it. Only the owner may
update or delete it, while anyone may look it up.

Responsibilities
----------------

- add a vehicle, assigning it the next id
- get a single vehicle, or all of them
- update or delete a vehicle on behalf of its owner
- report whether a vehicle is booked
"""

from typing import Any, List, Mapping, Optional

from carhire import logger
from carhire.models import Identity, Vehicle
from carhire.permissions import CallerOwnsVehicle, PermissionDenied
from carhire.serializer.models import VehiclePayloadSchema
from carhire.service.clock import Clock, utcnow
from carhire.service.errors import NotFound, NotAuthorized
from carhire.service.validation import validate
from carhire.store import Storage


class VehicleManager:

    def __init__(self, storage: Storage, clock: Clock = utcnow):
        self._vehicles = storage.vehicles
        self._ids = storage.vehicle_ids
        self._clock = clock
        self._payload_schema = VehiclePayloadSchema()
        self.owner_permission = CallerOwnsVehicle()

    def find(self, vehicle_id: int) -> Optional[Vehicle]:
        """Gets the vehicle with the given id, or None."""
        return self._vehicles.get(vehicle_id)

    def get(self, vehicle_id: int) -> Vehicle:
        """:raises NotFound: If there is no such vehicle."""
        vehicle = self.find(vehicle_id)
        if vehicle is None:
            raise NotFound(f"a vehicle with id={vehicle_id} not found")
        return vehicle

    def get_all(self) -> List[Vehicle]:
        """Gets every vehicle, ordered by id."""
        return [vehicle for _, vehicle in self._vehicles.iterate_all()]

    def add(self, payload: Mapping[str, Any], *, caller: Identity) -> Vehicle:
        """
        Adds a vehicle owned by the caller.

        The id is only taken from the counter once the record is stored,
        so a rejected payload or an oversized record never uses up an id.

        :raises ValidationFailed: If the payload is invalid.
        :raises RecordTooLargeError: If the vehicle is too large to store. Nothing is stored.
        """
        data = validate(self._payload_schema, payload)

        vehicle = Vehicle(
            id=self._ids.current(),
            make=data["make"],
            model=data["model"],
            year=data["year"],
            color=data["color"],
            created_at=self._clock(),
            updated_at=None,
            owner=caller,
            is_booked=data["is_booked"],
        )
        self._vehicles.insert(vehicle.id, vehicle)
        self._ids.next()
        logger.info("Vehicle %s added by %s", vehicle.id, caller)
        return vehicle

    def update(self, vehicle_id: int, payload: Mapping[str, Any], *, caller: Identity) -> Vehicle:
        """
        Replaces the mutable fields of a vehicle.

        :raises ValidationFailed: If the payload is invalid.
        :raises NotFound: If there is no such vehicle.
        :raises NotAuthorized: If the caller does not own the vehicle.
        """
        data = validate(self._payload_schema, payload)

        vehicle = self.find(vehicle_id)
        if vehicle is None:
            raise NotFound(f"couldn't update a vehicle with id={vehicle_id}. vehicle not found")
        self._check_owner(vehicle, caller, "update")

        vehicle.make = data["make"]
        vehicle.model = data["model"]
        vehicle.year = data["year"]
        vehicle.color = data["color"]
        vehicle.is_booked = data["is_booked"]
        vehicle.updated_at = self._clock()

        self._vehicles.insert(vehicle.id, vehicle)
        logger.info("Vehicle %s updated by %s", vehicle.id, caller)
        return vehicle

    def delete(self, vehicle_id: int, *, caller: Identity) -> Vehicle:
        """
        Removes a vehicle, returning it.

        Reservations for the vehicle are left in place.

        :raises NotFound: If there is no such vehicle.
        :raises NotAuthorized: If the caller does not own the vehicle.
        """
        vehicle = self.find(vehicle_id)
        if vehicle is None:
            raise NotFound(f"couldn't delete a vehicle with id={vehicle_id}. vehicle not found")
        self._check_owner(vehicle, caller, "delete")

        self._vehicles.remove(vehicle_id)
        logger.info("Vehicle %s deleted by %s", vehicle_id, caller)
        return vehicle

    def is_booked(self, vehicle_id: int) -> bool:
        """:raises NotFound: If there is no such vehicle."""
        return self.get(vehicle_id).is_booked

    def _check_owner(self, vehicle: Vehicle, caller: Identity, action: str):
        try:
            self.owner_permission(caller, vehicle=vehicle)
        except PermissionDenied as error:
            logger.info("Refused to %s vehicle %s for %s", action, vehicle.id, caller)
            raise NotAuthorized(f"Unauthorized to {action} vehicle with id={vehicle.id}: {error}") from error
