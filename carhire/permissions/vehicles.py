from carhire.models import Identity, Vehicle
from carhire.permissions.permission import Permission, PermissionDenied


class CallerOwnsVehicle(Permission):
    """Asserts that the caller is the identity that created the vehicle."""

    def __call__(self, caller: Identity, *, vehicle: Vehicle, **kwargs):
        if vehicle.owner != caller:
            raise PermissionDenied(f"The caller does not own vehicle {vehicle.id}.")

    def __repr__(self):
        return "CallerOwnsVehicle()"
