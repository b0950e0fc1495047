import pytest

from carhire.models import Identity
from carhire.permissions import PermissionDenied, CallerOwnsVehicle
from carhire.service import NotAuthorized


class TestCallerOwnsVehicle:

    def test_owner_passes(self, random_vehicle, owner):
        """Assert that calling a permission that passes does not raise."""
        assert CallerOwnsVehicle()(owner, vehicle=random_vehicle) is None

    def test_stranger_fails(self, random_vehicle, stranger):
        with pytest.raises(PermissionDenied) as error:
            CallerOwnsVehicle()(stranger, vehicle=random_vehicle)
        assert str(error.value) == f"the caller does not own vehicle {random_vehicle.id}"

    def test_anonymous_fails(self, random_vehicle):
        with pytest.raises(PermissionDenied):
            CallerOwnsVehicle()(Identity.ANONYMOUS, vehicle=random_vehicle)


def test_refusal_reaches_caller(vehicle_manager, random_vehicle, stranger):
    """Assert that the vehicle service reports why the permission was denied."""
    with pytest.raises(NotAuthorized) as error:
        vehicle_manager.delete(random_vehicle.id, caller=stranger)
    assert "does not own vehicle" in error.value.message
