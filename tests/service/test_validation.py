import pytest

from carhire.serializer.models import VehiclePayloadSchema
from carhire.service import ValidationFailed
from carhire.service.validation import flatten_messages, validate


def test_flatten_messages():
    messages = {
        "year": ["Must be greater than or equal to 1880 and less than or equal to 2024."],
        "owner": {"name": ["Missing data for required field."]},
        "_schema": ["Invalid input."],
    }
    assert flatten_messages(messages) == [
        "year: Must be greater than or equal to 1880 and less than or equal to 2024.",
        "owner.name: Missing data for required field.",
        "Invalid input.",
    ]


def test_validate_returns_data():
    data = validate(VehiclePayloadSchema(), {"make": "Ford", "model": "Focus", "year": 2001, "color": "grey"})
    assert data == {"make": "Ford", "model": "Focus", "year": 2001, "color": "grey", "is_booked": False}


def test_validate_joins_messages():
    with pytest.raises(ValidationFailed) as error:
        validate(VehiclePayloadSchema(), {"make": "Ford", "model": "Focus", "year": 1800})
    assert "year: " in error.value.message
    assert "color: Missing data for required field." in error.value.message
    assert "; " in error.value.message


def test_validate_non_object():
    with pytest.raises(ValidationFailed):
        validate(VehiclePayloadSchema(), ["Ford"])
