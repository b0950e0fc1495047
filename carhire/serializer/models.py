"""
Model Serializers
-----------------

Defines serializers for the records in the system, along with the
payloads used to create and update them.
"""

from marshmallow import Schema
from marshmallow.fields import Integer, Boolean, String, DateTime, Url
from marshmallow.validate import Length, Range

from .fields import IdentityField

U64 = Range(min=0, max=2 ** 64 - 1)


class VehiclePayloadSchema(Schema):
    """The fields a caller supplies when adding or updating a vehicle."""

    make = String(required=True, validate=Length(min=2))
    model = String(required=True, validate=Length(min=2))
    year = Integer(required=True, strict=True, validate=Range(min=1880, max=2024))
    color = String(required=True, validate=Length(min=1))
    is_booked = Boolean(load_default=False)


class VehicleSchema(Schema):
    """The schema corresponding to the :class:`~carhire.models.vehicle.Vehicle` model."""

    id = Integer(required=True)
    url = Url(relative=True)
    make = String(required=True)
    model = String(required=True)
    year = Integer(required=True)
    color = String(required=True)
    created_at = DateTime(required=True)
    updated_at = DateTime(allow_none=True)
    owner = IdentityField(required=True)
    is_booked = Boolean(required=True)


class CustomerPayloadSchema(Schema):
    name = String(required=True, validate=Length(min=1))
    contact = String(required=True)


class CustomerSchema(Schema):
    id = Integer(required=True)
    url = Url(relative=True)
    name = String(required=True)
    contact = String(required=True)


class ReservationRequestSchema(Schema):
    car_id = Integer(required=True, strict=True, validate=U64)
    customer_id = Integer(required=True, strict=True, validate=U64)


class ReservationSchema(Schema):
    car_id = Integer(required=True)
    car_url = Url(relative=True)
    customer_id = Integer(required=True)
    customer_url = Url(relative=True)
    reservation_time = DateTime(required=True)
