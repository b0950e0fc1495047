"""
Fields
-------

Defines some additional fields so that the Schemas can
serialize to and from additional native python data types.
"""

from enum import Enum
from typing import Optional, Type, Union

from marshmallow import fields, ValidationError

from carhire.models import Identity


class IdentityField(fields.Field):
    """
    A field that serializes an :class:`~carhire.models.Identity` to its
    hex-encoded principal and de-serializes it back.
    """

    def _serialize(self, value: Union[Identity, str], attr, obj, **kwargs) -> Optional[str]:
        if value is None:
            return None
        if isinstance(value, Identity):
            return str(value)
        if isinstance(value, str):
            return value
        raise ValidationError(f"Only accepts type Identity or str, not {type(value)}")

    def _deserialize(self, value: str, attr, data, **kwargs) -> Identity:
        try:
            return Identity.from_hex(value)
        except (ValueError, TypeError):
            raise ValidationError(f"{value} is not a valid hex-encoded identity.")


class EnumField(fields.Field):
    """
    A field that serializes an :class:`~enum.Enum` to a :class:`str` and back.
    """

    def __init__(self, enum_type: Type[Enum], *args, **kwargs):
        super().__init__(*args, **kwargs)
        if not issubclass(enum_type, Enum):
            raise ValueError(f"Expected enum type, got {type(enum_type)} instead")
        self._enum_type = enum_type

    def _serialize(self, value: Union[Enum, str], attr, obj, **kwargs):
        if isinstance(value, self._enum_type):
            return value.value
        if isinstance(value, str) and value in (enum.value for enum in self._enum_type):
            return value
        return None

    def _deserialize(self, value: str, attr, data, **kwargs) -> Enum:
        try:
            return self._enum_type(value)
        except ValueError:
            raise ValidationError(f"Field does not exist on {self._enum_type}.")


def Many(schema):
    return fields.List(fields.Nested(schema))
