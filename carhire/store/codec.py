"""
Record Codec
------------

Deterministic binary encoding for the records kept in a
:class:`~carhire.store.sorted_map.SortedMap`.

A record is encoded as its fields, in declaration order, with no tags or
padding between them. All integers are little-endian. Decoding is strict:
truncated input, trailing bytes, or any byte that the field type could
not have produced raises a :class:`~carhire.store.exceptions.DecodeError`.
"""

import struct
from abc import ABC, abstractmethod
from datetime import datetime, timedelta, timezone
from typing import Any, Sequence, Tuple, Type

from carhire.models import Customer, Identity, Reservation, Vehicle
from carhire.store.exceptions import DecodeError, EncodeError, RecordTooLargeError

MAX_RECORD_SIZE = 1024
"""The largest encoded record that any of the maps accept."""

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class Reader:
    """Consumes a byte string from the front."""

    def __init__(self, data: bytes):
        self._data = memoryview(data)
        self._offset = 0

    def take(self, length: int) -> bytes:
        if self._offset + length > len(self._data):
            raise DecodeError(f"Expected {length} more bytes at offset {self._offset}, the record is too short.")
        chunk = bytes(self._data[self._offset:self._offset + length])
        self._offset += length
        return chunk

    @property
    def remaining(self) -> int:
        return len(self._data) - self._offset


class Field(ABC):
    """A single encodable value type."""

    @abstractmethod
    def encode(self, value, out: bytearray):
        """Appends the encoded value to ``out``."""

    @abstractmethod
    def decode(self, reader: Reader):
        """Reads a value of this type from the reader."""


class Integer(Field):

    def __init__(self, bits: int):
        self._struct = struct.Struct({32: "<I", 64: "<Q"}[bits])
        self._bits = bits

    def encode(self, value, out):
        if not isinstance(value, int) or isinstance(value, bool):
            raise EncodeError(f"Expected an int, got {type(value)}")
        if not 0 <= value < 2 ** self._bits:
            raise EncodeError(f"{value} does not fit in an unsigned {self._bits} bit integer.")
        out += self._struct.pack(value)

    def decode(self, reader):
        value, = self._struct.unpack(reader.take(self._struct.size))
        return value


U32 = Integer(32)
U64 = Integer(64)


class Bool(Field):

    def encode(self, value, out):
        if not isinstance(value, bool):
            raise EncodeError(f"Expected a bool, got {type(value)}")
        out.append(1 if value else 0)

    def decode(self, reader):
        byte = reader.take(1)[0]
        if byte not in (0, 1):
            raise DecodeError(f"Invalid bool byte {byte}.")
        return byte == 1


class Bytes(Field):
    """A u32 length followed by the raw bytes."""

    def encode(self, value, out):
        if not isinstance(value, bytes):
            raise EncodeError(f"Expected bytes, got {type(value)}")
        U32.encode(len(value), out)
        out += value

    def decode(self, reader):
        return reader.take(U32.decode(reader))


class String(Bytes):

    def encode(self, value, out):
        if not isinstance(value, str):
            raise EncodeError(f"Expected a str, got {type(value)}")
        super().encode(value.encode("utf-8"), out)

    def decode(self, reader):
        raw = super().decode(reader)
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as error:
            raise DecodeError("String is not valid UTF-8.") from error


class Timestamp(Field):
    """An aware datetime, stored as microseconds since the unix epoch."""

    def encode(self, value, out):
        if not isinstance(value, datetime) or value.tzinfo is None:
            raise EncodeError(f"Expected an aware datetime, got {value!r}")
        delta = value - EPOCH
        U64.encode((delta.days * 86400 + delta.seconds) * 10 ** 6 + delta.microseconds, out)

    def decode(self, reader):
        micros = U64.decode(reader)
        try:
            return EPOCH + timedelta(microseconds=micros)
        except OverflowError as error:
            raise DecodeError(f"Timestamp {micros} is out of range.") from error


class IdentityField(Bytes):

    def encode(self, value, out):
        if not isinstance(value, Identity):
            raise EncodeError(f"Expected an Identity, got {type(value)}")
        super().encode(value.principal, out)

    def decode(self, reader):
        return Identity(super().decode(reader))


class Optional(Field):
    """A presence byte, followed by the inner value if it is present."""

    def __init__(self, inner: Field):
        self.inner = inner

    def encode(self, value, out):
        if value is None:
            out.append(0)
        else:
            out.append(1)
            self.inner.encode(value, out)

    def decode(self, reader):
        flag = reader.take(1)[0]
        if flag == 0:
            return None
        if flag == 1:
            return self.inner.decode(reader)
        raise DecodeError(f"Invalid presence byte {flag}.")


class RecordCodec:
    """
    Encodes and decodes a record type from the list of its fields.

    :param record_type: The class to construct when decoding.
    :param fields: The attribute names and their field types, in encoding order.
    :param max_size: The largest encoding the codec will produce.
    """

    def __init__(self, record_type: Type, fields: Sequence[Tuple[str, Field]], max_size: int = MAX_RECORD_SIZE):
        self.record_type = record_type
        self.fields = tuple(fields)
        self.max_size = max_size

    def encode(self, record) -> bytes:
        """
        :raises RecordTooLargeError: If the record does not fit in ``max_size`` bytes.
        :raises EncodeError: If a value cannot be represented by its field.
        """
        if not isinstance(record, self.record_type):
            raise EncodeError(f"Expected a {self.record_type.__name__}, got {type(record)}")

        out = bytearray()
        for name, field in self.fields:
            try:
                field.encode(getattr(record, name), out)
            except EncodeError as error:
                raise EncodeError(f"{self.record_type.__name__}.{name}: {error}") from error

        if len(out) > self.max_size:
            raise RecordTooLargeError(len(out), self.max_size)
        return bytes(out)

    def decode(self, data: bytes) -> Any:
        """:raises DecodeError: If the data is not an encoded record of this type."""
        reader = Reader(data)
        values = {name: field.decode(reader) for name, field in self.fields}
        if reader.remaining:
            raise DecodeError(f"{reader.remaining} unexpected trailing bytes after {self.record_type.__name__}.")
        return self.record_type(**values)

    def __repr__(self):
        return f"RecordCodec({self.record_type.__name__}, max_size={self.max_size})"


VehicleCodec = RecordCodec(Vehicle, [
    ("id", U64),
    ("make", String()),
    ("model", String()),
    ("year", U32),
    ("color", String()),
    ("created_at", Timestamp()),
    ("updated_at", Optional(Timestamp())),
    ("owner", IdentityField()),
    ("is_booked", Bool()),
])

CustomerCodec = RecordCodec(Customer, [
    ("id", U64),
    ("name", String()),
    ("contact", String()),
])

ReservationCodec = RecordCodec(Reservation, [
    ("car_id", U64),
    ("customer_id", U64),
    ("reservation_time", Timestamp()),
])
