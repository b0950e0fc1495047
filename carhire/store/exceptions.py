"""
Storage Errors
--------------

Errors raised by the storage layer. None of these are recoverable by the
caller: they signal either a corrupt or incompatible backing store, or a
programming error such as a record that cannot fit in its slot.
"""


class StoreError(Exception):
    """Base class for all fatal storage errors."""


class StoreLayoutError(StoreError):
    """
    Raised when a backing store or region does not have the layout
    that is being asked of it.
    """


class OutOfBoundsError(StoreError):
    """Raised when reading or writing past the end of a memory."""


class EncodeError(StoreError):
    """Raised when a value cannot be represented by its field type."""


class RecordTooLargeError(EncodeError):
    """Raised when an encoded record exceeds the maximum size of its codec."""

    def __init__(self, size: int, max_size: int):
        self.size = size
        self.max_size = max_size
        super().__init__(f"Encoded record is {size} bytes, the limit is {max_size}.")


class DecodeError(StoreError):
    """Raised when some bytes do not match the schema they are decoded with."""


class StoreFullError(StoreError):
    """Raised when a region cannot grow to fit another record."""
