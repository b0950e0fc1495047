"""
Sorted Map
----------

A persisted mapping from unsigned 64 bit keys to records, ordered by key.

The region starts with a header::

    0       magic "MAP"
    3       layout version
    4       maximum record size (u32)
    8       number of entries (u64)

followed by fixed-width slots, one per entry, sorted by key::

    key (u64) | record length (u32) | encoded record (up to the maximum size)

Lookups binary-search the slots. Inserting or removing a key shifts the
slots after it by one.
"""

import struct
from typing import Generic, Iterator, Optional, Tuple, TypeVar

from carhire.store.codec import RecordCodec
from carhire.store.exceptions import StoreFullError, StoreLayoutError, DecodeError
from carhire.store.memory import Memory, PAGE_SIZE

MAGIC = b"MAP"
LAYOUT_VERSION = 1

T = TypeVar("T")

_HEADER = struct.Struct("<3sBIQ")
_LENGTH = struct.Struct("<Q")
_SLOT_HEADER = struct.Struct("<QI")
_LENGTH_OFFSET = 8


class SortedMap(Generic[T]):
    """
    A map of records that lives in a single memory, usually a
    :class:`~carhire.store.regions.Region`. Records are encoded with the
    supplied :class:`~carhire.store.codec.RecordCodec` before anything is
    written, so a record that is too large never reaches the memory.
    """

    def __init__(self, memory: Memory, codec: RecordCodec):
        self._memory = memory
        self._codec = codec
        self._slot_size = _SLOT_HEADER.size + codec.max_size

    @classmethod
    def init(cls, memory: Memory, codec: RecordCodec) -> 'SortedMap':
        """
        Opens the map stored in the memory, creating an empty one if the memory is empty.

        :raises StoreLayoutError: If the memory holds something other than a map
            of records with the same maximum size.
        """
        sorted_map = cls(memory, codec)

        if memory.size() == 0:
            if memory.grow(1) == -1:
                raise StoreLayoutError("The memory cannot grow to fit a map.")
            memory.write(0, _HEADER.pack(MAGIC, LAYOUT_VERSION, codec.max_size, 0))
            return sorted_map

        magic, version, max_size, _ = _HEADER.unpack(memory.read(0, _HEADER.size))
        if magic != MAGIC:
            raise StoreLayoutError(f"The memory does not hold a map (found magic {magic!r}).")
        if version != LAYOUT_VERSION:
            raise StoreLayoutError(f"Unsupported map layout version {version}.")
        if max_size != codec.max_size:
            raise StoreLayoutError(f"The map holds records of up to {max_size} bytes, not {codec.max_size}.")
        return sorted_map

    def get(self, key: int) -> Optional[T]:
        """Gets the record stored under the key, if any."""
        found, index = self._search(key)
        return self._read_record(index) if found else None

    def insert(self, key: int, record: T) -> Optional[T]:
        """
        Stores the record under the key, replacing any existing record.

        :return: The record previously stored under the key, if any.
        :raises RecordTooLargeError: If the record does not fit in a slot.
        :raises StoreFullError: If the memory cannot grow to fit the record.
        """
        data = self._codec.encode(record)
        found, index = self._search(key)

        if found:
            previous = self._read_record(index)
            self._write_slot(index, key, data)
            return previous

        length = len(self)
        self._reserve(length + 1)
        if index < length:
            tail = self._memory.read(self._slot_offset(index), (length - index) * self._slot_size)
            self._memory.write(self._slot_offset(index + 1), tail)
        self._write_slot(index, key, data)
        self._set_length(length + 1)
        return None

    def remove(self, key: int) -> Optional[T]:
        """
        Removes the record stored under the key.

        :return: The removed record, or None if there was nothing to remove.
        """
        found, index = self._search(key)
        if not found:
            return None

        previous = self._read_record(index)
        length = len(self)
        if index < length - 1:
            tail = self._memory.read(self._slot_offset(index + 1), (length - index - 1) * self._slot_size)
            self._memory.write(self._slot_offset(index), tail)
        self._memory.write(self._slot_offset(length - 1), bytes(self._slot_size))
        self._set_length(length - 1)
        return previous

    def iterate_all(self) -> Iterator[Tuple[int, T]]:
        """
        Lazily yields every (key, record) pair in ascending key order.
        Each call starts again from the smallest key.
        """
        index = 0
        while index < len(self):
            yield self._read_key(index), self._read_record(index)
            index += 1

    def keys(self) -> Iterator[int]:
        return (self._read_key(index) for index in range(len(self)))

    def __iter__(self):
        return self.iterate_all()

    def __len__(self):
        length, = _LENGTH.unpack(self._memory.read(_LENGTH_OFFSET, _LENGTH.size))
        return length

    def __contains__(self, key: int):
        found, _ = self._search(key)
        return found

    def _search(self, key: int) -> Tuple[bool, int]:
        """Finds the slot holding the key, or the slot it should be inserted at."""
        if not isinstance(key, int) or isinstance(key, bool) or not 0 <= key < 2 ** 64:
            raise ValueError(f"Keys must be unsigned 64 bit integers, not {key!r}")

        low, high = 0, len(self)
        while low < high:
            middle = (low + high) // 2
            middle_key = self._read_key(middle)
            if middle_key == key:
                return True, middle
            if middle_key < key:
                low = middle + 1
            else:
                high = middle
        return False, low

    def _slot_offset(self, index: int) -> int:
        return _HEADER.size + index * self._slot_size

    def _read_key(self, index: int) -> int:
        key, _ = _SLOT_HEADER.unpack(self._memory.read(self._slot_offset(index), _SLOT_HEADER.size))
        return key

    def _read_record(self, index: int) -> T:
        offset = self._slot_offset(index)
        _, size = _SLOT_HEADER.unpack(self._memory.read(offset, _SLOT_HEADER.size))
        if size > self._codec.max_size:
            raise DecodeError(f"Slot {index} claims a record of {size} bytes.")
        return self._codec.decode(self._memory.read(offset + _SLOT_HEADER.size, size))

    def _write_slot(self, index: int, key: int, data: bytes):
        self._memory.write(self._slot_offset(index), _SLOT_HEADER.pack(key, len(data)) + data)

    def _set_length(self, length: int):
        self._memory.write(_LENGTH_OFFSET, _LENGTH.pack(length))

    def _reserve(self, entries: int):
        required_pages = -(-self._slot_offset(entries) // PAGE_SIZE)
        missing_pages = required_pages - self._memory.size()
        if missing_pages > 0 and self._memory.grow(missing_pages) == -1:
            raise StoreFullError(f"Cannot grow the map to hold {entries} records.")
