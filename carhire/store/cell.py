"""
Counter
-------

A single unsigned 64 bit integer persisted at the start of a region,
used to hand out record ids.
"""

import struct

from carhire.store.exceptions import EncodeError, StoreLayoutError
from carhire.store.memory import Memory

MAGIC = b"CNT"
LAYOUT_VERSION = 1

_LAYOUT = struct.Struct("<3sBQ")


class Counter:
    """
    A persisted monotonic counter.

    The read, increment and store in :meth:`next` are not guarded by a lock:
    callers must not interleave calls on the same counter from multiple threads.
    """

    def __init__(self, memory: Memory):
        self._memory = memory

    @classmethod
    def init(cls, memory: Memory, initial: int = 0) -> 'Counter':
        """
        Opens the counter stored in the memory, creating it with the given
        initial value if the memory is empty.

        :raises StoreLayoutError: If the memory holds something other than a counter.
        """
        counter = cls(memory)

        if memory.size() == 0:
            if memory.grow(1) == -1:
                raise StoreLayoutError("The memory cannot grow to fit a counter.")
            memory.write(0, _LAYOUT.pack(MAGIC, LAYOUT_VERSION, initial))
            return counter

        magic, version, _ = _LAYOUT.unpack(memory.read(0, _LAYOUT.size))
        if magic != MAGIC:
            raise StoreLayoutError(f"The memory does not hold a counter (found magic {magic!r}).")
        if version != LAYOUT_VERSION:
            raise StoreLayoutError(f"Unsupported counter layout version {version}.")
        return counter

    def current(self) -> int:
        """Gets the stored value without changing it."""
        _, _, value = _LAYOUT.unpack(self._memory.read(0, _LAYOUT.size))
        return value

    def next(self) -> int:
        """Stores the incremented value, returning the value before the increment."""
        value = self.current()
        if value + 1 >= 2 ** 64:
            raise EncodeError("The counter has run out of values.")
        self._memory.write(0, _LAYOUT.pack(MAGIC, LAYOUT_VERSION, value + 1))
        return value
