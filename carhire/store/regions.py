"""
Regions
-------

Partitions a single :class:`~carhire.store.memory.Memory` into a number of
independently growable regions, each addressed by a small integer id.

The first page of the memory holds the header::

    0       magic "CRM"
    3       layout version
    4       number of allocated buckets (u16)
    6       bucket size in pages (u16)
    40      size in pages of each region (255 x u64)
    2080    bucket table, the owning region of each bucket (32768 x u8)

Everything after the first page is handed out in buckets. A region that
needs more room claims the next free bucket, so the buckets of different
regions interleave, and a region offset is translated to a physical offset
by looking it up in that region's list of buckets.
"""

import struct
from typing import Dict, List

from carhire import logger
from carhire.store.exceptions import StoreLayoutError
from carhire.store.memory import Memory, PAGE_SIZE

MAGIC = b"CRM"
LAYOUT_VERSION = 1

MAX_REGIONS = 255
"""Region ids run from 0 to 254."""

MAX_BUCKETS = 32768
UNALLOCATED = 0xFF
DEFAULT_BUCKET_PAGES = 16

_HEADER = struct.Struct("<3sBHH")
_REGION_SIZES_OFFSET = 40
_BUCKET_TABLE_OFFSET = _REGION_SIZES_OFFSET + MAX_REGIONS * 8
_U16 = struct.Struct("<H")
_U64 = struct.Struct("<Q")


class RegionManager:
    """
    Hands out :class:`Region` views onto a shared memory.

    :raises StoreLayoutError: If the memory holds something other than a
        compatible region header.
    """

    def __init__(self, memory: Memory, *, bucket_pages: int = DEFAULT_BUCKET_PAGES):
        if not 0 < bucket_pages <= 0xFFFF:
            raise ValueError(f"Bucket size must be between 1 and {0xFFFF} pages.")

        self._memory = memory
        self._regions: Dict[int, Region] = {}

        if memory.size() == 0:
            self._create(bucket_pages)
        else:
            self._load(bucket_pages)

    @property
    def bucket_pages(self) -> int:
        return self._bucket_pages

    @property
    def allocated_buckets(self) -> int:
        return self._allocated

    def get(self, region_id: int) -> 'Region':
        """Gets the region with the given id, which is the same object on every call."""
        if not 0 <= region_id < MAX_REGIONS:
            raise ValueError(f"Region id must be between 0 and {MAX_REGIONS - 1}, not {region_id}.")
        if region_id not in self._regions:
            self._regions[region_id] = Region(self, region_id)
        return self._regions[region_id]

    def _create(self, bucket_pages: int):
        if self._memory.grow(1) == -1:
            raise StoreLayoutError("The memory cannot grow to fit the region header.")

        self._bucket_pages = bucket_pages
        self._allocated = 0
        self._sizes: List[int] = [0] * MAX_REGIONS
        self._buckets: List[List[int]] = [[] for _ in range(MAX_REGIONS)]

        self._memory.write(0, _HEADER.pack(MAGIC, LAYOUT_VERSION, 0, bucket_pages))
        self._memory.write(_BUCKET_TABLE_OFFSET, bytes([UNALLOCATED]) * MAX_BUCKETS)
        logger.debug("Created region header with %s page buckets", bucket_pages)

    def _load(self, bucket_pages: int):
        magic, version, allocated, stored_bucket_pages = _HEADER.unpack(self._memory.read(0, _HEADER.size))

        if magic != MAGIC:
            raise StoreLayoutError(f"The memory does not hold a region header (found magic {magic!r}).")
        if version != LAYOUT_VERSION:
            raise StoreLayoutError(f"Unsupported region layout version {version}.")
        if stored_bucket_pages != bucket_pages:
            raise StoreLayoutError(
                f"The memory uses buckets of {stored_bucket_pages} pages, not {bucket_pages}."
            )

        self._bucket_pages = stored_bucket_pages
        self._allocated = allocated

        raw_sizes = self._memory.read(_REGION_SIZES_OFFSET, MAX_REGIONS * 8)
        self._sizes = [size for size, in _U64.iter_unpack(raw_sizes)]

        self._buckets = [[] for _ in range(MAX_REGIONS)]
        table = self._memory.read(_BUCKET_TABLE_OFFSET, MAX_BUCKETS)
        for bucket, owner in enumerate(table[:allocated]):
            if owner == UNALLOCATED:
                raise StoreLayoutError(f"Bucket {bucket} is counted as allocated but has no owner.")
            self._buckets[owner].append(bucket)

        for region_id, size in enumerate(self._sizes):
            if size > len(self._buckets[region_id]) * self._bucket_pages:
                raise StoreLayoutError(f"Region {region_id} is larger than the buckets it owns.")

    def _region_size(self, region_id: int) -> int:
        return self._sizes[region_id]

    def _grow_region(self, region_id: int, pages: int) -> int:
        previous = self._sizes[region_id]
        new_size = previous + pages
        owned = self._buckets[region_id]
        needed = -(-new_size // self._bucket_pages) - len(owned)

        if needed > 0:
            if self._allocated + needed > MAX_BUCKETS:
                return -1

            required_pages = 1 + (self._allocated + needed) * self._bucket_pages
            missing_pages = required_pages - self._memory.size()
            if missing_pages > 0 and self._memory.grow(missing_pages) == -1:
                return -1

            for bucket in range(self._allocated, self._allocated + needed):
                self._memory.write(_BUCKET_TABLE_OFFSET + bucket, bytes([region_id]))
                owned.append(bucket)

            self._allocated += needed
            self._memory.write(4, _U16.pack(self._allocated))
            logger.debug("Allocated %s bucket(s) to region %s", needed, region_id)

        self._sizes[region_id] = new_size
        self._memory.write(_REGION_SIZES_OFFSET + region_id * 8, _U64.pack(new_size))
        return previous

    def _spans(self, region_id: int, offset: int, length: int):
        """Yields the physical (offset, length) chunks covering a region range."""
        bucket_bytes = self._bucket_pages * PAGE_SIZE
        buckets = self._buckets[region_id]

        while length > 0:
            index, within = divmod(offset, bucket_bytes)
            chunk = min(length, bucket_bytes - within)
            yield PAGE_SIZE + buckets[index] * bucket_bytes + within, chunk
            offset += chunk
            length -= chunk


class Region(Memory):
    """
    A view onto one region of a :class:`RegionManager`. It behaves like a
    memory of its own, growing without displacing any other region.
    """

    def __init__(self, manager: RegionManager, region_id: int):
        self._manager = manager
        self.region_id = region_id

    def size(self) -> int:
        return self._manager._region_size(self.region_id)

    def grow(self, pages: int) -> int:
        if pages < 0:
            raise ValueError("Memory can only grow.")
        return self._manager._grow_region(self.region_id, pages)

    def read(self, offset: int, length: int) -> bytes:
        self._check_bounds(offset, length)
        return b"".join(
            self._manager._memory.read(physical, chunk)
            for physical, chunk in self._manager._spans(self.region_id, offset, length)
        )

    def write(self, offset: int, data: bytes):
        self._check_bounds(offset, len(data))
        view = memoryview(data)
        position = 0
        for physical, chunk in self._manager._spans(self.region_id, offset, len(data)):
            self._manager._memory.write(physical, bytes(view[position:position + chunk]))
            position += chunk

    def __repr__(self):
        return f"Region({self.region_id}, pages={self.size()})"
