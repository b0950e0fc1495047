"""
Handles all the persistence for the application.

Every record lives in a single :class:`~carhire.store.memory.Memory`, split
into fixed regions by a :class:`~carhire.store.regions.RegionManager`. The
region ids are part of the persisted layout and must never be reassigned.
"""

from enum import IntEnum
from typing import Optional

from carhire import logger
from carhire.store.cell import Counter
from carhire.store.codec import VehicleCodec, CustomerCodec, ReservationCodec
from carhire.store.exceptions import StoreError, StoreLayoutError, RecordTooLargeError, DecodeError
from carhire.store.memory import Memory, VectorMemory, FileMemory
from carhire.store.regions import RegionManager, DEFAULT_BUCKET_PAGES
from carhire.store.sorted_map import SortedMap


class RegionId(IntEnum):
    VEHICLE_COUNTER = 0
    VEHICLES = 1
    CUSTOMERS = 2
    RESERVATIONS = 3
    CUSTOMER_COUNTER = 4


class Storage:
    """
    The counters and maps backing the services, opened over one memory.

    :raises StoreLayoutError: If the memory was laid out by something else.
    """

    def __init__(self, memory: Memory, *, bucket_pages: int = DEFAULT_BUCKET_PAGES):
        self.memory = memory
        self.regions = RegionManager(memory, bucket_pages=bucket_pages)

        self.vehicle_ids = Counter.init(self.regions.get(RegionId.VEHICLE_COUNTER), 0)
        self.vehicles = SortedMap.init(self.regions.get(RegionId.VEHICLES), VehicleCodec)
        self.customers = SortedMap.init(self.regions.get(RegionId.CUSTOMERS), CustomerCodec)
        self.reservations = SortedMap.init(self.regions.get(RegionId.RESERVATIONS), ReservationCodec)
        self.customer_ids = Counter.init(self.regions.get(RegionId.CUSTOMER_COUNTER), 0)

    @classmethod
    def open(cls, path: Optional[str] = None, *, bucket_pages: int = DEFAULT_BUCKET_PAGES) -> 'Storage':
        """Opens the storage kept in the file at the given path, or in memory if there is no path."""
        if path is None:
            logger.info("Opening in-memory record store")
            return cls(VectorMemory(), bucket_pages=bucket_pages)

        logger.info("Opening record store at %s", path)
        memory = FileMemory(path)
        try:
            return cls(memory, bucket_pages=bucket_pages)
        except StoreError:
            memory.close()
            raise

    def close(self):
        self.memory.close()
