import pytest

from carhire.store.cell import Counter
from carhire.store.codec import CustomerCodec
from carhire.store.exceptions import StoreLayoutError
from carhire.store.regions import RegionManager
from carhire.store.sorted_map import SortedMap


@pytest.fixture
def regions(memory) -> RegionManager:
    return RegionManager(memory, bucket_pages=1)


def test_next_returns_value_before_increment(regions):
    counter = Counter.init(regions.get(0), 0)
    assert [counter.next() for _ in range(3)] == [0, 1, 2]
    assert counter.current() == 3


def test_current_does_not_change_value(regions):
    counter = Counter.init(regions.get(0), 5)
    assert counter.current() == 5
    assert counter.current() == 5
    assert counter.next() == 5


def test_reopen_keeps_value(regions):
    """Assert that opening an existing counter ignores the initial value."""
    counter = Counter.init(regions.get(0), 0)
    counter.next()
    counter.next()

    reopened = Counter.init(regions.get(0), 100)
    assert reopened.current() == 2


def test_counter_on_map_region(regions):
    """Assert that a region holding a map cannot be opened as a counter."""
    SortedMap.init(regions.get(1), CustomerCodec)
    with pytest.raises(StoreLayoutError):
        Counter.init(regions.get(1), 0)
