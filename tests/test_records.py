import pytest

from flightdesk.errors import AllocationFailure
from flightdesk.store.records import INITIAL_CAPACITY, RecordStore


class NoMemoryList(list):
    def append(self, item):
        raise MemoryError


def test_failed_growth_keeps_contents():
    store = RecordStore[str]("item")
    for i in range(INITIAL_CAPACITY):
        store.append(f"item {i}")
    store._records = NoMemoryList(store._records)  # pylint: disable=protected-access

    with pytest.raises(AllocationFailure):
        store.append("one too many")

    assert len(store) == INITIAL_CAPACITY
    assert store.capacity == INITIAL_CAPACITY
    assert list(store.list_all()) == [f"item {i}" for i in range(INITIAL_CAPACITY)]


def test_grows_again_after_close():
    store = RecordStore[str]("item")
    store.close()
    assert store.capacity == 0
    store.append("x")
    assert store.capacity == INITIAL_CAPACITY
