from collections.abc import Callable, Iterable, Iterator
from typing import Generic, TypeVar

from flightdesk.errors import AllocationFailure, CapacityExceeded, NotFound
from flightdesk.log import log


INITIAL_CAPACITY = 10

R = TypeVar("R")


class RecordStore(Generic[R]):
    """
    An ordered, densely packed sequence of records with no indexes; every lookup is a scan from the front. This is the
    common part of the flight, passenger and ticket stores.

    The store keeps track of a capacity. It starts at INITIAL_CAPACITY and doubles whenever an append would exceed it.
    A store can also have a hard limit (`max_records`) that no amount of growth gets past. Removing a record closes
    the gap by moving every later record up one place, so the positions of those records change.
    """

    def __init__(self, kind: str, initial_capacity: int = INITIAL_CAPACITY, max_records: int | None = None):
        self._kind = kind
        self._initial_capacity = initial_capacity
        self._max_records = max_records
        self._records: list[R] = []
        self._capacity = initial_capacity

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def max_records(self) -> int | None:
        return self._max_records

    def append(self, record: R) -> int:
        """
        Add a record at the end and return its position. Raises CapacityExceeded if the store is at its hard limit, or
        AllocationFailure if growing fails; in both cases the store is unchanged.
        """
        if self._max_records is not None and len(self._records) >= self._max_records:
            raise CapacityExceeded(f"{self._kind} limit of {self._max_records} reached")

        new_capacity = self._capacity
        if len(self._records) >= self._capacity:
            new_capacity = max(self._capacity * 2, self._initial_capacity)
        try:
            self._records.append(record)
        except MemoryError as exc:
            raise AllocationFailure(f"out of memory adding a {self._kind}") from exc

        if new_capacity != self._capacity:
            self._capacity = new_capacity
            log(f"{self._kind} capacity increased to {self._capacity}")
        return len(self._records) - 1

    def find(self, predicate: Callable[[R], bool]) -> R | None:
        for record in self._records:
            if predicate(record):
                return record
        return None

    def index(self, predicate: Callable[[R], bool]) -> int | None:
        for i, record in enumerate(self._records):
            if predicate(record):
                return i
        return None

    def remove(self, predicate: Callable[[R], bool], description: str = "record") -> R:
        """
        Remove the first record matching `predicate` and return it. Raises NotFound if nothing matches.
        """
        i = self.index(predicate)
        if i is None:
            raise NotFound(f"{self._kind} {description} not found")
        return self._records.pop(i)

    def list_all(self) -> Iterator[R]:
        """
        Iterate over the stored records in storage order. Each call starts a new iteration from the front.
        """
        return iter(self._records)

    def replace_all(self, records: Iterable[R], capacity: int | None = None) -> None:
        """
        Discard the current contents and store `records` instead, with the capacity set to `capacity` (or to the number
        of records, whichever is larger). Used when loading a data file. The hard limit is not checked here; callers
        clamp beforehand.
        """
        self._records = list(records)
        if capacity is None:
            capacity = self._initial_capacity
        self._capacity = max(capacity, len(self._records))

    def close(self) -> None:
        """
        Release all records and set the capacity to zero. Safe to call more than once; the store grows again from
        INITIAL_CAPACITY if it is used afterwards.
        """
        if self._capacity == 0 and not self._records:
            return
        self._records = []
        self._capacity = 0
        log(f"{self._kind} store released")

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[R]:
        return self.list_all()

    def __bool__(self) -> bool:
        return bool(self._records)
