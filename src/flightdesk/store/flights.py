from functools import cmp_to_key

from flightdesk import codec
from flightdesk.codec import LoadResult, Path
from flightdesk.errors import CapacityExceeded, DuplicateKey, InvalidTimeOrder, NotEnoughRecords
from flightdesk.log import log
from flightdesk.model.date_time import compare_date_time
from flightdesk.model.flight import Flight
from flightdesk.store.records import RecordStore


MAX_FLIGHTS = 100


class FlightStore(RecordStore[Flight]):
    """
    Flights keyed by flight ID. The store holds at most MAX_FLIGHTS flights regardless of its current capacity.
    Flights stay in the order they were added (or loaded) until `sort_by_departure` is called.
    """

    def __init__(self) -> None:
        super().__init__("flight", max_records=MAX_FLIGHTS)

    def add(self, flight: Flight) -> None:
        """
        Store a new flight. Raises CapacityExceeded if MAX_FLIGHTS flights are already stored, DuplicateKey if the
        flight ID is taken, and InvalidTimeOrder if the flight arrives before it departs, checked in that order.
        """
        if len(self) >= MAX_FLIGHTS:
            raise CapacityExceeded(f"flight limit of {MAX_FLIGHTS} reached")
        if self.search(flight.flight_id) is not None:
            raise DuplicateKey(f"flight with ID {flight.flight_id} already exists")
        if compare_date_time(flight.departure, flight.arrival) > 0:
            raise InvalidTimeOrder(f"flight {flight.flight_id} arrives before it departs")
        self.append(flight)

    def search(self, flight_id: int) -> Flight | None:
        return self.find(lambda f: f.flight_id == flight_id)

    def delete(self, flight_id: int) -> Flight:
        return self.remove(lambda f: f.flight_id == flight_id, f"with ID {flight_id}")

    def sort_by_departure(self) -> None:
        """
        Put the flights in order of departure, earliest first. Raises NotEnoughRecords if there are fewer than two.
        """
        if len(self) < 2:
            raise NotEnoughRecords("not enough flights to sort")
        self._records.sort(key=cmp_to_key(lambda a, b: compare_date_time(a.departure, b.departure)))

    def load(self, path: Path) -> LoadResult[Flight]:
        """
        Replace the stored flights with the contents of a flights file. A file declaring more than MAX_FLIGHTS flights
        is cut short at MAX_FLIGHTS. See `codec.read_file` for how missing and malformed files are handled.
        """
        result = codec.read_file(path, codec.decode_flight, limit=MAX_FLIGHTS)
        self.replace_all(result.records, result.declared if result.found else None)
        log(f"loaded {len(self)} flights from {path}")
        return result

    def save(self, path: Path) -> None:
        count = codec.write_file(path, self.list_all(), codec.encode_flight)
        log(f"saved {count} flights to {path}")
