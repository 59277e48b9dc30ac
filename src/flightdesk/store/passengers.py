from flightdesk import codec
from flightdesk.codec import LoadResult, Path
from flightdesk.errors import DuplicateKey
from flightdesk.log import log
from flightdesk.model import PASSPORT_LEN
from flightdesk.model.passenger import Passenger
from flightdesk.store.records import RecordStore
from flightdesk.util import truncate


class PassengerStore(RecordStore[Passenger]):
    """
    Registered passengers keyed by passport number.
    """

    def __init__(self) -> None:
        super().__init__("passenger")

    def add(self, passenger: Passenger) -> None:
        if self.search(passenger.passport) is not None:
            raise DuplicateKey(f"passenger with passport number {passenger.passport} already exists")
        self.append(passenger)

    def search(self, passport: str) -> Passenger | None:
        passport = truncate(passport, PASSPORT_LEN)
        return self.find(lambda p: p.passport == passport)

    def remove_passenger(self, passport: str) -> Passenger:
        passport = truncate(passport, PASSPORT_LEN)
        return self.remove(lambda p: p.passport == passport, f"with passport number {passport}")

    def load(self, path: Path) -> LoadResult[Passenger]:
        result = codec.read_file(path, codec.decode_passenger)
        self.replace_all(result.records, result.declared if result.found else None)
        log(f"loaded {len(self)} passengers from {path}")
        return result

    def save(self, path: Path) -> None:
        count = codec.write_file(path, self.list_all(), codec.encode_passenger)
        log(f"saved {count} passengers to {path}")
