from dataclasses import dataclass

from flightdesk.model import MAX_NAME_LEN, PASSPORT_LEN
from flightdesk.util import truncate


@dataclass
class Passenger:
    """
    A registered passenger, keyed by passport number. A flight ID or seat number of 0 means none has been assigned;
    non-zero values are not checked against the flight or ticket stores.
    """

    name: str
    age: int
    passport: str
    assigned_flight_id: int = 0
    assigned_seat_no: int = 0

    def __post_init__(self) -> None:
        self.name = truncate(self.name, MAX_NAME_LEN)
        self.passport = truncate(self.passport, PASSPORT_LEN)

    @property
    def is_assigned(self) -> bool:
        return self.assigned_flight_id != 0
