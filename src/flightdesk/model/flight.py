from dataclasses import dataclass, field
from enum import Enum

from flightdesk.model import MAX_NAME_LEN
from flightdesk.model.date_time import DateTime
from flightdesk.model.seat_map import SeatMap
from flightdesk.util import truncate


class FlightStatus(Enum):
    # fmt:off
    ON_TIME   = 0
    DELAYED   = 1
    CANCELLED = 2
    # fmt:on

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()


@dataclass
class Flight:
    """
    A scheduled flight. The flight ID is assigned by whoever creates the flight and is the key the flight store uses
    to find it. Name, origin and destination are clipped to MAX_NAME_LEN - 1 characters.

    Departure is expected to be no later than arrival, but only FlightStore.add checks this; nothing re-checks it after
    the flight has been stored.
    """

    flight_id: int
    name: str
    origin: str
    destination: str
    departure: DateTime
    arrival: DateTime
    status: FlightStatus = FlightStatus.ON_TIME
    available_seats: int = 0
    seat_map: SeatMap = field(default_factory=SeatMap)

    def __post_init__(self) -> None:
        self.name = truncate(self.name, MAX_NAME_LEN)
        self.origin = truncate(self.origin, MAX_NAME_LEN)
        self.destination = truncate(self.destination, MAX_NAME_LEN)
