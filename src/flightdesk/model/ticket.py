from dataclasses import dataclass

from flightdesk.model import MAX_NAME_LEN
from flightdesk.util import truncate


@dataclass
class Ticket:
    """
    A booked seat. The passenger name is free text and the flight ID and seat number are taken on trust: none of them
    is checked against the other stores or the flight's seat map.
    """

    ticket_id: int
    passenger_name: str
    flight_id: int
    seat_no: int

    def __post_init__(self) -> None:
        self.passenger_name = truncate(self.passenger_name, MAX_NAME_LEN)
