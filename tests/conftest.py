import pytest

from flightdesk.model.date_time import DateTime
from flightdesk.model.flight import Flight, FlightStatus


def flight(flight_id: int, departure: str = "1 1 2025 10 0", arrival: str | None = None, **kwargs) -> Flight:
    return Flight(
        flight_id,
        kwargs.pop("name", f"Flight {flight_id}"),
        kwargs.pop("origin", "Lisbon"),
        kwargs.pop("destination", "Oslo"),
        DateTime.parse(departure),
        DateTime.parse(arrival if arrival is not None else departure),
        kwargs.pop("status", FlightStatus.ON_TIME),
        kwargs.pop("available_seats", 180),
        **kwargs,
    )


@pytest.fixture
def make_flight():
    return flight
