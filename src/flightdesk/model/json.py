"""
Utilities for serializing flightdesk data model objects into JSON for the departure board. Example:

    flight = model.Flight(...)
    model.json.dumps([flight, ...])

This is equivalent to:

    flight = model.Flight(...)
    json.dumps([flight, ...], default=<private serialization function>, allow_nan=False, separators=(",", ":"))

Seat maps are left out of flight objects; the board shows the available seat count instead.
"""

import json
from typing import Any

from flightdesk.model.date_time import DateTime
from flightdesk.model.flight import Flight, FlightStatus


def _default(obj: Any) -> Any:
    if isinstance(obj, Flight):
        return {
            "flight_id": obj.flight_id,
            "name": obj.name,
            "origin": obj.origin,
            "destination": obj.destination,
            "departure": obj.departure,
            "arrival": obj.arrival,
            "status": obj.status,
            "available_seats": obj.available_seats,
        }
    if isinstance(obj, (DateTime, FlightStatus)):
        return str(obj)
    raise TypeError(f"object of type {type(obj).__name__!r} is not JSON serializable")


def dumps(obj: Any) -> str:
    return json.dumps(obj, default=_default, allow_nan=False, separators=(",", ":"))
