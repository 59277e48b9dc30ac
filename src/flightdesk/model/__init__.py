"""
This module contains the application's data model. The record classes are Flight, Passenger and Ticket; DateTime and
SeatMap support Flight.

Records are plain dataclasses. Text fields are clipped to the widths of the on-disk format when a record is
constructed, so a record always looks the same after a save/load round trip. Model objects can also be serialized to
JSON for the departure board:

    flight = model.Flight(...)
    model.json.dumps([flight, ...])
"""

MAX_NAME_LEN = 100
PASSPORT_LEN = 20
MAX_SEATS = 250
