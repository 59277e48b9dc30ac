"""
The record stores. Each store owns an ordered list of one kind of record and knows how to load it from and save it to
its data file:

    flights = FlightStore()
    flights.load("flights.txt")
    flights.add(Flight(...))
    flights.save("flights.txt")

Failures are raised as subclasses of StoreError (see `flightdesk.errors`), except for malformed data files,
which load as far as they can and report the problem in the returned LoadResult.
"""

from flightdesk.store.flights import FlightStore
from flightdesk.store.passengers import PassengerStore
from flightdesk.store.tickets import TicketStore

__all__ = ["FlightStore", "PassengerStore", "TicketStore"]
