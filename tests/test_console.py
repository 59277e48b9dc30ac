import asyncio
import io

from flightdesk.console import Console
from flightdesk.model.passenger import Passenger
from flightdesk.store import FlightStore, PassengerStore, TicketStore


class Desk:
    def __init__(self):
        self.flights = FlightStore()
        self.passengers = PassengerStore()
        self.tickets = TicketStore()

    def run(self, *lines: str) -> str:
        async def session() -> str:
            reader = asyncio.StreamReader()
            reader.feed_data("".join(line + "\n" for line in lines).encode())
            reader.feed_eof()
            out = io.StringIO()
            console = Console(self.flights, self.passengers, self.tickets, reader=reader, out=out)
            await console.run()
            return out.getvalue()

        return asyncio.run(session())


ADD_FLIGHT_7 = ("1", "7", "A320", "Lisbon", "Oslo", "1 1 2025 10 0", "1 1 2025 12 30", "1", "180")


def test_add_and_search_flight():
    desk = Desk()
    out = desk.run(*ADD_FLIGHT_7, "9", "7", "0")

    assert "Flight added successfully." in out
    assert "--- Flight Found ---" in out
    assert "Departure      : 01-01-2025 10:00" in out
    assert "Status         : Delayed" in out
    assert "Exiting system. Goodbye!" in out
    assert desk.flights.search(7).available_seats == 180


def test_add_flight_with_taken_id():
    desk = Desk()
    out = desk.run(*ADD_FLIGHT_7, "1", "7", "0")
    assert "Error: Flight with ID 7 already exists." in out
    assert len(desk.flights) == 1


def test_add_flight_arriving_before_departure():
    desk = Desk()
    out = desk.run("1", "7", "A320", "Lisbon", "Oslo", "1 1 2025 10 0", "1 1 2025 9 0", "0", "180", "0")
    assert "arrives before it departs" in out
    assert len(desk.flights) == 0


def test_add_flight_with_bad_input():
    desk = Desk()
    out = desk.run("1", "7", "A320", "Lisbon", "Oslo", "soon", "0")
    assert "Invalid input:" in out
    assert len(desk.flights) == 0


def test_menu_input_errors():
    desk = Desk()
    out = desk.run("x", "12", "0")
    assert "Invalid input! Please enter a number." in out
    assert "Invalid choice. Please try again." in out


def test_end_of_input_stops_console():
    desk = Desk()
    out = desk.run()
    assert "Flight Management System" in out
    assert "Goodbye" not in out


def test_sort_and_delete():
    desk = Desk()
    out = desk.run(
        *ADD_FLIGHT_7,
        "1", "8", "B737", "Porto", "Rome", "1 1 2024 9 0", "1 1 2024 11 0", "0", "150",
        "7",
        "8", "7",
        "8", "7",
        "0",
    )  # fmt: skip
    assert "Flights sorted by departure time." in out
    assert "Flight ID 7 deleted successfully." in out
    assert "flight with ID 7 not found" in out
    assert [f.flight_id for f in desk.flights.list_all()] == [8]


def test_sort_needs_two_flights():
    desk = Desk()
    out = desk.run("7", "0")
    assert "Error: not enough flights to sort" in out


def test_list_flights():
    desk = Desk()
    assert "No flights available to list." in desk.run("2", "0")
    out = desk.run(*ADD_FLIGHT_7, "2", "0")
    assert "---- All Available Flights ----" in out
    assert "From           : Lisbon" in out


def test_passengers():
    desk = Desk()
    out = desk.run(
        "3", "1", "Ann Lee", "34", "P1234",
        "3", "1", "Ann Again", "40", "P1234",
        "3", "1", "Baby", "0",
        "3", "3",
        "3", "2", "P1234",
        "3", "3",
        "0",
    )  # fmt: skip
    assert "Passenger added successfully. Total passengers: 1" in out
    assert "already exists" in out
    assert "age must be a positive integer" in out
    assert "Passport   : P1234" in out
    assert "Flight ID  : Not assigned" in out
    assert "removed successfully. Total passengers: 0" in out
    assert "No passengers found to display." in out


def test_passenger_with_assignment_is_shown():
    desk = Desk()
    desk.passengers.add(Passenger("Ann", 34, "P1", 7, 12))
    out = desk.run("3", "3", "0")
    assert "Flight ID  : 7" in out
    assert "Seat No    : 12" in out


def test_tickets():
    desk = Desk()
    out = desk.run(
        "5", "1", "Ann", "42", "3",
        "5", "1", "Bob", "42", "4",
        "5", "1", "Cy", "43", "1",
        "5", "2", "2",
        "5", "3",
        "5", "4", "42",
        "5", "4", "44",
        "5", "1", "Di", "-1",
        "0",
    )  # fmt: skip
    assert "Ticket booked successfully. Ticket ID: 3" in out
    assert "Ticket ID 2 cancelled successfully. Total tickets: 2" in out
    assert "Ticket ID: 1 | Passenger: Ann | Flight ID: 42 | Seat: 3" in out
    assert "Ticket ID: 3 | Passenger: Cy | Flight ID: 43 | Seat: 1" in out
    assert "Seat No: 3 (Passenger: Ann)" in out
    assert "No seats booked for this flight." in out
    assert "flight ID must be a positive number" in out
    assert [t.ticket_id for t in desk.tickets.list_all()] == [1, 3]


def test_cancel_with_no_tickets():
    desk = Desk()
    assert "No tickets to cancel." in desk.run("5", "2", "0")


def test_crew_and_payment():
    desk = Desk()
    out = desk.run("4", "Ann", "7", "6", "Card", "12.5", "6", "Cash", "-3", "0")
    assert "Crew member Ann assigned to Flight ID 7." in out
    assert "Payment of 12.50 via Card completed successfully." in out
    assert "amount must be a positive number" in out
