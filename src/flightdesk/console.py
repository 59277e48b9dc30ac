import asyncio
import sys
from typing import TextIO, cast

from flightdesk.crew import assign_crew
from flightdesk.errors import StoreError
from flightdesk.log import log
from flightdesk.model.date_time import DateTime
from flightdesk.model.flight import Flight, FlightStatus
from flightdesk.model.passenger import Passenger
from flightdesk.payment import handle_payment
from flightdesk.runnable import Runnable
from flightdesk.store import FlightStore, PassengerStore, TicketStore


MAIN_MENU = """
========== Flight Management System ==========
1. Add New Flight
2. List All Flights
3. Add/Remove/View Passenger
4. Assign Crew
5. Ticket Management
6. Payment Handling
7. Sort Flights by Departure Time
8. Delete Flight
9. Search Flight
0. Exit"""

PASSENGER_MENU = """
--- Passenger Management ---
1. Add Passenger
2. Remove Passenger
3. View Passengers"""

TICKET_MENU = """
--- Ticket Management ---
1. Book Ticket
2. Cancel Ticket
3. Show All Tickets
4. Seat Management"""


class InvalidInput(ValueError):
    pass


class Console(Runnable):
    """
    The interactive front end: a numbered menu read line by line from an asyncio StreamReader (stdin unless another
    reader is given). Each menu choice maps onto one store operation. Bad input and failed operations are reported and
    the menu is shown again. Choosing "Exit", or reaching the end of the input, stops the console.

    Store operations never await, so an operation started from the console runs to completion before any other task
    (e.g. the departure board) sees the store.
    """

    def __init__(
        self,
        flights: FlightStore,
        passengers: PassengerStore,
        tickets: TicketStore,
        reader: asyncio.StreamReader | None = None,
        out: TextIO | None = None,
    ):
        super().__init__()
        self._flights = flights
        self._passengers = passengers
        self._tickets = tickets
        self._reader = reader
        self._out = out if out is not None else sys.stdout

    async def setup(self) -> None:
        if self._reader is not None:
            return
        self._reader = asyncio.StreamReader()
        loop = asyncio.get_running_loop()
        try:
            await loop.connect_read_pipe(lambda: asyncio.StreamReaderProtocol(self._reader), sys.stdin)
        except ValueError:
            # stdin is a regular file, which can't be watched by the event loop. It can't block either, though.
            self._reader.feed_data(sys.stdin.buffer.read())
            self._reader.feed_eof()

    def stop(self) -> None:
        super().stop()
        # Wake up a pending read so the loop can see it has been stopped.
        if self._reader is not None and not self._reader.at_eof():
            self._reader.feed_eof()

    async def step(self) -> None:
        self._print(MAIN_MENU)
        try:
            choice = await self._ask_int("Enter your choice: ")
        except InvalidInput:
            self._print("Invalid input! Please enter a number.")
            return
        except EOFError:
            log("end of input")
            self.stop()
            return

        handlers = {
            1: self._add_flight,
            2: self._list_flights,
            3: self._passenger_menu,
            4: self._assign_crew,
            5: self._ticket_menu,
            6: self._payment,
            7: self._sort_flights,
            8: self._delete_flight,
            9: self._search_flight,
        }
        if choice == 0:
            self._print("Exiting system. Goodbye!")
            self.stop()
            return
        handler = handlers.get(choice)
        if handler is None:
            self._print("Invalid choice. Please try again.")
            return

        try:
            await handler()
        except InvalidInput as exc:
            self._print(f"Invalid input: {exc}")
        except StoreError as exc:
            self._print(f"Error: {exc}")
        except EOFError:
            log("end of input")
            self.stop()

    # Flights

    async def _add_flight(self) -> None:
        flight_id = await self._ask_int("Enter flight ID: ")
        if self._flights.search(flight_id) is not None:
            self._print(f"Error: Flight with ID {flight_id} already exists.")
            return
        name = await self._ask_text("Enter flight name: ")
        origin = await self._ask_text("Enter origin: ")
        destination = await self._ask_text("Enter destination: ")
        departure = await self._ask_date_time("Enter departure (DD MM YYYY HH MM): ")
        arrival = await self._ask_date_time("Enter arrival (DD MM YYYY HH MM): ")
        status = await self._ask_int("Enter status (0 = ON_TIME, 1 = DELAYED, 2 = CANCELLED): ")
        if status not in (s.value for s in FlightStatus):
            raise InvalidInput("status must be 0, 1 or 2")
        seats = await self._ask_int("Enter available seats: ")
        if seats <= 0:
            raise InvalidInput("number of available seats must be a positive integer")

        flight = Flight(flight_id, name, origin, destination, departure, arrival, FlightStatus(status), seats)
        self._flights.add(flight)
        self._print("Flight added successfully.")

    async def _list_flights(self) -> None:
        if not self._flights:
            self._print("No flights available to list.")
            return
        self._print("\n---- All Available Flights ----")
        for flight in self._flights.list_all():
            self._print("")
            self._print_flight(flight)

    async def _sort_flights(self) -> None:
        self._flights.sort_by_departure()
        self._print("Flights sorted by departure time.")

    async def _delete_flight(self) -> None:
        flight_id = await self._ask_int("Enter Flight ID to delete: ")
        self._flights.delete(flight_id)
        self._print(f"Flight ID {flight_id} deleted successfully.")

    async def _search_flight(self) -> None:
        flight_id = await self._ask_int("Enter Flight ID to search: ")
        flight = self._flights.search(flight_id)
        if flight is None:
            self._print(f"Flight with ID {flight_id} not found.")
            return
        self._print("\n--- Flight Found ---")
        self._print_flight(flight)
        self._print("--------------------")

    def _print_flight(self, flight: Flight) -> None:
        # fmt: off
        self._print(f"Flight ID      : {flight.flight_id}")
        self._print(f"Name           : {flight.name}")
        self._print(f"From           : {flight.origin}")
        self._print(f"To             : {flight.destination}")
        self._print(f"Departure      : {flight.departure}")
        self._print(f"Arrival        : {flight.arrival}")
        self._print(f"Status         : {flight.status}")
        self._print(f"Seats Available: {flight.available_seats}")
        # fmt: on

    # Passengers

    async def _passenger_menu(self) -> None:
        self._print(PASSENGER_MENU)
        match await self._ask_int("Enter your choice: "):
            case 1:
                await self._add_passenger()
            case 2:
                await self._remove_passenger()
            case 3:
                self._view_passengers()
            case _:
                self._print("Invalid passenger option!")

    async def _add_passenger(self) -> None:
        name = await self._ask_text("Enter passenger name: ")
        age = await self._ask_int("Enter age: ")
        if age <= 0:
            raise InvalidInput("age must be a positive integer")
        passport = await self._ask_text("Enter passport number: ")
        self._passengers.add(Passenger(name, age, passport))
        self._print(f"Passenger added successfully. Total passengers: {len(self._passengers)}")

    async def _remove_passenger(self) -> None:
        if not self._passengers:
            self._print("No passengers to remove.")
            return
        passport = await self._ask_text("Enter passport number of passenger to remove: ")
        self._passengers.remove_passenger(passport)
        self._print(
            f"Passenger with passport number {passport} removed successfully. "
            f"Total passengers: {len(self._passengers)}"
        )

    def _view_passengers(self) -> None:
        if not self._passengers:
            self._print("No passengers found to display.")
            return
        self._print("\n---- All Registered Passengers ----")
        for i, passenger in enumerate(self._passengers.list_all(), start=1):
            self._print(f"Passenger {i}:")
            self._print(f"  Name       : {passenger.name}")
            self._print(f"  Age        : {passenger.age}")
            self._print(f"  Passport   : {passenger.passport}")
            if passenger.is_assigned:
                self._print(f"  Flight ID  : {passenger.assigned_flight_id}")
                self._print(f"  Seat No    : {passenger.assigned_seat_no}")
            else:
                self._print("  Flight ID  : Not assigned")
                self._print("  Seat No    : Not assigned")
            self._print("----------------------------")

    # Tickets

    async def _ticket_menu(self) -> None:
        self._print(TICKET_MENU)
        match await self._ask_int("Enter your choice: "):
            case 1:
                await self._book_ticket()
            case 2:
                await self._cancel_ticket()
            case 3:
                self._show_all_tickets()
            case 4:
                await self._seat_management()
            case _:
                self._print("Invalid ticket option!")

    async def _book_ticket(self) -> None:
        name = await self._ask_text("Enter passenger name for ticket: ")
        flight_id = await self._ask_positive_int("Enter flight ID for ticket: ", "flight ID")
        seat_no = await self._ask_positive_int("Enter seat number for ticket: ", "seat number")
        ticket = self._tickets.book(name, flight_id, seat_no)
        self._print(f"Ticket booked successfully. Ticket ID: {ticket.ticket_id}")

    async def _cancel_ticket(self) -> None:
        if not self._tickets:
            self._print("No tickets to cancel.")
            return
        ticket_id = await self._ask_positive_int("Enter ticket ID to cancel: ", "ticket ID")
        self._tickets.cancel(ticket_id)
        self._print(f"Ticket ID {ticket_id} cancelled successfully. Total tickets: {len(self._tickets)}")

    def _show_all_tickets(self) -> None:
        if not self._tickets:
            self._print("No tickets booked to display.")
            return
        self._print("\n---- All Booked Tickets ----")
        for t in self._tickets.list_all():
            self._print(
                f"Ticket ID: {t.ticket_id} | Passenger: {t.passenger_name} | "
                f"Flight ID: {t.flight_id} | Seat: {t.seat_no}"
            )

    async def _seat_management(self) -> None:
        flight_id = await self._ask_positive_int("Enter flight ID to check seats: ", "flight ID")
        self._print(f"Seats booked on Flight {flight_id}:")
        booked = self._tickets.seats_for_flight(flight_id)
        for ticket in booked:
            self._print(f"Seat No: {ticket.seat_no} (Passenger: {ticket.passenger_name})")
        if not booked:
            self._print("No seats booked for this flight.")

    # Stateless collaborators

    async def _assign_crew(self) -> None:
        crew_name = await self._ask_text("Enter crew name: ")
        flight_id = await self._ask_positive_int("Enter flight ID to assign: ", "flight ID")
        self._print(str(assign_crew(crew_name, flight_id)))

    async def _payment(self) -> None:
        method = await self._ask_text("Enter payment method (Cash/Card/Online): ")
        text = await self._ask("Enter amount to pay: ")
        try:
            payment = handle_payment(method, float(text))
        except ValueError as exc:
            raise InvalidInput(f"amount must be a positive number, got {text!r}") from exc
        self._print(payment.receipt())

    # Input

    def _print(self, text: str) -> None:
        print(text, file=self._out)

    async def _ask(self, prompt: str) -> str:
        print(prompt, end="", file=self._out, flush=True)
        line = await cast(asyncio.StreamReader, self._reader).readline()
        if not line:
            raise EOFError
        return line.decode("utf-8", errors="replace").rstrip("\r\n")

    async def _ask_text(self, prompt: str) -> str:
        text = (await self._ask(prompt)).strip()
        if not text:
            raise InvalidInput("a value is required")
        return text

    async def _ask_int(self, prompt: str) -> int:
        text = await self._ask(prompt)
        try:
            return int(text)
        except ValueError as exc:
            raise InvalidInput(f"expected a number, got {text!r}") from exc

    async def _ask_positive_int(self, prompt: str, what: str) -> int:
        value = await self._ask_int(prompt)
        if value <= 0:
            raise InvalidInput(f"{what} must be a positive number")
        return value

    async def _ask_date_time(self, prompt: str) -> DateTime:
        text = await self._ask(prompt)
        try:
            return DateTime.parse(text)
        except ValueError as exc:
            raise InvalidInput(str(exc)) from exc
