from flightdesk import codec
from flightdesk.codec import LoadResult, Path
from flightdesk.log import log
from flightdesk.model.ticket import Ticket
from flightdesk.store.records import RecordStore


class TicketStore(RecordStore[Ticket]):
    """
    Booked tickets, in booking order.

    A new ticket's ID is one more than the number of tickets currently stored. IDs are not reused in the sense of
    being looked up and recycled, but after a cancellation the count goes down, so the next booking can be given an
    ID that a surviving ticket already has. Cancelling by ID then removes the earliest of the tickets that share it.
    """

    def __init__(self) -> None:
        super().__init__("ticket")

    def book(self, passenger_name: str, flight_id: int, seat_no: int) -> Ticket:
        ticket = Ticket(len(self) + 1, passenger_name, flight_id, seat_no)
        self.append(ticket)
        return ticket

    def cancel(self, ticket_id: int) -> Ticket:
        return self.remove(lambda t: t.ticket_id == ticket_id, f"ID {ticket_id}")

    def search(self, ticket_id: int) -> Ticket | None:
        return self.find(lambda t: t.ticket_id == ticket_id)

    def seats_for_flight(self, flight_id: int) -> list[Ticket]:
        """
        Return the tickets booked on one flight, in booking order.
        """
        return [t for t in self.list_all() if t.flight_id == flight_id]

    def load(self, path: Path) -> LoadResult[Ticket]:
        result = codec.read_file(path, codec.decode_ticket)
        self.replace_all(result.records, result.declared if result.found else None)
        log(f"loaded {len(self)} tickets from {path}")
        return result

    def save(self, path: Path) -> None:
        count = codec.write_file(path, self.list_all(), codec.encode_ticket)
        log(f"saved {count} tickets to {path}")
