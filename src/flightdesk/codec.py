"""
Reading and writing the flightdesk data files. There is one file per store, in a plain line-oriented text format:

    2
    Ann Lee,34,P1234,7,12
    Bob Ray,51,P9876,0,0

The first line is the number of records that follow. Each record is one line of comma-separated fields in a fixed
order (see the `encode_*` functions). Date/time fields hold five space-separated integers and a flight's seat map is
written as a hex string (see SeatMap). There is no escaping, so a comma inside a name splits that name in two when the
file is read back; this is a property of the format, and changing it would make existing files unreadable.

Fields are read the way the format has always been read: each field is the next run of characters that aren't commas,
after skipping any commas in front of it, and the last field of a line takes everything up to the end of the line. An
empty text field therefore isn't read as an empty string; it pulls the following field into its place.

Reading is best effort. If a record line is malformed, reading stops there and the records read so far are kept; the
problem is reported in the returned LoadResult instead of being raised. Only a file whose first line isn't a record
count is rejected outright.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
import os
from typing import Generic, TypeAlias, TypeVar

from flightdesk.errors import FileUnavailable, FormatCorruption
from flightdesk.log import log
from flightdesk.model.date_time import DateTime
from flightdesk.model.flight import Flight, FlightStatus
from flightdesk.model.passenger import Passenger
from flightdesk.model.seat_map import SeatMap
from flightdesk.model.ticket import Ticket


DELIMITER = ","

R = TypeVar("R")

Path: TypeAlias = str | os.PathLike[str]


@dataclass
class LoadResult(Generic[R]):
    """
    The outcome of reading a data file. `records` holds everything that was decoded, in file order. `declared` is the
    record count from the first line of the file, after any clamping. `error` is set when reading stopped early at a
    malformed line; the records before that line are still in `records`. `found` is False if there was no file.
    """

    records: list[R] = field(default_factory=list)
    declared: int = 0
    error: FormatCorruption | None = None
    found: bool = True

    @property
    def partial(self) -> bool:
        return self.error is not None


class _Fields:
    """
    Splits one record line into fields, one field at a time. See the module docstring for the splitting rules.
    """

    def __init__(self, line: str, lineno: int):
        self._line = line.rstrip("\r\n")
        self._pos = 0
        self._lineno = lineno

    def next(self, name: str) -> str:
        line = self._line
        start = self._pos
        while start < len(line) and line[start] == DELIMITER:
            start += 1
        if start == len(line):
            raise FormatCorruption(f"missing {name}", self._lineno)
        end = line.find(DELIMITER, start)
        if end == -1:
            end = len(line)
        self._pos = min(end + 1, len(line))
        return line[start:end]

    def rest(self, name: str) -> str:
        token = self._line[self._pos :]
        self._pos = len(self._line)
        if not token:
            raise FormatCorruption(f"missing {name}", self._lineno)
        return token

    def integer(self, name: str, last: bool = False) -> int:
        token = self.rest(name) if last else self.next(name)
        try:
            return int(token)
        except ValueError as exc:
            raise FormatCorruption(f"{name} is not an integer: {token!r}", self._lineno) from exc

    def date_time(self, name: str) -> DateTime:
        token = self.next(name)
        try:
            return DateTime.parse(token)
        except ValueError as exc:
            raise FormatCorruption(f"bad {name}: {exc}", self._lineno) from exc


def encode_flight(flight: Flight) -> str:
    return DELIMITER.join(
        [
            str(flight.flight_id),
            flight.name,
            flight.origin,
            flight.destination,
            flight.departure.to_text(),
            flight.arrival.to_text(),
            str(flight.status.value),
            str(flight.available_seats),
            flight.seat_map.to_hex(),
        ]
    )


def decode_flight(line: str, lineno: int = 0) -> Flight:
    fields = _Fields(line, lineno)
    flight_id = fields.integer("flight ID")
    name = fields.next("flight name")
    origin = fields.next("origin")
    destination = fields.next("destination")
    departure = fields.date_time("departure")
    arrival = fields.date_time("arrival")
    status_value = fields.integer("status")
    try:
        status = FlightStatus(status_value)
    except ValueError as exc:
        raise FormatCorruption(f"unknown flight status {status_value}", lineno) from exc
    available_seats = fields.integer("available seats")
    seat_map = SeatMap.from_hex(fields.rest("seat map"))
    return Flight(flight_id, name, origin, destination, departure, arrival, status, available_seats, seat_map)


def encode_passenger(passenger: Passenger) -> str:
    return DELIMITER.join(
        [
            passenger.name,
            str(passenger.age),
            passenger.passport,
            str(passenger.assigned_flight_id),
            str(passenger.assigned_seat_no),
        ]
    )


def decode_passenger(line: str, lineno: int = 0) -> Passenger:
    fields = _Fields(line, lineno)
    name = fields.next("passenger name")
    age = fields.integer("age")
    passport = fields.next("passport")
    assigned_flight_id = fields.integer("assigned flight ID")
    assigned_seat_no = fields.integer("assigned seat number", last=True)
    return Passenger(name, age, passport, assigned_flight_id, assigned_seat_no)


def encode_ticket(ticket: Ticket) -> str:
    return DELIMITER.join([str(ticket.ticket_id), ticket.passenger_name, str(ticket.flight_id), str(ticket.seat_no)])


def decode_ticket(line: str, lineno: int = 0) -> Ticket:
    fields = _Fields(line, lineno)
    ticket_id = fields.integer("ticket ID")
    passenger_name = fields.next("passenger name")
    flight_id = fields.integer("flight ID")
    seat_no = fields.integer("seat number", last=True)
    return Ticket(ticket_id, passenger_name, flight_id, seat_no)


def _decode_line(raw: bytes, lineno: int) -> str:
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise FormatCorruption(f"invalid UTF-8 at byte {exc.start}", lineno) from exc


def read_file(path: Path, decode: Callable[[str, int], R], limit: int | None = None) -> LoadResult[R]:
    """
    Read a data file, decoding each record line with `decode`. If `limit` is given, a declared record count above it
    is clamped to it (with a warning) and the extra lines are ignored.

    A missing file produces an empty result with `found` set to False. A first line that isn't a non-negative integer
    raises FormatCorruption. A malformed record line, including one that isn't valid UTF-8, ends the read early; see
    LoadResult.
    """
    try:
        f = open(path, "rb")
    except FileNotFoundError:
        log(f"no data file {os.fspath(path)!r}, starting empty")
        return LoadResult(found=False)
    except OSError as exc:
        log(f"can't open {os.fspath(path)!r} ({exc}), starting empty")
        return LoadResult(found=False)

    with f:
        first = _decode_line(f.readline(), 1)
        try:
            declared = int(first)
        except ValueError as exc:
            raise FormatCorruption(f"record count is not an integer: {first.strip()!r}", 1) from exc
        if declared < 0:
            raise FormatCorruption(f"negative record count {declared}", 1)
        if limit is not None and declared > limit:
            log(f"warning: {os.fspath(path)!r} declares {declared} records, only {limit} will be loaded")
            declared = limit

        result = LoadResult[R](declared=declared)
        for lineno, raw in enumerate(f, start=2):
            if len(result.records) >= declared:
                break
            try:
                result.records.append(decode(_decode_line(raw, lineno), lineno))
            except FormatCorruption as exc:
                log(f"{os.fspath(path)}:{exc}; keeping the {len(result.records)} records before it")
                result.error = exc
                break

    if result.error is None and len(result.records) < declared:
        log(f"{os.fspath(path)!r} declares {declared} records but only has {len(result.records)}")
    return result


def write_file(path: Path, records: Iterable[R], encode: Callable[[R], str]) -> int:
    """
    Write `records` to a data file, replacing any existing file. Returns the number of records written. Raises
    FileUnavailable if the file can't be opened or written.
    """
    lines = [encode(record) for record in records]
    try:
        with open(path, "wt", encoding="utf-8", newline="\n") as f:
            f.write(f"{len(lines)}\n")
            for line in lines:
                f.write(line + "\n")
    except OSError as exc:
        raise FileUnavailable(f"can't write {os.fspath(path)!r}: {exc}") from exc
    return len(lines)
