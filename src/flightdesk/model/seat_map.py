import string
from typing import Self

from flightdesk.log import log
from flightdesk.model import MAX_SEATS


class SeatMap:
    """
    Seat occupancy for one flight, packed eight seats to a byte. Seat `n` (counting from zero) is bit `n % 8` of byte
    `n // 8`; a set bit means the seat is booked. The canonical text representation is every byte as two uppercase hex
    digits, concatenated, which is how the map is stored in the flights file.

    Bookings are tracked by the ticket store, not here. The map is carried along and persisted with its flight, but
    nothing consults it when a ticket is booked.
    """

    SIZE = (MAX_SEATS + 7) // 8
    SEATS = MAX_SEATS

    def __init__(self, data: bytes | bytearray | None = None) -> None:
        if data is None:
            self._bytes = bytearray(SeatMap.SIZE)
        elif len(data) == SeatMap.SIZE:
            self._bytes = bytearray(data)
        else:
            raise ValueError(f"seat map must be {SeatMap.SIZE} bytes, got {len(data)}")

    @classmethod
    def from_hex(cls, text: str) -> Self:
        """
        Decode the hex form produced by `to_hex`. Each byte is decoded independently: a pair of characters that is
        missing or isn't two hex digits becomes a zero byte and the rest of the map is decoded normally.
        """
        data = bytearray(cls.SIZE)
        bad: list[int] = []
        for i in range(cls.SIZE):
            pair = text[i * 2 : i * 2 + 2]
            if len(pair) == 2 and all(c in string.hexdigits for c in pair):
                data[i] = int(pair, 16)
            else:
                bad.append(i)
        if bad:
            log(f"unreadable seat map bytes {bad} reset to 00")
        return cls(data)

    def to_hex(self) -> str:
        return self._bytes.hex().upper()

    def is_booked(self, seat: int) -> bool:
        byte, bit = self._locate(seat)
        return bool(self._bytes[byte] & (1 << bit))

    def book(self, seat: int) -> None:
        byte, bit = self._locate(seat)
        self._bytes[byte] |= 1 << bit

    def release(self, seat: int) -> None:
        byte, bit = self._locate(seat)
        self._bytes[byte] &= ~(1 << bit) & 0xFF

    def booked_count(self) -> int:
        return sum(byte.bit_count() for byte in self._bytes)

    def _locate(self, seat: int) -> tuple[int, int]:
        if not 0 <= seat < SeatMap.SEATS:
            raise IndexError(f"seat {seat} out of range 0..{SeatMap.SEATS - 1}")
        return seat // 8, seat % 8

    def __bytes__(self) -> bytes:
        return bytes(self._bytes)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SeatMap):
            return self._bytes == other._bytes
        return False

    def __repr__(self) -> str:
        return f"SeatMap({self.to_hex()!r})"

    def __str__(self) -> str:
        return self.to_hex()
