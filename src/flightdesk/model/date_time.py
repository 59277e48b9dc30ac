from dataclasses import astuple, dataclass
from functools import total_ordering
from typing import Self


@total_ordering
@dataclass(frozen=True)
class DateTime:
    """
    A calendar date and time of day with minute resolution. Intended ranges are day 1-31, month 1-12, year 0-4095,
    hour 0-23 and minute 0-59, but nothing checks them: whatever the caller supplies is stored as-is, including dates
    that don't exist on any calendar.

    Ordering is chronological, i.e. by year, then month, then day, then hour, then minute.
    """

    # fmt:off
    day:    int
    month:  int
    year:   int
    hour:   int
    minute: int
    # fmt:on

    @classmethod
    def parse(cls, text: str) -> Self:
        """
        Parse the five space-separated integers "day month year hour minute" used by both the data files and the
        console. Anything after the fifth number is ignored.
        """
        parts = text.split()
        if len(parts) < 5:
            raise ValueError(f"expected day, month, year, hour and minute, got {text!r}")
        values = [int(part) for part in parts[:5]]
        if any(value < 0 for value in values):
            raise ValueError(f"date/time fields must not be negative: {text!r}")
        return cls(*values)

    def to_text(self) -> str:
        return " ".join(str(value) for value in astuple(self))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return compare_date_time(self, other) < 0

    def __str__(self) -> str:
        return f"{self.day:02}-{self.month:02}-{self.year:04} {self.hour:02}:{self.minute:02}"


def compare_date_time(a: DateTime, b: DateTime) -> int:
    """
    Return a negative number, zero or a positive number if `a` is earlier than, the same as, or later than `b`.
    """
    for field_a, field_b in (
        (a.year, b.year),
        (a.month, b.month),
        (a.day, b.day),
        (a.hour, b.hour),
        (a.minute, b.minute),
    ):
        if field_a != field_b:
            return field_a - field_b
    return 0
