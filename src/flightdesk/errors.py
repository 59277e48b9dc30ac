"""
Exceptions raised by the record stores and the data file codec. Every one of them derives from StoreError, so callers
that only want to report a failure and carry on can catch that.
"""


class StoreError(Exception):
    """
    Base class for all store and persistence failures. A store that raises one of these is left as it was before the
    failed operation.
    """


class CapacityExceeded(StoreError):
    """
    The store already holds as many records as it is allowed to.
    """


class AllocationFailure(StoreError):
    """
    The store ran out of memory while growing.
    """


class DuplicateKey(StoreError):
    """
    A record with the same key (flight ID, passport number) is already stored.
    """


class NotFound(StoreError, LookupError):
    pass


class InvalidTimeOrder(StoreError, ValueError):
    """
    A flight's arrival is earlier than its departure.
    """


class NotEnoughRecords(StoreError):
    """
    The operation needs more records than the store holds, e.g. sorting fewer than two flights.
    """


class FileUnavailable(StoreError, OSError):
    """
    A data file couldn't be opened.
    """


class FormatCorruption(StoreError, ValueError):
    """
    A data file isn't in the expected format. `lineno` is the 1-based line number of the offending line, when known.
    """

    def __init__(self, message: str, lineno: int | None = None):
        super().__init__(message if lineno is None else f"line {lineno}: {message}")
        self.lineno = lineno
