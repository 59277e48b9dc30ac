"""
Generally useful stuff that doesn't fit anywhere else
"""

from collections.abc import Callable
from typing import TypeVar

T = TypeVar("T")


def maybe(dangerous: Callable[[], T]) -> T | None:
    """
    Executes a callable (function, lambda, etc.) and returns the result. If the callable raises an exception, the
    exception is caught and discarded, and None is returned.
    """
    try:
        return dangerous()
    except Exception:  # pylint: disable=broad-exception-caught
        return None


def truncate(text: str, size: int) -> str:
    """
    Clip `text` so that it fits a field of `size` characters, one of which is reserved for the terminator in the
    on-disk format. Text that already fits is returned unchanged.
    """
    return text[: size - 1]
