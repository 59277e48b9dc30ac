import inspect
import os
import sys
from typing import Any, TextIO

from flightdesk.util import maybe


_src_root = ""  # pylint: disable=invalid-name
_stream: TextIO | None = None  # pylint: disable=invalid-name


def set_src_root(path: str) -> None:
    """
    Set the directory prefix to strip from filenames in log message context.
    """
    global _src_root
    _src_root = os.path.abspath(path)
    if not _src_root.endswith("/"):
        _src_root += "/"


def set_stream(stream: TextIO | None) -> None:
    """
    Send log messages to `stream` instead of stdout. Passing None restores stdout. The console uses stdout for its
    prompts, so running it interactively usually means logging to stderr.
    """
    global _stream
    _stream = stream


def log(*args: object, **kwargs: Any) -> None:
    """
    Log a message prefixed with caller context. The arguments to this function are passed directly to print() after
    the context is printed.
    """
    # fmt: off
    frame    = maybe(lambda: inspect.stack()[3].frame                )
    caller   = maybe(lambda: inspect.getframeinfo(frame)             ) if frame  else None
    filename = maybe(lambda: caller.filename.removeprefix(_src_root) ) if caller else None
    lineno   = maybe(lambda: caller.lineno                           ) if caller else None
    qualname = maybe(lambda: frame.f_code.co_qualname                ) if frame  else None
    # fmt: on

    stream = _stream if _stream is not None else sys.stdout
    kwargs.setdefault("file", stream)

    has_file_context = bool(filename and lineno is not None)
    has_fn_context = bool(qualname)

    if has_file_context:
        print(f"{filename}:{lineno}:", end="", file=stream)
    if has_fn_context:
        print(f"{qualname}:", end="", file=stream)

    if has_file_context or has_fn_context:
        print(" ", end="", file=stream)

    print(*args, **kwargs)
