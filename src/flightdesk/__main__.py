import asyncio
import functools
import io
import os
import signal
import sys
import traceback

import flightdesk.log
from flightdesk.board import Board
from flightdesk.config import Config
from flightdesk.console import Console
from flightdesk.errors import FormatCorruption, StoreError
from flightdesk.log import log
from flightdesk.runnable import Runnable
from flightdesk.store import FlightStore, PassengerStore, TicketStore


def load_all(config: Config, flights: FlightStore, passengers: PassengerStore, tickets: TicketStore) -> None:
    for store, path in (
        (flights, config.flights_path),
        (passengers, config.passengers_path),
        (tickets, config.tickets_path),
    ):
        try:
            result = store.load(path)
        except FormatCorruption as exc:
            log(f"{path}: {exc}; file not loaded")
            continue
        if result.partial:
            log(f"{path}: loaded partially ({result.error})")


def save_all(config: Config, flights: FlightStore, passengers: PassengerStore, tickets: TicketStore) -> bool:
    """
    Save every store. A store that can't be saved is reported and the others are still saved.
    """
    ok = True
    for store, path in (
        (flights, config.flights_path),
        (passengers, config.passengers_path),
        (tickets, config.tickets_path),
    ):
        try:
            store.save(path)
        except StoreError as exc:
            log(f"save failed: {exc}")
            ok = False
    return ok


async def main() -> int:
    flightdesk.log.set_src_root(os.path.dirname(__file__))
    # Keep stdout for the console.
    flightdesk.log.set_stream(sys.stderr)

    config = Config.from_env()
    flights, passengers, tickets = FlightStore(), PassengerStore(), TicketStore()
    load_all(config, flights, passengers, tickets)

    console = Console(flights, passengers, tickets)
    runnables: list[Runnable] = [console]
    if config.board_port is None:
        log("BOARD_PORT not set; departure board disabled")
    else:
        runnables.append(Board(config.board_host, config.board_port, flights))

    def shutdown_others() -> None:
        [r.stop() for r in runnables if r is not console]

    console.on_stop(shutdown_others)

    def graceful_shutdown(signame: str) -> None:
        log(signame)
        [r.stop() for r in runnables]

    loop = asyncio.get_running_loop()
    for signame in ("SIGINT", "SIGTERM"):
        loop.add_signal_handler(getattr(signal, signame), functools.partial(graceful_shutdown, signame))

    try:
        await asyncio.gather(*[r.run() for r in runnables])
    except Exception as exc:  # pylint: disable=broad-exception-caught
        log("uncaught exception")
        traceback_buffer = io.StringIO()
        traceback.print_exception(exc, file=traceback_buffer)
        log(traceback_buffer.getvalue())
        return os.EX_SOFTWARE
    else:
        saved = save_all(config, flights, passengers, tickets)
    finally:
        for store in (flights, passengers, tickets):
            store.close()

    return os.EX_OK if saved else os.EX_IOERR


def run() -> None:
    _exit_status = asyncio.run(main())
    log(f"sys.exit({_exit_status})")
    sys.exit(_exit_status)


if __name__ == "__main__":
    run()
