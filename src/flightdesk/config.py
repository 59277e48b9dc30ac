from collections.abc import Mapping
from dataclasses import dataclass
import os
from typing import Self


FLIGHTS_FILE = "flights.txt"
PASSENGERS_FILE = "passengers.txt"
TICKETS_FILE = "tickets.txt"


@dataclass
class Config:
    """
    Runtime settings, taken from the environment:

        FLIGHTDESK_DATA_DIR  directory holding the data files (default: current directory)
        BOARD_HOST           address the departure board listens on (default: all interfaces)
        BOARD_PORT           port the departure board listens on; the board is disabled if this isn't set
    """

    data_dir: str = "."
    board_host: str = ""
    board_port: int | None = None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] = os.environ) -> Self:
        board_port = environ.get("BOARD_PORT")
        return cls(
            data_dir=environ.get("FLIGHTDESK_DATA_DIR", "."),
            board_host=environ.get("BOARD_HOST", ""),
            board_port=int(board_port) if board_port else None,
        )

    @property
    def flights_path(self) -> str:
        return os.path.join(self.data_dir, FLIGHTS_FILE)

    @property
    def passengers_path(self) -> str:
        return os.path.join(self.data_dir, PASSENGERS_FILE)

    @property
    def tickets_path(self) -> str:
        return os.path.join(self.data_dir, TICKETS_FILE)
