import asyncio

import pytest

from flightdesk.config import Config
from flightdesk.crew import assign_crew
from flightdesk.payment import handle_payment
from flightdesk.runnable import Runnable


class Counter(Runnable):
    def __init__(self, limit: int):
        super().__init__()
        self.limit = limit
        self.steps = 0
        self.torn_down = False

    async def step(self) -> None:
        self.steps += 1
        if self.steps == self.limit:
            self.stop()
        await asyncio.sleep(0)

    async def teardown(self) -> None:
        self.torn_down = True


def test_runnable_stops_and_notifies():
    counter = Counter(3)
    stopped: list[str] = []
    counter.on_stop(lambda: stopped.append(counter.name))

    asyncio.run(counter.run())

    assert counter.steps == 3
    assert counter.torn_down
    assert not counter.is_running()
    assert stopped == ["Counter"]


def test_stop_before_run_does_nothing():
    counter = Counter(1)
    stopped: list[int] = []
    counter.on_stop(lambda: stopped.append(1))
    counter.stop()
    assert stopped == []


def test_config_defaults():
    config = Config.from_env({})
    assert config.board_port is None
    assert config.board_host == ""
    assert config.flights_path == "./flights.txt"


def test_config_from_env():
    config = Config.from_env({"FLIGHTDESK_DATA_DIR": "/data", "BOARD_HOST": "127.0.0.1", "BOARD_PORT": "9999"})
    assert config.board_port == 9999
    assert config.board_host == "127.0.0.1"
    assert config.passengers_path == "/data/passengers.txt"
    assert config.tickets_path == "/data/tickets.txt"


def test_config_bad_port():
    with pytest.raises(ValueError):
        Config.from_env({"BOARD_PORT": "ninety"})


def test_payment():
    assert handle_payment("Card", 10).receipt() == "Payment of 10.00 via Card completed successfully."
    with pytest.raises(ValueError):
        handle_payment("Card", 0)


def test_crew():
    assert str(assign_crew("Ann", 7)) == "Crew member Ann assigned to Flight ID 7."
    with pytest.raises(ValueError):
        assign_crew("Ann", 0)
