from abc import ABC, abstractmethod
from collections.abc import Callable

from flightdesk.log import log


class Runnable(ABC):
    """
    Runnable implements an asynchronous "run until told to stop" loop. The loop begins when `run` is awaited and can be
    stopped by calling `stop`. Subclasses implement `step`, which is awaited on each loop cycle. Subclasses can also
    implement `setup` and/or `teardown` if they need to do any pre- or post-loop work.

    Other parts of the program can ask to be told when a runnable stops (see `on_stop`). The console uses this to
    bring the rest of the process down when the operator picks "Exit".
    """

    def __init__(self, name: str | None = None):
        if name is None:
            self._name = type(self).__name__
        else:
            self._name = name
        self._running = False
        self._stop_callbacks: list[Callable[[], None]] = []

    @property
    def name(self) -> str:
        return self._name

    async def run(self) -> None:
        log(f"{self._name} starting")
        self._running = True
        await self.setup()
        log(f"{self._name} started")

        try:
            while self._running:
                await self.step()
        finally:
            await self.teardown()
            log(f"{self._name} stopped")

    def stop(self) -> None:
        if not self._running:
            return
        log(f"{self._name} stopping")
        self._running = False
        for callback in self._stop_callbacks:
            callback()

    def on_stop(self, callback: Callable[[], None]) -> None:
        """
        Register a callback to be invoked (once per `stop` call) when this runnable is told to stop.
        """
        self._stop_callbacks.append(callback)

    def is_running(self) -> bool:
        return self._running

    @abstractmethod
    async def step(self) -> None: ...

    async def setup(self) -> None:
        pass

    async def teardown(self) -> None:
        pass
