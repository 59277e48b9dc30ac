"""
The departure board: a websocket server that pushes the current flight list, as JSON, to every connected client. A
client receives the list as soon as it connects and then once per `interval` seconds. The board only reads the flight
store; it never changes it.
"""

import asyncio
from collections.abc import Awaitable

import websockets
from websockets.asyncio.server import serve, ServerConnection, Server as WebsocketsServer

from flightdesk.log import log
from flightdesk.model.json import dumps
from flightdesk.runnable import Runnable
from flightdesk.store import FlightStore


class Board(Runnable):
    def __init__(self, listen_host: str, listen_port: int, flights: FlightStore, interval: float = 1.0):
        super().__init__()
        self._listen_host = listen_host
        self._listen_port = listen_port
        self._flights = flights
        self._interval = interval
        self._server: WebsocketsServer | None = None
        self._serve_task: asyncio.Task[None] | None = None
        self._clients: list[ServerConnection] = []
        self.listening = asyncio.Event()

    @property
    def port(self) -> int | None:
        """
        The port actually being listened on, which differs from the configured one when that is 0.
        """
        if self._server is None:
            return None
        for sock in self._server.sockets:
            return sock.getsockname()[1]
        return None

    def snapshot(self) -> str:
        return dumps(list(self._flights.list_all()))

    async def setup(self) -> None:
        self._serve_task = asyncio.create_task(self._serve())

    async def step(self) -> None:
        await asyncio.sleep(self._interval)

        message = self.snapshot()
        futures: list[Awaitable[None]] = []
        try:
            for ws in self._clients:
                futures.append(ws.send(message))
            await asyncio.gather(*futures)
        except websockets.WebSocketException as exc:
            log(f"websocket exception: {exc}")

    async def teardown(self) -> None:
        if self._server:
            self._server.close()
        if self._serve_task:
            await self._serve_task

    async def _serve(self) -> None:
        async with serve(self._handler, self._listen_host, self._listen_port) as server:
            self._server = server
            log(f"listening on {self._listen_host}:{self.port}")
            self.listening.set()
            await server.wait_closed()
        log("stopped listening")

    async def _handler(self, ws: ServerConnection) -> None:
        log(f"{ws.remote_address[0]}:{ws.remote_address[1]}: connection established")
        try:
            await ws.send(self.snapshot())
        except websockets.WebSocketException as exc:
            log(f"websocket exception: {exc}")
            return
        self._clients.append(ws)
        await ws.wait_closed()
        self._clients.remove(ws)
        log(f"{ws.remote_address[0]}:{ws.remote_address[1]}: connection closed")
