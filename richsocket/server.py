"""Websocket server that receives media messages from clients."""

from __future__ import annotations

import inspect
import logging
from typing import Any, Callable

import websockets
from websockets.exceptions import ConnectionClosed

from richsocket.config import get_config

logger = logging.getLogger(__name__)

TextCallback = Callable[[Any, str], Any]
BytesCallback = Callable[[Any, bytes], Any]
ClosedCallback = Callable[[], Any]


async def _emit(callbacks: list, *args: Any) -> None:
    for callback in tuple(callbacks):
        result = callback(*args)
        if inspect.isawaitable(result):
            await result


class WSServer:
    """Websocket server that echoes text messages and forwards binary ones.

    Text messages are handed to the ``on_text`` callbacks and sent back to
    the client that sent them. Binary messages are handed to the ``on_json``
    callbacks. Callbacks receive the client connection and the message and
    may be plain functions or coroutine functions.
    """

    def __init__(self, port: int | None = None, host: str | None = None) -> None:
        self._requested_port = get_config().port if port is None else port
        self.host = host
        self._server: Any = None
        self._clients: set[Any] = set()
        self._text_callbacks: list[TextCallback] = []
        self._json_callbacks: list[BytesCallback] = []
        self._closed_callbacks: list[ClosedCallback] = []

    @property
    def port(self) -> int:
        """The port actually bound while running, else the requested one."""
        if self._server is not None:
            for sock in self._server.sockets:
                return sock.getsockname()[1]
        return self._requested_port

    @property
    def clients(self) -> frozenset:
        """The connections currently open."""
        return frozenset(self._clients)

    @property
    def running(self) -> bool:
        """Whether the server is listening."""
        return self._server is not None

    async def start(self) -> WSServer:
        """Start listening; raise OSError if the port cannot be bound."""
        if self._server is not None:
            raise RuntimeError("server already started")
        self._server = await websockets.serve(
            self._handle, self.host, self._requested_port
        )
        logger.info("Websocket server listening on port %d", self.port)
        return self

    async def close(self) -> None:
        """Stop listening, drop every client and notify ``on_closed`` callbacks."""
        if self._server is None:
            return
        server, self._server = self._server, None
        server.close()
        await server.wait_closed()
        self._clients.clear()
        await _emit(self._closed_callbacks)

    def on_text(self, callback: TextCallback) -> None:
        """Call ``callback(client, message)`` for each text message."""
        self._text_callbacks.append(callback)

    def on_json(self, callback: BytesCallback) -> None:
        """Call ``callback(client, data)`` for each binary message."""
        self._json_callbacks.append(callback)

    def on_closed(self, callback: ClosedCallback) -> None:
        """Call ``callback()`` once the server has been closed."""
        self._closed_callbacks.append(callback)

    async def _handle(self, connection: Any) -> None:
        self._clients.add(connection)
        try:
            async for message in connection:
                if isinstance(message, str):
                    logger.debug("Text message received: %s", message)
                    await _emit(self._text_callbacks, connection, message)
                    await connection.send(message)
                else:
                    logger.debug("Binary message received (%d bytes)", len(message))
                    await _emit(self._json_callbacks, connection, bytes(message))
        except ConnectionClosed:
            pass
        finally:
            self._clients.discard(connection)

    async def __aenter__(self) -> WSServer:
        return await self.start()

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()