"""Websocket client that listens to a server and logs what it sends."""

from __future__ import annotations

import asyncio
import inspect
import logging
from typing import Any, Callable

import websockets
from websockets.exceptions import ConnectionClosed, WebSocketException

logger = logging.getLogger(__name__)


class Listener:
    """Connects to a websocket URL and collects the text messages it receives."""

    def __init__(self, url: str) -> None:
        self.url = url
        self._closed_callbacks: list[Callable[[], Any]] = []

    def on_closed(self, callback: Callable[[], Any]) -> None:
        """Call ``callback()`` when an established connection ends."""
        self._closed_callbacks.append(callback)

    async def run(self) -> list[str]:
        """Listen until the connection ends and return the text messages received.

        Connection errors are logged, not raised; the closed callbacks are
        only called if a connection was actually established.
        """
        messages: list[str] = []
        connected = False
        try:
            async with websockets.connect(self.url) as connection:
                connected = True
                logger.debug("Websocket connected to %s", self.url)
                try:
                    async for message in connection:
                        if isinstance(message, str):
                            logger.debug("Message received: %s", message)
                            messages.append(message)
                except ConnectionClosed:
                    pass
        except (OSError, WebSocketException, asyncio.TimeoutError) as error:
            logger.warning("Websocket error: %s", error)
        if connected:
            for callback in tuple(self._closed_callbacks):
                result = callback()
                if inspect.isawaitable(result):
                    await result
        return messages