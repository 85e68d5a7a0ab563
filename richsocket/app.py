"""Entry point: run the websocket server that feeds the media object."""

from __future__ import annotations

import argparse
import asyncio
import logging
from typing import Any

from richsocket import media
from richsocket.config import get_config
from richsocket.media import MediaObject, MediaParseError
from richsocket.server import WSServer

logger = logging.getLogger(__name__)


def handle_json(client: Any, message: bytes | str) -> MediaObject | None:
    """Update the shared media object from a client message.

    Returns the media object, or None when the message was rejected.
    """
    try:
        return media.from_bytes(message)
    except MediaParseError as error:
        logger.warning("Discarding media message: %s", error)
        return None


async def serve(port: int | None = None) -> None:
    """Listen on ``port`` and feed binary messages to the media object until cancelled."""
    server = WSServer(port)
    server.on_json(handle_json)
    async with server:
        await asyncio.Event().wait()


def _port(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid port: {text!r}") from None
    if not 0 <= value <= 65535:
        raise argparse.ArgumentTypeError(f"port out of range: {value}")
    return value


def main(argv: list[str] | None = None) -> int:
    """Parse the command line and run the server; return the exit status."""
    parser = argparse.ArgumentParser(
        prog="richsocket",
        description="Receive now-playing media information over a websocket.",
    )
    parser.add_argument(
        "--port", type=_port, default=get_config().port, help="port to listen on"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="log every message"
    )
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)
    try:
        asyncio.run(serve(args.port))
    except KeyboardInterrupt:
        pass
    except OSError as error:
        logger.error("Cannot start server: %s", error)
        return 1
    return 0