import asyncio
import json
import socket

import pytest
import websockets

from richsocket import media
from richsocket.app import handle_json, main, serve
from richsocket.media import Music


def _free_port():
    with socket.socket() as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


def _music_message(track):
    return json.dumps(
        {"version": "1.0", "music": {"track": track, "artist": "Powerwolf"}}
    ).encode()


def test_handle_json_updates_shared_media():
    media.get_instance().set_metadata(Music(track="before"))
    result = handle_json(None, _music_message("Demons"))
    assert result is media.get_instance()
    assert result.metadata.track == "Demons"
    assert result.metadata.artist == "Powerwolf"


def test_handle_json_rejects_bad_message_and_keeps_metadata():
    media.get_instance().set_metadata(Music(track="before"))
    assert handle_json(None, b'{"version": "2.0", "music": {}}') is None
    assert media.get_instance().metadata == Music(track="before")


def test_handle_json_rejects_invalid_json():
    media.get_instance().set_metadata(Music(track="kept"))
    assert handle_json(None, b"not json at all") is None
    assert media.get_instance().metadata.track == "kept"


@pytest.mark.asyncio
async def test_serve_feeds_binary_messages_to_media():
    media.get_instance().set_metadata(Music(track="before"))
    port = _free_port()
    task = asyncio.create_task(serve(port))
    loop = asyncio.get_running_loop()
    deadline = loop.time() + 5
    try:
        while True:
            try:
                ws = await websockets.connect(f"ws://127.0.0.1:{port}")
                break
            except OSError:
                assert loop.time() < deadline
                await asyncio.sleep(0.02)
        try:
            await ws.send(_music_message("Sacrament"))
            while media.get_instance().metadata.track != "Sacrament":
                assert loop.time() < deadline
                await asyncio.sleep(0.01)
        finally:
            await ws.close()
    finally:
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task
    assert media.get_instance().metadata.duration == 322


@pytest.mark.parametrize("port", ["70000", "-1", "abc"])
def test_main_rejects_bad_port(port):
    with pytest.raises(SystemExit) as info:
        main(["--port", port])
    assert info.value.code == 2


def test_main_reports_port_in_use():
    with socket.socket() as sock:
        sock.bind(("0.0.0.0", 0))
        sock.listen()
        port = sock.getsockname()[1]
        assert main(["--port", str(port)]) == 1