# richsocket

A small asyncio WebSocket server that receives "now playing" media metadata
as JSON, keeps the current media in one shared object, and calls every
subscribed callback whenever it changes.

## Install

    pip install .

## Run

    richsocket [--port PORT] [-v]

- `--port` sets the port to listen on (0 to 65535). The default, 32322,
  comes from `richsocket.config.get_config().port`.
- `-v` / `--verbose` turns on debug logging, which logs every message.

The server listens on all interfaces until interrupted with Ctrl+C. It exits
with status 1 if the port cannot be bound.

While it runs:

- text messages are echoed back to the client that sent them;
- binary messages are read as JSON media documents and stored as the current
  media. Rejected documents are logged and discarded; the connection stays
  open.

## Message format

Only version `"1.0"` is accepted. A music document looks like this:

    {
      "version": "1.0",
      "music": {
        "track": "Some Track",
        "artist": "Some Artist",
        "album": "Some Album"
      }
    }

- `track` is required.
- `artist` and `album` default to `"Unknown Artist"` and `"Unknown Album"`
  when missing or not strings.
- Any `duration` sent is ignored; every track is recorded with a duration of
  322.
- A document carrying a `series` or `movie` object instead of `music` is
  accepted, but its details are not read; the stored metadata is an empty
  `Music` record.

A document with no version, with an unknown version, with no media object,
or with music but no `track` raises `richsocket.media.MediaParseError`, and
the current metadata is left as it was. Data that is not valid JSON, or JSON
that is not an object, is treated as an empty document and so is rejected
for having no version.

## Using it from Python

### The media object

`richsocket.media` defines the metadata records `Music`, `Series` and
`Movie` (dataclasses), the `Status` enum, and `MediaObject`, which holds the
current metadata in its `metadata` property.

    from richsocket.media import from_bytes, get_instance

    get_instance().connect(lambda metadata: print("now playing:", metadata))
    from_bytes(b'{"version": "1.0", "music": {"track": "Some Track"}}')

- `get_instance()` returns the one process-wide `MediaObject`.
- `from_bytes(data)` decodes JSON from bytes or a string;
  `from_json_document(document)` takes an already decoded document. Both
  update the shared object and return it.
- `MediaObject.connect(callback)` registers a callback that receives the new
  metadata on every `set_metadata`; `disconnect(callback)` removes it and
  raises `ValueError` if it was not connected.

`richsocket.app.handle_json(client, message)` wraps `from_bytes`: it returns
the media object, or `None` after logging a warning when the message is
rejected.

### The server

`richsocket.server.WSServer(port=None, host=None)` listens on the configured
port by default, and on all interfaces unless `host` is given. Register
callbacks, which may be plain functions or coroutine functions, with:

- `on_text(callback)`: called as `callback(client, message)` for each text
  message, before the echo is sent;
- `on_json(callback)`: called as `callback(client, data)` for each binary
  message;
- `on_closed(callback)`: called with no arguments after `close()`.

Start it with `await server.start()` (raises `OSError` if the port cannot be
bound, `RuntimeError` if already started) and stop it with
`await server.close()`, or use it as `async with WSServer(...) as server:`.
The `port` property gives the port actually bound, which makes `port=0`
useful; `clients` and `running` report the open connections and whether it
is listening.

`richsocket.app.serve(port=None)` runs such a server with `handle_json`
attached until it is cancelled.

### The listener

`richsocket.listener.Listener(url)` is a client. `await listener.run()`
connects, collects the text messages it receives until the connection ends,
and returns them as a list. Connection errors are logged rather than raised.
Callbacks registered with `on_closed` run only if a connection was actually
established.

### Configuration

`richsocket.config.get_config()` returns a frozen `Config` with `port`
(32322) and `only_local` (`True`). The server does not apply `only_local`;
pass `host="127.0.0.1"` to `WSServer` to accept local connections only.

## What it does not do

- It shows no system tray icon or any other window; the only interface is
  the command line and the log.
- It does not forward the current media anywhere, for example to a chat
  client's presence status. Subscribe with `MediaObject.connect` to act on
  updates yourself.
- It does not read series or movie details, playback status or position.

## Tests

    pip install .[test]
    pytest