"""Media metadata model and the parser for messages sent by clients."""

from __future__ import annotations

import enum
import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, Union

logger = logging.getLogger(__name__)

VALID_VERSIONS = frozenset({"1.0"})

# Reported durations are not trusted yet; every track gets this fixed value.
_FIXED_MUSIC_DURATION = 322


class Status(enum.Enum):
    """Playback state of the current media."""

    PLAYING = enum.auto()
    PAUSED = enum.auto()
    UNKNOWN = enum.auto()


@dataclass
class Music:
    """A music track."""

    track: str = ""
    album: str = ""
    artist: str = ""
    duration: int = 0


@dataclass
class Series:
    """An episode of a series; ``episode`` 0 is used for specials."""

    episode_name: str = ""
    show: str = ""
    season: int = 0
    episode: int = 0
    duration: int = 0


@dataclass
class Movie:
    """A movie."""

    movie_name: str = ""
    director: str = ""
    duration: int = 0
    year: int = 0


MediaMetaData = Union[Music, Series, Movie]
ChangeCallback = Callable[[MediaMetaData], Any]


class MediaParseError(ValueError):
    """Raised when a media message cannot be turned into metadata."""


class MediaObject:
    """Holds the media currently playing and notifies listeners of changes."""

    def __init__(self) -> None:
        self.status = Status.UNKNOWN
        self.length = 0
        self.where_at = 0
        self._metadata: MediaMetaData = Music()
        self._callbacks: list[ChangeCallback] = []

    @property
    def metadata(self) -> MediaMetaData:
        """The metadata of the current media."""
        return self._metadata

    def set_metadata(self, metadata: MediaMetaData) -> None:
        """Replace the current metadata and notify every connected callback."""
        self._metadata = metadata
        for callback in tuple(self._callbacks):
            callback(metadata)

    def connect(self, callback: ChangeCallback) -> None:
        """Call ``callback`` with the new metadata on every change."""
        self._callbacks.append(callback)

    def disconnect(self, callback: ChangeCallback) -> None:
        """Stop calling ``callback``; raise ValueError if it was not connected."""
        self._callbacks.remove(callback)


_instance: MediaObject | None = None


def get_instance() -> MediaObject:
    """Return the process-wide media object, creating it on first use."""
    global _instance
    if _instance is None:
        _instance = MediaObject()
    return _instance


def _string_or(value: Any, default: str) -> str:
    return value if isinstance(value, str) else default


def _parse_music(music: Mapping[str, Any]) -> Music:
    if "track" not in music:
        raise MediaParseError("No song found")
    return Music(
        track=_string_or(music["track"], ""),
        artist=_string_or(music.get("artist"), "Unknown Artist"),
        album=_string_or(music.get("album"), "Unknown Album"),
        duration=_FIXED_MUSIC_DURATION,
    )


def _parse(document: Mapping[str, Any]) -> MediaMetaData:
    if "version" not in document:
        raise MediaParseError("Undefined version")
    version = _string_or(document["version"], "")
    if version not in VALID_VERSIONS:
        raise MediaParseError("Wrong json version")

    if "music" in document:
        music = document["music"]
        return _parse_music(music if isinstance(music, Mapping) else {})
    if "series" in document or "movie" in document:
        # Series and movie details are accepted but not read yet.
        return Music()
    raise MediaParseError("Wrong/empty media found")


def from_json_document(document: Any) -> MediaObject:
    """Update the shared media object from a decoded JSON document.

    Anything that is not a JSON object is treated as an empty object.
    Raises MediaParseError, leaving the current metadata untouched, when
    the document is not a valid media message.
    """
    if not isinstance(document, Mapping):
        document = {}
    try:
        metadata = _parse(document)
    except MediaParseError as error:
        logger.debug("error parsing json, discarding new metadata: %s", error)
        raise
    media_object = get_instance()
    media_object.set_metadata(metadata)
    return media_object


def from_bytes(data: bytes | str) -> MediaObject:
    """Decode ``data`` as JSON and update the shared media object from it.

    Data that is not valid JSON is treated as an empty document.
    """
    try:
        document = json.loads(data)
    except ValueError:
        document = {}
    return from_json_document(document)