"""Application settings shared by the whole process."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

DEFAULT_PORT = 32322


@dataclass(frozen=True)
class Config:
    """Settings for the websocket endpoint.

    ``port`` is the port the websocket server listens on; ``only_local``
    tells whether connections are accepted from localhost only.
    """

    port: int = DEFAULT_PORT
    only_local: bool = True

    def __copy__(self) -> Config:
        return self

    def __deepcopy__(self, memo: dict) -> Config:
        return self


@lru_cache(maxsize=None)
def get_config() -> Config:
    """Return the process-wide configuration, creating it on first use."""
    return Config()