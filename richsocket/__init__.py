"""Receive now-playing media metadata over WebSocket and notify subscribers."""

__version__ = "0.1.0"

__all__ = ["config", "media", "server", "listener", "app"]