"""Playlist domain - in-memory, deduplicated playlist store."""

from .store import PlaylistStore

__all__ = ["PlaylistStore"]
