"""
Catalog domain models.

Contains the track descriptor shared by search, playlist and playback.
"""

from typing import NamedTuple


class PlayableItem(NamedTuple):
    """A searchable/queueable track.

    Immutable once constructed. ``id`` identifies the catalog entry and is
    the key used for playlist deduplication; ``video_id`` addresses the
    embedded player surface. Several items may share a ``video_id``.
    """
    id: str
    title: str
    artist: str  # Channel name for YouTube results
    thumbnail: str
    duration: str  # Human readable, "m:ss" or "h:mm:ss"
    video_id: str

    def same_track(self, other: "PlayableItem") -> bool:
        """Check whether two items are the same catalog entry."""
        return self.id == other.id
