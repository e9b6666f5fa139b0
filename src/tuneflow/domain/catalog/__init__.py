"""Catalog domain - YouTube search and the shared track model.

This domain handles:
- The PlayableItem descriptor used across search, playlist and playback
- YouTube Data API search with duration lookup
- Deterministic demo results when live search is unavailable
"""

from .exceptions import YouTubeError, YouTubeRequestError, YouTubeResponseError
from .models import PlayableItem
from .youtube import (
    DEFAULT_DURATION,
    MOCK_VIDEO_ID,
    format_iso_duration,
    mock_results,
    search,
)

__all__ = [
    "PlayableItem",
    "YouTubeError",
    "YouTubeRequestError",
    "YouTubeResponseError",
    "DEFAULT_DURATION",
    "MOCK_VIDEO_ID",
    "format_iso_duration",
    "mock_results",
    "search",
]
