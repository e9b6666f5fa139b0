"""
Playback state for TuneFlow

Session state container, playback status, and the clock-string helpers used
to derive track durations.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from loguru import logger

from tuneflow.domain.catalog.models import PlayableItem

# Seconds used when an item's duration string cannot be parsed ("3:30")
DEFAULT_DURATION_SECONDS = 210


class PlaybackStatus(str, Enum):
    """Session state machine states."""

    IDLE = "idle"  # No current item
    SELECTED = "selected"  # Current item set, paused
    PLAYING = "playing"  # Current item set, playing


@dataclass
class SessionState:
    """Mutable playback session state.

    Invariants (maintained by SessionController):
    - position >= 0 implies playlist[position].id == current_item.id
    - an empty playlist implies position == -1 and is_playing is False
    - elapsed <= duration except at the instant of rollover
    """

    current_item: Optional[PlayableItem] = None
    position: int = -1  # Index into the playlist, -1 when not queued
    is_playing: bool = False
    elapsed: float = 0.0  # Local estimate, seconds
    duration: int = 0  # Seconds, parsed once per selection
    repeat: bool = False
    shuffle: bool = False  # Stored and reported, not consulted by next/previous
    selection: int = 0  # Incremented on every selection transition

    @property
    def status(self) -> PlaybackStatus:
        if self.current_item is None:
            return PlaybackStatus.IDLE
        if self.is_playing:
            return PlaybackStatus.PLAYING
        return PlaybackStatus.SELECTED

    def clear_selection(self) -> None:
        """Return to Idle, keeping repeat/shuffle preferences."""
        self.current_item = None
        self.position = -1
        self.is_playing = False
        self.elapsed = 0.0
        self.duration = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "status": self.status.value,
            "current_item": self.current_item._asdict() if self.current_item else None,
            "position": self.position,
            "is_playing": self.is_playing,
            "elapsed": self.elapsed,
            "duration": self.duration,
            "repeat": self.repeat,
            "shuffle": self.shuffle,
        }


def parse_clock(text: str) -> int:
    """Parse a "m:ss" or "h:mm:ss" duration string into total seconds.

    Minutes may exceed 59 in the two-part form ("62:03" is 3723 seconds).
    Malformed strings fall back to DEFAULT_DURATION_SECONDS.

    Args:
        text: Duration string

    Returns:
        Total seconds
    """
    parts = (text or "").strip().split(":")
    if len(parts) not in (2, 3) or not all(p.isdigit() for p in parts):
        logger.debug(f"Malformed duration {text!r}, using {DEFAULT_DURATION_SECONDS}s")
        return DEFAULT_DURATION_SECONDS

    if len(parts) == 2:
        minutes, seconds = (int(p) for p in parts)
        return minutes * 60 + seconds

    hours, minutes, seconds = (int(p) for p in parts)
    return hours * 3600 + minutes * 60 + seconds


def format_time(seconds: float) -> str:
    """Format time in seconds to m:ss format."""
    if seconds < 0:
        return "0:00"

    minutes = int(seconds // 60)
    secs = int(seconds % 60)
    return f"{minutes}:{secs:02d}"
