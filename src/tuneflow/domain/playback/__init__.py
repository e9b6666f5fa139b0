"""Playback domain - session state machine and embedded player control.

This domain handles:
- Session state (current item, position, play flag, elapsed time)
- Selection, next/previous with wraparound, playlist reconciliation
- Embedded player commands, gating and surface visibility
- The periodic elapsed-time ticker
"""

# State
from .state import (
    DEFAULT_DURATION_SECONDS,
    PlaybackStatus,
    SessionState,
    format_time,
    parse_clock,
)

# Controller and session
from .controller import SessionController
from .session import PlaybackSession

# Embedded player
from .embed import (
    PLAYER_ORIGIN,
    EmbeddedPlayer,
    PlayerCommand,
    volume_to_percent,
)
from .ticker import PlaybackTicker

__all__ = [
    # State
    "DEFAULT_DURATION_SECONDS",
    "PlaybackStatus",
    "SessionState",
    "format_time",
    "parse_clock",
    # Controller
    "SessionController",
    "PlaybackSession",
    # Player
    "PLAYER_ORIGIN",
    "EmbeddedPlayer",
    "PlayerCommand",
    "volume_to_percent",
    "PlaybackTicker",
]
