"""
Embedded player adapter for the YouTube iframe surface.

The surface is opaque: it plays on its own schedule, reports nothing back
we can rely on, and only accepts commands posted to its origin. This
adapter turns session intent (play, pause, volume) into iframe API
messages, gated on surface readiness and a prior user gesture, and keeps
the visibility policy for the surface.

Commands are fire-and-forget. They accumulate in an outbox that the
transport drains; nothing waits for acknowledgement.
"""

import json
import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import urlencode

from loguru import logger

# Commands are only ever posted to the player's own origin
PLAYER_ORIGIN = "https://www.youtube.com"
EMBED_BASE_URL = f"{PLAYER_ORIGIN}/embed"

DEFAULT_MOBILE_BREAKPOINT = 800


@dataclass(frozen=True)
class PlayerCommand:
    """A single iframe API command addressed to one surface."""

    func: str  # playVideo, pauseVideo, setVolume
    video_id: str
    args: Tuple[Any, ...] = field(default_factory=tuple)
    target_origin: str = PLAYER_ORIGIN

    def to_message(self) -> str:
        """Serialize to the iframe API postMessage payload."""
        return json.dumps({"event": "command", "func": self.func, "args": list(self.args)})

    def to_dict(self) -> Dict[str, Any]:
        return {
            "func": self.func,
            "args": list(self.args),
            "video_id": self.video_id,
            "target_origin": self.target_origin,
            "message": self.to_message(),
        }


def volume_to_percent(level: float) -> int:
    """Map a 0.0-1.0 volume level to the player's 0-100 scale (round half up)."""
    level = min(max(level, 0.0), 1.0)
    return int(math.floor(level * 100 + 0.5))


class EmbeddedPlayer:
    """Best-effort control channel to the embedded player surface.

    Holds only the current item's video id, attached and revoked by the
    session. A command is queued only when:
    - a surface is attached,
    - that surface has signalled ready,
    - at least one user interaction has happened in the session.
    Commands issued before the gate opens are dropped, not deferred.
    """

    def __init__(
        self,
        volume: float = 1.0,
        mobile_breakpoint: int = DEFAULT_MOBILE_BREAKPOINT,
        show_video: bool = False,
        page_origin: Optional[str] = None,
    ):
        self.video_id: Optional[str] = None
        self.autoplay = False
        self.ready = False
        self.user_interacted = False
        self.volume = min(max(volume, 0.0), 1.0)

        self.mobile_breakpoint = mobile_breakpoint
        self.is_mobile = False
        self.video_toggle = show_video
        self.page_origin = page_origin

        self._outbox: List[PlayerCommand] = []

    # Surface lifecycle

    def attach(self, video_id: str, autoplay: bool = True) -> None:
        """Materialize a surface for video_id; it must signal ready again."""
        if self.video_id != video_id:
            self._drop_pending()
        self.video_id = video_id
        self.autoplay = autoplay
        self.ready = False
        logger.debug(f"Attached player surface {video_id} (autoplay={autoplay})")

    def detach(self) -> None:
        """Revoke the surface reference."""
        if self.video_id is None:
            return
        logger.debug(f"Detached player surface {self.video_id}")
        self._drop_pending()
        self.video_id = None
        self.autoplay = False
        self.ready = False

    def mark_ready(self, video_id: str) -> bool:
        """Record the surface's ready signal. Signals for stale surfaces are ignored."""
        if self.video_id is None or video_id != self.video_id:
            logger.debug(f"Ignoring ready signal for {video_id} (attached: {self.video_id})")
            return False
        self.ready = True
        return True

    def note_user_interaction(self) -> None:
        if not self.user_interacted:
            logger.debug("First user interaction recorded, player commands enabled")
        self.user_interacted = True

    @property
    def can_send(self) -> bool:
        return self.video_id is not None and self.ready and self.user_interacted

    # Commands

    def _send(self, func: str, *args: Any) -> bool:
        if not self.can_send:
            logger.debug(
                f"Suppressed {func}: attached={self.video_id is not None} "
                f"ready={self.ready} interacted={self.user_interacted}"
            )
            return False
        self._outbox.append(PlayerCommand(func=func, video_id=self.video_id, args=args))
        return True

    def play(self) -> bool:
        return self._send("playVideo")

    def pause(self) -> bool:
        return self._send("pauseVideo")

    def set_volume(self, level: float) -> bool:
        self.volume = min(max(level, 0.0), 1.0)
        return self._send("setVolume", volume_to_percent(self.volume))

    def drain(self) -> List[PlayerCommand]:
        """Hand queued commands to the transport."""
        commands, self._outbox = self._outbox, []
        return commands

    def _drop_pending(self) -> None:
        if self._outbox:
            logger.debug(f"Dropping {len(self._outbox)} undelivered commands")
        self._outbox = []

    # Visibility

    def apply_viewport(self, width: int) -> bool:
        """Update the viewport class. Idempotent.

        Returns:
            True if the mobile/desktop classification changed
        """
        is_mobile = width < self.mobile_breakpoint
        if is_mobile == self.is_mobile:
            return False
        self.is_mobile = is_mobile
        logger.debug(f"Viewport {width}px -> {'mobile' if is_mobile else 'desktop'}")
        return True

    def toggle_video(self) -> bool:
        """Flip the desktop show-video preference. Returns the new preference."""
        self.video_toggle = not self.video_toggle
        return self.video_toggle

    @property
    def mounted(self) -> bool:
        # Hidden surfaces stay mounted to avoid re-initialization and lost commands
        return self.video_id is not None

    @property
    def visible(self) -> bool:
        # Mobile autoplay needs a materialized, visible surface
        return self.mounted and (self.is_mobile or self.video_toggle)

    def embed_url(self) -> Optional[str]:
        if self.video_id is None:
            return None
        params = {"enablejsapi": 1, "autoplay": 1 if self.autoplay else 0}
        if self.page_origin:
            params["origin"] = self.page_origin
        return f"{EMBED_BASE_URL}/{self.video_id}?{urlencode(params)}"

    def surface(self) -> Dict[str, Any]:
        return {
            "video_id": self.video_id,
            "embed_url": self.embed_url(),
            "mounted": self.mounted,
            "visible": self.visible,
            "ready": self.ready,
            "is_mobile": self.is_mobile,
            "video_toggle": self.video_toggle,
            "volume": self.volume,
        }
