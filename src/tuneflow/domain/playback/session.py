"""
Playback session: the top-level owner of playlist and session state.

Every public action runs the SessionController transition and then
reconciles the embedded player and the ticker with the resulting state:
- selection changed: attach the new surface (or play, if the video is unchanged)
- play flag changed: play / pause command
- no current item: detach the surface
- Playing: ticker resumed, otherwise suspended
"""

from typing import Any, Dict, List, Optional

from tuneflow.core.config import PlayerConfig
from tuneflow.domain.catalog.models import PlayableItem
from tuneflow.domain.playlist.store import PlaylistStore

from .controller import SessionController
from .embed import EmbeddedPlayer, PlayerCommand
from .state import PlaybackStatus, SessionState
from .ticker import PlaybackTicker


class PlaybackSession:
    """One listener's session: playlist, controller, player surface, ticker."""

    def __init__(
        self,
        config: Optional[PlayerConfig] = None,
        playlist: Optional[PlaylistStore] = None,
    ):
        config = config or PlayerConfig()
        self.controller = SessionController(
            playlist if playlist is not None else PlaylistStore(),
            SessionState(repeat=config.repeat_on_start, shuffle=config.shuffle_on_start),
        )
        self.player = EmbeddedPlayer(
            volume=config.volume,
            mobile_breakpoint=config.mobile_breakpoint,
            show_video=config.show_video,
            page_origin=config.page_origin,
        )
        self.ticker: Optional[PlaybackTicker] = None

        # Last state the player/ticker were reconciled against
        self._seen_selection = 0
        self._seen_playing = False

    @property
    def playlist(self) -> PlaylistStore:
        return self.controller.playlist

    @property
    def state(self) -> SessionState:
        return self.controller.state

    def attach_ticker(self, ticker: PlaybackTicker) -> None:
        self.ticker = ticker
        self._sync_ticker()

    # Reconciliation

    def _reconcile(self) -> None:
        state = self.state
        item = state.current_item

        if item is None:
            self.player.detach()
        elif state.selection != self._seen_selection:
            if self.player.video_id != item.video_id:
                self.player.attach(item.video_id, autoplay=state.is_playing)
            elif state.is_playing:
                self.player.play()
        elif state.is_playing != self._seen_playing:
            if state.is_playing:
                self.player.play()
            else:
                self.player.pause()

        self._seen_selection = state.selection
        self._seen_playing = state.is_playing
        self._sync_ticker()

    def _sync_ticker(self) -> None:
        if self.ticker is None:
            return
        if self.controller.status == PlaybackStatus.PLAYING:
            self.ticker.resume()
        else:
            self.ticker.suspend()

    def _user_action(self) -> None:
        self.player.note_user_interaction()

    # User actions

    def play_search_result(self, item: PlayableItem) -> int:
        self._user_action()
        index = self.controller.select_from_search(item)
        self._reconcile()
        return index

    def play_playlist_entry(self, item: PlayableItem, index: int) -> bool:
        self._user_action()
        changed = self.controller.select_from_playlist(item, index)
        self._reconcile()
        return changed

    def add_to_playlist(self, item: PlayableItem) -> int:
        self._user_action()
        return self.controller.add_to_playlist(item)

    def remove_from_playlist(self, index: int) -> bool:
        self._user_action()
        changed = self.controller.remove_from_playlist(index)
        self._reconcile()
        return changed

    def toggle_play_pause(self) -> bool:
        self._user_action()
        changed = self.controller.toggle_play_pause()
        self._reconcile()
        return changed

    def next(self) -> bool:
        self._user_action()
        changed = self.controller.next()
        self._reconcile()
        return changed

    def previous(self) -> bool:
        self._user_action()
        changed = self.controller.previous()
        self._reconcile()
        return changed

    def seek(self, seconds: float) -> bool:
        self._user_action()
        return self.controller.seek(seconds)

    def set_repeat(self, enabled: bool) -> None:
        self._user_action()
        self.controller.set_repeat(enabled)

    def set_shuffle(self, enabled: bool) -> None:
        self._user_action()
        self.controller.set_shuffle(enabled)

    def set_volume(self, level: float) -> bool:
        self._user_action()
        return self.player.set_volume(level)

    def toggle_video(self) -> bool:
        self._user_action()
        return self.player.toggle_video()

    def user_interaction(self) -> None:
        self._user_action()

    # Surface signals

    def surface_ready(self, video_id: str) -> bool:
        return self.player.mark_ready(video_id)

    def apply_viewport(self, width: int) -> bool:
        return self.player.apply_viewport(width)

    # Clock

    def tick(self, seconds: float = 1.0) -> bool:
        applied = self.controller.tick(seconds)
        if applied:
            self._reconcile()
        return applied

    # Output

    def drain_commands(self) -> List[PlayerCommand]:
        return self.player.drain()

    def snapshot(self) -> Dict[str, Any]:
        """Plain-dict view of the whole session."""
        return {
            **self.state.to_dict(),
            "playlist": [item._asdict() for item in self.playlist],
            "surface": self.player.surface(),
        }
