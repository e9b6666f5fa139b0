"""
Session controller: selection, play/pause, ordering and auto-advance.

Owns no I/O. Every operation mutates SessionState and the PlaylistStore in
place; invalid operations are no-ops that return False (or None) rather
than raising. Synchronizing the embedded player and the tick timer with
these transitions is PlaybackSession's job.
"""

from typing import Optional

from loguru import logger

from tuneflow.domain.catalog.models import PlayableItem
from tuneflow.domain.playlist.store import PlaylistStore

from .state import PlaybackStatus, SessionState, parse_clock


class SessionController:
    """State machine over Idle / Selected / Playing."""

    def __init__(
        self,
        playlist: Optional[PlaylistStore] = None,
        state: Optional[SessionState] = None,
    ):
        self.playlist = playlist if playlist is not None else PlaylistStore()
        self.state = state if state is not None else SessionState()

    @property
    def status(self) -> PlaybackStatus:
        return self.state.status

    # Selection

    def _select(self, item: PlayableItem, position: int) -> None:
        """Enter Playing on item; duration is parsed once, elapsed resets."""
        self.state.current_item = item
        self.state.position = position
        self.state.is_playing = True
        self.state.elapsed = 0.0
        self.state.duration = parse_clock(item.duration)
        self.state.selection += 1
        logger.info(f"Playing [{position}] {item.title} ({item.duration})")

    def select_from_search(self, item: PlayableItem) -> int:
        """Play a search result, queueing it first if needed.

        Returns:
            Playlist index of the item
        """
        _, index = self.playlist.append(item)
        self._select(item, index)
        return index

    def select_from_playlist(self, item: PlayableItem, index: int) -> bool:
        """Play the playlist entry at index.

        Precondition: index is valid and playlist[index] is item.
        Returns False without changing anything otherwise.
        """
        if not 0 <= index < len(self.playlist):
            logger.warning(f"Playlist index {index} out of range ({len(self.playlist)} items)")
            return False
        if not self.playlist[index].same_track(item):
            logger.warning(
                f"Playlist entry {index} is {self.playlist[index].id}, not {item.id}"
            )
            return False

        self._select(item, index)
        return True

    def add_to_playlist(self, item: PlayableItem) -> int:
        """Queue an item without changing the selection.

        Returns:
            Playlist index of the item
        """
        _, index = self.playlist.append(item)
        return index

    # Transport

    def toggle_play_pause(self) -> bool:
        """Selected <-> Playing. No-op in Idle."""
        if self.status == PlaybackStatus.IDLE:
            return False
        self.state.is_playing = not self.state.is_playing
        logger.debug(f"Toggled playback: {self.status.value}")
        return True

    def next(self) -> bool:
        """Advance one position with wraparound."""
        if len(self.playlist) == 0:
            return False
        position = (self.state.position + 1) % len(self.playlist)
        self._select(self.playlist[position], position)
        return True

    def previous(self) -> bool:
        """Step back one position; the first entry wraps to the last."""
        if len(self.playlist) == 0:
            return False
        if self.state.position <= 0:
            position = len(self.playlist) - 1
        else:
            position = self.state.position - 1
        self._select(self.playlist[position], position)
        return True

    def seek(self, seconds: float) -> bool:
        """Move the elapsed-time estimate, clamped to the track."""
        if self.status == PlaybackStatus.IDLE:
            return False
        self.state.elapsed = float(min(max(seconds, 0.0), self.state.duration))
        return True

    def set_repeat(self, enabled: bool) -> None:
        self.state.repeat = enabled

    def set_shuffle(self, enabled: bool) -> None:
        # Not consulted by next()/previous()
        self.state.shuffle = enabled

    # Playlist mutation

    def remove_from_playlist(self, index: int) -> bool:
        """Remove a playlist entry and reconcile the current position."""
        removed = self.playlist.remove_at(index)
        if removed is None:
            return False

        position = self.state.position
        if index == position:
            logger.info(f"Removed current item {removed.id}, session idle")
            self.state.clear_selection()
        elif index < position:
            self.state.position = position - 1

        if len(self.playlist) == 0 and self.status != PlaybackStatus.IDLE:
            self.state.clear_selection()
        return True

    # Clock

    def tick(self, seconds: float = 1.0) -> bool:
        """Advance the local elapsed-time estimate while Playing.

        On reaching the track duration, repeat restarts the same item;
        otherwise the session advances to the next playlist entry.

        Returns:
            True if the tick was applied
        """
        if self.status != PlaybackStatus.PLAYING:
            return False

        self.state.elapsed += seconds
        if self.state.elapsed < self.state.duration:
            return True

        if self.state.repeat:
            logger.debug(f"Repeating {self.state.current_item.id}")
            self.state.elapsed = 0.0
        elif not self.next():
            self.state.clear_selection()
        return True
