"""Playlist router: queue, list and remove tracks."""

from fastapi import APIRouter, Depends
from loguru import logger

from tuneflow.domain.playback import PlaybackSession

from ..deps import get_session
from ..schemas import AddToPlaylistResponse, SessionSnapshot, TrackItem, session_snapshot
from ..sync_manager import sync_manager

router = APIRouter()


@router.get("/playlist", response_model=list[TrackItem])
async def list_playlist(session: PlaybackSession = Depends(get_session)):
    """Get playlist entries in play order."""
    return [TrackItem.from_item(item) for item in session.playlist]


@router.post("/playlist", response_model=AddToPlaylistResponse)
async def add_to_playlist(
    track: TrackItem, session: PlaybackSession = Depends(get_session)
):
    """Queue a track without playing it. Already-queued tracks are left in place."""
    index = session.add_to_playlist(track.to_item())
    logger.info(f"Queued {track.id} at {index}")
    await sync_manager.publish_session(session)
    return AddToPlaylistResponse(
        index=index, size=len(session.playlist), session=session_snapshot(session)
    )


@router.delete("/playlist/{index}", response_model=SessionSnapshot)
async def remove_from_playlist(
    index: int, session: PlaybackSession = Depends(get_session)
):
    """Remove the entry at index. Out-of-range indices leave the playlist unchanged."""
    if session.remove_from_playlist(index):
        logger.info(f"Removed playlist entry {index}")
    await sync_manager.publish_session(session)
    return session_snapshot(session)
