"""Player router for playback control and embedded player signals."""

from fastapi import APIRouter, Depends, HTTPException
from loguru import logger

from tuneflow.domain.playback import PlaybackSession

from ..deps import get_session
from ..schemas import (
    FlagRequest,
    PlayIndexRequest,
    PlayRequest,
    ReadyRequest,
    SeekRequest,
    SessionSnapshot,
    ViewportRequest,
    VolumeRequest,
    session_snapshot,
)
from ..sync_manager import sync_manager

router = APIRouter(prefix="/player")


async def _publish(session: PlaybackSession) -> SessionSnapshot:
    await sync_manager.publish_session(session)
    return session_snapshot(session)


@router.get("/state", response_model=SessionSnapshot)
async def get_state(session: PlaybackSession = Depends(get_session)):
    """Get current playback state."""
    return session_snapshot(session)


@router.post("/play", response_model=SessionSnapshot)
async def play(request: PlayRequest, session: PlaybackSession = Depends(get_session)):
    """Play a search result, queueing it if needed."""
    logger.info(f"Play request: {request.item.id}")
    session.play_search_result(request.item.to_item())
    return await _publish(session)


@router.post("/play-index", response_model=SessionSnapshot)
async def play_index(
    request: PlayIndexRequest, session: PlaybackSession = Depends(get_session)
):
    """Play the playlist entry at index."""
    if not session.play_playlist_entry(request.item.to_item(), request.index):
        raise HTTPException(
            409, f"Playlist entry {request.index} is not {request.item.id}"
        )
    return await _publish(session)


@router.post("/toggle", response_model=SessionSnapshot)
async def toggle(session: PlaybackSession = Depends(get_session)):
    """Toggle play/pause. No effect when nothing is selected."""
    session.toggle_play_pause()
    return await _publish(session)


@router.post("/next", response_model=SessionSnapshot)
async def next_track(session: PlaybackSession = Depends(get_session)):
    """Skip to next playlist entry, wrapping to the first."""
    session.next()
    return await _publish(session)


@router.post("/prev", response_model=SessionSnapshot)
async def prev_track(session: PlaybackSession = Depends(get_session)):
    """Go to previous playlist entry, wrapping to the last."""
    session.previous()
    return await _publish(session)


@router.post("/seek", response_model=SessionSnapshot)
async def seek(request: SeekRequest, session: PlaybackSession = Depends(get_session)):
    """Move the elapsed-time estimate."""
    session.seek(request.seconds)
    return await _publish(session)


@router.post("/repeat", response_model=SessionSnapshot)
async def set_repeat(
    request: FlagRequest, session: PlaybackSession = Depends(get_session)
):
    session.set_repeat(request.enabled)
    return await _publish(session)


@router.post("/shuffle", response_model=SessionSnapshot)
async def set_shuffle(
    request: FlagRequest, session: PlaybackSession = Depends(get_session)
):
    session.set_shuffle(request.enabled)
    return await _publish(session)


@router.post("/volume", response_model=SessionSnapshot)
async def set_volume(
    request: VolumeRequest, session: PlaybackSession = Depends(get_session)
):
    session.set_volume(request.level)
    return await _publish(session)


@router.post("/video-toggle", response_model=SessionSnapshot)
async def toggle_video(session: PlaybackSession = Depends(get_session)):
    """Show or hide the video surface on desktop viewports."""
    session.toggle_video()
    return await _publish(session)


@router.post("/ready", response_model=SessionSnapshot)
async def surface_ready(
    request: ReadyRequest, session: PlaybackSession = Depends(get_session)
):
    """Embedded player reported ready."""
    session.surface_ready(request.video_id)
    return await _publish(session)


@router.post("/interaction", response_model=SessionSnapshot)
async def user_interaction(session: PlaybackSession = Depends(get_session)):
    """Record a user gesture so the player may accept commands."""
    session.user_interaction()
    return await _publish(session)


@router.post("/viewport", response_model=SessionSnapshot)
async def viewport(
    request: ViewportRequest, session: PlaybackSession = Depends(get_session)
):
    """Viewport resized. Repeated widths are no-ops."""
    if session.apply_viewport(request.width):
        return await _publish(session)
    return session_snapshot(session)
