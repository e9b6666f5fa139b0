import json

from fastapi import APIRouter, Depends, WebSocket, WebSocketDisconnect
from loguru import logger

from tuneflow.domain.playback import PlaybackSession

from ..deps import get_session
from ..sync_manager import sync_manager

router = APIRouter()


@router.websocket("/ws")
async def session_websocket(
    websocket: WebSocket, session: PlaybackSession = Depends(get_session)
):
    """WebSocket endpoint for session state and player commands."""
    await sync_manager.connect(websocket)

    try:
        # Send current state immediately
        await websocket.send_json({
            "type": "state:sync",
            "data": sync_manager.get_current_state(session),
        })

        # Player surface signals from the page
        while True:
            message = await websocket.receive_text()
            try:
                data = json.loads(message)
            except json.JSONDecodeError:
                logger.warning(f"Invalid JSON from WebSocket: {message}")
                continue
            if not isinstance(data, dict):
                logger.warning(f"Ignoring non-object WebSocket message: {message}")
                continue

            msg_type = data.get("type")
            changed = False
            if msg_type == "player:ready":
                changed = session.surface_ready(str(data.get("videoId", "")))
            elif msg_type == "viewport":
                width = data.get("width")
                if isinstance(width, int) and width > 0:
                    changed = session.apply_viewport(width)
            elif msg_type == "interaction":
                session.user_interaction()
            else:
                logger.debug(f"Ignoring WebSocket message type: {msg_type}")

            if changed:
                await sync_manager.publish_session(session)

    except WebSocketDisconnect:
        sync_manager.disconnect(websocket)
