import time
from typing import Any

from fastapi import WebSocket
from loguru import logger

from tuneflow.domain.playback import PlaybackSession

from .schemas import session_snapshot


class SyncManager:
    """Manages WebSocket connections and broadcasts session updates.

    Delivery is best effort: a connection that fails a send is dropped and
    nothing is retried.
    """

    def __init__(self):
        self.connections: list[WebSocket] = []

    async def connect(self, ws: WebSocket) -> None:
        """Accept and store a new WebSocket connection."""
        await ws.accept()
        self.connections.append(ws)

    def disconnect(self, ws: WebSocket) -> None:
        """Remove a WebSocket connection."""
        if ws in self.connections:
            self.connections.remove(ws)

    def get_current_state(self, session: PlaybackSession) -> dict:
        """Get current session state for new connections."""
        return session_snapshot(session).model_dump(by_alias=True)

    async def publish_session(self, session: PlaybackSession) -> None:
        """Deliver queued player commands, then the updated session state."""
        for command in session.drain_commands():
            await self.broadcast("player:command", command.to_dict())
        await self.broadcast("playback:state", self.get_current_state(session))

    async def broadcast(self, event_type: str, data: Any) -> None:
        """Send a message to all connected clients."""
        message = {
            "type": event_type,
            "data": data,
            "ts": time.time(),
        }
        dead_connections: list[WebSocket] = []

        for conn in self.connections:
            try:
                await conn.send_json(message)
            except Exception:
                dead_connections.append(conn)

        for conn in dead_connections:
            logger.debug("Dropping dead WebSocket connection")
            self.connections.remove(conn)


# Singleton instance
sync_manager = SyncManager()
