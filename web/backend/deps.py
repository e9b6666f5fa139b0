from functools import lru_cache
from typing import Optional

from loguru import logger

from tuneflow.core.config import Config, load_config
from tuneflow.domain.playback import PlaybackSession, PlaybackTicker

# In-memory session (v1 limitation: one listener per server, lost on restart)
_session: Optional[PlaybackSession] = None


@lru_cache(maxsize=1)
def get_config() -> Config:
    """FastAPI dependency for configuration."""
    return load_config()


async def _tick_session() -> None:
    """Ticker callback: advance the clock and push the result to clients."""
    from .sync_manager import sync_manager

    session = get_session()
    # One tick covers one ticker interval of wall-clock time
    if session.tick(session.ticker.interval):
        await sync_manager.publish_session(session)


def get_session() -> PlaybackSession:
    """FastAPI dependency for the playback session."""
    global _session
    if _session is None:
        config = get_config()
        _session = PlaybackSession(config.player)
        _session.attach_ticker(
            PlaybackTicker(on_tick=_tick_session, interval=config.player.tick_interval)
        )
        logger.info("Created playback session")
    return _session


def reset_session() -> None:
    """Discard the current session, stopping its ticker."""
    global _session
    if _session is not None and _session.ticker is not None:
        _session.ticker.suspend()
    _session = None
