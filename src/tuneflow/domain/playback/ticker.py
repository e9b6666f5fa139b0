"""
Periodic elapsed-time ticker.

The only autonomous source of session mutation. Runs as an asyncio task
while the session is Playing and is cancelled, not just ignored, when it
is not.
"""

import asyncio
from typing import Awaitable, Callable, Optional

from loguru import logger

TickCallback = Callable[[], Awaitable[None]]


class PlaybackTicker:
    """Calls on_tick every interval seconds between resume() and suspend()."""

    def __init__(self, on_tick: TickCallback, interval: float = 1.0):
        self.on_tick = on_tick
        self.interval = interval
        self._task: Optional[asyncio.Task] = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def resume(self) -> None:
        """Start ticking if not already. Requires a running event loop."""
        if self.running:
            return
        self._task = asyncio.get_running_loop().create_task(self._run())
        logger.debug("Playback ticker resumed")

    def suspend(self) -> None:
        """Stop ticking. Safe to call from inside on_tick."""
        task, self._task = self._task, None
        if task is None or task.done():
            return
        try:
            current = asyncio.current_task()
        except RuntimeError:
            current = None  # No running loop, e.g. during shutdown
        if task is not current:
            task.cancel()
        logger.debug("Playback ticker suspended")

    async def _run(self) -> None:
        me = asyncio.current_task()
        while self._task is me:
            await asyncio.sleep(self.interval)
            if self._task is not me:
                break
            try:
                await self.on_tick()
            except Exception as e:
                logger.exception(f"Tick handler failed: {e}")
