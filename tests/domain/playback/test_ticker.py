"""Tests for the periodic playback ticker."""

import asyncio
from unittest.mock import AsyncMock

import pytest

from tuneflow.domain.playback.ticker import PlaybackTicker


@pytest.fixture
def anyio_backend():
    return "asyncio"


INTERVAL = 0.01


@pytest.mark.anyio
async def test_resume_calls_on_tick():
    on_tick = AsyncMock()
    ticker = PlaybackTicker(on_tick, interval=INTERVAL)

    ticker.resume()
    await asyncio.sleep(INTERVAL * 5)
    ticker.suspend()

    assert on_tick.await_count >= 1


@pytest.mark.anyio
async def test_resume_is_idempotent():
    ticker = PlaybackTicker(AsyncMock(), interval=INTERVAL)

    ticker.resume()
    task = ticker._task
    ticker.resume()

    assert ticker._task is task
    ticker.suspend()


@pytest.mark.anyio
async def test_suspend_stops_ticking():
    on_tick = AsyncMock()
    ticker = PlaybackTicker(on_tick, interval=INTERVAL)

    ticker.resume()
    await asyncio.sleep(INTERVAL * 3)
    ticker.suspend()
    count = on_tick.await_count
    await asyncio.sleep(INTERVAL * 5)

    assert ticker.running is False
    assert on_tick.await_count == count


@pytest.mark.anyio
async def test_suspend_when_not_running():
    ticker = PlaybackTicker(AsyncMock(), interval=INTERVAL)

    ticker.suspend()
    ticker.suspend()

    assert ticker.running is False


@pytest.mark.anyio
async def test_suspend_from_inside_tick():
    calls = []

    async def on_tick():
        calls.append(1)
        ticker.suspend()

    ticker = PlaybackTicker(on_tick, interval=INTERVAL)

    ticker.resume()
    await asyncio.sleep(INTERVAL * 6)

    assert calls == [1]
    assert ticker.running is False


@pytest.mark.anyio
async def test_resume_after_suspend():
    on_tick = AsyncMock()
    ticker = PlaybackTicker(on_tick, interval=INTERVAL)

    ticker.resume()
    ticker.suspend()
    ticker.resume()
    await asyncio.sleep(INTERVAL * 4)

    assert ticker.running is True
    assert on_tick.await_count >= 1
    ticker.suspend()


@pytest.mark.anyio
async def test_tick_errors_do_not_stop_ticker():
    on_tick = AsyncMock(side_effect=RuntimeError("boom"))
    ticker = PlaybackTicker(on_tick, interval=INTERVAL)

    ticker.resume()
    await asyncio.sleep(INTERVAL * 6)

    assert on_tick.await_count >= 2
    assert ticker.running is True
    ticker.suspend()


def test_resume_requires_event_loop():
    ticker = PlaybackTicker(AsyncMock())

    with pytest.raises(RuntimeError):
        ticker.resume()
