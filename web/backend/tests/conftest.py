"""Pytest configuration for backend tests.

Each test gets a fresh in-memory session and a key-less config, so search
serves mock results and no ticker task is started.
"""

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Add project root to path so `web.backend` resolves
project_root = Path(__file__).parent.parent.parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from tuneflow.core.config import Config
from tuneflow.domain.playback import PlaybackSession
from web.backend.deps import get_config, get_session
from web.backend.main import app
from web.backend.sync_manager import sync_manager


@pytest.fixture
def session() -> PlaybackSession:
    return PlaybackSession()


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def client(session):
    app.dependency_overrides[get_session] = lambda: session
    app.dependency_overrides[get_config] = lambda: Config()
    sync_manager.connections.clear()
    yield TestClient(app)
    app.dependency_overrides.clear()
    sync_manager.connections.clear()


@pytest.fixture
def track() -> dict:
    """A search result as the page sends it (camelCase)."""
    return {
        "id": "abc123",
        "title": "Test Song",
        "artist": "Test Channel",
        "thumbnail": "https://i.ytimg.com/vi/abc123/mqdefault.jpg",
        "duration": "3:00",
        "videoId": "abc123",
    }


@pytest.fixture
def make_track(track):
    def _make(n: int, duration: str = "3:00") -> dict:
        return {**track, "id": f"t{n}", "videoId": f"t{n}", "title": f"Song {n}", "duration": duration}

    return _make
