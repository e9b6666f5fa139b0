"""Shared fixtures for domain tests."""

from typing import Callable, Optional

import pytest

from tuneflow.domain.catalog.models import PlayableItem

ItemFactory = Callable[..., PlayableItem]


def _make_item(n: int, duration: str = "3:00", video_id: Optional[str] = None) -> PlayableItem:
    return PlayableItem(
        id=f"vid-{n}",
        title=f"Track {n}",
        artist=f"Channel {n}",
        thumbnail=f"https://i.ytimg.com/vi/vid-{n}/mqdefault.jpg",
        duration=duration,
        video_id=video_id or f"vid-{n}",
    )


@pytest.fixture
def make_item() -> ItemFactory:
    """Factory for distinct playable items: make_item(n, duration=..., video_id=...)."""
    return _make_item


@pytest.fixture
def items() -> list[PlayableItem]:
    """Five distinct items, three minutes each."""
    return [_make_item(i) for i in range(5)]
