"""Search router: catalog lookups for the results grid."""

from fastapi import APIRouter, Depends, Query

from tuneflow.core.config import Config
from tuneflow.domain.catalog import youtube

from ..deps import get_config
from ..schemas import TrackItem

router = APIRouter()


@router.get("/search", response_model=list[TrackItem])
def search(
    q: str = Query(..., min_length=1, max_length=200),
    config: Config = Depends(get_config),
) -> list[TrackItem]:
    """Search YouTube. Falls back to demo results, never errors."""
    items = youtube.search(q.strip(), config.youtube)
    return [TrackItem.from_item(item) for item in items]
