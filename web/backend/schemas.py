from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from tuneflow.domain.catalog.models import PlayableItem
from tuneflow.domain.playback import PlaybackSession, format_time


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TrackItem(CamelModel):
    id: str
    title: str
    artist: str
    thumbnail: str
    duration: str
    video_id: str

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True
    )

    @classmethod
    def from_item(cls, item: PlayableItem) -> "TrackItem":
        return cls(**item._asdict())

    def to_item(self) -> PlayableItem:
        return PlayableItem(**self.model_dump())


class SurfaceInfo(CamelModel):
    """Embedded player surface as the page should render it."""
    video_id: Optional[str] = None
    embed_url: Optional[str] = None
    mounted: bool = False
    visible: bool = False
    ready: bool = False
    is_mobile: bool = False
    video_toggle: bool = False
    volume: float = 1.0


class SessionSnapshot(CamelModel):
    status: Literal["idle", "selected", "playing"]
    current_item: Optional[TrackItem] = None
    position: int = -1
    is_playing: bool = False
    elapsed: float = 0.0
    duration: int = 0
    elapsed_display: str = "0:00"
    duration_display: str = "0:00"
    repeat: bool = False
    shuffle: bool = False
    playlist: list[TrackItem] = []
    surface: SurfaceInfo


class AddToPlaylistResponse(CamelModel):
    index: int
    size: int
    session: SessionSnapshot


class PlayRequest(CamelModel):
    """Play a search result (queued first if needed)."""
    item: TrackItem


class PlayIndexRequest(CamelModel):
    """Play an existing playlist entry."""
    item: TrackItem
    index: int


class SeekRequest(CamelModel):
    seconds: float = Field(ge=0)


class FlagRequest(CamelModel):
    enabled: bool


class VolumeRequest(CamelModel):
    level: float = Field(ge=0.0, le=1.0)


class ReadyRequest(CamelModel):
    video_id: str


class ViewportRequest(CamelModel):
    width: int = Field(gt=0)


def session_snapshot(session: PlaybackSession) -> SessionSnapshot:
    """Build the API view of a playback session."""
    data = session.snapshot()
    return SessionSnapshot(
        **data,
        elapsed_display=format_time(data["elapsed"]),
        duration_display=format_time(data["duration"]),
    )
