"""
YouTube Data API search gateway.

Pure functions: search the catalog, fetch exact durations, and fall back to
deterministic demo results. Search never raises; every failure degrades to
the fallback set for the query.
"""

import html
import re
from typing import Any, Dict, List, Optional

import requests
from loguru import logger

from tuneflow.core.config import YouTubeConfig

from .exceptions import YouTubeError, YouTubeRequestError, YouTubeResponseError
from .models import PlayableItem

# Compact ISO-8601 duration, each component optional (e.g. PT1H2M3S, PT45S)
ISO_DURATION_PATTERN = re.compile(r"PT(\d+H)?(\d+M)?(\d+S)?")

DEFAULT_ISO_DURATION = "PT3M30S"
DEFAULT_DURATION = "3:30"

# Shared by every demo result
MOCK_VIDEO_ID = "dQw4w9WgXcQ"

_MOCK_TEMPLATES = [
    (
        "{query} - Popular Song",
        "Featured Artist",
        "https://images.pexels.com/photos/1763075/pexels-photo-1763075.jpeg?auto=compress&cs=tinysrgb&w=400",
        "3:45",
    ),
    (
        "Best of {query}",
        "Various Artists",
        "https://images.pexels.com/photos/1105666/pexels-photo-1105666.jpeg?auto=compress&cs=tinysrgb&w=400",
        "4:12",
    ),
    (
        "{query} Live Performance",
        "Live Sessions",
        "https://images.pexels.com/photos/1190298/pexels-photo-1190298.jpeg?auto=compress&cs=tinysrgb&w=400",
        "5:28",
    ),
    (
        "{query} Acoustic Version",
        "Acoustic Covers",
        "https://images.pexels.com/photos/1134393/pexels-photo-1134393.jpeg?auto=compress&cs=tinysrgb&w=400",
        "3:52",
    ),
    (
        "{query} Remix",
        "DJ Remix",
        "https://images.pexels.com/photos/1375849/pexels-photo-1375849.jpeg?auto=compress&cs=tinysrgb&w=400",
        "4:33",
    ),
    (
        "{query} Piano Cover",
        "Piano Covers",
        "https://images.pexels.com/photos/1246437/pexels-photo-1246437.jpeg?auto=compress&cs=tinysrgb&w=400",
        "3:18",
    ),
]


def format_iso_duration(duration: str) -> str:
    """Convert a compact ISO-8601 duration to "minutes:seconds".

    Hours fold into minutes, so "PT1H2M3S" becomes "62:03". Missing
    components count as zero; an unmatched value gives "3:30".

    Args:
        duration: Duration string such as "PT4M13S"

    Returns:
        Duration formatted as "m:ss"
    """
    match = ISO_DURATION_PATTERN.search(duration or "")
    if not match:
        logger.debug(f"Unparseable duration {duration!r}, using {DEFAULT_DURATION}")
        return DEFAULT_DURATION

    hours = int(match.group(1)[:-1]) if match.group(1) else 0
    minutes = int(match.group(2)[:-1]) if match.group(2) else 0
    seconds = int(match.group(3)[:-1]) if match.group(3) else 0

    total_minutes = hours * 60 + minutes
    return f"{total_minutes}:{seconds:02d}"


def mock_results(query: str) -> List[PlayableItem]:
    """Deterministic demo results used when live search is unavailable.

    Args:
        query: Search query, interpolated into every title

    Returns:
        Six items sharing the same video id
    """
    return [
        PlayableItem(
            id=f"mock-{i}",
            title=title.format(query=query),
            artist=artist,
            thumbnail=thumbnail,
            duration=duration,
            video_id=MOCK_VIDEO_ID,
        )
        for i, (title, artist, thumbnail, duration) in enumerate(_MOCK_TEMPLATES, start=1)
    ]


def _get_json(config: YouTubeConfig, endpoint: str, params: Dict[str, Any]) -> Dict[str, Any]:
    """GET a Data API endpoint and decode the JSON body.

    Raises:
        YouTubeRequestError: On transport failure or non-2xx status
        YouTubeResponseError: When the body is not JSON
    """
    url = f"{config.api_base}/{endpoint}"
    try:
        response = requests.get(
            url, params={**params, "key": config.api_key}, timeout=config.timeout
        )
    except requests.RequestException as e:
        raise YouTubeRequestError(endpoint) from e

    if not response.ok:
        raise YouTubeRequestError(endpoint, status_code=response.status_code)

    try:
        return response.json()
    except ValueError as e:
        raise YouTubeResponseError(f"YouTube {endpoint} returned invalid JSON") from e


def _search_snippets(query: str, config: YouTubeConfig) -> List[Dict[str, Any]]:
    """Text search returning up to max_results raw snippet entries."""
    data = _get_json(
        config,
        "search",
        {
            "part": "snippet",
            "type": "video",
            "q": query,
            "maxResults": config.max_results,
        },
    )
    items = data.get("items")
    if not isinstance(items, list):
        raise YouTubeResponseError("YouTube search response has no items list")
    return items


def _fetch_durations(video_ids: List[str], config: YouTubeConfig) -> List[str]:
    """Batch lookup of ISO durations, positionally aligned with video_ids."""
    data = _get_json(
        config,
        "videos",
        {"part": "contentDetails", "id": ",".join(video_ids)},
    )
    details = data.get("items") or []

    durations = []
    for i in range(len(video_ids)):
        try:
            durations.append(details[i]["contentDetails"]["duration"] or DEFAULT_ISO_DURATION)
        except (IndexError, KeyError, TypeError):
            durations.append(DEFAULT_ISO_DURATION)
    return durations


def _normalize_search_item(item: Dict[str, Any], iso_duration: str) -> PlayableItem:
    """Convert a search API entry to a PlayableItem."""
    try:
        video_id = item["id"]["videoId"]
        snippet = item["snippet"]
        return PlayableItem(
            id=video_id,
            title=html.unescape(snippet["title"]),
            artist=html.unescape(snippet["channelTitle"]),
            thumbnail=snippet["thumbnails"]["medium"]["url"],
            duration=format_iso_duration(iso_duration),
            video_id=video_id,
        )
    except (KeyError, TypeError) as e:
        raise YouTubeResponseError(f"Malformed search result entry: {e}") from e


def _live_search(query: str, config: YouTubeConfig) -> List[PlayableItem]:
    snippets = _search_snippets(query, config)
    if not snippets:
        return []

    try:
        video_ids = [entry["id"]["videoId"] for entry in snippets]
    except (KeyError, TypeError) as e:
        raise YouTubeResponseError(f"Search result without video id: {e}") from e

    durations = _fetch_durations(video_ids, config)
    return [
        _normalize_search_item(entry, duration)
        for entry, duration in zip(snippets, durations)
    ]


def search(query: str, config: Optional[YouTubeConfig] = None) -> List[PlayableItem]:
    """Search the catalog for playable items.

    Without an API key no network call is made and demo results are
    returned. With a key, performs a text search followed by a batch
    duration lookup. Never raises.

    Args:
        query: Free-text search query
        config: YouTube configuration (default: no API key)

    Returns:
        Up to max_results items, or the fallback set on failure
    """
    config = config or YouTubeConfig()

    if not config.api_key:
        logger.debug(f"No YouTube API key configured, returning demo results for {query!r}")
        return mock_results(query)

    try:
        results = _live_search(query, config)
        logger.info(f"YouTube search {query!r}: {len(results)} results")
        return results
    except YouTubeError as e:
        logger.warning(f"YouTube search failed for {query!r}: {e}")
    except Exception as e:
        logger.exception(f"Unexpected error searching YouTube for {query!r}: {e}")

    return mock_results(query)
