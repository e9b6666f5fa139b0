"""Tests for the YouTube search gateway."""

from unittest.mock import MagicMock, patch

import pytest
import requests

from tuneflow.core.config import YouTubeConfig
from tuneflow.domain.catalog import youtube
from tuneflow.domain.catalog.models import PlayableItem
from tuneflow.domain.catalog.youtube import (
    MOCK_VIDEO_ID,
    format_iso_duration,
    mock_results,
    search,
)


def _response(payload=None, status_code: int = 200) -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 300
    response.json.return_value = payload
    return response


def _search_payload(*video_ids: str) -> dict:
    return {
        "items": [
            {
                "id": {"videoId": vid},
                "snippet": {
                    "title": f"Song {vid} &amp; Friends",
                    "channelTitle": f"Channel {vid}",
                    "thumbnails": {"medium": {"url": f"https://i.ytimg.com/vi/{vid}/mqdefault.jpg"}},
                },
            }
            for vid in video_ids
        ]
    }


def _details_payload(*durations: str) -> dict:
    return {"items": [{"contentDetails": {"duration": d}} for d in durations]}


@pytest.fixture
def config() -> YouTubeConfig:
    return YouTubeConfig(api_key="test-key", api_base="https://yt.test/v3")


class TestFormatIsoDuration:
    """Tests for ISO-8601 duration formatting."""

    def test_hours_fold_into_minutes(self) -> None:
        assert format_iso_duration("PT1H2M3S") == "62:03"

    def test_seconds_only(self) -> None:
        assert format_iso_duration("PT45S") == "0:45"

    def test_minutes_only_pads_seconds(self) -> None:
        assert format_iso_duration("PT4M") == "4:00"

    def test_hours_only(self) -> None:
        assert format_iso_duration("PT2H") == "120:00"

    def test_unmatched_defaults(self) -> None:
        assert format_iso_duration("not a duration") == "3:30"

    def test_empty_defaults(self) -> None:
        assert format_iso_duration("") == "3:30"


class TestMockResults:
    """Tests for deterministic fallback data."""

    def test_six_items_with_query_in_title(self) -> None:
        results = mock_results("jazz")

        assert len(results) == 6
        assert all("jazz" in item.title for item in results)

    def test_shared_video_id(self) -> None:
        results = mock_results("jazz")

        assert {item.video_id for item in results} == {MOCK_VIDEO_ID}

    def test_distinct_ids(self) -> None:
        results = mock_results("jazz")

        assert [item.id for item in results] == [f"mock-{i}" for i in range(1, 7)]

    def test_deterministic(self) -> None:
        assert mock_results("rock") == mock_results("rock")


class TestSearch:
    """Tests for search() with and without a credential."""

    def test_no_credential_returns_mock_without_network(self) -> None:
        with patch.object(youtube.requests, "get") as mock_get:
            results = search("jazz", YouTubeConfig(api_key=None))

        mock_get.assert_not_called()
        assert len(results) == 6
        assert all("jazz" in item.title for item in results)

    def test_default_config_has_no_credential(self) -> None:
        with patch.object(youtube.requests, "get") as mock_get:
            results = search("jazz")

        mock_get.assert_not_called()
        assert results == mock_results("jazz")

    def test_live_search_builds_items(self, config: YouTubeConfig) -> None:
        responses = [
            _response(_search_payload("aaa", "bbb")),
            _response(_details_payload("PT4M13S", "PT1H2M3S")),
        ]
        with patch.object(youtube.requests, "get", side_effect=responses) as mock_get:
            results = search("jazz", config)

        assert results == [
            PlayableItem(
                id="aaa",
                title="Song aaa & Friends",
                artist="Channel aaa",
                thumbnail="https://i.ytimg.com/vi/aaa/mqdefault.jpg",
                duration="4:13",
                video_id="aaa",
            ),
            PlayableItem(
                id="bbb",
                title="Song bbb & Friends",
                artist="Channel bbb",
                thumbnail="https://i.ytimg.com/vi/bbb/mqdefault.jpg",
                duration="62:03",
                video_id="bbb",
            ),
        ]
        assert mock_get.call_count == 2

    def test_live_search_request_parameters(self, config: YouTubeConfig) -> None:
        responses = [
            _response(_search_payload("aaa", "bbb")),
            _response(_details_payload("PT3M", "PT4M")),
        ]
        with patch.object(youtube.requests, "get", side_effect=responses) as mock_get:
            search("jazz", config)

        search_call, details_call = mock_get.call_args_list
        assert search_call.args[0] == "https://yt.test/v3/search"
        assert search_call.kwargs["params"] == {
            "part": "snippet",
            "type": "video",
            "q": "jazz",
            "maxResults": 12,
            "key": "test-key",
        }
        assert details_call.args[0] == "https://yt.test/v3/videos"
        assert details_call.kwargs["params"] == {
            "part": "contentDetails",
            "id": "aaa,bbb",
            "key": "test-key",
        }

    def test_missing_detail_defaults_duration(self, config: YouTubeConfig) -> None:
        responses = [
            _response(_search_payload("aaa", "bbb")),
            _response(_details_payload("PT2M5S")),
        ]
        with patch.object(youtube.requests, "get", side_effect=responses):
            results = search("jazz", config)

        assert [item.duration for item in results] == ["2:05", "3:30"]

    def test_no_results_skips_details_call(self, config: YouTubeConfig) -> None:
        with patch.object(youtube.requests, "get", return_value=_response({"items": []})) as mock_get:
            results = search("zzzz", config)

        assert results == []
        assert mock_get.call_count == 1

    def test_transport_error_falls_back(self, config: YouTubeConfig) -> None:
        with patch.object(
            youtube.requests, "get", side_effect=requests.ConnectionError("offline")
        ):
            results = search("jazz", config)

        assert results == mock_results("jazz")

    def test_http_error_falls_back(self, config: YouTubeConfig) -> None:
        with patch.object(youtube.requests, "get", return_value=_response({}, status_code=403)):
            results = search("jazz", config)

        assert results == mock_results("jazz")

    def test_details_failure_falls_back(self, config: YouTubeConfig) -> None:
        responses = [
            _response(_search_payload("aaa")),
            _response({}, status_code=500),
        ]
        with patch.object(youtube.requests, "get", side_effect=responses):
            results = search("jazz", config)

        assert results == mock_results("jazz")

    def test_invalid_json_falls_back(self, config: YouTubeConfig) -> None:
        response = _response()
        response.json.side_effect = ValueError("not json")
        with patch.object(youtube.requests, "get", return_value=response):
            results = search("jazz", config)

        assert results == mock_results("jazz")

    def test_malformed_entry_falls_back(self, config: YouTubeConfig) -> None:
        payload = {"items": [{"id": {"videoId": "aaa"}, "snippet": {"title": "No channel"}}]}
        responses = [_response(payload), _response(_details_payload("PT3M"))]
        with patch.object(youtube.requests, "get", side_effect=responses):
            results = search("jazz", config)

        assert results == mock_results("jazz")

    def test_unexpected_error_falls_back(self, config: YouTubeConfig) -> None:
        with patch.object(youtube.requests, "get", side_effect=RuntimeError("boom")):
            results = search("jazz", config)

        assert results == mock_results("jazz")
