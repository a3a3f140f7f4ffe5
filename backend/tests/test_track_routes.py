"""Tests for the track lookup route."""

from unittest.mock import MagicMock

from fastapi.testclient import TestClient

from backend.services.track_service import TrackLookup
from lyrics_link.core.exceptions import ExternalServiceError, ValidationError
from lyrics_link.core.models import MatchResult, MatchTrace, VideoMetadata


class TestGetTrack:
    """Tests for GET /track."""

    def test_requires_video_id(self, client: TestClient, mock_track_service: MagicMock) -> None:
        """Test a missing v parameter is a 400."""
        response = client.get("/track")

        assert response.status_code == 400
        assert response.json()["detail"] == "Video ID is required"
        mock_track_service.lookup.assert_not_called()

    def test_song(self, client: TestClient, mock_track_service: MagicMock) -> None:
        """Test a music video returns its song card and lyrics page."""
        response = client.get("/track", params={"v": "x8VYWazR5mE"})

        assert response.status_code == 200
        assert response.json() == {
            "song": True,
            "title": "夜に駆ける",
            "artist": "YOASOBI",
            "thumbnail": "https://i.ytimg.com/vi/x8VYWazR5mE/hqdefault.jpg",
            "genius_url": "https://genius.com/Yoasobi-yoru-ni-kakeru-lyrics",
        }
        mock_track_service.lookup.assert_awaited_once_with("x8VYWazR5mE", want_trace=False)

    def test_song_without_lyrics(
        self, client: TestClient, mock_track_service: MagicMock, sample_metadata: VideoMetadata
    ) -> None:
        """Test genius_url is null when nothing matched."""
        mock_track_service.lookup.return_value = TrackLookup(metadata=sample_metadata, match=MatchResult(url=None))

        response = client.get("/track", params={"v": "x8VYWazR5mE"})

        assert response.status_code == 200
        assert response.json()["song"] is True
        assert response.json()["genius_url"] is None

    def test_not_a_song(self, client: TestClient, mock_track_service: MagicMock) -> None:
        """Test a video without a song card returns only song=false."""
        mock_track_service.lookup.return_value = TrackLookup(metadata=None)

        response = client.get("/track", params={"v": "x8VYWazR5mE"})

        assert response.status_code == 200
        assert response.json() == {"song": False}

    def test_debug(self, client: TestClient, mock_track_service: MagicMock, sample_metadata: VideoMetadata) -> None:
        """Test debug=1 includes the match trace."""
        mock_track_service.lookup.return_value = TrackLookup(
            metadata=sample_metadata,
            match=MatchResult(url=None, trace=MatchTrace(reason="no_match", strategy="lenient")),
        )

        response = client.get("/track", params={"v": "x8VYWazR5mE", "debug": "1"})

        assert response.status_code == 200
        data = response.json()
        assert data["debug"]["reason"] == "no_match"
        assert data["debug"]["steps"] == []
        mock_track_service.lookup.assert_awaited_once_with("x8VYWazR5mE", want_trace=True)

    def test_debug_other_value(self, client: TestClient, mock_track_service: MagicMock) -> None:
        """Test only debug=1 turns tracing on."""
        response = client.get("/track", params={"v": "x8VYWazR5mE", "debug": "true"})

        assert response.status_code == 200
        assert "debug" not in response.json()
        mock_track_service.lookup.assert_awaited_once_with("x8VYWazR5mE", want_trace=False)

    def test_metadata_failure(self, client: TestClient, mock_track_service: MagicMock) -> None:
        """Test a YouTube failure is a 500."""
        mock_track_service.lookup.side_effect = ExternalServiceError("YouTube", "Video unavailable")

        response = client.get("/track", params={"v": "x8VYWazR5mE"})

        assert response.status_code == 500
        assert response.json()["detail"].startswith("Failed to fetch video info")

    def test_invalid_video_id(self, client: TestClient, mock_track_service: MagicMock) -> None:
        """Test a malformed video ID is a 400."""
        mock_track_service.lookup.side_effect = ValidationError("Invalid YouTube video ID: 'bad'")

        response = client.get("/track", params={"v": "bad"})

        assert response.status_code == 400
        assert "Invalid YouTube video ID" in response.json()["detail"]

    def test_cors_header(self, client: TestClient) -> None:
        """Test CORS is open by default."""
        response = client.get("/track", params={"v": "x8VYWazR5mE"}, headers={"Origin": "https://www.youtube.com"})

        assert response.headers["access-control-allow-origin"] == "*"
