"""Tests for the YouTube metadata client."""

from unittest.mock import patch

import pytest
import yt_dlp

from lyrics_link.core.exceptions import ExternalServiceError, ValidationError
from lyrics_link.services.youtube import YouTubeMetadataClient

VIDEO_ID = "x8VYWazR5mE"


class TestParseInfo:
    """Tests for YouTubeMetadataClient.parse_info."""

    def test_song_card(self) -> None:
        """Test track, artist and thumbnail are read."""
        metadata = YouTubeMetadataClient.parse_info(
            {"track": "夜に駆ける", "artist": "YOASOBI", "thumbnail": "https://i.ytimg.com/x.jpg"}
        )

        assert metadata is not None
        assert metadata.title == "夜に駆ける"
        assert metadata.artist == "YOASOBI"
        assert metadata.thumbnail_url == "https://i.ytimg.com/x.jpg"

    def test_artists_list(self) -> None:
        """Test the artists list is preferred and joined."""
        metadata = YouTubeMetadataClient.parse_info({"track": "Song", "artists": ["A", "B"], "artist": "A"})
        assert metadata.artist == "A, B"

    def test_creator_fallback(self) -> None:
        """Test creator is used when no artist field is present."""
        metadata = YouTubeMetadataClient.parse_info({"track": "Song", "creator": "C"})
        assert metadata.artist == "C"

    def test_no_song_card(self) -> None:
        """Test videos without a track are not songs."""
        assert YouTubeMetadataClient.parse_info({"title": "My vlog"}) is None


class TestValidateVideoId:
    """Tests for video ID validation."""

    def test_valid(self) -> None:
        """Test an 11-character ID passes and is stripped."""
        assert YouTubeMetadataClient.validate_video_id(f" {VIDEO_ID} ") == VIDEO_ID

    @pytest.mark.parametrize("video_id", ["", "short", "x8VYWazR5mE&list=1", "https://youtu.be/x"])
    def test_invalid(self, video_id: str) -> None:
        """Test malformed IDs raise ValidationError."""
        with pytest.raises(ValidationError):
            YouTubeMetadataClient.validate_video_id(video_id)


class TestGetVideoMetadata:
    """Tests for YouTubeMetadataClient.get_video_metadata."""

    @pytest.mark.asyncio
    async def test_fetches_watch_url(self) -> None:
        """Test yt-dlp is asked for the watch URL."""
        client = YouTubeMetadataClient()
        with patch.object(client, "_extract_info", return_value={"track": "Song", "artist": "A"}) as mock_extract:
            metadata = await client.get_video_metadata(VIDEO_ID)

        mock_extract.assert_called_once_with(f"https://www.youtube.com/watch?v={VIDEO_ID}")
        assert metadata.title == "Song"

    @pytest.mark.asyncio
    async def test_not_a_music_video(self) -> None:
        """Test None is returned without a song card."""
        client = YouTubeMetadataClient()
        with patch.object(client, "_extract_info", return_value={"title": "Vlog"}):
            assert await client.get_video_metadata(VIDEO_ID) is None

    @pytest.mark.asyncio
    async def test_download_error(self) -> None:
        """Test yt-dlp failures become ExternalServiceError."""
        client = YouTubeMetadataClient()
        with patch.object(client, "_extract_info", side_effect=yt_dlp.utils.DownloadError("Video unavailable")):
            with pytest.raises(ExternalServiceError, match="Failed to fetch video info"):
                await client.get_video_metadata(VIDEO_ID)

    def test_options_merge(self) -> None:
        """Test custom yt-dlp options extend the defaults."""
        client = YouTubeMetadataClient({"socket_timeout": 5})
        assert client.ydl_opts["quiet"] is True
        assert client.ydl_opts["socket_timeout"] == 5
