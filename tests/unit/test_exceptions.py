"""Tests for custom exceptions."""

import pytest

from lyrics_link.core.exceptions import (
    ConfigurationError,
    ExternalServiceError,
    LyricsLinkError,
    NotFoundError,
    RateLimitError,
    ValidationError,
)


class TestLyricsLinkError:
    """Tests for base exception."""

    def test_base_exception_message(self) -> None:
        """Test base exception preserves message."""
        error = LyricsLinkError("Something went wrong")
        assert str(error) == "Something went wrong"

    @pytest.mark.parametrize("error_cls", [ConfigurationError, ValidationError, NotFoundError])
    def test_subclasses(self, error_cls: type[LyricsLinkError]) -> None:
        """Test simple errors inherit from the base."""
        with pytest.raises(LyricsLinkError):
            raise error_cls("boom")


class TestExternalServiceError:
    """Tests for external service error."""

    def test_message_includes_service(self) -> None:
        """Test the service name prefixes the message."""
        error = ExternalServiceError("Genius", "API error: 500")

        assert error.service == "Genius"
        assert str(error) == "Genius: API error: 500"
        assert isinstance(error, LyricsLinkError)


class TestRateLimitError:
    """Tests for rate limit error."""

    def test_is_external_service_error(self) -> None:
        """Test rate limiting is an external service failure."""
        error = RateLimitError("Genius", "Rate limited")

        assert isinstance(error, ExternalServiceError)
        assert error.service == "Genius"
