"""Custom exceptions for Lyrics Link."""


class LyricsLinkError(Exception):
    """Base exception for all Lyrics Link errors."""

    pass


class ConfigurationError(LyricsLinkError):
    """Required configuration (e.g. an API token) is missing or invalid."""

    pass


class ValidationError(LyricsLinkError):
    """Validation failed."""

    pass


class NotFoundError(LyricsLinkError):
    """Resource not found."""

    pass


class ExternalServiceError(LyricsLinkError):
    """External service (Genius, YouTube, etc.) failed."""

    def __init__(self, service: str, message: str):
        self.service = service
        super().__init__(f"{service}: {message}")


class RateLimitError(ExternalServiceError):
    """Rate limited by external service."""

    pass
