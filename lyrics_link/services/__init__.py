"""External service clients."""

from lyrics_link.services.genius import GeniusClient
from lyrics_link.services.youtube import YouTubeMetadataClient

__all__ = ["GeniusClient", "YouTubeMetadataClient"]
