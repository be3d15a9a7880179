# src/rapidtube/infrastructure/clients/channel_videos.py
"""
Channel Videos Client
Lists a channel's videos through the YouTube Media Downloader RapidAPI service.
"""

import logging
from typing import List, Optional, Union

from rapidtube.app.config import Config, get_config
from rapidtube.domain.models import ChannelVideosResponse, ContentType, VideoSummary
from .base import BaseRapidAPIClient
from .options import Option, with_host, with_rate_limit, with_timeout
from .rate_limiter import RateLimiter

logger = logging.getLogger(__name__)


class ChannelVideosClient(BaseRapidAPIClient):
    """
    Channel video listing client

    Defaults: host youtube-media-downloader.p.rapidapi.com, 3 requests/second.
    """

    DEFAULT_HOST = "youtube-media-downloader.p.rapidapi.com"
    DEFAULT_REQUESTS_PER_SECOND = 3

    def get_channel_videos(
        self,
        channel_id: str,
        lang: str = "en",
        content_type: Union[ContentType, str] = ContentType.VIDEOS,
    ) -> List[VideoSummary]:
        """
        Fetch the first page of a channel's videos

        Args:
            channel_id: Channel ID
            lang: Response language (empty = "en")
            content_type: Content filter (UNDEFINED = VIDEOS). Strings outside
                ContentType are accepted unchanged. Defaulted but not sent on
                the request.

        Returns:
            Videos in the order the API returned them. The next-page token is
            not exposed.
        """
        lang = lang or "en"
        content_type = _normalize_content_type(content_type)

        # TODO: forward content_type once the service's query parameter for it is confirmed
        params = {"channelId": channel_id, "lang": lang}

        response = self._request(
            "/v2/channel/videos", params, response_model=ChannelVideosResponse
        )

        logger.debug(
            f"📺 {len(response.items)} videos for channel {channel_id} "
            f"(content_type={content_type})"
        )
        return list(response.items)


def _normalize_content_type(content_type: Union[ContentType, str]) -> str:
    """Map UNDEFINED to videos; pass any other value through as a plain string"""
    value = content_type.value if isinstance(content_type, ContentType) else str(content_type)
    return value or ContentType.VIDEOS.value


# ============================================================================
# Convenience Functions
# ============================================================================


def create_channel_videos_client(
    api_key: Optional[str] = None,
    *options: Option,
    config: Optional[Config] = None,
) -> ChannelVideosClient:
    """
    Factory function to create a channel videos client from settings

    Args:
        api_key: Optional API key (reads from env / config file if not provided)
        *options: Extra options, applied after the settings-derived ones
        config: Config instance (uses global if None)

    Returns:
        Configured ChannelVideosClient instance

    Raises:
        ConfigError: No API key found or a setting fails validation
    """
    config = config or get_config()
    settings = config.rapidapi

    settings_options = [
        with_host(settings.channel_videos_host),
        with_timeout(settings.request_timeout),
    ]
    if settings.channel_videos_rate:
        settings_options.append(with_rate_limit(RateLimiter(settings.channel_videos_rate)))

    return ChannelVideosClient(
        config.resolve_api_key(api_key), *settings_options, *options
    )
