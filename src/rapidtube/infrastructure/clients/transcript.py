# src/rapidtube/infrastructure/clients/transcript.py
"""
Transcript Client
Fetches video transcripts through the YouTube Transcriptor RapidAPI service.
"""

import logging
from typing import Optional

from rapidtube.app.config import Config, get_config
from rapidtube.domain.models import TranscriptResult
from .base import BaseRapidAPIClient
from .options import Option, with_host, with_rate_limit, with_timeout
from .rate_limiter import RateLimiter

logger = logging.getLogger(__name__)


class TranscriptClient(BaseRapidAPIClient):
    """
    Video transcript client

    Defaults: host youtube-transcriptor.p.rapidapi.com, 10 requests/second.
    """

    DEFAULT_HOST = "youtube-transcriptor.p.rapidapi.com"
    DEFAULT_REQUESTS_PER_SECOND = 10

    def get_transcript(self, video_id: str, lang: str = "en") -> TranscriptResult:
        """
        Fetch a video's transcript

        Args:
            video_id: Video ID
            lang: Transcript language (empty = "en")

        Returns:
            TranscriptResult with segments and video metadata
        """
        params = {"video_id": video_id, "lang": lang or "en"}

        transcript = self._request("/transcript", params, response_model=TranscriptResult)

        logger.debug(f"📝 {len(transcript.segments)} segments for video {video_id}")
        return transcript


def create_transcript_client(
    api_key: Optional[str] = None,
    *options: Option,
    config: Optional[Config] = None,
) -> TranscriptClient:
    """
    Factory function to create a transcript client from settings

    Args:
        api_key: Optional API key (reads from env / config file if not provided)
        *options: Extra options, applied after the settings-derived ones
        config: Config instance (uses global if None)

    Returns:
        Configured TranscriptClient instance
    """
    config = config or get_config()
    settings = config.rapidapi

    settings_options = [
        with_host(settings.transcript_host),
        with_timeout(settings.request_timeout),
    ]
    if settings.transcript_rate:
        settings_options.append(with_rate_limit(RateLimiter(settings.transcript_rate)))

    return TranscriptClient(config.resolve_api_key(api_key), *settings_options, *options)
