# src/rapidtube/__init__.py
"""
rapidtube
Rate-limited clients for the RapidAPI YouTube channel videos and transcript
services.

Quick start::

    from rapidtube import TranscriptClient

    with TranscriptClient("your_rapidapi_key") as client:
        transcript = client.get_transcript("dQw4w9WgXcQ")
        print(transcript.full_text)
"""

from rapidtube.domain import (
    RapidAPIError,
    ConfigError,
    ExecutionError,
    HTTPStatusError,
    DecodeError,
    ContentType,
    Thumbnail,
    VideoSummary,
    TranscriptSegment,
    TranscriptResult,
)
from rapidtube.infrastructure.clients import (
    ChannelVideosClient,
    create_channel_videos_client,
    TranscriptClient,
    create_transcript_client,
    with_host,
    with_rate_limit,
    with_http_client,
    with_timeout,
    RateLimiter,
)

__version__ = "0.1.0"
__all__ = [
    "RapidAPIError",
    "ConfigError",
    "ExecutionError",
    "HTTPStatusError",
    "DecodeError",
    "ContentType",
    "Thumbnail",
    "VideoSummary",
    "TranscriptSegment",
    "TranscriptResult",
    "ChannelVideosClient",
    "create_channel_videos_client",
    "TranscriptClient",
    "create_transcript_client",
    "with_host",
    "with_rate_limit",
    "with_http_client",
    "with_timeout",
    "RateLimiter",
]
