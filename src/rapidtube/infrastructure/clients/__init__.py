# src/rapidtube/infrastructure/clients/__init__.py
"""API Clients"""

from .channel_videos import ChannelVideosClient, create_channel_videos_client
from .transcript import TranscriptClient, create_transcript_client
from .options import (
    ClientConfig,
    with_host,
    with_rate_limit,
    with_http_client,
    with_timeout,
)
from .rate_limiter import RateLimiter, TokenBucket, rate_limit

__all__ = [
    "ChannelVideosClient",
    "create_channel_videos_client",
    "TranscriptClient",
    "create_transcript_client",
    "ClientConfig",
    "with_host",
    "with_rate_limit",
    "with_http_client",
    "with_timeout",
    "RateLimiter",
    "TokenBucket",
    "rate_limit",
]
