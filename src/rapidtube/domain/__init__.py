# src/rapidtube/domain/__init__.py
"""
Domain-facing models and interfaces.

    from rapidtube.domain import VideoSummary, TranscriptResult, RateLimiterProtocol
"""
from .exceptions import (
    RapidAPIError,
    ConfigError,
    ExecutionError,
    HTTPStatusError,
    DecodeError,
)
from .interfaces import (
    RateLimiterProtocol,
    ChannelVideosClientProtocol,
    TranscriptClientProtocol,
)
from .models import (
    ContentType,
    Thumbnail,
    VideoSummary,
    ChannelVideosResponse,
    TranscriptSegment,
    TranscriptResult,
)

__all__ = [
    "RapidAPIError",
    "ConfigError",
    "ExecutionError",
    "HTTPStatusError",
    "DecodeError",
    "RateLimiterProtocol",
    "ChannelVideosClientProtocol",
    "TranscriptClientProtocol",
    "ContentType",
    "Thumbnail",
    "VideoSummary",
    "ChannelVideosResponse",
    "TranscriptSegment",
    "TranscriptResult",
]
