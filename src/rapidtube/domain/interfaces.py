# src/rapidtube/domain/interfaces.py
"""
Collaborator and client interfaces (Protocols).

Concrete implementations satisfy these via duck typing; there is no
inheritance requirement.
"""
from __future__ import annotations

from typing import List, Protocol, Union, runtime_checkable

from .models import ContentType, TranscriptResult, VideoSummary


@runtime_checkable
class RateLimiterProtocol(Protocol):
    """Anything exposing a blocking "take a slot" operation."""

    def take(self) -> None: ...


@runtime_checkable
class ChannelVideosClientProtocol(Protocol):
    def get_channel_videos(
        self,
        channel_id: str,
        lang: str = "en",
        content_type: Union[ContentType, str] = ContentType.VIDEOS,
    ) -> List[VideoSummary]: ...


@runtime_checkable
class TranscriptClientProtocol(Protocol):
    def get_transcript(self, video_id: str, lang: str = "en") -> TranscriptResult: ...
