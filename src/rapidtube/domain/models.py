# src/rapidtube/domain/models.py
"""
Response models for the RapidAPI video metadata services.

All models are immutable value objects produced by decoding a response.
They accept both the camelCase wire names and the Python field names;
missing fields fall back to empty defaults and unknown fields are ignored.
"""
from __future__ import annotations

from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class ContentType(str, Enum):
    """Channel content filter accepted by the channel videos endpoint"""

    VIDEOS = "videos"
    SHORTS = "shorts"
    LIVE = "live"
    UNDEFINED = ""


class _ResponseModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        # JSON null behaves like a missing field or an empty object
        if data is None:
            return {}
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


# ============================================================================
# Shared
# ============================================================================


class Thumbnail(_ResponseModel):
    """Thumbnail image reference"""

    url: str = ""
    width: int = 0
    height: int = 0
    # Only the channel videos service reports animated thumbnails
    moving: Optional[bool] = None


# ============================================================================
# Channel Videos
# ============================================================================


class VideoSummary(_ResponseModel):
    """One entry of a channel's video listing"""

    type: str = ""
    id: str = ""
    title: str = ""
    is_live_now: bool = Field(alias="isLiveNow", default=False)
    length_text: str = Field(alias="lengthText", default="")
    view_count_text: str = Field(alias="viewCountText", default="")
    published_time_text: str = Field(alias="publishedTimeText", default="")
    thumbnails: List[Thumbnail] = Field(default_factory=list)


class ChannelVideosResponse(_ResponseModel):
    """Complete channel videos response"""

    status: bool = False
    next_token: str = Field(alias="nextToken", default="")
    items: List[VideoSummary] = Field(default_factory=list)


# ============================================================================
# Transcript
# ============================================================================


class TranscriptSegment(_ResponseModel):
    """Single timed subtitle line"""

    subtitle_text: str = Field(alias="subtitle", default="")
    start_seconds: float = Field(alias="start", default=0.0)
    duration_seconds: float = Field(alias="dur", default=0.0)


class TranscriptResult(_ResponseModel):
    """Transcript plus video metadata"""

    title: str = ""
    description: str = ""
    available_langs: List[str] = Field(alias="availableLangs", default_factory=list)
    length_in_seconds: str = Field(alias="lengthInSeconds", default="")
    thumbnails: List[Thumbnail] = Field(default_factory=list)
    segments: List[TranscriptSegment] = Field(
        alias="transcription", default_factory=list
    )

    @field_validator("length_in_seconds", mode="before")
    @classmethod
    def _length_as_string(cls, v: Any) -> Any:
        # The service sends either "212" or 212
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("available_langs", mode="before")
    @classmethod
    def _null_langs_as_empty(cls, v: Any) -> Any:
        if isinstance(v, list):
            return ["" if lang is None else lang for lang in v]
        return v

    @property
    def full_text(self) -> str:
        """All subtitles joined by a single space"""
        return " ".join(segment.subtitle_text for segment in self.segments)

    def __str__(self) -> str:
        return self.full_text


__all__ = [
    "ContentType",
    "Thumbnail",
    "VideoSummary",
    "ChannelVideosResponse",
    "TranscriptSegment",
    "TranscriptResult",
]
