"""Stream video models (as listed for a live input)."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class VideoStatus(BaseModel):
    """Processing state of a video."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    state: str | None = None
    # The API sends the percentage as a string (e.g. "100.000000").
    pct_complete: str | None = Field(default=None, alias="pctComplete")
    error_reason_code: str | None = Field(default=None, alias="errorReasonCode")
    error_reason_text: str | None = Field(default=None, alias="errorReasonText")


class VideoInput(BaseModel):
    """Dimensions of the uploaded source."""

    model_config = ConfigDict(frozen=True)

    width: int | None = None
    height: int | None = None


class VideoPlayback(BaseModel):
    """Playback manifest URLs."""

    model_config = ConfigDict(frozen=True)

    hls: str | None = None
    dash: str | None = None


class Video(BaseModel):
    """Video as returned by the Stream API (recordings of a live input)."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    uid: str | None = None
    thumbnail: str | None = None
    thumbnail_timestamp_pct: float | None = Field(default=None, alias="thumbnailTimestampPct")
    ready_to_stream: bool | None = Field(default=None, alias="readyToStream")
    status: VideoStatus | None = None
    meta: dict[str, Any] | None = None
    created: datetime | None = None
    modified: datetime | None = None
    uploaded: datetime | None = None
    size: int | None = None
    preview: str | None = None
    allowed_origins: list[str] | None = Field(default=None, alias="allowedOrigins")
    require_signed_urls: bool | None = Field(default=None, alias="requireSignedURLs")
    duration: float | None = None
    input_: VideoInput | None = Field(default=None, alias="input")
    playback: VideoPlayback | None = None
    live_input: str | None = Field(default=None, alias="liveInput")
    max_duration_seconds: int | None = Field(default=None, alias="maxDurationSeconds")
    scheduled_deletion: datetime | None = Field(default=None, alias="scheduledDeletion")
