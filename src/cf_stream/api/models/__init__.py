"""Pydantic models for Cloudflare Stream API requests and responses."""

from cf_stream.api.models.envelope import (
    LiveInputListResponse,
    LiveInputResponse,
    ResponseEnvelope,
    ResponseInfo,
    ResultInfo,
    VideoListResponse,
)
from cf_stream.api.models.live_input import (
    CreateLiveInputParameters,
    ListLiveInputsParameters,
    LiveInput,
    LiveInputListItem,
    LiveInputParameters,
    LiveInputState,
    LiveInputStatus,
    LiveInputStatuses,
    RecordingConfig,
    RecordingMode,
    RTMPSEndpoint,
    SRTEndpoint,
    UpdateLiveInputParameters,
    WebRTCEndpoint,
)
from cf_stream.api.models.video import Video, VideoInput, VideoPlayback, VideoStatus

__all__ = [
    "CreateLiveInputParameters",
    "ListLiveInputsParameters",
    "LiveInput",
    "LiveInputListItem",
    "LiveInputListResponse",
    "LiveInputParameters",
    "LiveInputResponse",
    "LiveInputState",
    "LiveInputStatus",
    "LiveInputStatuses",
    "RTMPSEndpoint",
    "RecordingConfig",
    "RecordingMode",
    "ResponseEnvelope",
    "ResponseInfo",
    "ResultInfo",
    "SRTEndpoint",
    "UpdateLiveInputParameters",
    "Video",
    "VideoInput",
    "VideoListResponse",
    "VideoPlayback",
    "VideoStatus",
    "WebRTCEndpoint",
]
