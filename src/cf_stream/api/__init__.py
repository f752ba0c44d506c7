"""Cloudflare Stream API client module."""

from cf_stream.api.auth import CloudflareAuth
from cf_stream.api.client import StreamClient
from cf_stream.api.config import APIConfig
from cf_stream.api.exceptions import (
    AuthenticationError,
    CloudflareAPIError,
    CloudflareError,
    DecodeError,
    MissingAccountIDError,
    MissingLiveInputIDError,
    MissingParameterError,
    NotFoundError,
    RateLimitError,
)
from cf_stream.api.models import (
    CreateLiveInputParameters,
    ListLiveInputsParameters,
    LiveInput,
    LiveInputListItem,
    LiveInputParameters,
    RecordingConfig,
    RecordingMode,
    UpdateLiveInputParameters,
    Video,
)

__all__ = [
    # Clients
    "APIConfig",
    "CloudflareAuth",
    "StreamClient",
    # Exceptions
    "AuthenticationError",
    "CloudflareAPIError",
    "CloudflareError",
    "DecodeError",
    "MissingAccountIDError",
    "MissingLiveInputIDError",
    "MissingParameterError",
    "NotFoundError",
    "RateLimitError",
    # Models
    "CreateLiveInputParameters",
    "ListLiveInputsParameters",
    "LiveInput",
    "LiveInputListItem",
    "LiveInputParameters",
    "RecordingConfig",
    "RecordingMode",
    "UpdateLiveInputParameters",
    "Video",
]
