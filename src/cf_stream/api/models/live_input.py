"""Live input models for the Cloudflare Stream API."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RecordingMode(str, Enum):
    """Recording mode of a live input (`recording.mode`)."""

    OFF = "off"
    AUTOMATIC = "automatic"


class LiveInputState(str, Enum):
    """Known connection states reported in `status.current.state`."""

    CONNECTED = "connected"
    RECONNECTED = "reconnected"
    RECONNECTING = "reconnecting"
    CLIENT_DISCONNECT = "client_disconnect"
    TTL_EXCEEDED = "ttl_exceeded"
    FAILED_TO_CONNECT = "failed_to_connect"
    FAILED_TO_RECONNECT = "failed_to_reconnect"
    NEW_CONFIGURATION_ACCEPTED = "new_configuration_accepted"


class RTMPSEndpoint(BaseModel):
    """RTMPS ingest (or playback) URL and stream key."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    url: str | None = None
    stream_key: str | None = Field(default=None, alias="streamKey")


class SRTEndpoint(BaseModel):
    """SRT ingest (or playback) URL with stream ID and passphrase."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    url: str | None = None
    stream_id: str | None = Field(default=None, alias="streamId")
    passphrase: str | None = None


class WebRTCEndpoint(BaseModel):
    """WebRTC (WHIP/WHEP) URL."""

    model_config = ConfigDict(frozen=True)

    url: str | None = None


class LiveInputStatus(BaseModel):
    """A single connection status entry."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    # Plain str: unknown states from the API must not fail decoding (see LiveInputState).
    reason: str | None = None
    state: str | None = None
    status_entered_at: datetime | None = Field(default=None, alias="statusEnteredAt")
    status_last_seen: datetime | None = Field(default=None, alias="statusLastSeen")


class LiveInputStatuses(BaseModel):
    """Current connection status plus prior states, most recent first."""

    model_config = ConfigDict(frozen=True)

    current: LiveInputStatus | None = None
    history: list[LiveInputStatus] = Field(default_factory=list)

    @field_validator("history", mode="before")
    @classmethod
    def _none_to_empty_list(cls, value: Any) -> Any:
        if value is None:
            return []
        return value


class RecordingConfig(BaseModel):
    """Recording settings for a live input."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    mode: RecordingMode | str | None = None
    require_signed_urls: bool | None = Field(default=None, alias="requireSignedURLs")
    allowed_origins: list[str] | None = Field(default=None, alias="allowedOrigins")
    timeout_seconds: int | None = Field(default=None, alias="timeoutSeconds")


class LiveInputListItem(BaseModel):
    """Live input as returned by `GET /accounts/{account_id}/stream/live_inputs`."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    uid: str | None = None
    created: datetime | None = None
    modified: datetime | None = None
    meta: dict[str, Any] | None = None
    delete_recording_after_days: int | None = Field(
        default=None, alias="deleteRecordingAfterDays"
    )


class LiveInput(BaseModel):
    """Live input as returned by the create/get/update endpoints."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    uid: str | None = None
    rtmps: RTMPSEndpoint | None = None
    rtmps_playback: RTMPSEndpoint | None = Field(default=None, alias="rtmpsPlayback")
    srt: SRTEndpoint | None = None
    srt_playback: SRTEndpoint | None = Field(default=None, alias="srtPlayback")
    web_rtc: WebRTCEndpoint | None = Field(default=None, alias="webRTC")
    web_rtc_playback: WebRTCEndpoint | None = Field(default=None, alias="webRTCPlayback")
    created: datetime | None = None
    modified: datetime | None = None
    meta: dict[str, Any] | None = None
    default_creator: str | None = Field(default=None, alias="defaultCreator")
    status: LiveInputStatuses | None = None
    recording: RecordingConfig | None = None
    delete_recording_after_days: int | None = Field(
        default=None, alias="deleteRecordingAfterDays"
    )
    prefer_low_latency: bool = Field(default=False, alias="preferLowLatency")

    @field_validator("prefer_low_latency", mode="before")
    @classmethod
    def _none_to_false(cls, value: Any) -> Any:
        if value is None:
            return False
        return value


# ==================== Request parameters ====================


class ListLiveInputsParameters(BaseModel):
    """Parameters for listing live inputs. `include_counts` is sent as a query flag."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    account_id: str = Field(default="", exclude=True)
    include_counts: bool = False


class LiveInputParameters(BaseModel):
    """Path identifiers for get/delete/list-videos."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    account_id: str = Field(default="", exclude=True)
    live_input_id: str = Field(default="", exclude=True)


class CreateLiveInputParameters(BaseModel):
    """Request body for `POST /accounts/{account_id}/stream/live_inputs`."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    account_id: str = Field(default="", exclude=True)
    default_creator: str | None = Field(default=None, alias="defaultCreator")
    delete_recording_after_days: int | None = Field(
        default=None, alias="deleteRecordingAfterDays"
    )
    meta: dict[str, Any] | None = None
    recording: RecordingConfig | None = None
    prefer_low_latency: bool | None = Field(default=None, alias="preferLowLatency")


class UpdateLiveInputParameters(CreateLiveInputParameters):
    """Request body for `PUT /accounts/{account_id}/stream/live_inputs/{live_input_id}`."""

    live_input_id: str = Field(default="", exclude=True)
