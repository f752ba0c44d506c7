"""Cloudflare v4 response envelope models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from cf_stream.api.models.live_input import LiveInput, LiveInputListItem
from cf_stream.api.models.video import Video


class ResponseInfo(BaseModel):
    """Entry of the envelope `errors` / `messages` arrays."""

    model_config = ConfigDict(frozen=True)

    code: int | None = None
    message: str = ""


class ResultInfo(BaseModel):
    """Pagination block (`result_info`) returned by some list endpoints."""

    model_config = ConfigDict(frozen=True)

    page: int | None = None
    per_page: int | None = None
    count: int | None = None
    total_count: int | None = None


class ResponseEnvelope(BaseModel):
    """Outer shape shared by every Cloudflare v4 response."""

    model_config = ConfigDict(frozen=True)

    success: bool = False
    errors: list[ResponseInfo] = Field(default_factory=list)
    messages: list[ResponseInfo] = Field(default_factory=list)
    result_info: ResultInfo | None = None

    @field_validator("errors", "messages", mode="before")
    @classmethod
    def _none_to_empty_list(cls, value: Any) -> Any:
        if value is None:
            return []
        return value


class LiveInputResponse(ResponseEnvelope):
    """Response schema for single live input endpoints (create/get/update)."""

    result: LiveInput = Field(default_factory=LiveInput)

    @field_validator("result", mode="before")
    @classmethod
    def _none_to_empty_live_input(cls, value: Any) -> Any:
        if value is None:
            return {}
        return value


class LiveInputListResponse(ResponseEnvelope):
    """Response schema for `GET /accounts/{account_id}/stream/live_inputs`."""

    result: list[LiveInputListItem] = Field(default_factory=list)

    @field_validator("result", mode="before")
    @classmethod
    def _none_to_empty_result(cls, value: Any) -> Any:
        if value is None:
            return []
        return value


class VideoListResponse(ResponseEnvelope):
    """Response schema for `GET /accounts/{account_id}/stream/live_inputs/{id}/videos`."""

    result: list[Video] = Field(default_factory=list)

    @field_validator("result", mode="before")
    @classmethod
    def _none_to_empty_result(cls, value: Any) -> Any:
        if value is None:
            return []
        return value
