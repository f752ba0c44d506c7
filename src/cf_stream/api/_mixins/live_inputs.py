"""Stream live input endpoint mixin."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar

from pydantic import BaseModel, ValidationError

from cf_stream.api._base import build_uri
from cf_stream.api.exceptions import DecodeError, MissingAccountIDError, MissingLiveInputIDError
from cf_stream.api.models.envelope import (
    LiveInputListResponse,
    LiveInputResponse,
    VideoListResponse,
)

if TYPE_CHECKING:
    from cf_stream.api.models.live_input import (
        CreateLiveInputParameters,
        ListLiveInputsParameters,
        LiveInput,
        LiveInputListItem,
        LiveInputParameters,
        UpdateLiveInputParameters,
    )
    from cf_stream.api.models.video import Video

EnvelopeT = TypeVar("EnvelopeT", bound=BaseModel)


def _decode(model: type[EnvelopeT], raw: bytes) -> EnvelopeT:
    try:
        return model.model_validate_json(raw)
    except ValidationError as e:
        raise DecodeError(f"Could not decode {model.__name__}: {e}") from e


def _live_inputs_path(account_id: str) -> str:
    if not account_id:
        raise MissingAccountIDError()
    return f"/accounts/{account_id}/stream/live_inputs"


def _live_input_path(account_id: str, live_input_id: str) -> str:
    base = _live_inputs_path(account_id)
    if not live_input_id:
        raise MissingLiveInputIDError()
    return f"{base}/{live_input_id}"


class LiveInputsMixin:
    """Mixin providing `/accounts/{account_id}/stream/live_inputs` endpoints."""

    if TYPE_CHECKING:
        # Implemented by ClientBase
        async def _request(
            self,
            method: str,
            path: str,
            *,
            json_body: dict[str, Any] | None = None,
        ) -> bytes: ...

    async def list_live_inputs(self, params: ListLiveInputsParameters) -> list[LiveInputListItem]:
        """
        List the live inputs of an account.

        API operation: `stream-live-inputs-list-live-inputs`
        """
        uri = build_uri(_live_inputs_path(params.account_id), params)
        raw = await self._request("GET", uri)
        return _decode(LiveInputListResponse, raw).result

    async def create_live_input(self, params: CreateLiveInputParameters) -> LiveInput:
        """
        Create a live input. Unset fields are omitted from the request body.

        API operation: `stream-live-inputs-create-a-live-input`
        """
        uri = _live_inputs_path(params.account_id)
        raw = await self._request(
            "POST",
            uri,
            json_body=params.model_dump(by_alias=True, exclude_none=True, mode="json"),
        )
        return _decode(LiveInputResponse, raw).result

    async def get_live_input(self, params: LiveInputParameters) -> LiveInput:
        """
        Fetch a single live input, including its ingest endpoints and status.

        API operation: `stream-live-inputs-retrieve-a-live-input`
        """
        uri = _live_input_path(params.account_id, params.live_input_id)
        raw = await self._request("GET", uri)
        return _decode(LiveInputResponse, raw).result

    async def update_live_input(self, params: UpdateLiveInputParameters) -> LiveInput:
        """
        Update a live input.

        API operation: `stream-live-inputs-update-a-live-input`
        """
        uri = _live_input_path(params.account_id, params.live_input_id)
        raw = await self._request(
            "PUT",
            uri,
            json_body=params.model_dump(by_alias=True, exclude_none=True, mode="json"),
        )
        return _decode(LiveInputResponse, raw).result

    async def delete_live_input(self, params: LiveInputParameters) -> None:
        """
        Delete a live input. Any active stream on it is ended.

        API operation: `stream-live-inputs-delete-a-live-input`
        """
        uri = _live_input_path(params.account_id, params.live_input_id)
        await self._request("DELETE", uri)

    async def list_live_input_videos(self, params: LiveInputParameters) -> list[Video]:
        """List the videos (recordings) associated with a live input."""
        uri = _live_input_path(params.account_id, params.live_input_id) + "/videos"
        raw = await self._request("GET", uri)
        return _decode(VideoListResponse, raw).result
