"""
Model tests - use REAL objects, NO MOCKS.

These tests verify wire-format aliases, omission of unset fields and
round-tripping of the live input models.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

from cf_stream.api.models.envelope import LiveInputResponse, ResponseEnvelope
from cf_stream.api.models.live_input import (
    CreateLiveInputParameters,
    LiveInput,
    LiveInputParameters,
    LiveInputState,
    RecordingConfig,
    RecordingMode,
    SRTEndpoint,
    UpdateLiveInputParameters,
)

if TYPE_CHECKING:
    from collections.abc import Callable


class TestLiveInputModel:
    def test_parses_api_payload(self, make_live_input: Callable[..., dict[str, Any]]) -> None:
        live_input = LiveInput.model_validate(make_live_input())

        assert live_input.uid == "li1"
        assert live_input.created == datetime(2014, 1, 2, 2, 20, tzinfo=UTC)
        assert live_input.rtmps_playback is not None
        assert live_input.rtmps_playback.stream_key is not None
        assert live_input.recording == RecordingConfig(
            mode=RecordingMode.AUTOMATIC,
            require_signed_urls=False,
            allowed_origins=["example.com"],
            timeout_seconds=10,
        )

    def test_srt_playback_carries_stream_id_and_passphrase(
        self, make_live_input: Callable[..., dict[str, Any]]
    ) -> None:
        live_input = LiveInput.model_validate(make_live_input())

        assert isinstance(live_input.srt_playback, SRTEndpoint)
        assert live_input.srt_playback.stream_id == "playli1"
        assert live_input.srt_playback.passphrase is not None

    def test_round_trip_by_alias(self, make_live_input: Callable[..., dict[str, Any]]) -> None:
        status = {
            "current": {
                "reason": "connected",
                "state": "connected",
                "statusEnteredAt": "2024-03-01T10:00:00Z",
            },
            "history": [],
        }
        original = LiveInput.model_validate(make_live_input(status=status))

        dumped = original.model_dump(by_alias=True, exclude_none=True, mode="json")
        assert "webRTCPlayback" in dumped
        assert "rtmpsPlayback" in dumped

        assert LiveInput.model_validate(dumped) == original

    def test_prefer_low_latency_defaults_false_and_is_always_dumped(self) -> None:
        live_input = LiveInput.model_validate({"uid": "x"})

        assert live_input.prefer_low_latency is False
        dumped = live_input.model_dump(by_alias=True, exclude_none=True)
        assert dumped == {"uid": "x", "preferLowLatency": False}

    def test_null_prefer_low_latency_decodes_as_false(self) -> None:
        live_input = LiveInput.model_validate({"uid": "x", "preferLowLatency": None})

        assert live_input.prefer_low_latency is False

    def test_null_status_history_decodes_as_empty_list(self) -> None:
        live_input = LiveInput.model_validate(
            {"uid": "x", "status": {"current": None, "history": None}}
        )

        assert live_input.status is not None
        assert live_input.status.current is None
        assert live_input.status.history == []

    def test_unknown_state_and_fields_are_accepted(self) -> None:
        live_input = LiveInput.model_validate(
            {
                "uid": "x",
                "status": {"current": {"state": "some_new_state"}},
                "brandNewField": 1,
            }
        )

        assert live_input.status is not None
        assert live_input.status.current is not None
        assert live_input.status.current.state == "some_new_state"

    def test_known_state_compares_with_enum(self) -> None:
        live_input = LiveInput.model_validate({"status": {"current": {"state": "connected"}}})

        assert live_input.status is not None
        assert live_input.status.current is not None
        assert live_input.status.current.state == LiveInputState.CONNECTED


class TestRequestParameters:
    def test_create_dump_omits_path_ids_and_unset_fields(self) -> None:
        params = CreateLiveInputParameters(
            account_id="acct1",
            default_creator="creator-1",
            prefer_low_latency=False,
        )

        assert params.model_dump(by_alias=True, exclude_none=True, mode="json") == {
            "defaultCreator": "creator-1",
            "preferLowLatency": False,
        }

    def test_update_dump_omits_live_input_id(self) -> None:
        params = UpdateLiveInputParameters(
            account_id="acct1",
            live_input_id="li1",
            meta={"name": "renamed", "tags": ["a", "b"]},
            recording=RecordingConfig(mode="off", allowed_origins=["*.example.com"]),
        )

        assert params.model_dump(by_alias=True, exclude_none=True, mode="json") == {
            "meta": {"name": "renamed", "tags": ["a", "b"]},
            "recording": {"mode": "off", "allowedOrigins": ["*.example.com"]},
        }

    def test_snake_case_and_alias_names_both_accepted(self) -> None:
        by_name = CreateLiveInputParameters(delete_recording_after_days=30)
        by_alias = CreateLiveInputParameters.model_validate({"deleteRecordingAfterDays": 30})

        assert by_name == by_alias

    def test_identifiers_default_to_empty(self) -> None:
        params = LiveInputParameters()

        assert params.account_id == ""
        assert params.live_input_id == ""


class TestEnvelope:
    def test_null_result_decodes_to_empty_live_input(self) -> None:
        parsed = LiveInputResponse.model_validate_json(
            b'{"success": true, "errors": null, "messages": null, "result": null}'
        )

        assert parsed.result == LiveInput()
        assert parsed.errors == []

    def test_result_info(self) -> None:
        parsed = ResponseEnvelope.model_validate(
            {
                "success": True,
                "errors": [],
                "messages": [{"code": 1000, "message": "ok"}],
                "result_info": {"page": 1, "per_page": 20, "count": 1, "total_count": 1},
            }
        )

        assert parsed.messages[0].code == 1000
        assert parsed.result_info is not None
        assert parsed.result_info.total_count == 1
