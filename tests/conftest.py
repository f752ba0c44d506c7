"""
Shared test fixtures.

PHILOSOPHY: Use REAL objects wherever possible. Only mock at system boundaries.
- Real Pydantic models (not dicts pretending to be models)
- respx ONLY for HTTP boundary
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest

if TYPE_CHECKING:
    from collections.abc import Callable

CLOUDFLARE_BASE_URL = "https://api.cloudflare.com/client/v4"
ACCOUNT_ID = "acct1"
LIVE_INPUT_ID = "li1"


@pytest.fixture
def base_url() -> str:
    return CLOUDFLARE_BASE_URL


@pytest.fixture
def live_inputs_url() -> str:
    return f"{CLOUDFLARE_BASE_URL}/accounts/{ACCOUNT_ID}/stream/live_inputs"


@pytest.fixture
def live_input_url(live_inputs_url: str) -> str:
    return f"{live_inputs_url}/{LIVE_INPUT_ID}"


# ============================================================================
# Domain Object Builders (dicts matching the API wire format)
# ============================================================================


@pytest.fixture
def make_live_input() -> Callable[..., dict[str, Any]]:
    """Factory for live input payloads as returned by the Stream API."""

    def _make(uid: str = LIVE_INPUT_ID, **overrides: Any) -> dict[str, Any]:
        data: dict[str, Any] = {
            "uid": uid,
            "rtmps": {
                "url": "rtmps://live.cloudflare.com:443/live/",
                "streamKey": "2fb3cb9f17e68a2568d6ebed8d5505eak3ceaf8c9b1f395e1b76b79332497cada",
            },
            "rtmpsPlayback": {
                "url": "rtmps://live.cloudflare.com:443/live/",
                "streamKey": "2fb3cb9f17e68a2568d6ebed8d5505eak3ceaf8c9b1f395e1b76b79332497cada",
            },
            "srt": {
                "url": "srt://live.cloudflare.com:778",
                "streamId": f"{uid}k3ceaf8c9b1f395e1b76b79332497cada",
                "passphrase": "2fb3cb9f17e68a2568d6ebed8d5505eak3ceaf8c9b1f395e1b76b79332497cada",
            },
            "srtPlayback": {
                "url": "srt://live.cloudflare.com:778",
                "streamId": f"play{uid}",
                "passphrase": "3fb3cb9f17e68a2568d6ebed8d5505eak3ceaf8c9b1f395e1b76b79332497cada",
            },
            "webRTC": {
                "url": f"https://customer-abc.cloudflarestream.com/{uid}/webRTC/publish"
            },
            "webRTCPlayback": {
                "url": f"https://customer-abc.cloudflarestream.com/{uid}/webRTC/play"
            },
            "created": "2014-01-02T02:20:00Z",
            "modified": "2014-01-02T02:20:00Z",
            "meta": {"name": "test stream 1"},
            "status": None,
            "recording": {
                "mode": "automatic",
                "requireSignedURLs": False,
                "allowedOrigins": ["example.com"],
                "timeoutSeconds": 10,
            },
            "deleteRecordingAfterDays": 45,
            "preferLowLatency": False,
        }
        data.update(overrides)
        return data

    return _make


@pytest.fixture
def make_envelope() -> Callable[[Any], dict[str, Any]]:
    """Wrap a result payload in the standard Cloudflare v4 envelope."""

    def _make(result: Any) -> dict[str, Any]:
        return {"success": True, "errors": [], "messages": [], "result": result}

    return _make
