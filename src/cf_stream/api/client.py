"""Cloudflare Stream API client."""

from __future__ import annotations

from cf_stream.api._base import ClientBase
from cf_stream.api._mixins import LiveInputsMixin
from cf_stream.api.config import APIConfig


class StreamClient(LiveInputsMixin, ClientBase):
    """
    Async client for the Cloudflare Stream API.

    Use as an async context manager:

        async with StreamClient.from_env() as client:
            inputs = await client.list_live_inputs(
                ListLiveInputsParameters(account_id="023e105f4ecef8ad9ca31a8372d0c353")
            )
    """

    async def __aenter__(self) -> StreamClient:
        return self

    @classmethod
    def from_env(cls) -> StreamClient:
        """Create a `StreamClient` using environment configuration.

        Raises:
            ValueError: If no Cloudflare credentials are set in the environment.
        """
        return cls(APIConfig.from_env())
