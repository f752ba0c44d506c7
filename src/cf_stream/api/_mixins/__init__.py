"""Endpoint mixins for Cloudflare API clients."""

from cf_stream.api._mixins.live_inputs import LiveInputsMixin

__all__ = [
    "LiveInputsMixin",
]
