"""
cf-stream.

Typed async client for Cloudflare Stream live inputs.
"""

__version__ = "0.1.0"

from cf_stream.api import StreamClient
from cf_stream.api.config import APIConfig

# Configure structlog once at import time (quiet by default).
from cf_stream.logging import configure_structlog

configure_structlog()

__all__ = [
    "APIConfig",
    "StreamClient",
    "__version__",
]
