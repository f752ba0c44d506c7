"""Configuration for the Cloudflare Stream API client."""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_BASE_URL = "https://api.cloudflare.com/client/v4"


@dataclass(frozen=True)
class APIConfig:
    """Configuration for the Cloudflare API client.

    Either `api_token` or the legacy `api_key` + `api_email` pair must be set.
    """

    api_token: str | None = None
    api_key: str | None = None
    api_email: str | None = None
    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: float = 30.0
    max_retries: int = 3

    def __post_init__(self) -> None:
        if self.api_token:
            return
        if self.api_key and self.api_email:
            return
        raise ValueError("api_token or api_key + api_email is required")

    @classmethod
    def from_env(cls) -> APIConfig:
        """Load configuration from environment variables.

        Required (one of):
            CLOUDFLARE_API_TOKEN: Scoped API token (preferred)
            CLOUDFLARE_API_KEY + CLOUDFLARE_API_EMAIL: Global API key and account email

        Optional:
            CLOUDFLARE_BASE_URL: Override base URL (default: https://api.cloudflare.com/client/v4)
            CLOUDFLARE_TIMEOUT: Request timeout in seconds (default: 30)
            CLOUDFLARE_MAX_RETRIES: Max attempts for transient errors (default: 3)
        """
        api_token = os.environ.get("CLOUDFLARE_API_TOKEN") or None
        api_key = os.environ.get("CLOUDFLARE_API_KEY") or None
        api_email = os.environ.get("CLOUDFLARE_API_EMAIL") or None
        if not api_token and not (api_key and api_email):
            raise ValueError(
                "CLOUDFLARE_API_TOKEN (or CLOUDFLARE_API_KEY and CLOUDFLARE_API_EMAIL) "
                "environment variable is required."
            )

        return cls(
            api_token=api_token,
            api_key=api_key,
            api_email=api_email,
            base_url=os.environ.get("CLOUDFLARE_BASE_URL", DEFAULT_BASE_URL),
            timeout_seconds=float(os.environ.get("CLOUDFLARE_TIMEOUT", "30")),
            max_retries=int(os.environ.get("CLOUDFLARE_MAX_RETRIES", "3")),
        )
