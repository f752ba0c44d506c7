"""Authentication headers for the Cloudflare API."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cf_stream.api.config import APIConfig


class CloudflareAuth:
    """
    Builds Cloudflare auth headers.

    Scoped API tokens are sent as a bearer token. The legacy global API key is
    sent as `X-Auth-Key` together with the account email in `X-Auth-Email`.
    """

    def __init__(
        self,
        api_token: str | None = None,
        api_key: str | None = None,
        api_email: str | None = None,
    ) -> None:
        if not api_token and not (api_key and api_email):
            raise ValueError("api_token or api_key + api_email is required")
        self.api_token = api_token
        self.api_key = api_key
        self.api_email = api_email

    @classmethod
    def from_config(cls, config: APIConfig) -> CloudflareAuth:
        return cls(
            api_token=config.api_token,
            api_key=config.api_key,
            api_email=config.api_email,
        )

    def get_headers(self) -> dict[str, str]:
        """Return the auth headers for a request (token takes precedence)."""
        if self.api_token:
            return {"Authorization": f"Bearer {self.api_token}"}
        api_key, api_email = self.api_key, self.api_email
        if not api_key or not api_email:
            raise ValueError("api_token or api_key + api_email is required")
        return {
            "X-Auth-Key": api_key,
            "X-Auth-Email": api_email,
        }
