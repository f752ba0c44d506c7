"""Custom exceptions for Cloudflare API errors."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cf_stream.api.models.envelope import ResponseInfo


class CloudflareError(Exception):
    """Base exception for Cloudflare API errors."""


class MissingParameterError(CloudflareError, ValueError):
    """A required request identifier was empty. Raised before any I/O."""


class MissingAccountIDError(MissingParameterError):
    """Required account ID missing."""

    def __init__(self) -> None:
        super().__init__("required missing account ID")


class MissingLiveInputIDError(MissingParameterError):
    """Required live input ID missing."""

    def __init__(self) -> None:
        super().__init__("required live input id missing")


class DecodeError(CloudflareError):
    """A successful response body could not be decoded into the expected model."""


class CloudflareAPIError(CloudflareError):
    """HTTP API error with status code and any envelope errors."""

    def __init__(
        self,
        status_code: int,
        message: str,
        errors: list[ResponseInfo] | None = None,
    ) -> None:
        self.status_code = status_code
        self.message = message
        self.errors = errors or []
        super().__init__(f"API Error {status_code}: {message}")

    @property
    def error_codes(self) -> list[int]:
        """Cloudflare error codes reported in the envelope."""
        return [e.code for e in self.errors if e.code is not None]


class AuthenticationError(CloudflareAPIError):
    """Authentication or authorization failed (HTTP 401/403)."""

    def __init__(
        self,
        message: str = "Authentication failed",
        status_code: int = 401,
        errors: list[ResponseInfo] | None = None,
    ) -> None:
        super().__init__(status_code, message, errors)


class NotFoundError(CloudflareAPIError):
    """Resource not found (HTTP 404)."""

    def __init__(
        self, message: str = "Not found", errors: list[ResponseInfo] | None = None
    ) -> None:
        super().__init__(404, message, errors)


class RateLimitError(CloudflareAPIError):
    """Rate limit exceeded (HTTP 429)."""

    def __init__(
        self,
        message: str = "Rate limit exceeded",
        retry_after: int | None = None,
        errors: list[ResponseInfo] | None = None,
    ) -> None:
        super().__init__(429, message, errors)
        self.retry_after = retry_after
