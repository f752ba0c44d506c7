"""Base client infrastructure - HTTP plumbing, auth headers, retries."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any
from urllib.parse import urlencode

import httpx
import structlog
from pydantic import ValidationError
from tenacity import (
    AsyncRetrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from cf_stream.api.auth import CloudflareAuth
from cf_stream.api.config import APIConfig
from cf_stream.api.exceptions import (
    AuthenticationError,
    CloudflareAPIError,
    NotFoundError,
    RateLimitError,
)
from cf_stream.api.models.envelope import ResponseEnvelope, ResponseInfo

if TYPE_CHECKING:
    from pydantic import BaseModel
    from tenacity import RetryCallState


logger = structlog.get_logger()

_RETRY_WAIT = wait_exponential(multiplier=1, min=1, max=60)


def _wait_with_retry_after(retry_state: RetryCallState) -> float:
    """Wait using Retry-After header if available, else exponential backoff."""
    outcome = retry_state.outcome
    if outcome is not None:
        exc = outcome.exception()
        if isinstance(exc, RateLimitError) and exc.retry_after is not None:
            return float(exc.retry_after)
    return float(_RETRY_WAIT(retry_state))


def _log_retry(retry_state: RetryCallState) -> None:
    outcome = retry_state.outcome
    logger.warning(
        "Retrying Cloudflare request",
        attempt=retry_state.attempt_number,
        error=str(outcome.exception()) if outcome is not None else None,
    )


def build_uri(path: str, params: BaseModel | None = None) -> str:
    """
    Append a parameter model's query fields to `path`.

    Fields marked `exclude=True` (path identifiers) never reach the query string.
    Unset, False and empty values are omitted; booleans are sent as `true`.
    """
    if params is None:
        return path

    query: list[tuple[str, str]] = []
    for key, value in params.model_dump(by_alias=True, exclude_none=True, mode="json").items():
        if value is False or value == "" or value == [] or value == {}:
            continue
        if value is True:
            query.append((key, "true"))
        elif isinstance(value, list):
            query.extend((key, str(v)) for v in value)
        else:
            query.append((key, str(value)))

    if not query:
        return path
    return f"{path}?{urlencode(query)}"


def _parse_error_envelope(response: httpx.Response) -> tuple[str, list[ResponseInfo]]:
    """Extract a message and the envelope `errors` from an error response."""
    try:
        envelope = ResponseEnvelope.model_validate_json(response.content)
    except ValidationError:
        return response.text, []
    if not envelope.errors:
        return response.text, []
    message = "; ".join(
        f"{e.message} ({e.code})" if e.code is not None else e.message for e in envelope.errors
    )
    return message, envelope.errors


def _raise_for_status(response: httpx.Response) -> None:
    if response.status_code < 400:
        return

    message, errors = _parse_error_envelope(response)

    if response.status_code == 429:
        retry_after: int | None = None
        retry_after_header = response.headers.get("Retry-After")
        if retry_after_header is not None:
            try:
                retry_after = int(retry_after_header)
            except ValueError:
                retry_after = None
        raise RateLimitError(
            message=message or "Rate limit exceeded",
            retry_after=retry_after,
            errors=errors,
        )

    if response.status_code in (401, 403):
        raise AuthenticationError(
            message=message or "Authentication failed",
            status_code=response.status_code,
            errors=errors,
        )

    if response.status_code == 404:
        raise NotFoundError(message=message or "Not found", errors=errors)

    raise CloudflareAPIError(response.status_code, message, errors)


class ClientBase:
    """
    Base class for Cloudflare API clients.

    Provides the shared HTTP executor: auth headers, error mapping and retry of
    transient failures. Endpoint mixins build paths and decode envelopes.
    """

    _client: httpx.AsyncClient
    _max_retries: int

    def __init__(self, config: APIConfig | None = None) -> None:
        if config is None:
            config = APIConfig.from_env()
        self._config = config
        self._auth = CloudflareAuth.from_config(config)
        self._max_retries = max(1, config.max_retries)

        self._client = httpx.AsyncClient(
            base_url=config.base_url,
            timeout=config.timeout_seconds,
            headers={
                "Accept": "application/json",
                "Content-Type": "application/json",
                **self._auth.get_headers(),
            },
        )

    @classmethod
    def from_env(cls) -> ClientBase:
        """Create a client using environment configuration.

        Raises:
            ValueError: If no Cloudflare credentials are set in the environment.
        """
        return cls(APIConfig.from_env())

    async def __aenter__(self) -> ClientBase:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: Any,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()

    async def _request(
        self,
        method: str,
        path: str,
        *,
        json_body: dict[str, Any] | None = None,
    ) -> bytes:
        """
        Send an authenticated request with retry and return the raw body.

        Retries rate limits (honouring `Retry-After`), network errors and timeouts
        up to `max_retries` attempts. Decoding the body is left to the caller.

        Raises:
            AuthenticationError: On 401/403.
            NotFoundError: On 404.
            RateLimitError: On 429 once retries are exhausted.
            CloudflareAPIError: For any other non-success status.
        """
        async for attempt in AsyncRetrying(
            retry=retry_if_exception_type(
                (
                    RateLimitError,
                    httpx.NetworkError,
                    httpx.TimeoutException,
                )
            ),
            stop=stop_after_attempt(self._max_retries),
            wait=_wait_with_retry_after,
            before_sleep=_log_retry,
            reraise=True,
        ):
            with attempt:
                response = await self._client.request(method, path, json=json_body)
                logger.debug(
                    "Cloudflare request",
                    method=method,
                    path=path,
                    status_code=response.status_code,
                )
                _raise_for_status(response)
                return response.content

        raise AssertionError("AsyncRetrying should have returned or raised")  # pragma: no cover
