"""
openFDA Request Client - GET with timeout, retry and exponential backoff.

Every outcome is returned as a ``RequestResult``; expected failures are
classified into ``ErrorRecord`` values instead of raised:

- Per-attempt timeout (``asyncio.timeout`` plus the httpx request timeout)
- Status-specific messages for openFDA HTTP errors
- Retry eligibility from the single table in ``retry.py``
- Backoff of ``retry_delay_ms * 2**attempt`` between attempts
- At most ``max_retries + 1`` attempts per call
"""

from __future__ import annotations

import asyncio
import logging
import re
from typing import Any

import httpx
from typing_extensions import Self

from openfda_mcp.core.config import DEFAULT_USER_AGENT
from openfda_mcp.domain.entities.request import (
    ErrorRecord,
    ErrorType,
    RequestConfig,
    RequestResult,
)

from .retry import RetryState, backoff_delay_ms, next_state

logger = logging.getLogger(__name__)

_STATUS_MESSAGES: dict[int, str] = {
    400: "Bad Request: Invalid search query or parameters",
    401: "Unauthorized: Invalid or missing API key",
    403: "Forbidden: API key may be invalid or quota exceeded",
    404: "Not Found: No results found for the specified query",
    429: "Rate Limited: Too many requests",
    500: "Server Error: openFDA service is experiencing issues",
}

_API_KEY_PARAM = re.compile(r"(api_key=)[^&]*")


def redact_url(url: str) -> str:
    """Hide the API key before a URL reaches the logs."""
    return _API_KEY_PARAM.sub(r"\1***", url)


def classify_status(status: int, reason: str = "", body: str | None = None) -> ErrorRecord:
    """Build the ``http`` error record for a non-2xx response."""
    message = _STATUS_MESSAGES.get(status, f"HTTP Error {status}: {reason}".rstrip(": "))
    return ErrorRecord(type=ErrorType.HTTP, message=message, status=status, details=body or None)


def _is_empty_payload(data: Any) -> bool:
    # JSON null or "" only; {} and [] are well-formed data and pass through
    return data is None or data == ""


class OpenFDAClient:
    """
    Async client for the openFDA drug API.

    One ``httpx.AsyncClient`` is shared by all calls; retry state lives in
    each ``execute()`` call, so concurrent calls do not interact.

    Example:
        async with OpenFDAClient() as client:
            result = await client.execute(url, RequestConfig(max_retries=2))
            if result.ok:
                print(result.data["results"][0])
            else:
                print(result.error.type, result.error.message)
    """

    _service_name: str = "openFDA"

    def __init__(
        self,
        *,
        user_agent: str = DEFAULT_USER_AGENT,
        config: RequestConfig | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """
        Initialize client.

        Args:
            user_agent: User-Agent header sent with every request
            config: Default retry/timeout settings for ``execute()``
            http_client: Pre-built httpx client (tests, custom transports)
        """
        self._config = config or RequestConfig()
        self._headers = {
            "User-Agent": user_agent,
            "Accept": "application/json",
        }
        self._client = http_client or httpx.AsyncClient(
            headers=self._headers,
            timeout=self._config.timeout_seconds,
            follow_redirects=True,
            limits=httpx.Limits(
                max_connections=20,
                max_keepalive_connections=10,
                keepalive_expiry=30.0,
            ),
        )

    @property
    def default_config(self) -> RequestConfig:
        return self._config

    async def execute(self, url: str, config: RequestConfig | None = None) -> RequestResult:
        """
        GET ``url`` with retries.

        Args:
            url: Fully built openFDA URL
            config: Overrides the client's default ``RequestConfig``

        Returns:
            ``RequestResult`` with parsed JSON data, or the last ``ErrorRecord``
        """
        cfg = config or self._config
        safe_url = redact_url(url)

        for attempt in range(cfg.max_attempts):
            logger.debug(f"{self._service_name} request (attempt {attempt + 1}/{cfg.max_attempts}): {safe_url}")
            data, error = await self._attempt(url, cfg)
            state = next_state(error, attempt, cfg)

            if state is RetryState.SUCCEEDED:
                if attempt:
                    logger.info(f"{self._service_name} request succeeded on attempt {attempt + 1}")
                return RequestResult.success(data, attempts=attempt + 1)

            if state is RetryState.FAILED_TERMINAL:
                logger.warning(
                    f"{self._service_name} request failed after {attempt + 1} attempt(s): "
                    f"{error.type.value} - {error.message}"
                )
                return RequestResult.failure(error, attempts=attempt + 1)

            delay_ms = backoff_delay_ms(cfg, attempt)
            logger.warning(
                f"{self._service_name} {error.type.value} error (attempt {attempt + 1}/{cfg.max_attempts}), "
                f"retrying in {delay_ms}ms"
            )
            await self._sleep(delay_ms / 1000)

        # next_state() never returns WAITING_TO_RETRY for the last allowed attempt
        raise RuntimeError("Unexpected retry loop exit")

    async def _attempt(self, url: str, cfg: RequestConfig) -> tuple[Any, ErrorRecord | None]:
        """Run one attempt and classify its outcome."""
        try:
            async with asyncio.timeout(cfg.timeout_seconds):
                response = await self._client.get(url, headers=self._headers, timeout=cfg.timeout_seconds)
        except (TimeoutError, httpx.TimeoutException) as e:
            return None, ErrorRecord(
                type=ErrorType.TIMEOUT,
                message=f"Request timeout after {cfg.timeout_ms}ms",
                details=str(e) or None,
            )
        except httpx.RequestError as e:
            return None, ErrorRecord(
                type=ErrorType.NETWORK,
                message=f"Network error: Unable to connect to {self._service_name} API",
                details=str(e) or type(e).__name__,
            )
        except Exception as e:
            logger.exception(f"{self._service_name} unexpected request error: {e}")
            return None, ErrorRecord(
                type=ErrorType.UNKNOWN,
                message=f"Unexpected error: {str(e) or type(e).__name__}",
                details=repr(e),
            )
        return self._handle_response(response)

    def _handle_response(self, response: httpx.Response) -> tuple[Any, ErrorRecord | None]:
        """Classify a completed response."""
        status = response.status_code
        if not 200 <= status < 300:
            body = response.text
            logger.warning(f"{self._service_name} HTTP error ({status}): {body[:200]}")
            return None, classify_status(status, response.reason_phrase, body)

        try:
            data = response.json()
        except ValueError as e:
            logger.warning(f"{self._service_name} JSON parsing error: {e}")
            return None, ErrorRecord(
                type=ErrorType.PARSING,
                message=f"Failed to parse JSON response: {e}",
                details=str(e),
            )

        if _is_empty_payload(data):
            return None, ErrorRecord(
                type=ErrorType.EMPTY_RESPONSE,
                message=f"Received empty response from {self._service_name} API",
            )
        return data, None

    async def _sleep(self, seconds: float) -> None:
        await asyncio.sleep(seconds)

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()


__all__ = ["OpenFDAClient", "classify_status", "redact_url"]
