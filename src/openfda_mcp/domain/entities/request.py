"""
Domain Entities: request configuration and outcomes.

``RequestResult`` is the single contract between the request client and its
callers: either parsed data or an ``ErrorRecord``, never both and never
neither. Expected failures travel as data so callers branch on
``ErrorRecord.type`` instead of catching exceptions.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from enum import Enum
from typing import Any

from openfda_mcp.core.exceptions import InvalidParameterError

DEFAULT_MAX_RETRIES = 3
DEFAULT_RETRY_DELAY_MS = 1000
DEFAULT_TIMEOUT_MS = 30000


class ErrorType(str, Enum):
    """Classification of a failed request."""

    HTTP = "http"
    NETWORK = "network"
    TIMEOUT = "timeout"
    PARSING = "parsing"
    EMPTY_RESPONSE = "empty_response"
    UNKNOWN = "unknown"


@dataclass(frozen=True, slots=True)
class RequestConfig:
    """
    Per-call retry and timeout settings.

    Any subset of fields may be overridden; the rest keep their defaults.
    """

    max_retries: int = DEFAULT_MAX_RETRIES
    retry_delay_ms: int = DEFAULT_RETRY_DELAY_MS
    timeout_ms: int = DEFAULT_TIMEOUT_MS

    def __post_init__(self) -> None:
        if not _is_int(self.max_retries) or self.max_retries < 0:
            raise InvalidParameterError("max_retries", self.max_retries, "a non-negative integer")
        if not _is_int(self.retry_delay_ms) or self.retry_delay_ms <= 0:
            raise InvalidParameterError("retry_delay_ms", self.retry_delay_ms, "a positive integer")
        if not _is_int(self.timeout_ms) or self.timeout_ms <= 0:
            raise InvalidParameterError("timeout_ms", self.timeout_ms, "a positive integer")

    @property
    def max_attempts(self) -> int:
        return self.max_retries + 1

    @property
    def timeout_seconds(self) -> float:
        return self.timeout_ms / 1000

    def with_overrides(self, **overrides: Any) -> RequestConfig:
        """Return a copy with the given fields replaced (``None`` values are ignored)."""
        changes = {key: value for key, value in overrides.items() if value is not None}
        return dataclasses.replace(self, **changes)


@dataclass(frozen=True, slots=True)
class ErrorRecord:
    """A classified request failure."""

    type: ErrorType
    message: str
    status: int | None = None
    details: Any = None

    @property
    def is_http(self) -> bool:
        return self.type is ErrorType.HTTP

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result: dict[str, Any] = {"type": self.type.value, "message": self.message}
        if self.status is not None:
            result["status"] = self.status
        if self.details is not None:
            result["details"] = self.details if isinstance(self.details, str) else repr(self.details)
        return result


@dataclass(frozen=True, slots=True)
class RequestResult:
    """Outcome of ``OpenFDAClient.execute``: data or error, exactly one."""

    data: Any = None
    error: ErrorRecord | None = None
    attempts: int = 1

    def __post_init__(self) -> None:
        if (self.data is None) == (self.error is None):
            msg = "RequestResult requires exactly one of data or error"
            raise ValueError(msg)

    @classmethod
    def success(cls, data: Any, attempts: int = 1) -> RequestResult:
        return cls(data=data, error=None, attempts=attempts)

    @classmethod
    def failure(cls, error: ErrorRecord, attempts: int = 1) -> RequestResult:
        return cls(data=None, error=error, attempts=attempts)

    @property
    def ok(self) -> bool:
        return self.error is None


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


__all__ = [
    "DEFAULT_MAX_RETRIES",
    "DEFAULT_RETRY_DELAY_MS",
    "DEFAULT_TIMEOUT_MS",
    "ErrorRecord",
    "ErrorType",
    "RequestConfig",
    "RequestResult",
]
