"""
Retry policy for openFDA requests.

One table decides whether a classified failure is worth another attempt.
The request client consults ``is_retryable()`` and nothing else.

    ErrorType        Retryable
    ---------------  -----------------------------------
    http             only for 429 and 500-599
    network          yes
    timeout          yes
    unknown          yes
    parsing          no (a malformed body stays malformed)
    empty_response   no
"""

from __future__ import annotations

from enum import Enum

from openfda_mcp.domain.entities.request import ErrorRecord, ErrorType, RequestConfig

RETRY_POLICY: dict[ErrorType, bool] = {
    ErrorType.HTTP: False,  # overridden per status by RETRYABLE_STATUSES
    ErrorType.NETWORK: True,
    ErrorType.TIMEOUT: True,
    ErrorType.UNKNOWN: True,
    ErrorType.PARSING: False,
    ErrorType.EMPTY_RESPONSE: False,
}

RETRYABLE_STATUSES: frozenset[int] = frozenset({429, *range(500, 600)})


class RetryState(str, Enum):
    """States of one ``execute()`` call."""

    ATTEMPTING = "attempting"
    WAITING_TO_RETRY = "waiting_to_retry"
    SUCCEEDED = "succeeded"
    FAILED_TERMINAL = "failed_terminal"


def is_retryable(error: ErrorRecord) -> bool:
    """Whether another attempt could change the outcome of ``error``."""
    if error.type is ErrorType.HTTP:
        return error.status in RETRYABLE_STATUSES
    return RETRY_POLICY[error.type]


def backoff_delay_ms(config: RequestConfig, attempt: int) -> int:
    """Delay before the attempt after ``attempt`` (0-based): ``retry_delay_ms * 2**attempt``."""
    return config.retry_delay_ms * (2**attempt)


def next_state(error: ErrorRecord | None, attempt: int, config: RequestConfig) -> RetryState:
    """Transition out of ATTEMPTING after attempt number ``attempt`` (0-based)."""
    if error is None:
        return RetryState.SUCCEEDED
    if is_retryable(error) and attempt < config.max_retries:
        return RetryState.WAITING_TO_RETRY
    return RetryState.FAILED_TERMINAL


__all__ = [
    "RETRYABLE_STATUSES",
    "RETRY_POLICY",
    "RetryState",
    "backoff_delay_ms",
    "is_retryable",
    "next_state",
]
