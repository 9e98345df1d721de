"""openFDA API access: URL builder, retry policy and request client."""

from .builder import Context, OpenFDABuilder
from .client import OpenFDAClient, classify_status, redact_url
from .retry import (
    RETRY_POLICY,
    RETRYABLE_STATUSES,
    RetryState,
    backoff_delay_ms,
    is_retryable,
    next_state,
)

__all__ = [
    "Context",
    "OpenFDABuilder",
    "OpenFDAClient",
    "classify_status",
    "redact_url",
    "RETRY_POLICY",
    "RETRYABLE_STATUSES",
    "RetryState",
    "backoff_delay_ms",
    "is_retryable",
    "next_state",
]
