"""
Domain Layer - Core Business Logic

Contains:
- entities: NDC codes, request configuration and results
"""

from .entities import (
    ErrorRecord,
    ErrorType,
    NDCResult,
    RequestConfig,
    RequestResult,
    normalize_ndc,
)

__all__ = [
    "ErrorRecord",
    "ErrorType",
    "NDCResult",
    "RequestConfig",
    "RequestResult",
    "normalize_ndc",
]
