"""
Domain Entities

NDC normalization and request outcome types.
"""

from __future__ import annotations

from .ndc import NDCResult, normalize_ndc
from .request import ErrorRecord, ErrorType, RequestConfig, RequestResult

__all__ = [
    "NDCResult",
    "normalize_ndc",
    "ErrorRecord",
    "ErrorType",
    "RequestConfig",
    "RequestResult",
]
