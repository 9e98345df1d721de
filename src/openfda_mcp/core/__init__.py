"""
Core module for OpenFDA MCP.

Provides:
- Exception hierarchy for fail-fast errors (``core.exceptions``)
- Process-wide settings (``core.config``)
"""

from .exceptions import (
    ConfigurationError,
    ErrorCategory,
    ErrorContext,
    ErrorSeverity,
    InvalidParameterError,
    MissingParameterError,
    OpenFDAError,
    ValidationError,
)

__all__ = [
    "OpenFDAError",
    "ErrorContext",
    "ErrorSeverity",
    "ErrorCategory",
    "ValidationError",
    "MissingParameterError",
    "InvalidParameterError",
    "ConfigurationError",
]
