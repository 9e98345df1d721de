"""
Exception Hierarchy for OpenFDA MCP.

Expected upstream failures (HTTP errors, timeouts, bad payloads) are NOT
exceptions: the request client returns them as ``ErrorRecord`` values.
The classes below cover caller programming errors and broken configuration,
which fail fast and are never retried.

Exception Hierarchy:
    OpenFDAError (base)
    ├── ValidationError
    │   ├── MissingParameterError
    │   └── InvalidParameterError
    └── ConfigurationError
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any

from typing_extensions import Self


class ErrorSeverity(Enum):
    """Severity levels for errors."""

    WARNING = auto()  # Caller can fix the input and call again
    ERROR = auto()
    CRITICAL = auto()  # Process cannot serve requests


class ErrorCategory(Enum):
    """Categories for error classification."""

    VALIDATION = "validation"
    CONFIGURATION = "config"


@dataclass(frozen=True, slots=True)
class ErrorContext:
    """Extra context attached to an error for agent-facing output."""

    tool_name: str | None = None
    suggestion: str | None = None
    example: str | None = None


class OpenFDAError(Exception):
    """
    Base exception for all OpenFDA MCP errors.

    Provides:
    - Structured error context
    - Severity classification
    - JSON rendering for tool responses
    """

    __slots__ = ("context", "severity", "category")

    def __init__(
        self,
        message: str,
        *,
        context: ErrorContext | None = None,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        category: ErrorCategory = ErrorCategory.VALIDATION,
    ) -> None:
        super().__init__(message)
        self.context = context or ErrorContext()
        self.severity = severity
        self.category = category

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result: dict[str, Any] = {
            "type": self.category.value,
            "message": str(self),
            "severity": self.severity.name.lower(),
        }
        if self.context.tool_name:
            result["tool"] = self.context.tool_name
        if self.context.suggestion:
            result["suggestion"] = self.context.suggestion
        if self.context.example:
            result["example"] = self.context.example
        return result

    def for_tool(self, tool_name: str) -> Self:
        """Attach the name of the MCP tool that rejected the input."""
        self.context = dataclasses.replace(self.context, tool_name=tool_name)
        return self


# =============================================================================
# Validation Errors
# =============================================================================


class ValidationError(OpenFDAError):
    """Base class for validation errors."""

    def __init__(
        self,
        message: str,
        *,
        context: ErrorContext | None = None,
    ) -> None:
        super().__init__(
            message,
            context=context,
            severity=ErrorSeverity.WARNING,
            category=ErrorCategory.VALIDATION,
        )


class MissingParameterError(ValidationError):
    """Raised when a URL is built before every required parameter is set."""

    def __init__(
        self,
        missing: list[str] | tuple[str, ...],
        *,
        context: ErrorContext | None = None,
    ) -> None:
        self.missing = tuple(missing)
        ctx = context or ErrorContext()
        ctx = ErrorContext(
            tool_name=ctx.tool_name,
            suggestion=ctx.suggestion or "Set context, search and limit before calling build()",
            example=ctx.example or "OpenFDABuilder().context('label').search('openfda.brand_name:\"Advil\"').limit(1).build()",
        )
        super().__init__(
            f"Missing required parameters: {', '.join(self.missing)}",
            context=ctx,
        )


class InvalidParameterError(ValidationError):
    """Raised when a parameter value is invalid."""

    def __init__(
        self,
        param_name: str,
        value: Any,
        expected: str,
        *,
        context: ErrorContext | None = None,
    ) -> None:
        self.param_name = param_name
        ctx = context or ErrorContext()
        ctx = ErrorContext(
            tool_name=ctx.tool_name,
            suggestion=f"Expected {expected}",
            example=ctx.example,
        )
        super().__init__(
            f"Invalid parameter '{param_name}': {value!r} (expected {expected})",
            context=ctx,
        )


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(OpenFDAError):
    """Raised for configuration-related errors."""

    def __init__(
        self,
        message: str,
        *,
        context: ErrorContext | None = None,
    ) -> None:
        super().__init__(
            message,
            context=context,
            severity=ErrorSeverity.CRITICAL,
            category=ErrorCategory.CONFIGURATION,
        )
