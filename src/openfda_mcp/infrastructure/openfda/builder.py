"""
openFDA URL builder.

Usage:
    url = (
        OpenFDABuilder()
        .context("label")
        .search('openfda.brand_name:"Advil"')
        .limit(1)
        .build()
    )

The search expression is passed through verbatim: callers are responsible
for quoting field:value pairs. ``build()`` fails instead of producing a URL
without context, search or limit.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from openfda_mcp.core.config import DEFAULT_BASE_URL, get_settings
from openfda_mcp.core.exceptions import InvalidParameterError, MissingParameterError


class Context(str, Enum):
    """openFDA drug endpoints."""

    LABEL = "label"  # Drug labeling
    NDC = "ndc"  # National Drug Code Directory
    EVENT = "event"  # Adverse event reports


_REQUIRED = ("context", "search", "limit")


class OpenFDABuilder:
    """
    Single-use accumulator for one openFDA request URL.

    The API key can be injected; otherwise it is read from the process-wide
    settings when ``build()`` runs.
    """

    def __init__(self, api_key: str | None = None, base_url: str = DEFAULT_BASE_URL) -> None:
        self._base_url = base_url.rstrip("/")
        self._api_key = api_key
        self._params: dict[str, Any] = {}

    def context(self, context: Context | str) -> OpenFDABuilder:
        self._params["context"] = context
        return self

    def search(self, query: str) -> OpenFDABuilder:
        self._params["search"] = query
        return self

    def limit(self, max_results: int = 1) -> OpenFDABuilder:
        self._params["limit"] = max_results
        return self

    def _resolve_api_key(self) -> str:
        if self._api_key is not None:
            return self._api_key
        return get_settings().api_key or ""

    def build(self) -> str:
        """
        Assemble the request URL.

        Raises:
            MissingParameterError: context, search or limit was never set
            InvalidParameterError: context is not a known endpoint, or limit
                is not a positive integer
        """
        missing = [name for name in _REQUIRED if self._params.get(name) in (None, "")]
        if missing:
            raise MissingParameterError(missing)

        raw_context = self._params["context"]
        try:
            context = Context(raw_context)
        except ValueError as e:
            expected = "one of " + ", ".join(c.value for c in Context)
            raise InvalidParameterError("context", raw_context, expected) from e

        limit = self._params["limit"]
        if isinstance(limit, bool) or not isinstance(limit, int) or limit <= 0:
            raise InvalidParameterError("limit", limit, "a positive integer")

        search = self._params["search"]
        api_key = self._resolve_api_key()
        return f"{self._base_url}/{context.value}.json?api_key={api_key}&search={search}&limit={limit}"


__all__ = ["Context", "OpenFDABuilder"]
