"""
Drug lookup use cases.

Each lookup turns tool arguments into an openFDA search expression, builds
the URL with a fresh builder and runs it through the request client. The
raw ``RequestResult`` is returned; shaping it for display is the tool
layer's job.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from urllib.parse import quote

from openfda_mcp.infrastructure.openfda.builder import Context, OpenFDABuilder

if TYPE_CHECKING:
    from collections.abc import Callable

    from openfda_mcp.domain.entities.ndc import NDCResult
    from openfda_mcp.domain.entities.request import RequestConfig, RequestResult
    from openfda_mcp.infrastructure.openfda.client import OpenFDAClient

logger = logging.getLogger(__name__)


def quote_term(value: str) -> str:
    """
    Wrap a user value as a percent-encoded openFDA phrase.

    Embedded double quotes are dropped. Everything outside the unreserved set
    is escaped, so ``&``, ``#`` and ``+`` stay inside the search parameter.
    """
    return '"' + quote(value.replace('"', "").strip(), safe="") + '"'


def field_query(field: str, value: str) -> str:
    """``field:"value"`` search expression; empty when ``value`` is blank so the builder rejects it."""
    if not value.replace('"', "").strip():
        return ""
    return f"{field}:{quote_term(value)}"


class DrugLookupService:
    """
    Application service behind the MCP tools.

    Args:
        client: Request client shared by all lookups
        builder_factory: Returns a new ``OpenFDABuilder`` per request
        config: Retry/timeout settings passed to every ``execute()``
    """

    def __init__(
        self,
        client: OpenFDAClient,
        builder_factory: Callable[[], OpenFDABuilder] = OpenFDABuilder,
        config: RequestConfig | None = None,
    ) -> None:
        self._client = client
        self._builder_factory = builder_factory
        self._config = config

    async def fetch(self, context: Context | str, search: str, limit: int = 1) -> RequestResult:
        """
        Build and execute one openFDA request.

        Raises:
            MissingParameterError: search is empty
            InvalidParameterError: context or limit is invalid
        """
        url = self._builder_factory().context(context).search(search).limit(limit).build()
        return await self._client.execute(url, self._config)

    async def label_by_brand_name(self, brand_name: str, limit: int = 1) -> RequestResult:
        return await self.fetch(Context.LABEL, field_query("openfda.brand_name", brand_name), limit)

    async def label_by_generic_name(self, generic_name: str, limit: int = 1) -> RequestResult:
        return await self.fetch(Context.LABEL, field_query("openfda.generic_name", generic_name), limit)

    async def label_by_ndc(self, ndc: NDCResult, limit: int = 1) -> RequestResult:
        """Label lookup by product or package NDC (package wins when present)."""
        if ndc.package_ndc:
            search = field_query("openfda.package_ndc", ndc.package_ndc)
        else:
            search = field_query("openfda.product_ndc", ndc.product_ndc)
        return await self.fetch(Context.LABEL, search, limit)

    async def ndc_directory(self, ndc: NDCResult, limit: int = 1) -> RequestResult:
        """NDC Directory lookup by product or package NDC."""
        if ndc.package_ndc:
            search = field_query("packaging.package_ndc", ndc.package_ndc)
        else:
            search = field_query("product_ndc", ndc.product_ndc)
        logger.debug(f"NDC directory search: {search}")
        return await self.fetch(Context.NDC, search, limit)

    async def adverse_events(self, drug_name: str, limit: int = 10) -> RequestResult:
        return await self.fetch(Context.EVENT, field_query("patient.drug.medicinalproduct", drug_name), limit)


__all__ = ["DrugLookupService", "field_query", "quote_term"]
