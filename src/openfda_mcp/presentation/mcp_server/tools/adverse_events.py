"""
Adverse Event Tools - FDA Adverse Event Reporting System (FAERS)

Tools:
- get_drug_adverse_events: recent adverse event reports mentioning a drug
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from openfda_mcp.core.exceptions import ValidationError

from .formatting import (
    clamp_limit,
    error_response,
    format_adverse_event,
    results_of,
    success_response,
    summarize_reactions,
    total_of,
)

if TYPE_CHECKING:
    from mcp.server.fastmcp import FastMCP

    from openfda_mcp.application.lookup import DrugLookupService

logger = logging.getLogger(__name__)


def register_adverse_event_tools(mcp: FastMCP, service: DrugLookupService) -> list[str]:
    """Register adverse event tools and return their names."""

    @mcp.tool()
    async def get_drug_adverse_events(drug_name: str, limit: int = 10) -> str:
        """
        Get adverse event reports for a drug.

        Reports come from FAERS and are not proof that the drug caused the
        reaction.

        Args:
            drug_name: Drug name as reported (brand or generic, e.g., "aspirin")
            limit: Maximum reports to return (1-100, default 10)

        Returns:
            JSON with report summaries (reactions, co-reported drugs,
            seriousness) and the most frequent reactions among them

        Example:
            get_drug_adverse_events("aspirin", limit=20)
        """
        query = {"drug_name": drug_name, "limit": limit}
        try:
            result = await service.adverse_events(drug_name, limit=clamp_limit(limit))
        except ValidationError as e:
            return error_response(query, e.for_tool("get_drug_adverse_events"))

        if not result.ok:
            return error_response(query, result.error)

        reports = [format_adverse_event(r) for r in results_of(result)]
        return success_response(
            query,
            reports,
            total=total_of(result),
            top_reactions=summarize_reactions(reports),
        )

    logger.info("Registered adverse event tools (1 tool)")
    return [get_drug_adverse_events.__name__]


__all__ = ["register_adverse_event_tools"]
