"""
Drug Label Tools - openFDA drug labeling lookups

Tools:
- get_drug_by_name: label lookup by brand name
- get_drug_by_generic_name: label lookup by generic name
- get_drug_safety_info: safety sections of a label (warnings, interactions, ...)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from openfda_mcp.core.exceptions import ValidationError

from .formatting import (
    LABEL_SAFETY_FIELDS,
    clamp_limit,
    error_response,
    format_label,
    results_of,
    success_response,
    total_of,
)

if TYPE_CHECKING:
    from mcp.server.fastmcp import FastMCP

    from openfda_mcp.application.lookup import DrugLookupService

logger = logging.getLogger(__name__)


def register_label_tools(mcp: FastMCP, service: DrugLookupService) -> list[str]:
    """Register drug label tools and return their names."""

    @mcp.tool()
    async def get_drug_by_name(drug_name: str) -> str:
        """
        Get drug label information by brand name.

        Returns brand name, generic name, manufacturer, product NDC, product
        type, route, substance name, indications and usage, warnings, do not
        use, ask doctor, ask doctor or pharmacist, stop use, and pregnancy or
        breast feeding sections.

        Args:
            drug_name: Brand name of the drug (e.g., "Advil", "Tylenol")

        Returns:
            JSON with the first matching label

        Example:
            get_drug_by_name("Advil")
        """
        query = {"brand_name": drug_name}
        try:
            result = await service.label_by_brand_name(drug_name, limit=1)
        except ValidationError as e:
            return error_response(query, e.for_tool("get_drug_by_name"))

        if not result.ok:
            logger.info(f"get_drug_by_name failed for {drug_name!r}: {result.error.message}")
            return error_response(query, result.error)
        return success_response(query, [format_label(r) for r in results_of(result)])

    @mcp.tool()
    async def get_drug_by_generic_name(generic_name: str, limit: int = 5) -> str:
        """
        Get drug labels by generic (non-proprietary) name.

        Several manufacturers usually market the same generic, so more than
        one label can be returned.

        Args:
            generic_name: Generic name (e.g., "ibuprofen", "metformin")
            limit: Maximum labels to return (1-100, default 5)

        Returns:
            JSON with matching labels and the total number of matches

        Example:
            get_drug_by_generic_name("ibuprofen", limit=3)
        """
        query = {"generic_name": generic_name, "limit": limit}
        try:
            result = await service.label_by_generic_name(generic_name, limit=clamp_limit(limit))
        except ValidationError as e:
            return error_response(query, e.for_tool("get_drug_by_generic_name"))

        if not result.ok:
            return error_response(query, result.error)
        labels = [format_label(r) for r in results_of(result)]
        return success_response(query, labels, total=total_of(result))

    @mcp.tool()
    async def get_drug_safety_info(drug_name: str) -> str:
        """
        Get safety information from a drug label by brand name.

        Returns boxed warning, warnings, contraindications, drug
        interactions, precautions, adverse reactions and overdosage sections
        when the label has them.

        Args:
            drug_name: Brand name of the drug (e.g., "Coumadin")

        Returns:
            JSON with the safety sections of the first matching label

        Example:
            get_drug_safety_info("Coumadin")
        """
        query = {"brand_name": drug_name}
        try:
            result = await service.label_by_brand_name(drug_name, limit=1)
        except ValidationError as e:
            return error_response(query, e.for_tool("get_drug_safety_info"))

        if not result.ok:
            return error_response(query, result.error)
        labels = [format_label(r, fields=LABEL_SAFETY_FIELDS) for r in results_of(result)]
        return success_response(query, labels)

    tools = [get_drug_by_name, get_drug_by_generic_name, get_drug_safety_info]
    logger.info(f"Registered drug label tools ({len(tools)} tools)")
    return [tool.__name__ for tool in tools]


__all__ = ["register_label_tools"]
