"""
NDC Tools - National Drug Code lookups

Tools:
- normalize_ndc_code: parse an NDC into product/package forms (no API call)
- get_drug_by_ndc: NDC Directory record for a product or package NDC
- get_drug_label_by_ndc: drug label for a product or package NDC

Accepted NDC layouts: 12345-1234, 12345-1234-01, 123451234, 12345123401
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from openfda_mcp.core.exceptions import ErrorContext, InvalidParameterError, ValidationError
from openfda_mcp.domain.entities.ndc import normalize_ndc

from .formatting import (
    clamp_limit,
    error_response,
    format_label,
    format_ndc_record,
    results_of,
    success_response,
    to_json,
)

if TYPE_CHECKING:
    from mcp.server.fastmcp import FastMCP

    from openfda_mcp.application.lookup import DrugLookupService

logger = logging.getLogger(__name__)

NDC_EXPECTED = "an NDC like 12345-1234, 12345-1234-01, 123451234 or 12345123401"
NDC_EXAMPLE = "12345-1234-01"


def _invalid_ndc(ndc: str, tool_name: str) -> InvalidParameterError:
    return InvalidParameterError("ndc", ndc, NDC_EXPECTED, context=ErrorContext(tool_name=tool_name, example=NDC_EXAMPLE))


def register_ndc_tools(mcp: FastMCP, service: DrugLookupService) -> list[str]:
    """Register NDC tools and return their names."""

    @mcp.tool()
    def normalize_ndc_code(ndc: str) -> str:
        """
        Normalize a National Drug Code without calling openFDA.

        Args:
            ndc: NDC in dashed or undashed form

        Returns:
            JSON with productNDC, packageNDC (null for product codes) and isValid

        Example:
            normalize_ndc_code("12345123401") → productNDC 12345-1234, packageNDC 12345-1234-01
        """
        return to_json(normalize_ndc(ndc).to_dict())

    @mcp.tool()
    async def get_drug_by_ndc(ndc: str, limit: int = 1) -> str:
        """
        Look up a product in the FDA NDC Directory.

        Package-level codes (11 digits or three segments) match on package
        NDC; product-level codes match on product NDC.

        Args:
            ndc: Product or package NDC
            limit: Maximum records to return (1-100, default 1)

        Returns:
            JSON with product NDC, names, labeler, dosage form, route,
            marketing category, active ingredients and packaging

        Example:
            get_drug_by_ndc("00573-0164")
            get_drug_by_ndc("12345-1234-01")
        """
        normalized = normalize_ndc(ndc)
        query = {"ndc": ndc, "normalized": normalized.to_dict(), "limit": limit}
        if not normalized.is_valid:
            return error_response(query, _invalid_ndc(ndc, "get_drug_by_ndc"))

        try:
            result = await service.ndc_directory(normalized, limit=clamp_limit(limit))
        except ValidationError as e:
            return error_response(query, e.for_tool("get_drug_by_ndc"))

        if not result.ok:
            return error_response(query, result.error)
        return success_response(query, [format_ndc_record(r) for r in results_of(result)])

    @mcp.tool()
    async def get_drug_label_by_ndc(ndc: str) -> str:
        """
        Get the drug label for a product or package NDC.

        Args:
            ndc: Product or package NDC

        Returns:
            JSON with the label identity block and usage/warning sections

        Example:
            get_drug_label_by_ndc("50580-0600")
        """
        normalized = normalize_ndc(ndc)
        query = {"ndc": ndc, "normalized": normalized.to_dict()}
        if not normalized.is_valid:
            return error_response(query, _invalid_ndc(ndc, "get_drug_label_by_ndc"))

        try:
            result = await service.label_by_ndc(normalized, limit=1)
        except ValidationError as e:
            return error_response(query, e.for_tool("get_drug_label_by_ndc"))

        if not result.ok:
            return error_response(query, result.error)
        return success_response(query, [format_label(r) for r in results_of(result)])

    tools = [normalize_ndc_code, get_drug_by_ndc, get_drug_label_by_ndc]
    logger.info(f"Registered NDC tools ({len(tools)} tools)")
    return [tool.__name__ for tool in tools]


__all__ = ["NDC_EXAMPLE", "NDC_EXPECTED", "register_ndc_tools"]
