"""
Tool Registry - central place for MCP tool registration

Usage:
    from .tool_registry import register_all_mcp_tools, list_registered_tools

    # Register every tool
    register_all_mcp_tools(mcp, lookup_service)

    # Query registered tools
    tools = list_registered_tools()
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mcp.server.fastmcp import FastMCP

    from openfda_mcp.application.lookup import DrugLookupService

logger = logging.getLogger(__name__)


# ============================================================================
# Tool Categories
# ============================================================================

TOOL_CATEGORIES: dict[str, dict[str, object]] = {
    "label": {
        "name": "Drug labels",
        "description": "Structured product labeling by brand or generic name",
        "tools": ["get_drug_by_name", "get_drug_by_generic_name", "get_drug_safety_info"],
    },
    "ndc": {
        "name": "National Drug Codes",
        "description": "NDC normalization, NDC Directory and label by NDC",
        "tools": ["normalize_ndc_code", "get_drug_by_ndc", "get_drug_label_by_ndc"],
    },
    "event": {
        "name": "Adverse events",
        "description": "FAERS adverse event reports",
        "tools": ["get_drug_adverse_events"],
    },
}


# ============================================================================
# Registration Functions
# ============================================================================


def register_all_mcp_tools(mcp: FastMCP, lookup_service: DrugLookupService) -> dict[str, int]:
    """
    Register all MCP tools.

    Args:
        mcp: FastMCP server instance
        lookup_service: DrugLookupService instance

    Returns:
        Dict with category ids and tool counts
    """
    from .tools import register_adverse_event_tools, register_label_tools, register_ndc_tools

    registrars = {
        "label": register_label_tools,
        "ndc": register_ndc_tools,
        "event": register_adverse_event_tools,
    }

    stats: dict[str, int] = {}
    for cat_id, register in registrars.items():
        logger.info(f"Registering {TOOL_CATEGORIES[cat_id]['name']} tools...")
        names = register(mcp, lookup_service)
        if set(names) != set(TOOL_CATEGORIES[cat_id]["tools"]):
            logger.warning(f"Category {cat_id!r} registered {names}, expected {TOOL_CATEGORIES[cat_id]['tools']}")
        stats[cat_id] = len(names)

    logger.info(f"Total registered: {sum(stats.values())} tools")
    return stats


def list_registered_tools() -> dict[str, list[str]]:
    """
    List all defined tools grouped by category.

    Returns:
        Dict with category ids as keys and tool lists as values
    """
    return {cat_id: list(cat_info["tools"]) for cat_id, cat_info in TOOL_CATEGORIES.items()}


def get_tool_info(tool_name: str) -> dict[str, str] | None:
    """
    Look up the category of a tool.

    Args:
        tool_name: Tool name

    Returns:
        Dict with category details, or None if not found
    """
    for cat_id, cat_info in TOOL_CATEGORIES.items():
        if tool_name in cat_info["tools"]:
            return {
                "name": tool_name,
                "category": str(cat_info["name"]),
                "category_id": cat_id,
                "category_description": str(cat_info["description"]),
            }
    return None


__all__ = [
    "TOOL_CATEGORIES",
    "get_tool_info",
    "list_registered_tools",
    "register_all_mcp_tools",
]
