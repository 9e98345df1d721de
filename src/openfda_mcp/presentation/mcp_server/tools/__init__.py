"""
OpenFDA MCP Tools

Drug labels (3):
- get_drug_by_name, get_drug_by_generic_name, get_drug_safety_info

NDC (3):
- normalize_ndc_code, get_drug_by_ndc, get_drug_label_by_ndc

Adverse events (1):
- get_drug_adverse_events

Each ``register_*_tools(mcp, service)`` returns the names it registered.
Servers register everything through ``tool_registry.register_all_mcp_tools``.
"""

from .adverse_events import register_adverse_event_tools
from .labels import register_label_tools
from .ndc import register_ndc_tools

__all__ = [
    "register_adverse_event_tools",
    "register_label_tools",
    "register_ndc_tools",
]
