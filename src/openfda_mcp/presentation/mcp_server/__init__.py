"""
OpenFDA MCP Server

This module provides a Model Context Protocol (MCP) server for openFDA
drug information.

Usage as standalone server:
    python -m openfda_mcp.presentation.mcp_server

Or in mcp.json:
    {
        "servers": {
            "openfda": {
                "type": "stdio",
                "command": "openfda-mcp",
                "env": {"OPENFDA_API_KEY": "..."}
            }
        }
    }

Usage for integration:
    from openfda_mcp.presentation.mcp_server import create_server, register_all_mcp_tools

    # Option 1: Create standalone server
    server = create_server(api_key="...")
    server.run()

    # Option 2: Register tools to existing server
    from openfda_mcp.container import ApplicationContainer
    container = ApplicationContainer()
    register_all_mcp_tools(your_mcp_server, container.lookup_service())
"""

from __future__ import annotations

from .server import create_server, main
from .tool_registry import register_all_mcp_tools

__all__ = ["create_server", "main", "register_all_mcp_tools"]
