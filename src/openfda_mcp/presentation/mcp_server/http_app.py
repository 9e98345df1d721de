"""
HTTP transport wrapper (SSE or streamable-http) with info and health routes.

Used by ``run_server.py`` so remote clients can connect over HTTP instead
of stdio.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from starlette.applications import Starlette
from starlette.responses import JSONResponse
from starlette.routing import Mount, Route

from openfda_mcp import __version__

if TYPE_CHECKING:
    from mcp.server.fastmcp import FastMCP
    from starlette.requests import Request

logger = logging.getLogger(__name__)

TRANSPORTS = ("sse", "streamable-http")


def build_http_app(server: FastMCP, transport: str = "sse", port: int = 8765) -> Starlette:
    """
    Wrap the MCP server's HTTP app with ``/`` (info) and ``/health`` routes.

    Raises:
        ValueError: Unknown transport
    """
    if transport == "sse":
        mcp_app = server.sse_app()
        mcp_endpoints = {"sse": "/sse", "messages": "/messages"}
    elif transport == "streamable-http":
        mcp_app = server.streamable_http_app()
        mcp_endpoints = {"streamable_http": "/mcp"}
    else:
        msg = f"Unknown transport {transport!r}, expected one of {', '.join(TRANSPORTS)}"
        raise ValueError(msg)

    async def health(request: Request) -> JSONResponse:
        return JSONResponse({"status": "ok", "service": "openfda-mcp"})

    async def info(request: Request) -> JSONResponse:
        return JSONResponse(
            {
                "service": "OpenFDA MCP Server",
                "version": __version__,
                "transport": transport,
                "endpoints": {
                    "mcp": mcp_endpoints,
                    "utility": {"health": "/health"},
                },
                "usage": {
                    "vscode_mcp_json": {
                        "type": "sse" if transport == "sse" else "http",
                        "url": f"http://YOUR_SERVER_IP:{port}{next(iter(mcp_endpoints.values()))}",
                    }
                },
            }
        )

    routes = [
        Route("/", info),
        Route("/health", health),
        Mount("/", app=mcp_app),
    ]
    logger.info(f"HTTP app ready ({transport}): {mcp_endpoints}")
    return Starlette(routes=routes)


__all__ = ["TRANSPORTS", "build_http_app"]
