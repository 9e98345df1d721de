#!/usr/bin/env python3
"""
OpenFDA MCP Server - HTTP Mode

This script runs the OpenFDA MCP server in HTTP mode (SSE or streamable-http),
allowing remote clients from other machines to connect.

Usage:
    # Run with SSE transport (default, more compatible)
    python run_server.py --transport sse --port 8765

    # Run with streamable-http transport
    python run_server.py --transport streamable-http --port 8765

    # Run with an explicit API key
    python run_server.py --api-key YOUR_API_KEY

Environment Variables:
    OPENFDA_API_KEY: openFDA API key (also read from .env)
    MCP_PORT: Server port (default: 8765)
    MCP_HOST: Server host (default: 0.0.0.0)
"""

import argparse
import logging
import os

import uvicorn

from openfda_mcp.core.config import get_settings
from openfda_mcp.presentation.mcp_server.http_app import TRANSPORTS, build_http_app
from openfda_mcp.presentation.mcp_server.server import LOG_FORMAT, create_server

logger = logging.getLogger(__name__)


def main():
    settings = get_settings()
    logging.basicConfig(level=getattr(logging, settings.log_level, logging.INFO), format=LOG_FORMAT)

    parser = argparse.ArgumentParser(description="Run OpenFDA MCP Server in HTTP mode")
    parser.add_argument(
        "--api-key",
        default=None,
        help="openFDA API key (default: OPENFDA_API_KEY)",
    )
    parser.add_argument(
        "--transport",
        choices=TRANSPORTS,
        default="sse",
        help="Transport protocol (default: sse)",
    )
    parser.add_argument(
        "--host",
        default=os.environ.get("MCP_HOST", "0.0.0.0"),
        help="Server host (default: 0.0.0.0)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=int(os.environ.get("MCP_PORT", "8765")),
        help="Server port (default: 8765)",
    )
    parser.add_argument(
        "--enable-security",
        action="store_true",
        help="Keep DNS rebinding protection on (off by default for remote access)",
    )

    args = parser.parse_args()

    logger.info("Creating OpenFDA MCP Server...")
    logger.info(f"  API Key: {'Set' if args.api_key or settings.api_key else 'Not set'}")
    logger.info(f"  Transport: {args.transport}")
    logger.info(f"  Host: {args.host}")
    logger.info(f"  Port: {args.port}")

    server = create_server(
        api_key=args.api_key,
        settings=settings,
        disable_security=not args.enable_security,
    )
    app = build_http_app(server, transport=args.transport, port=args.port)

    logger.info(f"Starting server at http://{args.host}:{args.port}")
    uvicorn.run(
        app,
        host=args.host,
        port=args.port,
        proxy_headers=True,
        forwarded_allow_ips="*",
        server_header=False,
    )


if __name__ == "__main__":
    main()
