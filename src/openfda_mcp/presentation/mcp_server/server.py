"""
OpenFDA MCP Server

A Model Context Protocol server for drug information from openFDA.

Architecture:
- instructions.py: SERVER_INSTRUCTIONS for AI agents
- tool_registry.py: Centralized tool registration
- tools/: Individual tool implementations by category
- container: DI container (dependency-injector) for service lifecycle
"""

from __future__ import annotations

import dataclasses
import logging
import sys
from contextlib import AbstractAsyncContextManager, asynccontextmanager
from typing import TYPE_CHECKING, Any, cast

from mcp.server.fastmcp import FastMCP
from mcp.server.transport_security import TransportSecuritySettings

from openfda_mcp.container import ApplicationContainer
from openfda_mcp.core.config import Settings, configure_settings, get_settings

from .instructions import SERVER_INSTRUCTIONS
from .tool_registry import register_all_mcp_tools

if TYPE_CHECKING:
    from collections.abc import AsyncIterator, Callable

    from openfda_mcp.application.lookup import DrugLookupService
    from openfda_mcp.infrastructure.openfda.client import OpenFDAClient

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# ── Module-level DI container ──────────────────────────────────────────────
_container: ApplicationContainer | None = None


def get_container() -> ApplicationContainer:
    """Get the application DI container.

    Raises:
        RuntimeError: If ``create_server()`` has not been called yet.
    """
    if _container is None:
        msg = "Container not initialized. Call create_server() first."
        raise RuntimeError(msg)
    return _container


def _make_lifespan(
    container: ApplicationContainer,
) -> Callable[[FastMCP[Any]], AbstractAsyncContextManager[ApplicationContainer]]:
    """Create a FastMCP lifespan handler bound to *container*."""

    @asynccontextmanager
    async def _lifespan(server: FastMCP[Any]) -> AsyncIterator[ApplicationContainer]:
        """Application lifecycle: startup → yield → shutdown."""
        logger.info("Lifecycle: startup, resources ready")
        try:
            yield container
        finally:
            client = cast("OpenFDAClient", container.client())
            await client.close()
            logger.info("Lifecycle: shutdown, openFDA HTTP client closed")

    return _lifespan


def create_server(
    api_key: str | None = None,
    name: str = "openfda",
    settings: Settings | None = None,
    disable_security: bool = False,
    json_response: bool = False,
    stateless_http: bool = False,
) -> FastMCP:
    """
    Create and configure the OpenFDA MCP server.

    Uses :class:`~openfda_mcp.container.ApplicationContainer` for
    dependency injection and lifecycle management.

    Args:
        api_key: openFDA API key; overrides the one in settings.
        name: Server name.
        settings: Process settings. Default: loaded from the environment.
        disable_security: Disable DNS rebinding protection (needed for remote access).
        json_response: Use JSON responses instead of SSE.
        stateless_http: Use stateless HTTP mode (no session management).

    Returns:
        Configured FastMCP server instance.
    """
    global _container
    logger.info("Initializing OpenFDA MCP Server...")

    settings = settings or get_settings()
    if api_key:
        settings = dataclasses.replace(settings, api_key=api_key)
    configure_settings(settings)

    # ── DI container ────────────────────────────────────────────────────
    _container = ApplicationContainer()
    _container.config.from_dict(dataclasses.asdict(settings))

    lookup_service = cast("DrugLookupService", _container.lookup_service())
    logger.info(f"openFDA API key: {'set' if settings.api_key else 'not set'}")

    # ── Transport security ──────────────────────────────────────────────
    if disable_security:
        transport_security = TransportSecuritySettings(enable_dns_rebinding_protection=False)
        logger.info("DNS rebinding protection disabled for remote access")
    else:
        transport_security = None

    # ── Create MCP server with lifespan ─────────────────────────────────
    mcp = FastMCP(
        name,
        instructions=SERVER_INSTRUCTIONS,
        transport_security=transport_security,
        json_response=json_response,
        stateless_http=stateless_http,
        lifespan=_make_lifespan(_container),
    )

    # ── Register all tools via centralized registry ─────────────────────
    stats = register_all_mcp_tools(mcp=mcp, lookup_service=lookup_service)
    logger.info("Tool registration complete: %s", stats)

    logger.info("OpenFDA MCP Server initialized successfully")
    return mcp


def main() -> None:
    """Run the MCP server over stdio."""
    settings = get_settings()

    # Logs go to stderr; stdout carries the MCP stream
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format=LOG_FORMAT,
        stream=sys.stderr,
    )

    # API key: CLI arg → env var / .env
    api_key = sys.argv[1].strip() if len(sys.argv) > 1 else None

    server = create_server(api_key=api_key or None, settings=settings)
    logger.info("OpenFDA MCP Server running on stdio")
    server.run()


if __name__ == "__main__":
    main()
