"""
Application DI Container (dependency-injector).

Centralizes service creation and lifecycle management.

Usage::

    from openfda_mcp.container import ApplicationContainer

    container = ApplicationContainer()
    container.config.from_dict({
        "api_key": "MY_KEY",
        "max_retries": 2,
    })

    service = container.lookup_service()
    url = container.builder().context("label").search('openfda.brand_name:"Advil"').limit().build()

    # In tests, override any provider:
    container.client.override(providers.Object(mock_client))
"""

from __future__ import annotations

import logging

from dependency_injector import containers, providers

from openfda_mcp.core.config import DEFAULT_BASE_URL, DEFAULT_USER_AGENT
from openfda_mcp.domain.entities.request import RequestConfig

logger = logging.getLogger(__name__)


def _create_request_config(
    max_retries: int | None,
    retry_delay_ms: int | None,
    timeout_ms: int | None,
) -> RequestConfig:
    """Default request config; unset values keep the built-in defaults."""
    return RequestConfig().with_overrides(
        max_retries=max_retries,
        retry_delay_ms=retry_delay_ms,
        timeout_ms=timeout_ms,
    )


def _create_client(user_agent: str | None, request_config: RequestConfig) -> object:
    """Lazy factory for OpenFDAClient (avoids top-level httpx import)."""
    from openfda_mcp.infrastructure.openfda.client import OpenFDAClient

    return OpenFDAClient(user_agent=user_agent or DEFAULT_USER_AGENT, config=request_config)


def _create_builder(api_key: str | None, base_url: str | None) -> object:
    """New OpenFDABuilder per call; a ``None`` key falls back to process settings."""
    from openfda_mcp.infrastructure.openfda.builder import OpenFDABuilder

    return OpenFDABuilder(api_key=api_key or None, base_url=base_url or DEFAULT_BASE_URL)


def _create_lookup_service(client: object, builder_factory: object, config: RequestConfig) -> object:
    """Lazy factory for DrugLookupService."""
    from openfda_mcp.application.lookup import DrugLookupService

    return DrugLookupService(client=client, builder_factory=builder_factory, config=config)


class ApplicationContainer(containers.DeclarativeContainer):
    """Central DI container for the OpenFDA MCP application.

    Manages creation and lifecycle of all core services:
    - ``request_config``: default retry/timeout settings
    - ``client``: shared openFDA request client
    - ``builder``: a fresh URL builder on every call
    - ``lookup_service``: drug lookup use cases used by the tools
    """

    config = providers.Configuration()

    request_config = providers.Singleton(
        _create_request_config,
        max_retries=config.max_retries,
        retry_delay_ms=config.retry_delay_ms,
        timeout_ms=config.timeout_ms,
    )

    client = providers.Singleton(
        _create_client,
        user_agent=config.user_agent,
        request_config=request_config,
    )

    builder = providers.Factory(
        _create_builder,
        api_key=config.api_key,
        base_url=config.base_url,
    )

    lookup_service = providers.Singleton(
        _create_lookup_service,
        client=client,
        builder_factory=builder.provider,
        config=request_config,
    )


__all__ = ["ApplicationContainer"]
