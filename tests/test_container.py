"""
Tests for ApplicationContainer (dependency-injector DI container).
"""

from unittest.mock import MagicMock

from dependency_injector import providers

from openfda_mcp.application.lookup import DrugLookupService
from openfda_mcp.container import ApplicationContainer
from openfda_mcp.core.config import Settings, configure_settings
from openfda_mcp.domain.entities.request import RequestConfig
from openfda_mcp.infrastructure.openfda.builder import OpenFDABuilder
from openfda_mcp.infrastructure.openfda.client import OpenFDAClient


def _container(**config) -> ApplicationContainer:
    container = ApplicationContainer()
    container.config.from_dict(config)
    return container


class TestRequestConfigProvider:
    def test_defaults_when_unset(self):
        assert _container().request_config() == RequestConfig()

    def test_from_config(self):
        container = _container(max_retries=1, retry_delay_ms=50, timeout_ms=2000)
        assert container.request_config() == RequestConfig(max_retries=1, retry_delay_ms=50, timeout_ms=2000)

    def test_singleton(self):
        container = _container()
        assert container.request_config() is container.request_config()


class TestClientProvider:
    async def test_client_is_singleton(self):
        container = _container(user_agent="agent/1")
        client = container.client()
        try:
            assert isinstance(client, OpenFDAClient)
            assert client is container.client()
            assert client._headers["User-Agent"] == "agent/1"
        finally:
            await client.close()

    async def test_client_gets_request_config(self):
        container = _container(max_retries=0)
        client = container.client()
        try:
            assert client.default_config.max_retries == 0
        finally:
            await client.close()


class TestBuilderProvider:
    def test_new_builder_each_call(self):
        container = _container(api_key="k")
        first = container.builder()
        assert isinstance(first, OpenFDABuilder)
        assert first is not container.builder()

    def test_injected_key_and_base_url(self):
        container = _container(api_key="INJECTED", base_url="http://localhost/drug")
        url = container.builder().context("label").search("x").limit().build()
        assert url == "http://localhost/drug/label.json?api_key=INJECTED&search=x&limit=1"

    def test_missing_key_falls_back_to_settings(self):
        configure_settings(Settings(api_key="SETTINGS_KEY"))
        container = _container(api_key=None)
        url = container.builder().context("label").search("x").limit().build()
        assert "api_key=SETTINGS_KEY&" in url


class TestLookupServiceProvider:
    def test_wired_with_overridden_client(self):
        container = _container(api_key="k", max_retries=2)
        mock_client = MagicMock()
        container.client.override(providers.Object(mock_client))

        service = container.lookup_service()

        assert isinstance(service, DrugLookupService)
        assert service._client is mock_client
        assert service._config == RequestConfig(max_retries=2)
        assert isinstance(service._builder_factory(), OpenFDABuilder)
        assert service is container.lookup_service()
