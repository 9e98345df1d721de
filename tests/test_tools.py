"""Tests for the openFDA MCP tools: label, NDC and adverse event lookups."""

import json
from unittest.mock import AsyncMock, MagicMock

import pytest

from openfda_mcp.core.exceptions import MissingParameterError
from openfda_mcp.domain.entities.request import ErrorRecord, ErrorType, RequestResult
from openfda_mcp.presentation.mcp_server.tool_registry import register_all_mcp_tools
from openfda_mcp.presentation.mcp_server.tools.formatting import (
    clamp_limit,
    format_adverse_event,
    format_label,
    summarize_reactions,
)


def _capture_tools(mcp, service):
    tools = {}
    mcp.tool = lambda: lambda func: (tools.__setitem__(func.__name__, func), func)[1]
    register_all_mcp_tools(mcp, service)
    return tools


@pytest.fixture
def service():
    svc = MagicMock()
    svc.label_by_brand_name = AsyncMock()
    svc.label_by_generic_name = AsyncMock()
    svc.label_by_ndc = AsyncMock()
    svc.ndc_directory = AsyncMock()
    svc.adverse_events = AsyncMock()
    return svc


@pytest.fixture
def tools(service):
    return _capture_tools(MagicMock(), service)


NOT_FOUND = RequestResult.failure(
    ErrorRecord(
        type=ErrorType.HTTP,
        message="Not Found: No results found for the specified query",
        status=404,
    )
)


class TestRegistration:
    def test_all_tools_registered(self, tools):
        assert set(tools) == {
            "get_drug_by_name",
            "get_drug_by_generic_name",
            "get_drug_safety_info",
            "normalize_ndc_code",
            "get_drug_by_ndc",
            "get_drug_label_by_ndc",
            "get_drug_adverse_events",
        }


# ============================================================
# get_drug_by_name
# ============================================================


class TestGetDrugByName:
    async def test_success(self, tools, service, label_payload):
        service.label_by_brand_name.return_value = RequestResult.success(label_payload)

        result = json.loads(await tools["get_drug_by_name"]("Advil"))

        service.label_by_brand_name.assert_awaited_once_with("Advil", limit=1)
        assert result["success"] is True
        assert result["query"] == {"brand_name": "Advil"}
        assert result["count"] == 1
        label = result["results"][0]
        assert label["brand_name"] == ["Advil"]
        assert label["generic_name"] == ["IBUPROFEN"]
        assert label["product_ndc"] == ["0573-0164"]
        assert label["indications_and_usage"] == ["Temporarily relieves minor aches and pains"]
        assert label["effective_time"] == "20240115"
        assert "boxed_warning" not in label

    async def test_not_found(self, tools, service):
        service.label_by_brand_name.return_value = NOT_FOUND

        result = json.loads(await tools["get_drug_by_name"]("Nonexistent"))

        assert result["success"] is False
        assert result["error"]["type"] == "http"
        assert result["error"]["status"] == 404

    async def test_blank_name(self, tools, service):
        service.label_by_brand_name.side_effect = MissingParameterError(["search"])

        result = json.loads(await tools["get_drug_by_name"](""))

        assert result["success"] is False
        assert result["error"]["type"] == "validation"
        assert "search" in result["error"]["message"]
        assert result["error"]["tool"] == "get_drug_by_name"


# ============================================================
# get_drug_by_generic_name
# ============================================================


class TestGetDrugByGenericName:
    async def test_success_with_total(self, tools, service, label_payload):
        service.label_by_generic_name.return_value = RequestResult.success(label_payload)

        result = json.loads(await tools["get_drug_by_generic_name"]("ibuprofen", limit=3))

        service.label_by_generic_name.assert_awaited_once_with("ibuprofen", limit=3)
        assert result["total"] == 12
        assert result["count"] == 1

    async def test_limit_clamped(self, tools, service, label_payload):
        service.label_by_generic_name.return_value = RequestResult.success(label_payload)

        await tools["get_drug_by_generic_name"]("ibuprofen", limit=1000)

        service.label_by_generic_name.assert_awaited_once_with("ibuprofen", limit=100)

    async def test_upstream_error(self, tools, service):
        service.label_by_generic_name.return_value = RequestResult.failure(
            ErrorRecord(type=ErrorType.TIMEOUT, message="Request timeout after 30000ms"), attempts=4
        )

        result = json.loads(await tools["get_drug_by_generic_name"]("ibuprofen"))

        assert result["error"] == {"type": "timeout", "message": "Request timeout after 30000ms"}


# ============================================================
# get_drug_safety_info
# ============================================================


class TestGetDrugSafetyInfo:
    async def test_safety_sections(self, tools, service, label_payload):
        service.label_by_brand_name.return_value = RequestResult.success(label_payload)

        result = json.loads(await tools["get_drug_safety_info"]("Advil"))

        label = result["results"][0]
        assert label["boxed_warning"] == ["Cardiovascular thrombotic events"]
        assert label["contraindications"] == ["Known hypersensitivity to ibuprofen"]
        assert label["drug_interactions"] == ["Ask a doctor before use if you take aspirin"]
        assert "indications_and_usage" not in label

    async def test_error(self, tools, service):
        service.label_by_brand_name.return_value = NOT_FOUND

        result = json.loads(await tools["get_drug_safety_info"]("Nonexistent"))

        assert result["success"] is False


# ============================================================
# NDC tools
# ============================================================


class TestNormalizeNdcCode:
    def test_package(self, tools):
        assert json.loads(tools["normalize_ndc_code"]("12345123401")) == {
            "productNDC": "12345-1234",
            "packageNDC": "12345-1234-01",
            "isValid": True,
        }

    def test_invalid(self, tools):
        assert json.loads(tools["normalize_ndc_code"]("abc"))["isValid"] is False


class TestGetDrugByNdc:
    async def test_success(self, tools, service, ndc_payload):
        service.ndc_directory.return_value = RequestResult.success(ndc_payload)

        result = json.loads(await tools["get_drug_by_ndc"]("50580-0600-01"))

        normalized = service.ndc_directory.await_args.args[0]
        assert normalized.package_ndc == "50580-0600-01"
        assert result["success"] is True
        assert result["query"]["normalized"]["productNDC"] == "50580-0600"
        record = result["results"][0]
        assert record["brand_name"] == "Tylenol"
        assert record["packaging"][0]["package_ndc"] == "50580-600-01"
        assert record["manufacturer_name"] == ["Kenvue Brands LLC"]

    async def test_invalid_ndc_skips_request(self, tools, service):
        result = json.loads(await tools["get_drug_by_ndc"]("not-an-ndc"))

        service.ndc_directory.assert_not_awaited()
        assert result["success"] is False
        assert result["error"]["type"] == "validation"
        assert "ndc" in result["error"]["message"]
        assert result["error"]["tool"] == "get_drug_by_ndc"
        assert result["error"]["example"] == "12345-1234-01"

    async def test_upstream_error(self, tools, service):
        service.ndc_directory.return_value = NOT_FOUND

        result = json.loads(await tools["get_drug_by_ndc"]("12345-1234"))

        assert result["error"]["status"] == 404


class TestGetDrugLabelByNdc:
    async def test_success(self, tools, service, label_payload):
        service.label_by_ndc.return_value = RequestResult.success(label_payload)

        result = json.loads(await tools["get_drug_label_by_ndc"]("123451234"))

        normalized = service.label_by_ndc.await_args.args[0]
        assert normalized.product_ndc == "12345-1234"
        assert normalized.package_ndc is None
        assert result["results"][0]["brand_name"] == ["Advil"]

    async def test_invalid_ndc(self, tools, service):
        result = json.loads(await tools["get_drug_label_by_ndc"]("12"))

        service.label_by_ndc.assert_not_awaited()
        assert result["query"]["normalized"]["isValid"] is False
        assert result["error"]["tool"] == "get_drug_label_by_ndc"


# ============================================================
# get_drug_adverse_events
# ============================================================


class TestGetDrugAdverseEvents:
    async def test_success(self, tools, service, event_payload):
        service.adverse_events.return_value = RequestResult.success(event_payload)

        result = json.loads(await tools["get_drug_adverse_events"]("aspirin", limit=2))

        service.adverse_events.assert_awaited_once_with("aspirin", limit=2)
        assert result["total"] == 5230
        assert result["count"] == 2
        assert result["top_reactions"][0] == {"reaction": "Nausea", "count": 2}
        first = result["results"][0]
        assert first["serious"] is True
        assert first["patient_sex"] == "female"
        assert first["patient_age"] == "67"
        assert first["drugs"] == ["ASPIRIN", "WARFARIN"]
        assert result["results"][1]["serious"] is False

    async def test_limit_floor(self, tools, service, event_payload):
        service.adverse_events.return_value = RequestResult.success(event_payload)

        await tools["get_drug_adverse_events"]("aspirin", limit=0)

        service.adverse_events.assert_awaited_once_with("aspirin", limit=1)

    async def test_error(self, tools, service):
        service.adverse_events.return_value = RequestResult.failure(
            ErrorRecord(type=ErrorType.HTTP, message="Rate Limited: Too many requests", status=429), attempts=4
        )

        result = json.loads(await tools["get_drug_adverse_events"]("aspirin"))

        assert result["error"]["status"] == 429


# ============================================================
# Formatting helpers
# ============================================================


class TestFormatting:
    @pytest.mark.parametrize(("value", "expected"), [(-5, 1), (0, 1), (50, 50), (100, 100), (101, 100)])
    def test_clamp_limit(self, value, expected):
        assert clamp_limit(value) == expected

    def test_format_label_without_openfda_block(self):
        assert format_label({"warnings": ["w"]}) == {"warnings": ["w"]}

    def test_format_adverse_event_minimal(self):
        assert format_adverse_event({"safetyreportid": "1"}) == {
            "safetyreportid": "1",
            "receivedate": None,
            "serious": False,
            "reactions": [],
            "drugs": [],
        }

    def test_unknown_sex_code(self):
        assert format_adverse_event({"patient": {"patientsex": "0"}})["patient_sex"] == "unknown"

    def test_summarize_reactions_top(self):
        reports = [{"reactions": ["A", "B"]}, {"reactions": ["B", "C"]}, {"reactions": ["B"]}]
        assert summarize_reactions(reports, top=2)[0] == {"reaction": "B", "count": 3}
        assert len(summarize_reactions(reports, top=2)) == 2
