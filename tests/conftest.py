"""
Pytest configuration and shared fixtures.
"""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from openfda_mcp.core.config import reset_settings
from openfda_mcp.domain.entities.request import RequestConfig
from openfda_mcp.infrastructure.openfda.client import OpenFDAClient

# ============================================================
# Environment Fixtures
# ============================================================


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch):
    """Keep process-wide settings and OPENFDA_* variables out of each test."""
    for name in (
        "OPENFDA_API_KEY",
        "OPENFDA_BASE_URL",
        "OPENFDA_USER_AGENT",
        "OPENFDA_MAX_RETRIES",
        "OPENFDA_RETRY_DELAY_MS",
        "OPENFDA_TIMEOUT_MS",
        "OPENFDA_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr("openfda_mcp.core.config.load_dotenv", lambda **kwargs: False)
    reset_settings()
    yield
    reset_settings()


# ============================================================
# HTTP Helpers
# ============================================================


def make_response(status_code: int = 200, *, json_data=None, text: str | None = None) -> httpx.Response:
    """Build a real httpx.Response without a network round-trip."""
    if json_data is not None:
        return httpx.Response(status_code, json=json_data)
    return httpx.Response(status_code, text=text or "")


@pytest.fixture
def response():
    """Factory fixture for httpx responses."""
    return make_response


@pytest.fixture
def fast_config():
    """Retry config with small delays; sleeps are mocked anyway."""
    return RequestConfig(max_retries=3, retry_delay_ms=100, timeout_ms=1000)


@pytest.fixture
def client(fast_config):
    """OpenFDAClient with a mocked httpx client and a recorded sleep."""
    http = MagicMock()
    http.get = AsyncMock()
    http.aclose = AsyncMock()
    c = OpenFDAClient(config=fast_config, http_client=http, user_agent="openfda-mcp-tests")
    c._sleep = AsyncMock()
    return c


# ============================================================
# Mock openFDA Payloads
# ============================================================


@pytest.fixture
def label_payload():
    """Mock /drug/label.json response."""
    return {
        "meta": {"results": {"skip": 0, "limit": 1, "total": 12}},
        "results": [
            {
                "id": "label-1",
                "effective_time": "20240115",
                "indications_and_usage": ["Temporarily relieves minor aches and pains"],
                "warnings": ["Allergy alert: Ibuprofen may cause a severe allergic reaction"],
                "do_not_use": ["right before or after heart surgery"],
                "stop_use": ["you experience any of the following signs of stomach bleeding"],
                "drug_interactions": ["Ask a doctor before use if you take aspirin"],
                "boxed_warning": ["Cardiovascular thrombotic events"],
                "contraindications": ["Known hypersensitivity to ibuprofen"],
                "spl_product_data_elements": ["Advil Ibuprofen"],
                "openfda": {
                    "brand_name": ["Advil"],
                    "generic_name": ["IBUPROFEN"],
                    "manufacturer_name": ["Haleon US Holdings LLC"],
                    "product_ndc": ["0573-0164"],
                    "product_type": ["HUMAN OTC DRUG"],
                    "route": ["ORAL"],
                    "substance_name": ["IBUPROFEN"],
                    "package_ndc": ["0573-0164-30"],
                },
            }
        ],
    }


@pytest.fixture
def ndc_payload():
    """Mock /drug/ndc.json response."""
    return {
        "meta": {"results": {"skip": 0, "limit": 1, "total": 1}},
        "results": [
            {
                "product_ndc": "50580-600",
                "generic_name": "Acetaminophen",
                "brand_name": "Tylenol",
                "labeler_name": "Kenvue Brands LLC",
                "dosage_form": "TABLET, COATED",
                "route": ["ORAL"],
                "product_type": "HUMAN OTC DRUG",
                "marketing_category": "OTC MONOGRAPH DRUG",
                "active_ingredients": [{"name": "ACETAMINOPHEN", "strength": "325 mg/1"}],
                "packaging": [{"package_ndc": "50580-600-01", "description": "100 TABLET in 1 BOTTLE"}],
                "openfda": {"manufacturer_name": ["Kenvue Brands LLC"]},
            }
        ],
    }


@pytest.fixture
def event_payload():
    """Mock /drug/event.json response."""
    return {
        "meta": {"results": {"skip": 0, "limit": 2, "total": 5230}},
        "results": [
            {
                "safetyreportid": "1001",
                "receivedate": "20230301",
                "serious": "1",
                "patient": {
                    "patientsex": "2",
                    "patientonsetage": "67",
                    "reaction": [{"reactionmeddrapt": "Nausea"}, {"reactionmeddrapt": "Dizziness"}],
                    "drug": [{"medicinalproduct": "ASPIRIN"}, {"medicinalproduct": "WARFARIN"}],
                },
            },
            {
                "safetyreportid": "1002",
                "receivedate": "20230405",
                "serious": "2",
                "patient": {
                    "patientsex": "1",
                    "reaction": [{"reactionmeddrapt": "Nausea"}],
                    "drug": [{"medicinalproduct": "ASPIRIN"}],
                },
            },
        ],
    }
