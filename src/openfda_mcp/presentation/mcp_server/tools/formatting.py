"""
Tool output formatting - field selection for openFDA payloads.

The request layer passes openFDA JSON through untouched; these helpers pick
the fields an agent actually needs and render tool responses as JSON text.
"""

from __future__ import annotations

import json
from collections import Counter
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from openfda_mcp.core.exceptions import OpenFDAError
    from openfda_mcp.domain.entities.request import ErrorRecord, RequestResult

# Identity fields from the nested ``openfda`` block of a label
LABEL_IDENTITY_FIELDS = (
    "brand_name",
    "generic_name",
    "manufacturer_name",
    "product_ndc",
    "product_type",
    "route",
    "substance_name",
)

LABEL_USAGE_FIELDS = (
    "indications_and_usage",
    "warnings",
    "do_not_use",
    "ask_doctor",
    "ask_doctor_or_pharmacist",
    "stop_use",
    "pregnancy_or_breast_feeding",
)

LABEL_SAFETY_FIELDS = (
    "boxed_warning",
    "warnings",
    "warnings_and_cautions",
    "contraindications",
    "drug_interactions",
    "precautions",
    "adverse_reactions",
    "overdosage",
    "pregnancy_or_breast_feeding",
    "do_not_use",
    "stop_use",
)

NDC_FIELDS = (
    "product_ndc",
    "brand_name",
    "generic_name",
    "labeler_name",
    "dosage_form",
    "route",
    "product_type",
    "marketing_category",
    "marketing_start_date",
    "active_ingredients",
    "packaging",
)

MAX_LIMIT = 100


def clamp_limit(limit: int, maximum: int = MAX_LIMIT) -> int:
    """Keep a tool's ``limit`` argument within 1..maximum."""
    return max(1, min(int(limit), maximum))


def to_json(payload: dict[str, Any]) -> str:
    return json.dumps(payload, indent=2, ensure_ascii=False, default=str)


def _pick(record: dict[str, Any], fields: tuple[str, ...]) -> dict[str, Any]:
    return {name: record[name] for name in fields if record.get(name) is not None}


def format_label(record: dict[str, Any], fields: tuple[str, ...] = LABEL_USAGE_FIELDS) -> dict[str, Any]:
    """Identity block plus the requested label sections."""
    formatted = _pick(record.get("openfda") or {}, LABEL_IDENTITY_FIELDS)
    formatted.update(_pick(record, fields))
    if record.get("effective_time"):
        formatted["effective_time"] = record["effective_time"]
    return formatted


def format_ndc_record(record: dict[str, Any]) -> dict[str, Any]:
    formatted = _pick(record, NDC_FIELDS)
    manufacturer = (record.get("openfda") or {}).get("manufacturer_name")
    if manufacturer:
        formatted["manufacturer_name"] = manufacturer
    return formatted


def format_adverse_event(report: dict[str, Any]) -> dict[str, Any]:
    """Compact view of one FAERS safety report."""
    patient = report.get("patient") or {}
    reactions = [r.get("reactionmeddrapt") for r in patient.get("reaction") or [] if r.get("reactionmeddrapt")]
    drugs = [d.get("medicinalproduct") for d in patient.get("drug") or [] if d.get("medicinalproduct")]
    formatted: dict[str, Any] = {
        "safetyreportid": report.get("safetyreportid"),
        "receivedate": report.get("receivedate"),
        "serious": report.get("serious") == "1",
        "reactions": reactions,
        "drugs": drugs,
    }
    if patient.get("patientsex"):
        formatted["patient_sex"] = {"1": "male", "2": "female"}.get(patient["patientsex"], "unknown")
    if patient.get("patientonsetage"):
        formatted["patient_age"] = patient["patientonsetage"]
    return formatted


def summarize_reactions(reports: list[dict[str, Any]], top: int = 10) -> list[dict[str, Any]]:
    """Most frequent reactions across formatted reports."""
    counts = Counter(reaction for report in reports for reaction in report.get("reactions", []))
    return [{"reaction": reaction, "count": count} for reaction, count in counts.most_common(top)]


def results_of(result: RequestResult) -> list[dict[str, Any]]:
    data = result.data if isinstance(result.data, dict) else {}
    return list(data.get("results") or [])


def total_of(result: RequestResult) -> int | None:
    data = result.data if isinstance(result.data, dict) else {}
    return ((data.get("meta") or {}).get("results") or {}).get("total")


def success_response(query: dict[str, Any], results: list[dict[str, Any]], **extra: Any) -> str:
    payload: dict[str, Any] = {"success": True, "query": query, "count": len(results)}
    payload.update(extra)
    payload["results"] = results
    return to_json(payload)


def error_response(query: dict[str, Any], error: ErrorRecord | OpenFDAError) -> str:
    """Failed lookup: an upstream ``ErrorRecord`` or a rejected argument."""
    return to_json({"success": False, "query": query, "error": error.to_dict()})


__all__ = [
    "LABEL_IDENTITY_FIELDS",
    "LABEL_SAFETY_FIELDS",
    "LABEL_USAGE_FIELDS",
    "MAX_LIMIT",
    "NDC_FIELDS",
    "clamp_limit",
    "error_response",
    "format_adverse_event",
    "format_label",
    "format_ndc_record",
    "results_of",
    "success_response",
    "summarize_reactions",
    "to_json",
    "total_of",
]
