"""
MCP Server Instructions - guidance for AI agents.

Kept out of server.py so the text can be maintained on its own.
"""

from __future__ import annotations

SERVER_INSTRUCTIONS = """
OpenFDA MCP Server - drug information from the U.S. FDA openFDA API

## Choosing a tool

- Know the brand name?           get_drug_by_name(drug_name="Advil")
- Know the generic name?         get_drug_by_generic_name(generic_name="ibuprofen", limit=5)
- Need warnings/interactions?    get_drug_safety_info(drug_name="Coumadin")
- Have an NDC code?              get_drug_by_ndc(ndc="00573-0164") for the NDC Directory record
                                 get_drug_label_by_ndc(ndc="00573-0164") for the label
- Unsure an NDC is well-formed?  normalize_ndc_code(ndc="12345123401")
- Looking for reported harms?    get_drug_adverse_events(drug_name="aspirin", limit=20)

## NDC formats

Product NDC: 12345-1234 or 123451234 (9 digits).
Package NDC: 12345-1234-01 or 12345123401 (11 digits).
Other layouts are rejected before any API call.

## Reading results

Every tool returns JSON with "success".
On failure, "error.type" is one of:
  http (see error.status: 404 means no match), network, timeout,
  parsing, empty_response, unknown, validation.
Transient failures (429, 5xx, network, timeout) were already retried
with exponential backoff; do not loop on them.

Adverse event reports are voluntary submissions and do not establish causation.
"""

__all__ = ["SERVER_INSTRUCTIONS"]
