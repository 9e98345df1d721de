"""
Domain Entity: National Drug Code (NDC) normalization.

Accepted layouts:
    AAAAA-BBBB       product NDC
    AAAAA-BBBB-CC    package NDC (product = first two segments)
    11 digits        package NDC, segmented 5-4-2
    9 digits         product NDC, segmented 5-4

Anything else is returned unchanged (after cleanup) and flagged invalid.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

PRODUCT_NDC_PATTERN = re.compile(r"[0-9]{5}-[0-9]{4}")

_DIGITS_ONLY = re.compile(r"[0-9]+")


@dataclass(frozen=True, slots=True)
class NDCResult:
    """Normalized forms of an NDC input."""

    product_ndc: str
    package_ndc: str | None = None
    is_valid: bool = False

    @property
    def is_package(self) -> bool:
        return self.package_ndc is not None

    def to_dict(self) -> dict[str, Any]:
        return {
            "productNDC": self.product_ndc,
            "packageNDC": self.package_ndc,
            "isValid": self.is_valid,
        }


def normalize_ndc(raw: str) -> NDCResult:
    """
    Parse an NDC in any supported layout.

    Never raises: unrecognized input yields ``is_valid=False`` with the cleaned
    input as ``product_ndc``.

    Example:
        normalize_ndc("12345-1234-01")  → product 12345-1234, package 12345-1234-01
        normalize_ndc("123451234")      → product 12345-1234
        normalize_ndc("abc")            → invalid
    """
    cleaned = raw.strip().upper()
    product_ndc = cleaned
    package_ndc: str | None = None

    if "-" in cleaned:
        parts = cleaned.split("-")
        if len(parts) == 2:
            product_ndc = cleaned
        elif len(parts) == 3:
            product_ndc = f"{parts[0]}-{parts[1]}"
            package_ndc = cleaned
    elif _DIGITS_ONLY.fullmatch(cleaned):
        if len(cleaned) == 11:
            product_ndc = f"{cleaned[:5]}-{cleaned[5:9]}"
            package_ndc = f"{product_ndc}-{cleaned[9:]}"
        elif len(cleaned) == 9:
            product_ndc = f"{cleaned[:5]}-{cleaned[5:]}"

    is_valid = bool(PRODUCT_NDC_PATTERN.fullmatch(product_ndc))
    if not is_valid:
        return NDCResult(product_ndc=cleaned, package_ndc=None, is_valid=False)
    return NDCResult(product_ndc=product_ndc, package_ndc=package_ndc, is_valid=True)


__all__ = ["NDCResult", "PRODUCT_NDC_PATTERN", "normalize_ndc"]
