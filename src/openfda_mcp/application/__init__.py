"""
Application Layer - Use Cases

Contains:
- lookup: Drug label, NDC directory and adverse event lookups
"""

from .lookup import DrugLookupService

__all__ = ["DrugLookupService"]
