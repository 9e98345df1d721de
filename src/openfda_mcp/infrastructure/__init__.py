"""
Infrastructure Layer - External Systems Integration

Contains:
- openfda: openFDA URL builder and resilient request client
"""

from .openfda import Context, OpenFDABuilder, OpenFDAClient

__all__ = ["Context", "OpenFDABuilder", "OpenFDAClient"]
