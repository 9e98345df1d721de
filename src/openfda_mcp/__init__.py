"""
OpenFDA MCP - Drug information from openFDA for AI agents

Usage:
    from openfda_mcp import OpenFDABuilder, OpenFDAClient, normalize_ndc

    ndc = normalize_ndc("12345123401")
    url = (
        OpenFDABuilder(api_key="MY_KEY")
        .context("ndc")
        .search(f'packaging.package_ndc:"{ndc.package_ndc}"')
        .limit(1)
        .build()
    )

    async with OpenFDAClient() as client:
        result = await client.execute(url)
        if result.ok:
            ...
        else:
            print(result.error.type, result.error.message)

Features:
    - NDC normalization (product and package, dashed and undashed)
    - URL builder for the label, ndc and event endpoints
    - Request client with timeout, retry and exponential backoff
    - MCP tools for labels, NDC Directory and adverse events
"""

__version__ = "1.0.0"

from .core.exceptions import (
    ConfigurationError,
    InvalidParameterError,
    MissingParameterError,
    OpenFDAError,
    ValidationError,
)
from .domain.entities import (
    ErrorRecord,
    ErrorType,
    NDCResult,
    RequestConfig,
    RequestResult,
    normalize_ndc,
)
from .infrastructure.openfda import Context, OpenFDABuilder, OpenFDAClient

__all__ = [
    "__version__",
    # Errors
    "OpenFDAError",
    "ValidationError",
    "MissingParameterError",
    "InvalidParameterError",
    "ConfigurationError",
    # Domain
    "NDCResult",
    "normalize_ndc",
    "ErrorRecord",
    "ErrorType",
    "RequestConfig",
    "RequestResult",
    # Infrastructure
    "Context",
    "OpenFDABuilder",
    "OpenFDAClient",
]
