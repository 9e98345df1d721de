"""
Process-wide settings.

Settings are read once from the environment (plus an optional ``.env`` file)
and treated as immutable afterwards. Tests swap them with
``configure_settings()`` / ``reset_settings()``.

Environment Variables:
    OPENFDA_API_KEY: openFDA API key (optional; upstream rejects bad keys)
    OPENFDA_BASE_URL: API base (default: https://api.fda.gov/drug)
    OPENFDA_USER_AGENT: User-Agent header value
    OPENFDA_MAX_RETRIES: Retries after the first attempt (default: 3)
    OPENFDA_RETRY_DELAY_MS: Base backoff delay in ms (default: 1000)
    OPENFDA_TIMEOUT_MS: Per-attempt timeout in ms (default: 30000)
    OPENFDA_LOG_LEVEL: Logging level for entry points (default: INFO)
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

from dotenv import load_dotenv

from openfda_mcp import __version__
from openfda_mcp.core.exceptions import ConfigurationError
from openfda_mcp.domain.entities.request import (
    DEFAULT_MAX_RETRIES,
    DEFAULT_RETRY_DELAY_MS,
    DEFAULT_TIMEOUT_MS,
    RequestConfig,
)

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.fda.gov/drug"
DEFAULT_USER_AGENT = f"openfda-mcp/{__version__}"


@dataclass(frozen=True, slots=True)
class Settings:
    """Immutable process configuration."""

    api_key: str | None = None
    base_url: str = DEFAULT_BASE_URL
    user_agent: str = DEFAULT_USER_AGENT
    max_retries: int = DEFAULT_MAX_RETRIES
    retry_delay_ms: int = DEFAULT_RETRY_DELAY_MS
    timeout_ms: int = DEFAULT_TIMEOUT_MS
    log_level: str = "INFO"

    def request_config(self) -> RequestConfig:
        """Default ``RequestConfig`` derived from these settings."""
        return RequestConfig(
            max_retries=self.max_retries,
            retry_delay_ms=self.retry_delay_ms,
            timeout_ms=self.timeout_ms,
        )


_settings: Settings | None = None


def _read_int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as e:
        msg = f"{name} must be an integer, got {raw!r}"
        raise ConfigurationError(msg) from e


def load_settings(env: Mapping[str, str] | None = None, *, dotenv: bool = True) -> Settings:
    """
    Build ``Settings`` from environment variables.

    Args:
        env: Mapping to read instead of ``os.environ`` (tests)
        dotenv: Load a ``.env`` file first; existing variables win

    Raises:
        ConfigurationError: When a numeric variable is not an integer
    """
    if env is None:
        if dotenv and load_dotenv(override=False):
            logger.info("Loaded environment variables from .env file")
        env = os.environ

    api_key = env.get("OPENFDA_API_KEY", "").strip() or None
    return Settings(
        api_key=api_key,
        base_url=(env.get("OPENFDA_BASE_URL", "").strip() or DEFAULT_BASE_URL).rstrip("/"),
        user_agent=env.get("OPENFDA_USER_AGENT", "").strip() or DEFAULT_USER_AGENT,
        max_retries=_read_int(env, "OPENFDA_MAX_RETRIES", DEFAULT_MAX_RETRIES),
        retry_delay_ms=_read_int(env, "OPENFDA_RETRY_DELAY_MS", DEFAULT_RETRY_DELAY_MS),
        timeout_ms=_read_int(env, "OPENFDA_TIMEOUT_MS", DEFAULT_TIMEOUT_MS),
        log_level=(env.get("OPENFDA_LOG_LEVEL", "").strip() or "INFO").upper(),
    )


def get_settings() -> Settings:
    """Return the process-wide settings, loading them on first use."""
    global _settings
    if _settings is None:
        _settings = load_settings()
        logger.info(f"Settings loaded (API key: {'set' if _settings.api_key else 'not set'})")
    return _settings


def configure_settings(settings: Settings) -> None:
    """Install explicit process-wide settings."""
    global _settings
    _settings = settings


def reset_settings() -> None:
    """Forget loaded settings so the next ``get_settings()`` reloads them."""
    global _settings
    _settings = None


__all__ = [
    "DEFAULT_BASE_URL",
    "DEFAULT_USER_AGENT",
    "Settings",
    "configure_settings",
    "get_settings",
    "load_settings",
    "reset_settings",
]
