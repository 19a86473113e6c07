"""
Centralized settings for dimcontent.

Manifesto:
    The resolution depth, the debug switch for unknown block types, the
    routing host and the database URL are read in many places. One
    validated, cached settings object replaces ad-hoc environment parsing.

All fields can be set via ``DIMCONTENT_*`` environment variables (e.g.
``DIMCONTENT_MAX_DEPTH=5``) or through a ``.env`` file.

Tags:
    dimcontent, configuration, settings, pydantic, caching, validation
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class DimContentSettings(BaseSettings):
    """dimcontent configuration.

    Fields
    ──────
    max_depth        : How many levels of nested content-rich entities are resolved
    debug            : Raise on unknown block types instead of falling back
    log_level        : Structlog log level
    log_format       : ``json`` or ``console``
    database_url     : SQLAlchemy URL of the route store
    templates_dir    : Directory holding the YAML form metadata
    default_site     : Site used when the request context has none
    scheme/host/...  : Request context used to generate urls
    """

    model_config = SettingsConfigDict(
        env_prefix="DIMCONTENT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Resolution ───────────────────────────────────────────────
    max_depth: int = Field(default=3, ge=0, description="Nested resolution depth")
    debug: bool = Field(default=False)

    # ── Logging ──────────────────────────────────────────────────
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="json")

    # ── Storage ──────────────────────────────────────────────────
    database_url: str = Field(default="sqlite:///data/dimcontent.db")
    database_echo: bool = Field(default=False)
    templates_dir: Path = Field(default=Path("config/templates"))

    # ── Routing ──────────────────────────────────────────────────
    default_site: str | None = Field(default=None)
    scheme: str = Field(default="https")
    host: str = Field(default="localhost")
    http_port: int = Field(default=80)
    https_port: int = Field(default=443)

    @field_validator("log_format")
    @classmethod
    def _validate_log_format(cls, value: str) -> str:
        value = value.lower()
        if value not in ("json", "console"):
            raise ValueError(f"log_format must be 'json' or 'console', got {value!r}")
        return value

    @field_validator("scheme")
    @classmethod
    def _validate_scheme(cls, value: str) -> str:
        if value not in ("http", "https"):
            raise ValueError(f"scheme must be 'http' or 'https', got {value!r}")
        return value


# ── Settings factory with caching ────────────────────────────────────────

_settings_cache: dict[str, DimContentSettings] = {}


def get_settings(
    *,
    env_file: Path | None = None,
    _force_reload: bool = False,
) -> DimContentSettings:
    """Load, validate, and cache a :class:`DimContentSettings` instance.

    Parameters
    ----------
    env_file:
        Explicit ``.env`` file. Defaults to ``.env`` in the working directory.
    _force_reload:
        Bypass cache and reload.
    """
    cache_key = str(env_file or "")
    if not _force_reload and cache_key in _settings_cache:
        return _settings_cache[cache_key]

    if env_file is not None:
        settings = DimContentSettings(_env_file=env_file)  # type: ignore[call-arg]
    else:
        settings = DimContentSettings()

    _settings_cache[cache_key] = settings
    return settings


def clear_settings_cache() -> None:
    """Drop cached settings (for testing)."""
    _settings_cache.clear()


__all__ = [
    "DimContentSettings",
    "get_settings",
    "clear_settings_cache",
]
