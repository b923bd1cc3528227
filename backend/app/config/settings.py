"""
Application configuration via Pydantic Settings.

All values are sourced from environment variables or an .env file.
The diff core never reads settings directly; the service layer passes the
relevant values in.
"""

from __future__ import annotations

from enum import StrEnum
from functools import lru_cache
from pathlib import Path
from typing import Annotated

from pydantic import BeforeValidator, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Environment(StrEnum):
    """Deployment environment identifiers."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    PRODUCTION = "production"


class LogLevel(StrEnum):
    """Structured log level options."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


def _parse_cors_origins(value: str | list[str]) -> list[str]:
    """Accept comma-separated string or list for CORS origins."""
    if isinstance(value, list):
        return value
    return [origin.strip() for origin in value.split(",") if origin.strip()]


class Settings(BaseSettings):
    """
    Centralised, type-validated application configuration.

    Reads from environment variables with an optional .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="forbid",
    )

    # ── Application ────────────────────────────────────────────────────── #
    app_name: str = Field(default="LineDiff", description="Human-readable application name")
    app_version: str = Field(default="1.0.0", description="Semantic version string")
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Deployment environment (development|testing|production)",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode. Must be False in production.",
    )

    # ── Server ─────────────────────────────────────────────────────────── #
    host: str = Field(default="127.0.0.1", description="Bind host. Default local-only.")
    port: int = Field(default=3000, ge=1024, le=65535, description="Bind port")
    reload: bool = Field(default=False, description="Auto-reload on code change (dev only)")
    static_dir: Path | None = Field(
        default=None,
        description="Directory served as static files at '/'. Disabled when unset.",
    )

    # ── CORS ───────────────────────────────────────────────────────────── #
    cors_origins: Annotated[list[str], BeforeValidator(_parse_cors_origins)] = Field(
        default=["http://localhost:3000"],
        description="Comma-separated list of allowed CORS origins",
    )

    # ── Diff ───────────────────────────────────────────────────────────── #
    context_lines: int = Field(
        default=3,
        ge=0,
        le=100,
        description="Unchanged lines kept around each change in a hunk",
    )
    max_input_lines: int = Field(
        default=5_000,
        ge=1,
        le=100_000,
        description="Maximum lines per side. The LCS table is (left x right) cells.",
    )
    max_input_chars: int = Field(
        default=2_000_000,
        ge=1,
        description="Maximum characters per side",
    )
    max_table_cells: int = Field(
        default=25_000_000,
        ge=1,
        description="Maximum LCS table size for the line pass (left lines x right lines)",
    )
    max_inline_cells: int = Field(
        default=1_000_000,
        ge=1,
        description="Maximum word table size for one modified pair; larger pairs get no inline diff",
    )
    max_request_body_mb: int = Field(
        default=50,
        ge=1,
        le=200,
        description="Maximum request body size in MB",
    )

    # ── Rate Limiting ──────────────────────────────────────────────────── #
    rate_limit_default: str = Field(
        default="100/minute",
        description="Default rate limit string (slowapi format)",
    )

    # ── Logging ────────────────────────────────────────────────────────── #
    log_level: LogLevel = Field(default=LogLevel.INFO, description="Minimum log level")
    log_json: bool = Field(default=True, description="Emit logs as JSON (False for dev console)")
    log_file: Path | None = Field(default=None, description="Optional log file path")

    # ── Validators ─────────────────────────────────────────────────────── #

    @model_validator(mode="after")
    def production_safety_checks(self) -> Settings:
        if self.environment == Environment.PRODUCTION:
            if self.debug:
                raise ValueError("debug must be False in production")
            if self.reload:
                raise ValueError("reload must be False in production")
        return self

    @property
    def max_request_body_bytes(self) -> int:
        return self.max_request_body_mb * 1024 * 1024


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Return the cached Settings singleton.

    Routes should read ``request.app.state.settings`` instead, so that
    ``create_app(settings=...)`` overrides take effect.
    """
    return Settings()
