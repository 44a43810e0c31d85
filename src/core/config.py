"""Core configuration.

Why here:
- Centralizes environment variables (pydantic-settings) without leaking into the CLI.
- Lets adapters (HTTP client, registry) read settings consistently.
"""

from __future__ import annotations

import os
import sys
from importlib.metadata import PackageNotFoundError, version as package_version
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_REGISTRY_URL = "https://registry.terraform.io"
DEFAULT_NAMESPACE = "hashicorp"


def get_package_version() -> str:
    try:
        return package_version("tfdocs")
    except PackageNotFoundError:
        return "unknown"


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no extra dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "tfdocs"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "tfdocs"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "tfdocs"
    return Path.home() / ".config" / "tfdocs"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Application settings.

    Why pydantic-settings:
    - Typed and validated at the edge (env vars) without polluting the Core.
    - A single configuration contract for the CLI and the adapters.

    With nothing set in the environment every field falls back to the public
    Terraform registry defaults.
    """

    model_config = SettingsConfigDict(
        env_prefix="TFDOCS_",
        extra="ignore",
        case_sensitive=False,
        # Project first (dev), then the per-user config.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    registry_url: str = Field(
        default=DEFAULT_REGISTRY_URL,
        min_length=8,
        description="Origin of the documentation registry (no trailing slash).",
    )
    namespace: str = Field(
        default=DEFAULT_NAMESPACE,
        min_length=1,
        description="Registry namespace used to resolve providers.",
    )
    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout per request (seconds).",
    )
    user_agent: str = Field(
        default_factory=lambda: f"tfdocs/{get_package_version()}",
        min_length=1,
        description="User-Agent sent to the registry.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Log level for stderr diagnostics (DEBUG, INFO, WARNING, ERROR).",
    )

    @field_validator("registry_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level: {value!r}")
        return level
