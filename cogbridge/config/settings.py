"""cogbridge configuration management.

Loads settings from (in priority order):
1. cogbridge.yaml / config.yaml (if exists, passed as init values)
2. Environment variables
3. .env file
4. Default values (lowest)
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any, Optional

import structlog
import yaml
from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from cogbridge.models.schemas import Model

logger = structlog.get_logger(__name__)

DEFAULT_API_BASE = "http://localhost:5000/v1"


# ---------------------------------------------------------------------------
# Provider sub-configs
# ---------------------------------------------------------------------------

class PatchEntry(BaseModel):
    """Per-request overrides applied after the body is built."""

    url: Optional[str] = None
    headers: dict[str, str] = Field(default_factory=dict)
    body: dict[str, Any] = Field(
        default_factory=dict, description="JSON merge patch; null removes a key"
    )


class RequestPatch(BaseModel):
    """Request patches keyed by a regex matched against the model name."""

    chat_completions: dict[str, PatchEntry] = Field(default_factory=dict)
    embeddings: dict[str, PatchEntry] = Field(default_factory=dict)


class ExtraConfig(BaseModel):
    """HTTP client options."""

    proxy: Optional[str] = None
    connect_timeout: Optional[float] = Field(default=None, gt=0)


class OpenCogSettings(BaseSettings):
    """OpenCog client configuration."""

    model_config = SettingsConfigDict(env_prefix="OPENCOG_", extra="ignore")

    name: Optional[str] = Field(default=None, description="Client name, defaults to 'opencog'")
    api_key: Optional[str] = Field(default=None, description="Bearer token, optional")
    api_base: Optional[str] = Field(
        default=None, description=f"API base URL, e.g. {DEFAULT_API_BASE}"
    )
    models: list[Model] = Field(default_factory=list)
    patch: Optional[RequestPatch] = None
    extra: Optional[ExtraConfig] = None


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(env_prefix="COGBRIDGE_LOG_")

    level: str = Field(default="INFO", description="Log level")
    json_format: bool = Field(default=False, description="Use JSON log format")

    @field_validator("level")
    @classmethod
    def _validate_level(cls, v: str) -> str:
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in allowed:
            raise ValueError(f"level must be one of {sorted(allowed)}")
        return v.upper()


# ---------------------------------------------------------------------------
# Main Settings
# ---------------------------------------------------------------------------

class Settings(BaseSettings):
    """Root settings."""

    model_config = SettingsConfigDict(
        env_prefix="COGBRIDGE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    opencog: OpenCogSettings = Field(default_factory=OpenCogSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


# ---------------------------------------------------------------------------
# YAML config support
# ---------------------------------------------------------------------------

def _config_search_paths() -> list[Path]:
    return [
        Path("config.local.yaml"),
        Path("config.yaml"),
        Path("cogbridge.yaml"),
        Path.home() / ".cogbridge" / "config.yaml",
    ]


def load_yaml_config(paths: Optional[list[Path]] = None) -> dict[str, Any]:
    """Load the first YAML config file found."""
    for path in paths if paths is not None else _config_search_paths():
        if not path.exists():
            continue
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as exc:
            logger.warning("Ignoring unreadable config file", path=str(path), error=str(exc))
            continue
        return data if isinstance(data, dict) else {}
    return {}


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get settings (cached).

    YAML values are passed as init kwargs, so they take priority over env
    vars for the keys they set.
    """
    return Settings(**load_yaml_config())
