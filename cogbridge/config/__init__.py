"""Configuration package."""

from cogbridge.config.logging import configure_logging
from cogbridge.config.settings import (
    DEFAULT_API_BASE,
    ExtraConfig,
    LoggingSettings,
    OpenCogSettings,
    PatchEntry,
    RequestPatch,
    Settings,
    get_settings,
    load_yaml_config,
)

__all__ = [
    "DEFAULT_API_BASE",
    "ExtraConfig",
    "LoggingSettings",
    "OpenCogSettings",
    "PatchEntry",
    "RequestPatch",
    "Settings",
    "configure_logging",
    "get_settings",
    "load_yaml_config",
]
