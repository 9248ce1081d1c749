"""Providers package."""

from cogbridge.providers.base import BaseProvider, RequestData
from cogbridge.providers.opencog_provider import OpenCogProvider
from cogbridge.providers.registry import (
    PROVIDER_TYPES,
    create_provider,
    list_models,
    resolve_model,
)

__all__ = [
    "BaseProvider",
    "OpenCogProvider",
    "PROVIDER_TYPES",
    "RequestData",
    "create_provider",
    "list_models",
    "resolve_model",
]
