"""Provider registry: maps client type names to provider classes.

Lookup is an explicit dispatch table; adding a provider means adding an
entry to ``PROVIDER_TYPES``.
"""

from __future__ import annotations

from typing import Any

from cogbridge.config.settings import OpenCogSettings
from cogbridge.errors import UnknownProviderError
from cogbridge.models.schemas import Model
from cogbridge.providers.base import BaseProvider
from cogbridge.providers.opencog_provider import OpenCogProvider

PROVIDER_TYPES: dict[str, type[BaseProvider]] = {
    "opencog": OpenCogProvider,
}


def resolve_model(config: OpenCogSettings, model_name: str) -> Model:
    """The configured model called ``model_name``, or a bare one."""
    for model in config.models:
        if model.name == model_name:
            return model
    return Model(name=model_name)


def list_models(config: OpenCogSettings) -> list[str]:
    """Model ids (``client:model``) declared in ``config``."""
    client = config.name or "opencog"
    return [f"{client}:{model.name}" for model in config.models]


def create_provider(
    client_type: str,
    config: OpenCogSettings,
    model_name: str,
    **kwargs: Any,
) -> BaseProvider:
    """Instantiate the provider registered as ``client_type``.

    Raises:
        UnknownProviderError: Nothing is registered under ``client_type``.
    """
    try:
        provider_cls = PROVIDER_TYPES[client_type]
    except KeyError as exc:
        raise UnknownProviderError(
            f"Unknown client type '{client_type}'",
            {"known": sorted(PROVIDER_TYPES)},
        ) from exc
    return provider_cls(config, resolve_model(config, model_name), **kwargs)
