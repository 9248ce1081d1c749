"""Shared test fixtures and helpers."""

from __future__ import annotations

import os
from typing import Any

import pytest

# Keep the developer's own OpenCog settings out of the tests
for _var in ("OPENCOG_API_KEY", "OPENCOG_API_BASE", "OPENCOG_NAME"):
    os.environ.pop(_var, None)


@pytest.fixture
def model():
    """A model with no max-tokens policy."""
    from cogbridge.models.schemas import Model

    return Model(name="opencog-chat")


@pytest.fixture
def limited_model():
    """A model that requires ``max_tokens`` and has a different wire name."""
    from cogbridge.models.schemas import Model

    return Model(
        name="reasoning",
        real_name="opencog-reasoning",
        max_output_tokens=1000,
        require_max_tokens=True,
    )


@pytest.fixture
def opencog_config():
    """OpenCog settings with nothing configured."""
    from cogbridge.config.settings import OpenCogSettings

    return OpenCogSettings()


@pytest.fixture
def stream_handler():
    """Fresh StreamHandler instance."""
    from cogbridge.core.stream_decoder import StreamHandler

    return StreamHandler()


@pytest.fixture
def pln_function() -> dict[str, Any]:
    """A function definition as a caller would pass it."""
    return {
        "name": "pln_deduction",
        "description": "Calculate PLN deduction TruthValue",
        "parameters": {
            "type": "object",
            "properties": {
                "premise1_strength": {"type": "number"},
                "premise1_confidence": {"type": "number"},
            },
            "required": ["premise1_strength", "premise1_confidence"],
        },
    }


@pytest.fixture
def sample_chat_response() -> dict[str, Any]:
    """A plain text chat completion as returned by the server."""
    return {
        "id": "chatcmpl-opencog-123",
        "object": "chat.completion",
        "created": 1234567890,
        "model": "opencog-chat",
        "choices": [
            {
                "index": 0,
                "message": {
                    "role": "assistant",
                    "content": "PLN (Probabilistic Logic Networks) is a framework for uncertain inference.",
                },
                "finish_reason": "stop",
            }
        ],
        "usage": {"prompt_tokens": 10, "completion_tokens": 20, "total_tokens": 30},
    }
