"""Error classifier: turns a non-success reply into an ``HttpStatusError``.

Providers disagree on how they shape error bodies, so the message is looked
up through a cascade of known layouts before falling back to the raw body.
"""

from __future__ import annotations

import json
from typing import Any, NoReturn, Optional

import structlog

from cogbridge.errors import HttpStatusError

logger = structlog.get_logger(__name__)


def is_success(status: int) -> bool:
    return 200 <= status < 300


def _str_field(obj: Any, key: str) -> Optional[str]:
    if isinstance(obj, dict):
        value = obj.get(key)
        if isinstance(value, str):
            return value
    return None


def _serialize(body: Any) -> str:
    if isinstance(body, str):
        return body
    try:
        return json.dumps(body, ensure_ascii=False)
    except (TypeError, ValueError):
        return repr(body)


def extract_error_message(body: Any) -> str:
    """Best human-readable message found in ``body``.

    Layouts are tried in order: an ``error`` object, ``errors[0]``, a batched
    ``[0].error`` envelope, ``detail`` with ``status``, ``error`` as a string,
    a top-level ``message``. Anything else is serialized whole.
    """
    if isinstance(body, dict):
        error = body.get("error")
        if isinstance(error, dict):
            message = _str_field(error, "message")
            if message is not None:
                kind = _str_field(error, "type")
                if kind is not None:
                    return f"{message} (type: {kind})"
                code = _str_field(error, "code")
                if code is not None:
                    return f"{message} (code: {code})"
                return message

        errors = body.get("errors")
        if isinstance(errors, list) and errors:
            message = _str_field(errors[0], "message")
            if message is not None:
                return message

    elif isinstance(body, list) and body and isinstance(body[0], dict):
        # Batched endpoints answer with a list of error envelopes
        message = _str_field(body[0].get("error"), "message")
        if message is not None:
            return message

    if isinstance(body, dict):
        detail = _str_field(body, "detail")
        status = body.get("status")
        if detail is not None and isinstance(status, int) and not isinstance(status, bool):
            return f"{detail} (status: {status})"

        error = _str_field(body, "error")
        if error is not None:
            return error

        message = _str_field(body, "message")
        if message is not None:
            return message

    return _serialize(body)


def looks_like_error(body: Any) -> bool:
    """Whether ``body`` has one of the error layouts known to the cascade."""
    if isinstance(body, dict):
        return any(key in body for key in ("error", "errors", "detail"))
    if isinstance(body, list) and body and isinstance(body[0], dict):
        return "error" in body[0]
    return False


def raise_for_status_error(status: int, body: Any) -> NoReturn:
    """Raise the classified failure for ``status``. Never returns."""
    message = extract_error_message(body)
    logger.error("Provider returned an error", status=status, message=message)
    raise HttpStatusError(status, message, body)
