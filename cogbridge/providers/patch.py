"""Request patches from configuration."""

from __future__ import annotations

import copy
import re
from typing import Any, Optional

from cogbridge.config.settings import PatchEntry
from cogbridge.providers.base import RequestData


def merge_patch(target: Any, patch: Any) -> Any:
    """Apply an RFC 7386 JSON merge patch and return the result."""
    if not isinstance(patch, dict):
        return copy.deepcopy(patch)
    result = dict(target) if isinstance(target, dict) else {}
    for key, value in patch.items():
        if value is None:
            result.pop(key, None)
        else:
            result[key] = merge_patch(result.get(key), value)
    return result


def select_patch(patches: dict[str, PatchEntry], model_name: str) -> Optional[PatchEntry]:
    """First patch whose regex fully matches ``model_name``."""
    for pattern, entry in patches.items():
        if re.fullmatch(pattern, model_name):
            return entry
    return None


def apply_patch(request: RequestData, entry: Optional[PatchEntry]) -> RequestData:
    if entry is None:
        return request
    if entry.url:
        request.url = entry.url
    request.headers.update(entry.headers)
    if entry.body:
        request.body = merge_patch(request.body, entry.body)
    return request
