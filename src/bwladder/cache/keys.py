"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Module: cache/keys.py.
"""

from __future__ import annotations

import json
from enum import Enum
from typing import Any


def _default(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    return str(value)


def cache_key(**fields: Any) -> str:
    """
    Encode one call's arguments as a deterministic cache key.

    Field order is the keyword order used at the call site, so each endpoint
    must always pass its arguments in the same order. Enum members encode by
    value, making ``ProfileMask.PROFILE`` and ``"scr_profile"`` equal.
    """
    normalized = {
        name: value.value if isinstance(value, Enum) else value
        for name, value in fields.items()
    }
    return json.dumps(
        normalized,
        ensure_ascii=True,
        separators=(",", ":"),
        default=_default,
    )


def size_of_json(value: Any) -> int:
    """Approximate the memory weight of a value by its UTF-8 JSON size."""
    encoded = json.dumps(value, ensure_ascii=False, separators=(",", ":"), default=_default)
    return len(encoded.encode("utf-8"))
