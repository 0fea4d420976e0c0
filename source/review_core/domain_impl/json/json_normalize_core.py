"""Recursive unwrapping of JSON documents stored inside string fields.

``normalize`` walks a decoded document and replaces every string that is
itself valid JSON text with its decoded (and again normalized) value, so a
payload like ``{"body": "{\\"id\\": 1}"}`` is shown as a nested object.

Whether bare literals (``"123"``, ``"true"``, ``"null"``, ``"\\"x\\""``) are
promoted to their decoded values is controlled by ``unwrap_literals``. The
default keeps the promotion; ``unwrap_literals=False`` only replaces strings
that decode to an object or an array.
"""

from __future__ import annotations

import json
from typing import Any

_MISSING = object()


def _reject_constant(token: str) -> Any:
    # NaN/Infinity are not JSON text.
    raise ValueError(f"non-standard JSON constant {token!r}")


def try_parse_json(text: str) -> Any:
    """Decode ``text`` as strict JSON, returning ``_MISSING`` on any failure."""
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except (ValueError, RecursionError):
        return _MISSING


def normalize(value: Any, unwrap_literals: bool = True) -> Any:
    if isinstance(value, str):
        parsed = try_parse_json(value)
        if parsed is _MISSING:
            return value
        if not unwrap_literals and not isinstance(parsed, (dict, list)):
            return value
        return normalize(parsed, unwrap_literals)
    if isinstance(value, list):
        return [normalize(item, unwrap_literals) for item in value]
    if isinstance(value, dict):
        return {key: normalize(item, unwrap_literals) for key, item in value.items()}
    return value


def normalize_text(text: str, unwrap_literals: bool = True) -> Any:
    """Normalize raw input text; non-JSON text comes back as the same string."""
    return normalize(text, unwrap_literals)
