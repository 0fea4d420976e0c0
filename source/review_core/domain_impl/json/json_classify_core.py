"""Value classification helpers used by the tree renderer.

All functions here are pure; they decide how a value is drawn and which
interactions its row offers, never how it is stored.
"""

from __future__ import annotations

import json
import math
import re
from dataclasses import dataclass
from typing import Any

from review_core import constants

# Scheme or "www." prefix, dotted host labels, then an optional tail that may
# not end on a bare "." or ",".
LINK_PATTERN = re.compile(
    r"(https?://|www\.)[\w\-]+(\.[\w\-]+)+([\w\-.,@?^=%&:/~+#]*[\w\-@?^=%&/~+#])?",
    re.IGNORECASE | re.ASCII,
)
_SCHEME_PATTERN = re.compile(r"https?://", re.IGNORECASE)


def is_container(value: Any) -> bool:
    return isinstance(value, (dict, list))


def is_array(value: Any) -> bool:
    return isinstance(value, list)


def is_simple_or_short(value: Any) -> bool:
    """Return True when the row can show the whole value inline (no preview)."""
    if is_container(value):
        return False
    if isinstance(value, str):
        return len(value) <= constants.INLINE_TEXT_MAX_CHARS
    return True


def is_link(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    return LINK_PATTERN.match(value) is not None


def link_target(value: str) -> str:
    """Return the URL to open for a link-shaped string."""
    text = str(value)
    if _SCHEME_PATTERN.match(text):
        return text
    return f"http://{text}"


def _finite_only(value: Any) -> Any:
    # Out-of-range numbers such as 1e999 decode to inf; they serialize as null.
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, list):
        return [_finite_only(item) for item in value]
    if isinstance(value, dict):
        return {key: _finite_only(item) for key, item in value.items()}
    return value


def compact_json(value: Any) -> str:
    return json.dumps(_finite_only(value), allow_nan=False, ensure_ascii=False, separators=(",", ":"))


def pretty_json(value: Any) -> str:
    return json.dumps(_finite_only(value), allow_nan=False, ensure_ascii=False, indent=constants.PREVIEW_INDENT)


def summary(value: Any) -> str:
    if isinstance(value, str):
        if len(value) <= constants.SUMMARY_MAX_CHARS:
            return value
        return value[: constants.SUMMARY_MAX_CHARS] + constants.SUMMARY_ELLIPSIS
    return compact_json(value)


def copy_text_for(value: Any) -> str:
    """Clipboard text for a node: raw strings verbatim, compact JSON otherwise."""
    if isinstance(value, str):
        return value
    return compact_json(value)


def preview_text_for(value: Any) -> str:
    if isinstance(value, str):
        return value
    return pretty_json(value)


@dataclass(frozen=True, slots=True)
class Classification:
    is_container: bool
    is_array: bool
    is_simple_or_short: bool
    is_link: bool

    @property
    def kind(self) -> str:
        if not self.is_container:
            return "leaf"
        return "array" if self.is_array else "object"

    @property
    def opens_preview(self) -> bool:
        return not self.is_simple_or_short and not self.is_link


def classify(value: Any) -> Classification:
    return Classification(
        is_container=is_container(value),
        is_array=is_array(value),
        is_simple_or_short=is_simple_or_short(value),
        is_link=is_link(value),
    )
