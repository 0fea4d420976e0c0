"""Activation payload resolution and document loading."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from review_core.domain_impl.json import json_normalize_core
from review_core.exceptions import EXPECTED_ERRORS, PayloadError, SourceReadError
import logging
_LOG = logging.getLogger(__name__)

_INLINE_PAIRS = (("{", "}"), ("[", "]"))


@dataclass(frozen=True, slots=True)
class ResolvedInput:
    text: str
    source_path: str | None = None

    @property
    def is_inline(self) -> bool:
        return self.source_path is None


def payload_source(payload: Any) -> str:
    """Return the raw string carried by an activation payload."""
    if isinstance(payload, (list, tuple)):
        if not payload:
            raise PayloadError("Activation payload list is empty.")
        first = payload[0]
        path = first.get("path") if isinstance(first, dict) else getattr(first, "path", None)
        if path is None:
            raise PayloadError("First payload entry has no 'path' field.")
        return str(path)
    if isinstance(payload, str):
        return payload
    raise PayloadError(f"Unsupported activation payload type: {type(payload).__name__}")


def looks_like_inline_json(text: str) -> bool:
    # Checked on the raw text; surrounding whitespace makes it a path.
    return any(text.startswith(opener) and text.endswith(closer) for opener, closer in _INLINE_PAIRS)


def read_text_file(path: Any) -> str:
    use_path = str(path or "")
    try:
        with open(use_path, "r", encoding="utf-8-sig") as handle:
            return handle.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise SourceReadError(use_path, str(exc)) from exc


def resolve_input(payload: Any, read_file_fn: Callable[[str], str]) -> ResolvedInput:
    source = payload_source(payload)
    if looks_like_inline_json(source):
        return ResolvedInput(source, None)
    _LOG.info("reading source file %s", source)
    try:
        text = read_file_fn(source)
    except SourceReadError:
        raise
    except EXPECTED_ERRORS as exc:
        # Host readers are not limited to OSError.
        raise SourceReadError(source, str(exc)) from exc
    return ResolvedInput(str(text), source)


def load_document(payload: Any, read_file_fn: Callable[[str], str], unwrap_literals: bool = True) -> tuple[Any, ResolvedInput]:
    """Resolve the payload and return ``(normalized_document, resolved_input)``."""
    resolved = resolve_input(payload, read_file_fn)
    document = json_normalize_core.normalize_text(resolved.text, unwrap_literals=unwrap_literals)
    return document, resolved
