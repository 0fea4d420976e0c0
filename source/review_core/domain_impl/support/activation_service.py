"""Activation lifecycle: route selection and document loading on enter."""

from __future__ import annotations

from typing import Any

from review_core import constants
from review_core.domain_impl.json import json_io_core
from review_core.review_state import ReviewState
import logging
_LOG = logging.getLogger(__name__)


def action_field(action: Any, name: str, default: Any = None) -> Any:
    if isinstance(action, dict):
        return action.get(name, default)
    return getattr(action, name, default)


def route_of(action: Any) -> str:
    return str(action_field(action, "code", "") or "")


def enter(state: ReviewState, action: Any, bridge: Any, unwrap_literals: bool = True) -> bool:
    """Reset ``state`` and load the payload when the action targets the tree view.

    Returns False for other routes. ``SourceReadError`` and ``PayloadError``
    propagate to the caller with ``state.route`` already set.
    """
    state.reset()
    route = route_of(action)
    if route != constants.ROUTE_ANY_JSON_PARSE:
        _LOG.info("ignoring activation for route %r", route)
        return False
    state.route = route
    payload = action_field(action, "payload")
    state.document.payload = payload
    document, resolved = json_io_core.load_document(payload, bridge.read_file, unwrap_literals=unwrap_literals)
    state.document.document = document
    state.document.source_path = resolved.source_path
    state.document.loaded = True
    _LOG.info("activated %s (%s)", route, "inline" if resolved.is_inline else resolved.source_path)
    return True


def exit_view(state: ReviewState) -> None:
    _LOG.info("deactivated %s", state.route or "<idle>")
    state.reset()
