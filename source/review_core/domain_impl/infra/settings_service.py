"""User settings loading for the viewer.

Settings are optional, read-only configuration. A missing or unreadable file
simply yields the defaults; individual bad values fall back one by one.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from typing import Any

from review_core import constants
from review_core.domain_impl.infra import runtime_paths_service
from review_core.exceptions import EXPECTED_ERRORS
import logging
_LOG = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ReviewSettings:
    unwrap_json_literals: bool = constants.DEFAULT_SETTINGS["unwrap_json_literals"]
    font_size: int = constants.DEFAULT_SETTINGS["font_size"]
    theme: str = constants.DEFAULT_SETTINGS["theme"]
    debug_logging: bool = constants.DEFAULT_SETTINGS["debug_logging"]


def settings_path(runtime_dir: Any = None) -> str:
    base = runtime_dir or runtime_paths_service.runtime_data_dir(create=False)
    return os.path.join(str(base), constants.SETTINGS_FILENAME)


def _coerce_bool(value: Any, default: bool) -> bool:
    return value if isinstance(value, bool) else default


def _coerce_font_size(value: Any, default: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        return default
    if constants.FONT_SIZE_MIN <= value <= constants.FONT_SIZE_MAX:
        return value
    return default


def _coerce_theme(value: Any, default: str) -> str:
    text = str(value or "").strip().upper()
    return text if text in constants.THEME_VARIANTS else default


def settings_from_mapping(raw: Any) -> ReviewSettings:
    defaults = ReviewSettings()
    if not isinstance(raw, dict):
        return defaults
    return ReviewSettings(
        unwrap_json_literals=_coerce_bool(raw.get("unwrap_json_literals"), defaults.unwrap_json_literals),
        font_size=_coerce_font_size(raw.get("font_size"), defaults.font_size),
        theme=_coerce_theme(raw.get("theme"), defaults.theme),
        debug_logging=_coerce_bool(raw.get("debug_logging"), defaults.debug_logging),
    )


def load_settings(path: Any = None) -> ReviewSettings:
    """Load user settings (literal unwrapping, font size, theme, log level)."""
    use_path = str(path or settings_path())
    if not os.path.isfile(use_path):
        return ReviewSettings()
    try:
        with open(use_path, "r", encoding="utf-8-sig") as fh:
            raw = json.load(fh)
    except EXPECTED_ERRORS as exc:
        _LOG.debug('expected_error', exc_info=exc)
        return ReviewSettings()
    return settings_from_mapping(raw)
