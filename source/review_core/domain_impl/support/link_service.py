"""Default link navigation used when the host has no external opener."""

import webbrowser
from typing import Any
from review_core.exceptions import EXPECTED_ERRORS
import logging
_LOG = logging.getLogger(__name__)


def open_in_browser(url: Any, opener: Any = None) -> bool:
    use_opener = opener if callable(opener) else webbrowser.open_new_tab
    try:
        return bool(use_opener(str(url)))
    except EXPECTED_ERRORS as exc:
        _LOG.debug('expected_error', exc_info=exc)
        return False
