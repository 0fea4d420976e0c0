"""Host bridge: file read, clipboard write and external open.

The viewer core never touches the platform directly. A host (a launcher
plugin, the desktop window in ``anyjson_review``) hands in whatever
callables it has; missing ones fall back to generic mechanisms and
clipboard/open failures are swallowed after a debug log.
"""

from __future__ import annotations

from typing import Any, Callable

from review_core.domain_impl.json import json_io_core
from review_core.domain_impl.support import clipboard_service
from review_core.exceptions import EXPECTED_ERRORS
import logging
_LOG = logging.getLogger(__name__)


class HostBridge:
    def __init__(
        self,
        read_file_fn: Callable[[str], str] | None = None,
        copy_text_fn: Callable[[str], Any] | None = None,
        open_external_fn: Callable[[str], Any] | None = None,
        clipboard_root: Any = None,
    ) -> None:
        self._read_file_fn = read_file_fn if callable(read_file_fn) else json_io_core.read_text_file
        self._copy_text_fn = copy_text_fn if callable(copy_text_fn) else None
        self._open_external_fn = open_external_fn if callable(open_external_fn) else None
        self.clipboard_root = clipboard_root

    @property
    def has_external_opener(self) -> bool:
        return self._open_external_fn is not None

    def read_file(self, path: str) -> str:
        # Read failures propagate to the host error surface.
        return self._read_file_fn(path)

    def copy_text(self, text: str) -> bool:
        """Best-effort copy: host clipboard, then the Tk clipboard, then give up."""
        if self._copy_text_fn is not None:
            try:
                self._copy_text_fn(text)
                return True
            except EXPECTED_ERRORS as exc:
                _LOG.debug('expected_error', exc_info=exc)
        copied = clipboard_service.copy_text_to_clipboard(text, self.clipboard_root, EXPECTED_ERRORS)
        if not copied:
            _LOG.debug("clipboard unavailable; copy dropped")
        return copied

    def open_external(self, url: str) -> bool:
        if self._open_external_fn is None:
            return False
        try:
            self._open_external_fn(url)
            return True
        except EXPECTED_ERRORS as exc:
            _LOG.debug('expected_error', exc_info=exc)
            return False
