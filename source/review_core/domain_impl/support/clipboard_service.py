"""Clipboard helpers for Tk-root text copy flows."""
from typing import Any


def copy_text_to_clipboard(payload: Any, root: Any, expected_errors: Any) -> bool:
    """Copy text payload verbatim into root clipboard; return success bool."""
    if payload is None or root is None:
        return False
    text = str(payload)
    try:
        root.clipboard_clear()
        root.clipboard_append(text)
        root.update_idletasks()
        return True
    except expected_errors:
        return False
