import tkinter as tk
from typing import Any

from review_core.domain_impl.ui import tree_view_service
from review_core.domain_impl.ui.tree_view_service import TK_ERRORS
import logging
_LOG = logging.getLogger(__name__)


def show_error_overlay(owner: Any, title: Any, message: Any) -> Any:
    # Floating error card over the view body; click anywhere on it to dismiss.
    destroy_error_overlay(owner)
    theme = getattr(owner, "_theme", {}) or {}
    overlay_bg = theme.get("error_bg", "#2a1215")
    overlay_fg = theme.get("error_fg", "#ffd7d7")
    font_size = int(getattr(owner, "_font_size", 11) or 11)
    overlay = tk.Frame(
        owner.body,
        bg=overlay_bg,
        bd=0,
        highlightthickness=2,
        highlightbackground=theme.get("error_border", "#c24b55"),
        highlightcolor=theme.get("error_border", "#c24b55"),
    )
    overlay.place(x=12, y=12)
    title_label = tk.Label(
        overlay,
        text=str(title or ""),
        bg=overlay_bg,
        fg=overlay_fg,
        font=(tree_view_service.mono_family(), font_size, "bold"),
        anchor="w",
        justify="left",
    )
    title_label.pack(fill="x", padx=10, pady=(8, 2))
    msg_label = tk.Label(
        overlay,
        text=str(message or ""),
        bg=overlay_bg,
        fg=overlay_fg,
        font=(tree_view_service.mono_family(), font_size),
        anchor="w",
        justify="left",
        wraplength=560,
    )
    msg_label.pack(fill="both", padx=10, pady=(0, 8))
    for widget in (overlay, title_label, msg_label):
        widget.bind("<Button-1>", lambda _evt: destroy_error_overlay(owner))
    owner.error_overlay = overlay
    owner.state.error_message = str(message or "")
    return overlay


def destroy_error_overlay(owner: Any) -> None:
    overlay = getattr(owner, "error_overlay", None)
    if overlay is not None:
        try:
            overlay.destroy()
        except TK_ERRORS as exc:
            _LOG.debug('expected_error', exc_info=exc)
        owner.error_overlay = None
    state = getattr(owner, "state", None)
    if state is not None:
        state.error_message = ""
