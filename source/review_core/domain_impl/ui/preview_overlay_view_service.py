"""Tk rendering of the shared preview overlay."""

import tkinter as tk
from typing import Any

from review_core import constants
from review_core.domain_impl.ui import asset_image_service
from review_core.domain_impl.ui import preview_overlay_service
from review_core.domain_impl.ui import tree_view_service
from review_core.domain_impl.ui.tree_view_service import TK_ERRORS
import logging
_LOG = logging.getLogger(__name__)


class PreviewOverlayView:
    """Centered card showing the open preview; follows controller changes."""

    def __init__(self, owner: Any, host: Any, controller: Any, surface: Any = None) -> None:
        self.owner = owner
        self.host = host
        self.controller = controller
        self.surface = surface if surface is not None else getattr(owner, "root", host)
        self.frame = None
        self.title_label = None
        self.text = None
        self.grip = None
        self.session = None
        controller.subscribe(self._on_state)

    def _theme(self) -> dict[str, Any]:
        return getattr(self.owner, "_theme", {}) or {}

    def _build(self) -> None:
        theme = self._theme()
        bg = theme.get("overlay_bg", "#11161f")
        fg = theme.get("overlay_fg", "#e6e6e6")
        font_size = int(getattr(self.owner, "_font_size", constants.DEFAULT_SETTINGS["font_size"]))
        family = tree_view_service.mono_family()
        frame = tk.Frame(
            self.host,
            bg=bg,
            bd=0,
            highlightthickness=1,
            highlightbackground=theme.get("overlay_border", "#264b64"),
            highlightcolor=theme.get("overlay_border", "#264b64"),
        )
        content = tk.Frame(frame, bg=bg, bd=0, highlightthickness=0)
        content.pack(fill="both", expand=True, padx=(24, 24), pady=(40, 24))
        self.title_label = tk.Label(
            content,
            text="",
            bg=bg,
            fg=fg,
            font=(family, font_size, "bold"),
            anchor="center",
        )
        self.title_label.pack(fill="x", pady=(8, 8))
        body = tk.Frame(content, bg=bg, bd=0, highlightthickness=0)
        body.pack(fill="both", expand=True)
        # wrap="char" also breaks long unbroken tokens; no horizontal scroll.
        self.text = tk.Text(
            body,
            wrap="char",
            bg=bg,
            fg=fg,
            insertbackground=fg,
            relief="flat",
            bd=0,
            highlightthickness=0,
            font=(family, font_size),
        )
        scrollbar = tk.Scrollbar(body, orient="vertical", command=self.text.yview)
        self.text.configure(yscrollcommand=scrollbar.set)
        self.text.pack(side="left", fill="both", expand=True)
        scrollbar.pack(side="right", fill="y")

        close_btn = tk.Button(
            frame,
            text="✖",
            command=self.controller.close,
            bd=0,
            relief="flat",
            highlightthickness=0,
            bg=bg,
            fg=theme.get("close_fg", "#888888"),
            activebackground=bg,
            font=(family, font_size + 4),
            cursor="hand2",
        )
        close_btn.place(x=8, y=8)

        grip_size = constants.PREVIEW_GRIP_SIZE
        self.grip = tk.Label(
            frame,
            image=asset_image_service.grip_photo(
                self.owner, theme.get("grip_fg", "#6c7a89"), size=grip_size - 4, master=frame
            ),
            bg=bg,
            bd=0,
            cursor="bottom_right_corner",
        )
        self.grip.place(relx=1.0, rely=1.0, anchor="se", width=grip_size, height=grip_size)
        self.grip.bind("<ButtonPress-1>", self._on_grip_press)
        # Clicks inside the card must not reach the tree below.
        frame.bind("<Button-1>", lambda _evt: "break")
        self.frame = frame

    def _place(self) -> None:
        if self.frame is None or not self.controller.is_open:
            return
        width, height = self.controller.geometry.as_tuple()
        self.frame.place(relx=0.5, rely=0.5, anchor="center", width=width, height=height)
        self.frame.lift()

    def _fill(self) -> None:
        self.title_label.configure(text=self.controller.title)
        self.text.configure(state="normal")
        self.text.delete("1.0", "end")
        self.text.insert("1.0", self.controller.body_text)
        self.text.configure(state="disabled")
        self.text.yview_moveto(0.0)

    def _on_state(self, state: Any) -> None:
        if state.open:
            if self.frame is None:
                self._build()
            self._fill()
            self._place()
            return
        # Only the pointer release ends a grip drag.
        if self.frame is not None:
            self.frame.place_forget()

    def _on_grip_press(self, event: Any) -> str:
        self._end_session()
        self.session = preview_overlay_service.ResizeSession(
            self.controller.geometry,
            self.surface,
            on_resize=lambda _geometry: self._place(),
        )
        self.session.begin(event.x_root, event.y_root)
        return "break"

    def _end_session(self) -> None:
        if self.session is not None:
            self.session.end()
            self.session = None

    def destroy(self) -> None:
        self._end_session()
        self.controller.unsubscribe(self._on_state)
        if self.frame is not None:
            try:
                self.frame.destroy()
            except TK_ERRORS as exc:
                _LOG.debug('expected_error', exc_info=exc)
            self.frame = None
