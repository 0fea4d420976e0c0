"""Preview overlay state and the corner-grip resize session.

``PreviewController`` is the one shared preview for a whole tree: opening a
new preview replaces the previous content. ``ResizeSession`` turns a
press/move*/release sequence into incremental size changes. Each move is
measured from the previous move, not from the press point, so the final size
depends on the order in which move events arrive.
"""

from __future__ import annotations

from typing import Any, Callable

from review_core.domain_impl.json import json_classify_core
from review_core.exceptions import EXPECTED_ERRORS
from review_core.review_state import PreviewState, ResizeGeometry
import logging
_LOG = logging.getLogger(__name__)

MOVE_SEQUENCE = "<B1-Motion>"
RELEASE_SEQUENCE = "<ButtonRelease-1>"


class PreviewController:
    def __init__(self, state: PreviewState | None = None, geometry: ResizeGeometry | None = None) -> None:
        self.state = state if state is not None else PreviewState()
        self.geometry = geometry if geometry is not None else ResizeGeometry()
        self._listeners: list[Callable[[PreviewState], Any]] = []

    def subscribe(self, listener: Callable[[PreviewState], Any]) -> None:
        if callable(listener) and listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: Callable[[PreviewState], Any]) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self) -> None:
        for listener in tuple(self._listeners):
            listener(self.state)

    @property
    def is_open(self) -> bool:
        return bool(self.state.open)

    @property
    def title(self) -> str:
        name = self.state.name
        return "" if name is None else str(name)

    @property
    def body_text(self) -> str:
        return json_classify_core.preview_text_for(self.state.value)

    def open(self, name: Any, value: Any) -> None:
        self.state.open = True
        self.state.name = name
        self.state.value = value
        _LOG.debug("preview opened for %r", name)
        self._notify()

    def close(self) -> None:
        if not self.state.open:
            return
        self.state.open = False
        self._notify()


class ResizeSession:
    """One drag of the resize grip.

    ``surface`` is anything with Tk-style ``bind(sequence, fn, add)`` returning
    a binding id and ``unbind(sequence, id)``; the application passes the
    toplevel window so moves and the release are seen anywhere in it.
    """

    def __init__(
        self,
        geometry: ResizeGeometry,
        surface: Any,
        on_resize: Callable[[ResizeGeometry], Any] | None = None,
    ) -> None:
        self.geometry = geometry
        self.surface = surface
        self._on_resize = on_resize
        self._last_pos: tuple[int, int] | None = None
        self._bindings: list[tuple[str, Any]] = []

    @property
    def active(self) -> bool:
        return self._last_pos is not None

    @property
    def binding_count(self) -> int:
        return len(self._bindings)

    def begin(self, x: int, y: int) -> bool:
        if self.active:
            return False
        self._last_pos = (int(x), int(y))
        self._bind_surface()
        return True

    def move(self, x: int, y: int) -> tuple[int, int] | None:
        if self._last_pos is None:
            return None
        last_x, last_y = self._last_pos
        self.geometry.apply_delta(int(x) - last_x, int(y) - last_y)
        self._last_pos = (int(x), int(y))
        if callable(self._on_resize):
            self._on_resize(self.geometry)
        return self.geometry.as_tuple()

    def end(self) -> bool:
        if self._last_pos is None:
            return False
        self._last_pos = None
        self._unbind_surface()
        _LOG.debug("resize session ended at %sx%s", self.geometry.width, self.geometry.height)
        return True

    def _on_move_event(self, event: Any) -> None:
        self.move(getattr(event, "x_root", 0), getattr(event, "y_root", 0))

    def _on_release_event(self, _event: Any = None) -> None:
        self.end()

    def _bind_surface(self) -> None:
        if self.surface is None:
            return
        for sequence, handler in ((MOVE_SEQUENCE, self._on_move_event), (RELEASE_SEQUENCE, self._on_release_event)):
            try:
                bind_id = self.surface.bind(sequence, handler, add="+")
            except EXPECTED_ERRORS as exc:
                _LOG.debug('expected_error', exc_info=exc)
                bind_id = None
            if bind_id:
                self._bindings.append((sequence, bind_id))

    def _unbind_surface(self) -> None:
        bindings = self._bindings
        self._bindings = []
        for sequence, bind_id in bindings:
            try:
                self.surface.unbind(sequence, bind_id)
            except EXPECTED_ERRORS as exc:
                _LOG.debug('expected_error', exc_info=exc)
