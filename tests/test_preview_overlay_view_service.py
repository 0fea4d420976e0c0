"""Grip drag behaviour of the preview overlay view, without a display."""
from types import SimpleNamespace

import pytest

pytest.importorskip("tkinter")
pytest.importorskip("PIL.ImageTk")

from review_core.domain_impl.ui import preview_overlay_service as pos
from review_core.domain_impl.ui import preview_overlay_view_service as povs
from review_core.review_state import ResizeGeometry


@pytest.fixture
def view(surface):
    controller = pos.PreviewController(geometry=ResizeGeometry(700, 400))
    # Opened before the view subscribes, so no widgets are built.
    controller.open("body", "some long preview text for the overlay")
    return povs.PreviewOverlayView(SimpleNamespace(), None, controller, surface=surface)


def test_closing_during_drag_does_not_cancel_it(view, surface):
    view._on_grip_press(SimpleNamespace(x_root=0, y_root=0))
    surface.fire(pos.MOVE_SEQUENCE, x_root=10, y_root=10)
    view.controller.close()
    assert view.session.active
    assert surface.active_count() == 2
    surface.fire(pos.MOVE_SEQUENCE, x_root=30, y_root=20)
    assert view.controller.geometry.as_tuple() == (730, 420)
    surface.fire(pos.RELEASE_SEQUENCE, x_root=30, y_root=20)
    assert not view.session.active
    assert surface.active_count() == 0


def test_new_press_replaces_finished_session(view, surface):
    view._on_grip_press(SimpleNamespace(x_root=0, y_root=0))
    surface.fire(pos.RELEASE_SEQUENCE)
    view._on_grip_press(SimpleNamespace(x_root=5, y_root=5))
    assert view.session.active
    assert surface.active_count() == 2


def test_destroy_releases_drag_bindings(view, surface):
    view._on_grip_press(SimpleNamespace(x_root=0, y_root=0))
    view.destroy()
    assert surface.active_count() == 0
