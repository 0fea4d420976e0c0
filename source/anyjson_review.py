import sys
import tkinter as tk
from review_core import constants as app_constants
from review_core.domain_impl.infra import runtime_log_service
from review_core.domain_impl.infra import runtime_paths_service
from review_core.domain_impl.infra import settings_service
from review_core.domain_impl.support import activation_service
from review_core.domain_impl.support import host_bridge_service
from review_core.domain_impl.ui import error_overlay_service
from review_core.domain_impl.ui import preview_overlay_service
from review_core.domain_impl.ui import preview_overlay_view_service
from review_core.domain_impl.ui import theme_service
from review_core.domain_impl.ui import tree_interaction_service
from review_core.domain_impl.ui import tree_view_service
from review_core.exceptions import PayloadError, SourceReadError
from review_core.review_state import ReviewState
import logging
_LOG = logging.getLogger("anyjson_review")


class AnyJsonReviewApp:
    APP_VERSION = app_constants.APP_VERSION
    ROUTE_CODE = app_constants.ROUTE_ANY_JSON_PARSE

    def __init__(self, root, settings=None, bridge=None):
        self.root = root
        self.settings = settings if settings is not None else settings_service.ReviewSettings()
        self.bridge = bridge if bridge is not None else host_bridge_service.HostBridge(clipboard_root=root)
        if getattr(self.bridge, "clipboard_root", None) is None:
            self.bridge.clipboard_root = root
        self.state = ReviewState()
        self._font_size = self.settings.font_size
        self._app_theme_variant = self.settings.theme
        self._theme = theme_service.theme_palette_for_variant(self._app_theme_variant)
        self.preview = None
        self.interaction = None
        self.tree_view = None
        self.preview_view = None
        self.error_overlay = None
        self._build_ui()

    def _build_ui(self):
        self.root.title(f"{app_constants.APP_TITLE} {self.APP_VERSION}")
        self.root.geometry("960x680")
        self.root.configure(bg=self._theme["bg"])
        self.body = tk.Frame(self.root, bg=self._theme["panel"], bd=0, highlightthickness=0)
        self.body.pack(fill="both", expand=True)

    # --- activation lifecycle -------------------------------------------------

    def enter(self, action):
        """Activate a route; only the tree route renders anything."""
        self.exit()
        try:
            activated = activation_service.enter(
                self.state,
                action,
                self.bridge,
                unwrap_literals=self.settings.unwrap_json_literals,
            )
        except SourceReadError as exc:
            _LOG.warning("source read failed: %s", exc)
            self._show_error("Could not open source", str(exc))
            return False
        except PayloadError as exc:
            _LOG.warning("bad activation payload: %s", exc)
            self._show_error("Unsupported input", str(exc))
            return False
        if not activated:
            return False
        self._build_view()
        return True

    def exit(self):
        """Tear the view down and discard tree, preview and error state."""
        if self.preview_view is not None:
            self.preview_view.destroy()
            self.preview_view = None
        if self.tree_view is not None:
            self.tree_view.destroy()
            self.tree_view = None
        self.interaction = None
        self.preview = None
        error_overlay_service.destroy_error_overlay(self)
        activation_service.exit_view(self.state)

    def _build_view(self):
        self.preview = preview_overlay_service.PreviewController(self.state.preview, self.state.geometry)
        self.interaction = tree_interaction_service.TreeInteraction(
            self.state.document.document,
            self.preview,
            self.bridge,
        )
        self.tree_view = tree_view_service.DocumentTreeView(self, self.body, self.interaction)
        self.tree_view.pack(fill="both", expand=True, padx=(16, 0), pady=(8, 8))
        self.tree_view.render()
        self.preview_view = preview_overlay_view_service.PreviewOverlayView(
            self, self.body, self.preview, surface=self.root
        )

    def close(self):
        self.exit()
        self.root.destroy()

    def _show_error(self, title, message):
        try:
            error_overlay_service.show_error_overlay(self, title, message)
        except tree_view_service.TK_ERRORS as exc:
            _LOG.debug('expected_error', exc_info=exc)


def _action_from_argv(argv):
    if len(argv) < 1:
        return None
    return {"code": app_constants.ROUTE_ANY_JSON_PARSE, "payload": argv[0]}


def main(argv=None):
    args = list(sys.argv[1:] if argv is None else argv)
    runtime_dir = runtime_paths_service.runtime_data_dir(create=True)
    settings = settings_service.load_settings(settings_service.settings_path(runtime_dir))
    handler = runtime_log_service.configure_diag_logging(runtime_dir, debug=settings.debug_logging)
    root = tk.Tk()
    app = AnyJsonReviewApp(root, settings=settings)
    root.protocol("WM_DELETE_WINDOW", app.close)
    action = _action_from_argv(args)
    if action is not None:
        root.after_idle(lambda: app.enter(action))
    try:
        root.mainloop()
    finally:
        runtime_log_service.detach_diag_logging(handler)
    return 0


if __name__ == "__main__":
    sys.exit(main())
