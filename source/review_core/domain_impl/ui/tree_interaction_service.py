"""Row interaction state machine for the document tree.

Every handler takes a node path and performs exactly one action. The Tk
layer in ``tree_view_service`` maps clicks to these handlers and stops event
propagation itself; nothing here knows about widgets.
"""

from __future__ import annotations

from typing import Any, Callable

from review_core.domain_impl.json import json_classify_core
from review_core.domain_impl.json import json_tree_core
from review_core.domain_impl.support import link_service
import logging
_LOG = logging.getLogger(__name__)

ACTION_NONE = "none"
ACTION_TOGGLE = "toggle"
ACTION_PREVIEW = "preview"
ACTION_COPY = "copy"
ACTION_OPEN_EXTERNAL = "open_external"
ACTION_OPEN_BROWSER = "open_browser"

TARGET_ROW = "row"
TARGET_LABEL = "label"
TARGET_VALUE = "value"
TARGET_COPY = "copy"

NAME_COLUMN = "#0"
VALUE_COLUMN = "#1"
COPY_COLUMN = "#2"


def hit_target(column: Any, element: Any, has_value_text: bool) -> str:
    """Map a Treeview hit (column id, element name) to the row part clicked."""
    use_column = str(column or "")
    use_element = str(element or "")
    if use_column == COPY_COLUMN:
        return TARGET_COPY
    if use_column == VALUE_COLUMN:
        return TARGET_VALUE if has_value_text else TARGET_ROW
    if use_column == NAME_COLUMN and use_element.endswith("text"):
        return TARGET_LABEL
    return TARGET_ROW


class TreeInteraction:
    def __init__(
        self,
        document: Any,
        preview: Any,
        bridge: Any,
        browser_open_fn: Callable[[str], Any] | None = None,
        on_change: Callable[[Any], Any] | None = None,
    ) -> None:
        self.root = json_tree_core.build_tree(document)
        self.store = json_tree_core.ExpansionStore()
        self.preview = preview
        self.bridge = bridge
        self._browser_open_fn = browser_open_fn
        self._on_change = on_change

    def node(self, path: Any) -> json_tree_core.TreeNode:
        return json_tree_core.node_at(self.root, path)

    def rows(self) -> list[json_tree_core.TreeRow]:
        return json_tree_core.visible_rows(self.root, self.store)

    def subtree_rows(self, path: Any) -> list[json_tree_core.TreeRow]:
        return json_tree_core.visible_rows(self.node(path), self.store)

    def is_expanded(self, path: Any) -> bool:
        return self.store.is_expanded(self.node(path))

    def click_row(self, path: Any) -> str:
        """Row background click: toggle containers, ignore leaves."""
        node = self.node(path)
        if not self.store.toggle(node):
            return ACTION_NONE
        _LOG.debug("toggled %s -> %s", node.display_path(), self.store.is_expanded(node))
        if callable(self._on_change):
            self._on_change(node.path)
        return ACTION_TOGGLE

    def click_label(self, path: Any) -> str:
        """Name label or value area click; never reaches the row toggle."""
        node = self.node(path)
        info = json_classify_core.classify(node.value)
        if not info.opens_preview:
            return ACTION_NONE
        self.preview.open(node.name, node.value)
        return ACTION_PREVIEW

    def click_value(self, path: Any) -> str:
        node = self.node(path)
        if json_classify_core.is_link(node.value):
            return self.activate_link(path)
        return self.click_label(path)

    def activate_link(self, path: Any) -> str:
        node = self.node(path)
        if not json_classify_core.is_link(node.value):
            return ACTION_NONE
        url = json_classify_core.link_target(node.value)
        if self.bridge is not None and self.bridge.has_external_opener:
            self.bridge.open_external(url)
            _LOG.info("opened link externally: %s", url)
            return ACTION_OPEN_EXTERNAL
        link_service.open_in_browser(url, self._browser_open_fn)
        _LOG.info("opened link in browser: %s", url)
        return ACTION_OPEN_BROWSER

    def dispatch(self, path: Any, target: str) -> str:
        match target:
            case "copy":
                return self.copy(path)
            case "value":
                return self.click_value(path)
            case "label":
                return self.click_label(path)
            case _:
                return self.click_row(path)

    def is_interactive(self, path: Any, target: str) -> bool:
        """Whether the pointer over ``target`` should show a hand cursor."""
        node = self.node(path)
        info = json_classify_core.classify(node.value)
        match target:
            case "copy":
                return True
            case "value":
                return info.is_link or info.opens_preview
            case "label":
                return info.opens_preview
            case _:
                return info.is_container

    def copy(self, path: Any) -> str:
        node = self.node(path)
        text = json_classify_core.copy_text_for(node.value)
        if self.bridge is not None:
            self.bridge.copy_text(text)
        _LOG.debug("copied %s (%d chars)", node.display_path(), len(text))
        return ACTION_COPY
