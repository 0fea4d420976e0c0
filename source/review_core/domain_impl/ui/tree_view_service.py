"""Tk Treeview binding for the document tree.

One Treeview item per visible node. Column ``#0`` holds the marker image and
the ``name:`` label, ``#1`` the value summary and ``#2`` the copy glyph. All
clicks are handled here and end with ``"break"`` so the Treeview's own
open/close and selection bindings never run.
"""

import tkinter as tk
import tkinter.font as tkfont
from tkinter import ttk
from typing import Any

from review_core import constants
from review_core.domain_impl.json import json_tree_core
from review_core.domain_impl.ui import asset_image_service
from review_core.domain_impl.ui import tree_interaction_service
from review_core.exceptions import EXPECTED_ERRORS
import logging
_LOG = logging.getLogger(__name__)

TK_ERRORS = (tk.TclError,) + tuple(EXPECTED_ERRORS)

_ITEM_LAYOUT_NO_INDICATOR = [
    (
        "Treeitem.padding",
        {
            "sticky": "nswe",
            "children": [
                ("Treeitem.image", {"side": "left", "sticky": ""}),
                (
                    "Treeitem.focus",
                    {
                        "side": "left",
                        "sticky": "",
                        "children": [("Treeitem.text", {"side": "left", "sticky": ""})],
                    },
                ),
            ],
        },
    )
]


def mono_family() -> str:
    try:
        return tkfont.nametofont("TkFixedFont").actual("family")
    except TK_ERRORS as exc:
        _LOG.debug('expected_error', exc_info=exc)
        return "Courier"


def apply_styles(owner: Any, style: Any = None) -> None:
    """Apply Treeview colors/fonts and hide the native indicator."""
    if style is None:
        style = ttk.Style(owner.root)
    theme = getattr(owner, "_theme", {}) or {}
    font_size = int(getattr(owner, "_font_size", constants.DEFAULT_SETTINGS["font_size"]))
    panel = theme.get("panel", "#161b24")
    style.configure(
        "Review.Treeview",
        background=panel,
        fieldbackground=panel,
        foreground=theme.get("fg", "#e6e6e6"),
        font=(mono_family(), font_size),
        rowheight=font_size * 2 + 4,
        bordercolor=panel,
        lightcolor=panel,
        darkcolor=panel,
    )
    try:
        style.layout("Review.Treeview.Item", _ITEM_LAYOUT_NO_INDICATOR)
    except TK_ERRORS as exc:
        _LOG.debug('expected_error', exc_info=exc)
    style.map(
        "Review.Treeview",
        background=[("selected", theme.get("select_bg", "#2f3a4d"))],
        foreground=[("selected", theme.get("select_fg", "#ffffff"))],
    )


class DocumentTreeView:
    def __init__(self, owner: Any, parent: Any, interaction: Any) -> None:
        self.owner = owner
        self.interaction = interaction
        self.item_to_path: dict[str, json_tree_core.Path] = {}
        self.path_to_item: dict[json_tree_core.Path, str] = {}
        theme = getattr(owner, "_theme", {}) or {}

        apply_styles(owner)
        self.frame = tk.Frame(parent, bg=theme.get("panel", "#161b24"), bd=0, highlightthickness=0)
        self.tree = ttk.Treeview(
            self.frame,
            columns=("value", "copy"),
            show="tree",
            selectmode="none",
            style="Review.Treeview",
        )
        self.tree.column("#0", stretch=True, minwidth=120)
        self.tree.column("value", width=constants.TREE_VALUE_COLUMN_WIDTH, stretch=False, anchor="w")
        self.tree.column("copy", width=constants.TREE_COPY_COLUMN_WIDTH, stretch=False, anchor="center")
        for kind in ("object", "array"):
            self.tree.tag_configure(kind, foreground=theme.get("name_fg", "#58a4f6"))
        self.tree.tag_configure("leaf", foreground=theme.get("value_fg", "#9aa7b4"))
        self.tree.tag_configure("link", foreground=theme.get("link_fg", "#6aa9ff"))
        scrollbar = ttk.Scrollbar(self.frame, orient="vertical", command=self.tree.yview)
        self.tree.configure(yscrollcommand=scrollbar.set)
        self.tree.pack(side="left", fill="both", expand=True)
        scrollbar.pack(side="right", fill="y")

        self.tree.bind("<Button-1>", self._on_click)
        self.tree.bind("<Double-Button-1>", lambda _evt: "break")
        self.tree.bind("<Motion>", self._on_motion)

    def pack(self, **kwargs: Any) -> None:
        self.frame.pack(**kwargs)

    def destroy(self) -> None:
        self.item_to_path.clear()
        self.path_to_item.clear()
        try:
            self.frame.destroy()
        except TK_ERRORS as exc:
            _LOG.debug('expected_error', exc_info=exc)

    def _marker_image(self, expanded: bool) -> Any:
        theme = getattr(self.owner, "_theme", {}) or {}
        size = max(8, int(getattr(self.owner, "_font_size", 11)))
        return asset_image_service.marker_photo(
            self.owner, expanded, theme.get("marker_fg", "#d7f2ff"), size=size, master=self.tree
        )

    def _row_options(self, row: json_tree_core.TreeRow) -> dict[str, Any]:
        info = row.classification
        tags = (info.kind, "link") if info.is_link else (info.kind,)
        options = {
            "text": row.label,
            "values": (row.value_text, constants.TREE_COPY_GLYPH),
            "open": True,
            "tags": tags,
        }
        if info.is_container:
            options["image"] = self._marker_image(row.expanded)
        return options

    def _insert_rows(self, parent_item: str, rows: list[json_tree_core.TreeRow]) -> None:
        # rows come depth-first; a row's parent is the last row one level up.
        base_depth = rows[0].depth if rows else 0
        parents = {base_depth - 1: parent_item}
        for row in rows:
            item_id = self.tree.insert(parents[row.depth - 1], "end", **self._row_options(row))
            self.item_to_path[item_id] = row.path
            self.path_to_item[row.path] = item_id
            parents[row.depth] = item_id

    def render(self) -> None:
        for child in self.tree.get_children(""):
            self.tree.delete(child)
        self.item_to_path.clear()
        self.path_to_item.clear()
        self._insert_rows("", self.interaction.rows())

    def _forget_descendants(self, item_id: str) -> None:
        for child in self.tree.get_children(item_id):
            self._forget_descendants(child)
            path = self.item_to_path.pop(child, None)
            if path is not None:
                self.path_to_item.pop(path, None)

    def refresh_node(self, path: Any) -> None:
        """Re-render one container row and its subtree after a toggle."""
        item_id = self.path_to_item.get(tuple(path))
        if item_id is None:
            self.render()
            return
        self._forget_descendants(item_id)
        for child in self.tree.get_children(item_id):
            self.tree.delete(child)
        rows = self.interaction.subtree_rows(path)
        if not rows:
            return
        self.tree.item(item_id, **self._row_options(rows[0]))
        if len(rows) > 1:
            self._insert_rows(item_id, rows[1:])

    def _hit(self, event: Any) -> tuple[Any, str] | None:
        item_id = self.tree.identify_row(event.y)
        if not item_id:
            return None
        path = self.item_to_path.get(item_id)
        if path is None:
            return None
        column = self.tree.identify_column(event.x)
        element = self.tree.identify_element(event.x, event.y)
        values = self.tree.item(item_id, "values") or ("",)
        has_value_text = bool(str(values[0]))
        return path, tree_interaction_service.hit_target(column, element, has_value_text)

    def _on_click(self, event: Any) -> str:
        hit = self._hit(event)
        if hit is None:
            return "break"
        path, target = hit
        action = self.interaction.dispatch(path, target)
        if action == tree_interaction_service.ACTION_TOGGLE:
            self.refresh_node(path)
        return "break"

    def _on_motion(self, event: Any) -> None:
        hit = self._hit(event)
        cursor = ""
        if hit is not None and self.interaction.is_interactive(*hit):
            cursor = "hand2"
        try:
            if str(self.tree.cget("cursor")) != cursor:
                self.tree.configure(cursor=cursor)
        except TK_ERRORS as exc:
            _LOG.debug('expected_error', exc_info=exc)
