"""Tree model for a normalized document.

Nodes are cheap views over the document: children are derived from the
node value on demand and nothing but expansion flags is stored. Expansion
flags are keyed by the structural path from the root so re-deriving the tree
from the same document keeps every node's open/closed state.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator

from review_core.domain_impl.json import json_classify_core

Path = tuple[Any, ...]
ROOT_PATH: Path = ()
ROOT_LABEL = "root"


def get_value(root_value: Any, path: Any) -> Any:
    """Resolve nested value from root by path keys/indexes."""
    value = root_value
    for key in path:
        value = value[key]
    return value


def format_path_for_display(path: Any) -> str:
    parts = [ROOT_LABEL]
    for token in path:
        if isinstance(token, int):
            parts.append(f"[{token}]")
        else:
            parts.append(f".{token}")
    return "".join(parts)


@dataclass(frozen=True, slots=True)
class TreeNode:
    name: Any
    value: Any
    path: Path = ROOT_PATH

    @property
    def is_container(self) -> bool:
        return json_classify_core.is_container(self.value)

    @property
    def depth(self) -> int:
        return len(self.path)

    def children(self) -> list["TreeNode"]:
        if isinstance(self.value, list):
            return [TreeNode(idx, item, self.path + (idx,)) for idx, item in enumerate(self.value)]
        if isinstance(self.value, dict):
            return [TreeNode(key, item, self.path + (key,)) for key, item in self.value.items()]
        return []

    def display_path(self) -> str:
        return format_path_for_display(self.path)


def build_tree(document: Any) -> TreeNode:
    return TreeNode(None, document, ROOT_PATH)


def node_at(root: TreeNode, path: Any) -> TreeNode:
    use_path = tuple(path or ())
    if not use_path:
        return root
    return TreeNode(use_path[-1], get_value(root.value, use_path), use_path)


class ExpansionStore:
    """Per-path Collapsed/Expanded flags; every container starts Expanded."""

    def __init__(self) -> None:
        self._flags: dict[Path, bool] = {}

    def is_expanded(self, node: TreeNode) -> bool:
        if not node.is_container:
            return False
        return self._flags.get(node.path, True)

    def toggle(self, node: TreeNode) -> bool:
        """Flip a container's flag and return True; leaves are left alone."""
        if not node.is_container:
            return False
        self._flags[node.path] = not self.is_expanded(node)
        return True


@dataclass(frozen=True, slots=True)
class TreeRow:
    """Render record for one visible node."""

    node: TreeNode
    expanded: bool
    classification: json_classify_core.Classification

    @property
    def path(self) -> Path:
        return self.node.path

    @property
    def depth(self) -> int:
        return self.node.depth

    @property
    def label(self) -> str:
        name = self.node.name
        return "" if name is None else f"{name}:"

    @property
    def value_text(self) -> str:
        if self.classification.is_container:
            return ""
        return json_classify_core.summary(self.node.value)


def iter_visible(node: TreeNode, store: ExpansionStore) -> Iterator[TreeRow]:
    expanded = store.is_expanded(node)
    yield TreeRow(node, expanded, json_classify_core.classify(node.value))
    if expanded:
        for child in node.children():
            yield from iter_visible(child, store)


def visible_rows(root: TreeNode, store: ExpansionStore) -> list[TreeRow]:
    return list(iter_visible(root, store))
