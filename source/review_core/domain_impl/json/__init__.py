"""JSON domain package exports."""

from __future__ import annotations

from . import json_classify_core
from . import json_io_core
from . import json_normalize_core
from . import json_tree_core

__all__ = [
    "json_classify_core",
    "json_io_core",
    "json_normalize_core",
    "json_tree_core",
]
