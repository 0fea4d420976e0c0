"""Structured runtime state buckets for one viewer activation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from review_core import constants


def clamp(value: int, lower: int, upper: int) -> int:
    return max(lower, min(upper, int(value)))


@dataclass(slots=True)
class ResizeGeometry:
    """Preview overlay size, always kept inside the configured bounds."""

    width: int = constants.PREVIEW_DEFAULT_WIDTH
    height: int = constants.PREVIEW_DEFAULT_HEIGHT

    def __post_init__(self) -> None:
        self.width = clamp(self.width, constants.PREVIEW_MIN_WIDTH, constants.PREVIEW_MAX_WIDTH)
        self.height = clamp(self.height, constants.PREVIEW_MIN_HEIGHT, constants.PREVIEW_MAX_HEIGHT)

    def apply_delta(self, dx: int, dy: int) -> "ResizeGeometry":
        """Grow/shrink in place by one pointer delta and clamp to bounds."""
        self.width = clamp(self.width + int(dx), constants.PREVIEW_MIN_WIDTH, constants.PREVIEW_MAX_WIDTH)
        self.height = clamp(self.height + int(dy), constants.PREVIEW_MIN_HEIGHT, constants.PREVIEW_MAX_HEIGHT)
        return self

    def as_tuple(self) -> tuple[int, int]:
        return self.width, self.height


@dataclass(slots=True)
class PreviewState:
    """Content of the single shared preview overlay."""

    open: bool = False
    name: Any = ""
    value: Any = None


@dataclass(slots=True)
class DocumentState:
    """Resolved activation input and its normalized document."""

    payload: Any = None
    source_path: str | None = None
    document: Any = None
    loaded: bool = False


@dataclass(slots=True)
class ReviewState:
    """Top-level grouped state container, discarded when the view exits."""

    route: str = ""
    document: DocumentState = field(default_factory=DocumentState)
    preview: PreviewState = field(default_factory=PreviewState)
    geometry: ResizeGeometry = field(default_factory=ResizeGeometry)
    error_message: str = ""

    def reset(self) -> None:
        self.route = ""
        self.document = DocumentState()
        self.preview = PreviewState()
        self.geometry = ResizeGeometry()
        self.error_message = ""
