"""Shared exception classes and expected-error tuple for the viewer core."""

from __future__ import annotations

from typing import TypeAlias


class AppError(Exception):
    """Base class for expected application-layer failures."""


class AppRuntimeError(RuntimeError, AppError):
    """Raised for runtime operation failures with user-facing context."""


class SourceReadError(AppRuntimeError):
    """Raised when the activation source file cannot be read."""

    def __init__(self, path: str, reason: str = "") -> None:
        self.path = str(path or "")
        self.reason = str(reason or "")
        message = f"Could not read {self.path!r}"
        if self.reason:
            message = f"{message}: {self.reason}"
        super().__init__(message)


class PayloadError(ValueError, AppError):
    """Raised when an activation payload does not carry a usable source."""


EXPECTED_ERRORS: TypeAlias = (
    OSError,
    ValueError,
    TypeError,
    RuntimeError,
    AttributeError,
    KeyError,
    IndexError,
    ImportError,
)
