"""Support domain package: host bridge, clipboard and link helpers."""

from __future__ import annotations

from . import activation_service
from . import clipboard_service
from . import host_bridge_service
from . import link_service

__all__ = [
    "activation_service",
    "clipboard_service",
    "host_bridge_service",
    "link_service",
]
