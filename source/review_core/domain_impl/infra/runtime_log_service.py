"""Diagnostics log file housekeeping and logger wiring."""

import logging
import os
from datetime import datetime, timedelta
from typing import Any

from review_core import constants

_LOG = logging.getLogger(__name__)

LOGGER_NAMES = ("review_core", "anyjson_review")
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
TRUNCATED_MARKER = b"\n--- log truncated ---\n"


def diag_log_path(runtime_dir: Any, now: Any = None) -> str:
    stamp = (now or datetime.now()).strftime("%Y-%m-%d")
    base, ext = os.path.splitext(constants.DIAG_LOG_FILENAME)
    return os.path.join(str(runtime_dir), f"{base}-{stamp}{ext}")


def trim_text_file_for_append(path: Any, max_bytes: int, keep_bytes: int) -> bool:
    """Keep only the tail of an oversized log; return True when trimmed."""
    if not os.path.isfile(path):
        return False
    if max_bytes <= 0 or keep_bytes <= 0:
        return False
    try:
        size = os.path.getsize(path)
    except OSError as exc:
        _LOG.debug('expected_error', exc_info=exc)
        return False
    if size <= max_bytes:
        return False
    keep_bytes = min(int(keep_bytes), int(size))
    try:
        with open(path, "rb") as src:
            src.seek(size - keep_bytes)
            tail = src.read()
        with open(path, "wb") as dst:
            dst.write(TRUNCATED_MARKER)
            dst.write(tail)
    except OSError as exc:
        _LOG.debug('expected_error', exc_info=exc)
        return False
    return True


def purge_stale_diag_logs(runtime_dir: Any, keep_days: int = constants.DIAG_LOG_KEEP_DAYS, now: Any = None) -> list[str]:
    """Delete dated diagnostics logs older than ``keep_days``; return removed names."""
    use_now = now or datetime.now()
    base, ext = os.path.splitext(constants.DIAG_LOG_FILENAME)
    prefix = f"{base}-"
    keep_stamps = {(use_now - timedelta(days=offset)).strftime("%Y-%m-%d") for offset in range(max(1, int(keep_days)))}
    removed = []
    try:
        entries = list(os.scandir(runtime_dir))
    except OSError as exc:
        _LOG.debug('expected_error', exc_info=exc)
        return removed
    for entry in entries:
        name = entry.name
        if not (name.startswith(prefix) and name.endswith(ext)):
            continue
        stamp = name[len(prefix) : len(name) - len(ext)]
        if stamp in keep_stamps:
            continue
        try:
            os.remove(entry.path)
        except OSError as exc:
            _LOG.debug('expected_error', exc_info=exc)
            continue
        removed.append(name)
    return removed


def configure_diag_logging(runtime_dir: Any, debug: bool = False, now: Any = None) -> logging.Handler | None:
    """Attach a file handler for the diagnostics log to the app loggers."""
    path = diag_log_path(runtime_dir, now)
    purge_stale_diag_logs(runtime_dir, now=now)
    trim_text_file_for_append(path, constants.DIAG_LOG_MAX_BYTES, constants.DIAG_LOG_KEEP_BYTES)
    try:
        handler = logging.FileHandler(path, encoding="utf-8")
    except OSError as exc:
        _LOG.debug('expected_error', exc_info=exc)
        return None
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    level = logging.DEBUG if debug else logging.INFO
    handler.setLevel(level)
    for name in LOGGER_NAMES:
        logger = logging.getLogger(name)
        logger.setLevel(level)
        logger.addHandler(handler)
    return handler


def detach_diag_logging(handler: Any) -> None:
    if handler is None:
        return
    for name in LOGGER_NAMES:
        logging.getLogger(name).removeHandler(handler)
    handler.close()
