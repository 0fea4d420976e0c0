"""Runtime data path resolution helpers."""

import os
import sys
from typing import Any

from review_core import constants


def runtime_data_dir(
    runtime_dir_name: Any = constants.RUNTIME_DIR_NAME,
    create: Any = False,
    platform_name: Any = None,
    env: Any = None,
    expected_errors: Any = (OSError, ValueError, TypeError),
) -> Any:
    """Resolve runtime data directory path with platform-aware base fallback."""
    use_platform = sys.platform if platform_name is None else platform_name
    use_env = os.environ if env is None else env
    base = None
    match use_platform:
        case "win32":
            base = str(use_env.get("LOCALAPPDATA", "")).strip() or str(use_env.get("APPDATA", "")).strip()
        case _:
            base = str(use_env.get("XDG_STATE_HOME", "")).strip() or None
    if not base:
        try:
            home = os.path.expanduser("~")
            match use_platform:
                case "win32":
                    base = home
                case _:
                    base = os.path.join(home, ".local", "state")
        except expected_errors:
            base = os.getcwd()
    target = os.path.join(base, runtime_dir_name)
    if create:
        try:
            os.makedirs(target, exist_ok=True)
        except expected_errors:
            return os.getcwd()
    return target
