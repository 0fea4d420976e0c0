"""Tests for runtime data directory resolution."""
import os

from review_core.domain_impl.infra import runtime_paths_service


def test_windows_prefers_localappdata():
    env = {"LOCALAPPDATA": r"C:\Users\me\AppData\Local", "APPDATA": r"C:\Roaming"}
    path = runtime_paths_service.runtime_data_dir("App", platform_name="win32", env=env)
    assert path == os.path.join(r"C:\Users\me\AppData\Local", "App")


def test_windows_falls_back_to_appdata():
    path = runtime_paths_service.runtime_data_dir("App", platform_name="win32", env={"APPDATA": "/roaming"})
    assert path == os.path.join("/roaming", "App")


def test_posix_uses_xdg_state_home():
    path = runtime_paths_service.runtime_data_dir("App", platform_name="linux", env={"XDG_STATE_HOME": "/state"})
    assert path == os.path.join("/state", "App")


def test_posix_default_is_local_state():
    path = runtime_paths_service.runtime_data_dir("App", platform_name="linux", env={})
    assert path == os.path.join(os.path.expanduser("~"), ".local", "state", "App")


def test_create_makes_directory(tmp_path):
    path = runtime_paths_service.runtime_data_dir(
        "App", create=True, platform_name="linux", env={"XDG_STATE_HOME": str(tmp_path)}
    )
    assert os.path.isdir(path)
