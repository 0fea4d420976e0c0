"""Shared fixtures for the AnyJSON Review test suite."""
import sys
from pathlib import Path
from types import SimpleNamespace

import pytest

# Add source/ to path so imports work without installing
SOURCE_ROOT = Path(__file__).resolve().parent.parent / "source"
sys.path.insert(0, str(SOURCE_ROOT))


# ── Sample documents ────────────────────────────────────────────────────

SAMPLE_TEXT = '{"a": "{\\"b\\":1}", "c":[1,2]}'

NESTED_DOCUMENT = {
    "id": 7,
    "body": '{"items": [{"name": "first", "tags": "[\\"x\\", \\"y\\"]"}], "count": "2"}',
    "homepage": "www.example.com/about",
    "note": "plain text that is definitely longer than twenty characters",
}


class FakeSurface:
    """Tk-style bind/unbind recorder standing in for the toplevel window."""

    def __init__(self):
        self.handlers = {}
        self.bind_calls = []
        self.unbind_calls = []
        self._next_id = 0

    def bind(self, sequence, func, add=None):
        self._next_id += 1
        bind_id = f"bind{self._next_id}"
        self.handlers.setdefault(sequence, {})[bind_id] = func
        self.bind_calls.append((sequence, bind_id, add))
        return bind_id

    def unbind(self, sequence, funcid=None):
        self.unbind_calls.append((sequence, funcid))
        self.handlers.get(sequence, {}).pop(funcid, None)

    def active_count(self):
        return sum(len(bucket) for bucket in self.handlers.values())

    def fire(self, sequence, x_root=0, y_root=0):
        event = SimpleNamespace(x_root=x_root, y_root=y_root)
        for func in list(self.handlers.get(sequence, {}).values()):
            func(event)


class FakeClipboardRoot:
    def __init__(self, fail=False):
        self.fail = fail
        self.clipboard = None
        self.cleared = 0

    def clipboard_clear(self):
        if self.fail:
            raise RuntimeError("no display")
        self.cleared += 1
        self.clipboard = ""

    def clipboard_append(self, text):
        self.clipboard = (self.clipboard or "") + text

    def update_idletasks(self):
        return None


class FakeBridge:
    def __init__(self, files=None, external=True):
        self.files = dict(files or {})
        self.reads = []
        self.copied = []
        self.opened = []
        self.has_external_opener = external

    def read_file(self, path):
        self.reads.append(path)
        if path not in self.files:
            raise FileNotFoundError(path)
        return self.files[path]

    def copy_text(self, text):
        self.copied.append(text)
        return True

    def open_external(self, url):
        self.opened.append(url)
        return True


@pytest.fixture
def surface():
    return FakeSurface()


@pytest.fixture
def bridge():
    return FakeBridge()


@pytest.fixture
def clipboard_root():
    return FakeClipboardRoot()
