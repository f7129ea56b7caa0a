"""Shared fixtures for the browser tests.

MemoryStorage keeps entries in insertion order, which gives the tests a
deterministic enumeration order and lets them inject directory failures.
"""

import os
import sys
from typing import Dict, List, Optional, Set, Tuple

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from browser.archive import ArchiveBrowser
from browser.file_menu import TextInput
from config.browser import BrowserConfig, Tab
from services.loader import Loader
from services.storage import DirectoryUnavailable, DirEntry, DirHandle, Storage
from utils.logging import update_log_file_path


def _parent(path: str) -> str:
    return path.rsplit("/", 1)[0] or "/"


class MemoryStorage(Storage):
    """In-memory Storage with failure injection."""

    def __init__(self):
        self.nodes: Dict[str, bool] = {"/": True}  # path -> is_dir
        self.data: Dict[str, bytes] = {}
        self.unreadable: Set[str] = set()
        self.fail_after: Dict[str, int] = {}
        self.open_handles = 0

    # ---- Setup helpers ---- #

    def add_dir(self, path: str) -> None:
        parts = path.strip("/").split("/")
        for i in range(1, len(parts) + 1):
            self.nodes.setdefault("/" + "/".join(parts[:i]), True)

    def add_file(self, path: str, data: bytes = b"") -> None:
        self.add_dir(_parent(path))
        self.nodes[path] = False
        self.data[path] = data

    def children(self, path: str) -> List[str]:
        return [
            p.rsplit("/", 1)[1]
            for p in self.nodes
            if p != "/" and _parent(p) == path
        ]

    # ---- Storage ---- #

    def open_dir(self, path: str) -> DirHandle:
        if path in self.unreadable or not self.nodes.get(path):
            raise DirectoryUnavailable(f"Cannot open {path}")
        entries = [
            DirEntry(name, self.nodes[f"{path.rstrip('/')}/{name}"])
            for name in self.children(path)
        ]
        self.open_handles += 1
        return DirHandle(path=path, cursor={"entries": entries, "pos": 0})

    def read_next(self, handle: DirHandle) -> Optional[DirEntry]:
        cursor = handle.cursor
        limit = self.fail_after.get(handle.path)
        if limit is not None and cursor["pos"] >= limit:
            raise DirectoryUnavailable(f"Read error in {handle.path}")
        if cursor["pos"] >= len(cursor["entries"]):
            return None
        entry = cursor["entries"][cursor["pos"]]
        cursor["pos"] += 1
        return entry

    def close_dir(self, handle: DirHandle) -> None:
        if not handle.closed:
            handle.closed = True
            self.open_handles -= 1

    def stat(self, path: str) -> bool:
        return path in self.nodes

    def copy(self, src: str, dst: str) -> bool:
        if self.nodes.get(src) is not False or not self.nodes.get(_parent(dst)):
            return False
        self.nodes[dst] = False
        self.data[dst] = self.data.get(src, b"")
        return True

    def remove(self, path: str) -> bool:
        if path not in self.nodes or path == "/":
            return False
        if self.nodes[path] and self.children(path):
            return False
        del self.nodes[path]
        self.data.pop(path, None)
        return True

    def rename(self, src: str, dst: str) -> bool:
        if src not in self.nodes or dst in self.nodes:
            return False
        self.nodes[dst] = self.nodes.pop(src)
        if src in self.data:
            self.data[dst] = self.data.pop(src)
        return True

    def mkdir(self, path: str) -> bool:
        self.add_dir(path)
        return True


class RecordingLoader(Loader):
    def __init__(self):
        self.started: List[Tuple[str, str]] = []

    def start(self, app_name: str, argument: str) -> None:
        self.started.append((app_name, argument))


class ScriptedTextInput(TextInput):
    """Captures prompts; tests complete them with finish()."""

    def __init__(self):
        self.prompts: List[Tuple[str, str, int]] = []
        self._on_done = None

    def prompt(self, header, initial, max_len, on_done) -> None:
        self.prompts.append((header, initial, max_len))
        self._on_done = on_done

    def finish(self, text: str) -> None:
        callback, self._on_done = self._on_done, None
        callback(text)


@pytest.fixture(autouse=True)
def _log_to_tmp(tmp_path):
    update_log_file_path(str(tmp_path / "logs"))


@pytest.fixture
def storage():
    return MemoryStorage()


@pytest.fixture
def loader():
    return RecordingLoader()


@pytest.fixture
def text_input():
    return ScriptedTextInput()


@pytest.fixture
def make_browser(storage, loader, text_input):
    """Build an ArchiveBrowser over the memory storage."""

    def _make(**config_kwargs) -> ArchiveBrowser:
        config = BrowserConfig(**config_kwargs)
        browser = ArchiveBrowser(config, storage, loader, text_input)
        browser.open()
        return browser

    return _make


@pytest.fixture
def tag_tab():
    return (Tab("Tag", "/ext/tag"),)
