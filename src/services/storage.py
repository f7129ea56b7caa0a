"""
Storage access for Archive Browser.

The browser core only talks to the Storage interface. LocalStorage maps the
device's absolute paths ("/ext/nfc/card.nfc") onto a directory on the host.
"""

import os
import shutil
import traceback
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Iterator, Optional

from utils.logging import log_error


class StorageError(Exception):
    """Base class for storage failures."""
    pass


class DirectoryUnavailable(StorageError):
    """Raised when a directory cannot be opened or enumerated."""
    pass


class IoFailure(StorageError):
    """Raised when a copy, remove, rename or mkdir fails."""
    pass


@dataclass(frozen=True)
class DirEntry:
    """One raw directory entry as reported by storage."""

    name: str
    is_dir: bool = False


@dataclass
class DirHandle:
    """An open directory being enumerated."""

    path: str
    cursor: Any = None
    closed: bool = False


class Storage(ABC):
    """
    Storage primitives used by the browser.

    Directory primitives raise DirectoryUnavailable. File primitives report
    success as a bool and never raise.
    """

    @abstractmethod
    def open_dir(self, path: str) -> DirHandle:
        """Open a directory for enumeration."""
        pass

    @abstractmethod
    def read_next(self, handle: DirHandle) -> Optional[DirEntry]:
        """Return the next entry, or None at the end of the directory."""
        pass

    @abstractmethod
    def close_dir(self, handle: DirHandle) -> None:
        pass

    @abstractmethod
    def stat(self, path: str) -> bool:
        """Check whether a file or directory exists at path."""
        pass

    @abstractmethod
    def copy(self, src: str, dst: str) -> bool:
        pass

    @abstractmethod
    def remove(self, path: str) -> bool:
        pass

    @abstractmethod
    def rename(self, src: str, dst: str) -> bool:
        pass

    @abstractmethod
    def mkdir(self, path: str) -> bool:
        pass


class LocalStorage(Storage):
    """Storage backed by a directory on the host filesystem."""

    def __init__(self, root: str):
        """
        Initialize local storage.

        Args:
            root: Host directory that device paths are resolved against
        """
        self.root = os.path.abspath(root)

    def host_path(self, path: str) -> str:
        """Resolve a device path to a host path under root."""
        return os.path.join(self.root, path.lstrip("/"))

    def open_dir(self, path: str) -> DirHandle:
        try:
            cursor = os.scandir(self.host_path(path))
        except OSError as e:
            raise DirectoryUnavailable(f"Cannot open {path}: {e}") from e
        return DirHandle(path=path, cursor=cursor)

    def read_next(self, handle: DirHandle) -> Optional[DirEntry]:
        if handle.closed:
            raise DirectoryUnavailable(f"Directory {handle.path} is closed")
        try:
            entry = next(handle.cursor, None)
            if entry is None:
                return None
            return DirEntry(name=entry.name, is_dir=entry.is_dir())
        except OSError as e:
            raise DirectoryUnavailable(f"Cannot read {handle.path}: {e}") from e

    def close_dir(self, handle: DirHandle) -> None:
        if not handle.closed:
            handle.cursor.close()
            handle.closed = True

    def stat(self, path: str) -> bool:
        return os.path.exists(self.host_path(path))

    def copy(self, src: str, dst: str) -> bool:
        try:
            shutil.copy2(self.host_path(src), self.host_path(dst))
            return True
        except OSError as e:
            log_error(f"Failed to copy {src} to {dst}", type(e).__name__, traceback.format_exc())
            return False

    def remove(self, path: str) -> bool:
        target = self.host_path(path)
        try:
            # Directories are only removed when empty
            if os.path.isdir(target) and not os.path.islink(target):
                os.rmdir(target)
            else:
                os.remove(target)
            return True
        except OSError as e:
            log_error(f"Failed to remove {path}", type(e).__name__, traceback.format_exc())
            return False

    def rename(self, src: str, dst: str) -> bool:
        # os.rename silently replaces an existing file on POSIX
        if os.path.lexists(self.host_path(dst)):
            log_error(f"Failed to rename {src} to {dst}: destination exists", "FileExistsError")
            return False
        try:
            os.rename(self.host_path(src), self.host_path(dst))
            return True
        except OSError as e:
            log_error(f"Failed to rename {src} to {dst}", type(e).__name__, traceback.format_exc())
            return False

    def mkdir(self, path: str) -> bool:
        try:
            os.makedirs(self.host_path(path), exist_ok=True)
            return True
        except OSError as e:
            log_error(f"Failed to create {path}", type(e).__name__, traceback.format_exc())
            return False


def iter_dir(storage: Storage, path: str) -> Iterator[DirEntry]:
    """
    Iterate over a directory, closing the handle when done.

    Raises:
        DirectoryUnavailable: If the directory cannot be opened or read
    """
    handle = storage.open_dir(path)
    try:
        while True:
            entry = storage.read_next(handle)
            if entry is None:
                return
            yield entry
    finally:
        storage.close_dir(handle)
