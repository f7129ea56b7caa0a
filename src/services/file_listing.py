"""
File listing services for Archive Browser.
Reads one directory from storage and builds the filtered, capped listing.
"""

from contextlib import closing
from typing import Iterable, List

from config.browser import KnownExtension, WILDCARD
from services.storage import Storage, iter_dir
from state import FileEntry, FileKind, Listing


def classify_entry(
    name: str, is_dir: bool, known_extensions: Iterable[KnownExtension]
) -> FileKind:
    """
    Determine the kind of an entry.

    The first known extension the name ends with wins; otherwise the storage
    directory flag decides between FOLDER and UNKNOWN.

    Args:
        name: Entry name
        is_dir: Directory flag reported by storage
        known_extensions: Ordered extension table

    Returns:
        The entry's FileKind
    """
    for known in known_extensions:
        if name.endswith(known.extension):
            return known.kind

    if is_dir:
        return FileKind.FOLDER
    return FileKind.UNKNOWN


def passes_filter(name: str, is_dir: bool, extension_filter: str) -> bool:
    """Check if an entry is shown under a tab's extension filter."""
    if extension_filter == WILDCARD:
        return True
    if extension_filter in name:
        return True
    # Directories always pass so the user can descend
    return is_dir


def list_directory(
    storage: Storage,
    path: str,
    extension_filter: str,
    known_extensions: Iterable[KnownExtension],
    max_files: int,
) -> Listing:
    """
    Build the listing for one directory.

    Entries keep storage enumeration order. Enumeration stops once max_files
    entries have been accepted.

    Args:
        storage: Storage to read from
        path: Device path of the directory
        extension_filter: Tab filter, or "*" for everything
        known_extensions: Ordered extension table
        max_files: Listing size cap

    Returns:
        A new Listing snapshot

    Raises:
        DirectoryUnavailable: If the directory cannot be opened or read;
            nothing from a partial enumeration is returned
    """
    known_extensions = tuple(known_extensions)
    entries: List[FileEntry] = []

    if max_files <= 0:
        return Listing.empty(path)

    with closing(iter_dir(storage, path)) as raw_entries:
        for raw in raw_entries:
            if not passes_filter(raw.name, raw.is_dir, extension_filter):
                continue

            kind = classify_entry(raw.name, raw.is_dir, known_extensions)
            entries.append(FileEntry(name=raw.name, kind=kind))

            if len(entries) >= max_files:
                break

    return Listing(path=path, entries=tuple(entries))
