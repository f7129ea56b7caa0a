"""
Services layer for Archive Browser.
Handles storage access, directory listing, favorites and app launching.
"""

from .storage import (
    Storage,
    LocalStorage,
    DirEntry,
    DirHandle,
    StorageError,
    DirectoryUnavailable,
    IoFailure,
)
from .file_listing import (
    list_directory,
    classify_entry,
    passes_filter,
)
from .favorites import FavoritesAdapter
from .loader import Loader, ProcessLoader

__all__ = [
    # Storage
    'Storage',
    'LocalStorage',
    'DirEntry',
    'DirHandle',
    'StorageError',
    'DirectoryUnavailable',
    'IoFailure',
    # File listing
    'list_directory',
    'classify_entry',
    'passes_filter',
    # Favorites
    'FavoritesAdapter',
    # Loader
    'Loader',
    'ProcessLoader',
]
