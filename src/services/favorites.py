"""
Favorites service for Archive Browser.

Favorite status is never stored on an entry: a file is a favorite when a
same-named entry exists in the favorites directory.
"""

from typing import Callable, Optional

from services.storage import IoFailure, Storage
from state import FileEntry, FileKind
from utils.formatting import join_path


class FavoritesAdapter:
    """
    Keeps the favorites directory in sync with user actions.

    Copies files in on add and removes them (optionally together with the
    original file) on delete.
    """

    def __init__(
        self,
        storage: Storage,
        favorites_path: str,
        default_root_for: Callable[[FileKind], Optional[str]],
    ):
        """
        Initialize the adapter.

        Args:
            storage: Storage to operate on
            favorites_path: Device path of the favorites directory
            default_root_for: Maps a kind to the directory that holds its originals
        """
        self.storage = storage
        self.favorites_path = favorites_path
        self.default_root_for = default_root_for

    def favorite_path(self, entry: FileEntry) -> str:
        return join_path(self.favorites_path, entry.name)

    def is_favorite(self, entry: FileEntry) -> bool:
        """Check if a same-named file or directory exists under favorites."""
        return self.storage.stat(self.favorite_path(entry))

    def add_favorite(self, entry: FileEntry, source_dir: str) -> None:
        """
        Copy an entry into the favorites directory.

        Args:
            entry: Entry to add
            source_dir: Directory currently holding the entry

        Raises:
            IoFailure: If the copy failed
        """
        # Result ignored: the directory usually exists already
        self.storage.mkdir(self.favorites_path)

        source = join_path(source_dir, entry.name)
        if not self.storage.copy(source, self.favorite_path(entry)):
            raise IoFailure(f"Could not add {source} to favorites")

    def remove(
        self,
        entry: FileEntry,
        current_dir: str,
        from_favorites: bool = False,
        also_original: bool = False,
    ) -> None:
        """
        Delete an entry in one of three shapes.

        - neither flag: delete the entry from current_dir
        - from_favorites: delete only the favorites copy
        - also_original: delete the favorites copy and the original in the
          kind's default directory

        Args:
            entry: Entry to delete
            current_dir: Directory currently being browsed
            from_favorites: Delete the copy in the favorites directory
            also_original: Also delete the original file

        Raises:
            IoFailure: If any removal failed
        """
        if not from_favorites and not also_original:
            path = join_path(current_dir, entry.name)
            if not self.storage.remove(path):
                raise IoFailure(f"Could not delete {path}")
            return

        favorite_path = self.favorite_path(entry)
        ok = self.storage.remove(favorite_path)

        if also_original:
            original_root = self.default_root_for(entry.kind) or current_dir
            original = join_path(original_root, entry.name)
            # Unknown kinds browsed from favorites resolve to the copy itself
            if original != favorite_path:
                ok = self.storage.remove(original) and ok

        if not ok:
            raise IoFailure(f"Could not fully delete favorite {entry.name}")
