"""
Browser state for Archive Browser.
Holds the entry types, the listing snapshot and the single mutable BrowserState.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple, Union

from constants import MAX_DEPTH


class FileKind(Enum):
    """Category of a listed entry."""

    IBUTTON = "ibutton"
    NFC = "nfc"
    SUBGHZ = "subghz"
    LFRFID = "lfrfid"
    INFRARED = "infrared"
    FOLDER = "folder"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class FileEntry:
    """A single directory entry (name only, no path)."""

    name: str
    kind: FileKind = FileKind.UNKNOWN

    @property
    def is_folder(self) -> bool:
        return self.kind is FileKind.FOLDER


@dataclass(frozen=True)
class Listing:
    """
    Filtered, capped, ordered entries of one directory.

    Replaced as a whole on every rescan, never edited in place.
    """

    path: str
    entries: Tuple[FileEntry, ...] = ()

    @classmethod
    def empty(cls, path: str) -> "Listing":
        return cls(path=path)

    def __len__(self) -> int:
        return len(self.entries)

    def __getitem__(self, index: int) -> FileEntry:
        return self.entries[index]

    def names(self) -> List[str]:
        return [entry.name for entry in self.entries]


@dataclass(frozen=True)
class MenuClosed:
    """File menu is hidden; the list has focus."""


@dataclass(frozen=True)
class MenuOpen:
    """File menu is shown for a snapshotted entry."""

    index: int
    entry: FileEntry
    favorite: bool = False


MenuState = Union[MenuClosed, MenuOpen]


@dataclass
class BrowserState:
    """
    State of one open browser screen.

    Created when the screen opens, dropped when it closes. Every field is
    updated by a single command at a time.
    """

    tab_id: int = 0
    path: str = ""
    depth: int = 0
    max_depth: int = MAX_DEPTH
    last_index: List[int] = field(default_factory=list)
    listing: Listing = field(default_factory=lambda: Listing.empty(""))
    selected_index: int = 0
    scroll_offset: int = 0
    selected_name: str = ""
    menu: MenuState = field(default_factory=MenuClosed)
    exit_requested: bool = False

    def __post_init__(self):
        # One slot per depth level, 0..max_depth inclusive
        if len(self.last_index) != self.max_depth + 1:
            self.last_index = [0] * (self.max_depth + 1)

    @property
    def menu_open(self) -> bool:
        return isinstance(self.menu, MenuOpen)

    def selected_entry(self) -> Optional[FileEntry]:
        """Get the highlighted entry, or None for an empty listing."""
        if not self.listing.entries:
            return None
        return self.listing[self.clamped_index(self.selected_index)]

    def clamped_index(self, index: int) -> int:
        """Clamp an index into the current listing."""
        return max(0, min(index, len(self.listing) - 1))

    def remember_index(self) -> None:
        """Store the current selection in the slot of the current depth."""
        self.last_index[self.depth] = self.clamped_index(self.selected_index)

    def recall_index(self) -> int:
        return self.last_index[self.depth]

    def reset_history(self) -> None:
        self.last_index = [0] * (self.max_depth + 1)
