"""
Static browser configuration: tabs, known extensions and limits.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from constants import MAX_DEPTH, MAX_FILES, MAX_NAME_LEN
from state import FileKind

WILDCARD = "*"
FAVORITES_PATH = "/ext/favorites"


@dataclass(frozen=True)
class Tab:
    """A named root directory plus its extension filter."""

    name: str
    root: str
    extension: str = WILDCARD


@dataclass(frozen=True)
class KnownExtension:
    """Maps a file suffix to a kind, its launcher app and its home directory."""

    extension: str
    kind: FileKind
    app_name: str
    default_root: str


DEFAULT_TABS: Tuple[Tab, ...] = (
    Tab("Favorites", FAVORITES_PATH),
    Tab("iButton", "/ext/ibutton", ".ibtn"),
    Tab("NFC", "/ext/nfc", ".nfc"),
    Tab("Sub-GHz", "/ext/subghz", ".sub"),
    Tab("RFID LF", "/ext/lfrfid", ".rfid"),
    Tab("Infrared", "/ext/infrared", ".ir"),
    Tab("Browser", "/ext"),
)

# Ordered, first match wins
KNOWN_EXTENSIONS: Tuple[KnownExtension, ...] = (
    KnownExtension(".ibtn", FileKind.IBUTTON, "iButton", "/ext/ibutton"),
    KnownExtension(".nfc", FileKind.NFC, "NFC", "/ext/nfc"),
    KnownExtension(".sub", FileKind.SUBGHZ, "Sub-GHz", "/ext/subghz"),
    KnownExtension(".rfid", FileKind.LFRFID, "125 kHz RFID", "/ext/lfrfid"),
    KnownExtension(".ir", FileKind.INFRARED, "Infrared", "/ext/infrared"),
)


@dataclass
class BrowserConfig:
    """Configuration handed to the browser core at startup."""

    tabs: Tuple[Tab, ...] = DEFAULT_TABS
    known_extensions: Tuple[KnownExtension, ...] = KNOWN_EXTENSIONS
    favorites_path: str = FAVORITES_PATH
    max_depth: int = MAX_DEPTH
    max_files: int = MAX_FILES
    max_name_len: int = MAX_NAME_LEN
    start_tab: int = 0
    loader_commands: Dict[str, List[str]] = field(default_factory=dict)

    @classmethod
    def from_settings(cls, settings: Dict[str, Any]) -> "BrowserConfig":
        """Build the browser configuration from loaded settings."""
        start_tab = int(settings.get("start_tab", 0))
        if not 0 <= start_tab < len(DEFAULT_TABS):
            start_tab = 0
        return cls(
            max_depth=int(settings.get("max_depth", MAX_DEPTH)),
            max_files=int(settings.get("max_files", MAX_FILES)),
            start_tab=start_tab,
            loader_commands=dict(settings.get("loader_commands", {})),
        )

    def known_extension_for(self, kind: FileKind) -> Optional[KnownExtension]:
        for known in self.known_extensions:
            if known.kind is kind:
                return known
        return None

    def is_known_app(self, kind: FileKind) -> bool:
        """Check if entries of this kind can be launched, favorited or renamed."""
        return self.known_extension_for(kind) is not None

    def default_root_for(self, kind: FileKind) -> Optional[str]:
        known = self.known_extension_for(kind)
        return known.default_root if known else None
