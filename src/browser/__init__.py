"""
Browser core for Archive Browser.
Navigation, tabs and the file menu, driven by abstract commands.
"""

from .navigation import NavigationStack
from .tabs import TabSelector
from .file_menu import FileMenu, TextInput, MENU_ITEMS, menu_labels
from .archive import ArchiveBrowser, BrowserCommand

__all__ = [
    "NavigationStack",
    "TabSelector",
    "FileMenu",
    "TextInput",
    "MENU_ITEMS",
    "menu_labels",
    "ArchiveBrowser",
    "BrowserCommand",
]
