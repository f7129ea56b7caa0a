"""
File action menu for Archive Browser.

The menu is either MenuClosed or MenuOpen(index, entry, favorite). Opening it
snapshots the highlighted entry, so later rescans cannot change what the
menu acts on.
"""

import traceback
from abc import ABC, abstractmethod
from dataclasses import replace
from typing import Callable, Optional

from browser.navigation import NavigationStack
from config.browser import BrowserConfig
from constants import MENU_ITEM_COUNT
from services.favorites import FavoritesAdapter
from services.loader import Loader
from services.storage import IoFailure, Storage
from state import BrowserState, FileEntry, MenuClosed, MenuOpen
from utils.formatting import join_path, trim_extension
from utils.logging import log_error

MENU_OPEN = 0
MENU_FAVORITE = 1
MENU_RENAME = 2
MENU_DELETE = 3

MENU_ITEMS = ("Open", "Favorite", "Rename", "Delete")


class TextInput(ABC):
    """Text entry widget that reports its result through a callback."""

    @abstractmethod
    def prompt(
        self,
        header: str,
        initial: str,
        max_len: int,
        on_done: Callable[[str], None],
    ) -> None:
        pass


def is_valid_name(name: str) -> bool:
    """Check that a typed name stays inside its directory."""
    if not name or name in (".", ".."):
        return False
    return "/" not in name and "\\" not in name


def menu_labels(menu: MenuOpen):
    """Labels to display for an open menu."""
    labels = list(MENU_ITEMS)
    if menu.favorite:
        labels[MENU_FAVORITE] = "Unfavorite"
    return labels


class FileMenu:
    """Open / favorite / rename / delete actions on the highlighted entry."""

    def __init__(
        self,
        state: BrowserState,
        navigation: NavigationStack,
        storage: Storage,
        favorites: FavoritesAdapter,
        loader: Loader,
        text_input: TextInput,
        config: BrowserConfig,
    ):
        self.state = state
        self.navigation = navigation
        self.storage = storage
        self.favorites = favorites
        self.loader = loader
        self.text_input = text_input
        self.config = config

    @property
    def current(self) -> Optional[MenuOpen]:
        menu = self.state.menu
        return menu if isinstance(menu, MenuOpen) else None

    def open_menu(self) -> bool:
        """
        Show the menu for the highlighted entry.

        Returns:
            True if the menu was opened
        """
        if self.state.menu_open:
            return False

        entry = self.state.selected_entry()
        if entry is None:
            return False

        self.state.selected_name = entry.name
        self.state.menu = MenuOpen(
            index=0, entry=entry, favorite=self.favorites.is_favorite(entry)
        )
        return True

    def move(self, direction: int) -> None:
        menu = self.current
        if menu is None:
            return
        self.state.menu = replace(
            menu, index=(menu.index + direction) % MENU_ITEM_COUNT
        )

    def close(self) -> None:
        self.state.menu = MenuClosed()

    def confirm(self) -> None:
        """Run the highlighted menu action."""
        menu = self.current
        if menu is None:
            return

        if menu.index == MENU_OPEN:
            self._open_entry(menu.entry)
        elif menu.index == MENU_FAVORITE:
            self._toggle_favorite(menu)
        elif menu.index == MENU_RENAME:
            self._start_rename(menu.entry)
        elif menu.index == MENU_DELETE:
            self._delete(menu)
        else:
            self.close()

    # ---- Actions ---- #

    def _open_entry(self, entry: FileEntry) -> None:
        known = self.config.known_extension_for(entry.kind)
        if known is None:
            return
        self.loader.start(known.app_name, join_path(self.state.path, entry.name))

    def _toggle_favorite(self, menu: MenuOpen) -> None:
        if not self.config.is_known_app(menu.entry.kind):
            return

        favorite = self.favorites.is_favorite(menu.entry)
        try:
            if not favorite:
                self.favorites.add_favorite(menu.entry, self.state.path)
            else:
                self.favorites.remove(menu.entry, self.state.path, from_favorites=True)
        except IoFailure as e:
            log_error(str(e), type(e).__name__, traceback.format_exc())
        if favorite:
            self.navigation.refresh()
        self.close()

    def _delete(self, menu: MenuOpen) -> None:
        # Re-probe: the favorites directory may have changed since the menu opened
        favorite = self.favorites.is_favorite(menu.entry)
        try:
            self.favorites.remove(
                menu.entry,
                self.state.path,
                from_favorites=favorite,
                also_original=favorite,
            )
        except IoFailure as e:
            log_error(str(e), type(e).__name__, traceback.format_exc())
        self.navigation.refresh()
        self.close()

    def _start_rename(self, entry: FileEntry) -> None:
        known = self.config.known_extension_for(entry.kind)
        if known is None:
            return

        directory = self.state.path

        def on_done(new_name: str) -> None:
            self.finish_rename(entry, directory, new_name)

        self.text_input.prompt(
            "Rename:",
            trim_extension(entry.name, known.extension),
            self.config.max_name_len - len(known.extension),
            on_done,
        )

    def finish_rename(self, entry: FileEntry, directory: str, new_name: str) -> bool:
        """
        Complete a rename started from the menu.

        The entry keeps its known extension. An empty name, or one that would
        leave the directory, cancels.

        Args:
            entry: Entry being renamed
            directory: Directory the entry lives in
            new_name: Name typed by the user, without extension

        Returns:
            True if the entry was renamed
        """
        known = self.config.known_extension_for(entry.kind)
        new_name = new_name.strip()
        renamed = False

        if not is_valid_name(new_name):
            if new_name:
                log_error(f"Invalid name for {entry.name}: {new_name!r}", "ValueError")
        elif known is not None:
            target = new_name + known.extension
            if target == entry.name:
                renamed = True
            elif self.storage.rename(
                join_path(directory, entry.name), join_path(directory, target)
            ):
                self.state.selected_name = target
                renamed = True
            else:
                log_error(f"Could not rename {entry.name} to {target}", "IoFailure")

        self.navigation.refresh()
        self.close()
        return renamed
