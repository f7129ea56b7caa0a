"""
Archive browser core.

Wires the navigation stack, tab selector, favorites and file menu together
and turns abstract commands into state transitions, one command at a time.
"""

from enum import Enum

from browser.file_menu import FileMenu, TextInput
from browser.navigation import NavigationStack
from browser.tabs import TabSelector
from config.browser import BrowserConfig
from services.favorites import FavoritesAdapter
from services.loader import Loader
from services.storage import Storage
from state import BrowserState


class BrowserCommand(Enum):
    """Logical commands produced by the input layer."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    OK = "ok"
    OK_LONG = "ok_long"
    BACK = "back"


class ArchiveBrowser:
    """
    The browser screen's engine.

    Owns a single BrowserState. Callers must feed commands sequentially;
    nothing here is safe to run concurrently.
    """

    def __init__(
        self,
        config: BrowserConfig,
        storage: Storage,
        loader: Loader,
        text_input: TextInput,
    ):
        self.config = config
        self.storage = storage
        self.state = BrowserState(tab_id=config.start_tab, max_depth=config.max_depth)

        self.navigation = NavigationStack(self.state, storage, config)
        self.tabs = TabSelector(self.navigation, config.tabs)
        self.favorites = FavoritesAdapter(
            storage, config.favorites_path, config.default_root_for
        )
        self.menu = FileMenu(
            self.state,
            self.navigation,
            storage,
            self.favorites,
            loader,
            text_input,
            config,
        )

    def open(self) -> None:
        """Show the start tab."""
        self.tabs.select_tab(self.config.start_tab)

    def handle_command(self, command: BrowserCommand) -> None:
        """
        Apply one command.

        BACK at the top level sets state.exit_requested instead of navigating.
        """
        if self.state.menu_open:
            self._handle_menu_command(command)
            return

        if command is BrowserCommand.LEFT:
            self.tabs.step(-1)
        elif command is BrowserCommand.RIGHT:
            self.tabs.step(1)
        elif command is BrowserCommand.BACK:
            if not self.navigation.leave_dir():
                self.state.exit_requested = True
        elif command is BrowserCommand.UP:
            self.navigation.move_selection(-1)
        elif command is BrowserCommand.DOWN:
            self.navigation.move_selection(1)
        elif command in (BrowserCommand.OK, BrowserCommand.OK_LONG):
            self._handle_ok(command is BrowserCommand.OK_LONG)

        self.navigation.reposition()

    def _handle_menu_command(self, command: BrowserCommand) -> None:
        if command is BrowserCommand.UP:
            self.menu.move(-1)
        elif command is BrowserCommand.DOWN:
            self.menu.move(1)
        elif command is BrowserCommand.OK:
            self.menu.confirm()
        elif command is BrowserCommand.BACK:
            self.menu.close()

    def _handle_ok(self, long_press: bool) -> None:
        entry = self.state.selected_entry()
        if entry is None:
            return

        self.state.selected_name = entry.name

        if entry.is_folder:
            if long_press:
                self.menu.open_menu()
            else:
                self.navigation.enter_dir(entry.name)
        elif not long_press:
            self.menu.open_menu()
