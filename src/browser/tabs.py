"""
Tab selection for Archive Browser.
"""

from typing import Tuple

from browser.navigation import NavigationStack
from config.browser import Tab


class TabSelector:
    """Switches the browser between its statically configured tabs."""

    def __init__(self, navigation: NavigationStack, tabs: Tuple[Tab, ...]):
        self.navigation = navigation
        self.tabs = tabs

    @property
    def current(self) -> Tab:
        return self.tabs[self.navigation.state.tab_id]

    def select_tab(self, tab_id: int) -> None:
        """
        Open a tab at its root directory.

        Resets depth, selection and per-depth history before rescanning.

        Args:
            tab_id: Index into the tab table

        Raises:
            ValueError: If tab_id is not a configured tab
        """
        if not 0 <= tab_id < len(self.tabs):
            raise ValueError(f"Unknown tab id {tab_id} (0-{len(self.tabs) - 1})")

        state = self.navigation.state
        state.tab_id = tab_id
        state.depth = 0
        state.reset_history()
        state.selected_index = 0
        state.scroll_offset = 0
        self.navigation.switch_dir(self.tabs[tab_id].root)

    def step(self, direction: int) -> bool:
        """
        Move to the neighbouring tab, without wrapping.

        Returns:
            True if the tab changed
        """
        target = self.navigation.state.tab_id + direction
        if not 0 <= target < len(self.tabs):
            return False
        self.select_tab(target)
        return True
