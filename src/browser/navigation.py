"""
Navigation stack for Archive Browser.
Owns the current path, the depth and the per-depth remembered selection.
"""

import traceback

from config.browser import BrowserConfig
from services.file_listing import list_directory
from services.storage import DirectoryUnavailable, Storage
from state import BrowserState, Listing
from utils.formatting import join_path, truncate_at_last_separator
from utils.logging import log_error
from utils.viewport import ascend_offset, reposition


class NavigationStack:
    """
    Moves the browser between directories.

    Every move rescans the target directory and repositions the viewport.
    A failed rescan leaves an empty listing but keeps the new path and depth.
    """

    def __init__(self, state: BrowserState, storage: Storage, config: BrowserConfig):
        self.state = state
        self.storage = storage
        self.config = config

    @property
    def extension_filter(self) -> str:
        return self.config.tabs[self.state.tab_id].extension

    def rescan(self) -> bool:
        """
        Replace the listing with a fresh read of the current path.

        Returns:
            True if the directory was read, False if it was unavailable
        """
        path = self.state.path
        try:
            listing = list_directory(
                self.storage,
                path,
                self.extension_filter,
                self.config.known_extensions,
                self.config.max_files,
            )
        except DirectoryUnavailable as e:
            log_error(
                f"Directory unavailable: {path}", type(e).__name__, traceback.format_exc()
            )
            self.state.listing = Listing.empty(path)
            self.state.selected_index = 0
            return False

        self.state.listing = listing
        return True

    def reposition(self) -> None:
        state = self.state
        state.scroll_offset = reposition(
            state.selected_index, len(state.listing), state.scroll_offset
        )

    def clamp_selection(self) -> None:
        self.state.selected_index = self.state.clamped_index(self.state.selected_index)

    def switch_dir(self, path: str) -> bool:
        """Show another directory without touching depth or history."""
        self.state.path = path
        ok = self.rescan()
        self.clamp_selection()
        self.reposition()
        return ok

    def enter_dir(self, name: str) -> bool:
        """
        Descend into a subdirectory of the current path.

        At max depth this is a no-op so path and depth stay in step.

        Args:
            name: Directory name (no path)

        Returns:
            True if the browser moved down a level
        """
        state = self.state
        if state.depth >= state.max_depth:
            return False

        state.remember_index()
        state.depth = min(state.depth + 1, state.max_depth)
        state.selected_index = 0
        state.scroll_offset = 0
        self.switch_dir(join_path(state.path, name))
        return True

    def leave_dir(self) -> bool:
        """
        Ascend to the parent directory and restore its selection.

        Returns:
            False at depth 0, where leaving means closing the browser
        """
        state = self.state
        if state.depth <= 0:
            return False

        state.path = truncate_at_last_separator(state.path)
        state.depth = max(state.depth - 1, 0)
        state.selected_index = state.recall_index()

        self.rescan()
        self.clamp_selection()
        state.scroll_offset = ascend_offset(state.selected_index, len(state.listing))
        self.reposition()
        return True

    def refresh(self) -> bool:
        """Rescan the current directory after it was modified."""
        ok = self.rescan()
        self.clamp_selection()
        self.reposition()
        return ok

    def move_selection(self, step: int) -> None:
        """Move the highlight by step rows, wrapping around the listing."""
        count = len(self.state.listing)
        if count == 0:
            self.state.selected_index = 0
            return
        self.state.selected_index = (self.state.selected_index + step) % count
        self.reposition()
