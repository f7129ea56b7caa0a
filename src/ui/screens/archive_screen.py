"""
Archive screen - Tabbed file list with the file action menu overlay.
"""

import pygame
from typing import Dict, List, Sequence, Tuple

from browser.file_menu import menu_labels
from config.browser import Tab
from constants import VISIBLE_ROWS
from state import BrowserState, FileEntry, FileKind, MenuOpen
from ui.theme import Theme, default_theme
from utils.formatting import truncate_text

KIND_ICONS: Dict[FileKind, str] = {
    FileKind.FOLDER: "[D]",
    FileKind.IBUTTON: "[i]",
    FileKind.NFC: "[N]",
    FileKind.SUBGHZ: "[S]",
    FileKind.LFRFID: "[R]",
    FileKind.INFRARED: "[I]",
    FileKind.UNKNOWN: "[?]",
}


class ArchiveScreen:
    """
    Draws the browser state.

    Shows the active tab, the current path and VISIBLE_ROWS entries starting
    at the state's scroll offset.
    """

    def __init__(self, theme: Theme = default_theme):
        self.theme = theme
        self._font_cache: dict = {}

    def get_font(self, size: int) -> pygame.font.Font:
        """Get or create a font of the given size."""
        if size not in self._font_cache:
            self._font_cache[size] = pygame.font.Font(self.theme.font_path, size)
        return self._font_cache[size]

    def visible_rows(self, state: BrowserState) -> List[Tuple[int, FileEntry]]:
        """Entries inside the viewport, with their listing index."""
        start = max(0, state.scroll_offset)
        entries = state.listing.entries[start : start + VISIBLE_ROWS]
        return list(enumerate(entries, start))

    def render(
        self, screen: pygame.Surface, state: BrowserState, tabs: Sequence[Tab]
    ) -> List[pygame.Rect]:
        """
        Render the browser.

        Args:
            screen: Surface to render to
            state: Browser state to draw
            tabs: Tab table, for the header

        Returns:
            Rects of the drawn rows
        """
        screen.fill(self.theme.background)
        width, height = screen.get_size()

        self._render_tabs(screen, state.tab_id, tabs, width)

        path_y = self.theme.tab_bar_height
        self._text(
            screen,
            truncate_text(state.path, 48),
            (self.theme.padding_sm, path_y + self.theme.padding_xs),
            self.theme.font_size_sm,
            self.theme.text_secondary,
        )

        list_top = path_y + self.theme.path_bar_height
        row_height = (height - list_top) // VISIBLE_ROWS
        row_rects = []

        if not state.listing.entries:
            self._text(
                screen,
                "Empty",
                (width // 2 - 30, list_top + row_height),
                self.theme.font_size_md,
                self.theme.text_secondary,
            )

        for row, (index, entry) in enumerate(self.visible_rows(state)):
            rect = pygame.Rect(0, list_top + row * row_height, width, row_height)
            highlighted = index == state.selected_index
            if highlighted:
                pygame.draw.rect(screen, self.theme.foreground, rect)
            color = self.theme.text_inverse if highlighted else self.theme.text_primary
            label = f"{KIND_ICONS[entry.kind]} {truncate_text(entry.name, 36)}"
            self._text(
                screen,
                label,
                (self.theme.padding_md, rect.top + self.theme.padding_sm),
                self.theme.font_size_md,
                color,
            )
            row_rects.append(rect)

        if isinstance(state.menu, MenuOpen):
            self._render_menu(screen, state.menu, width, height)

        return row_rects

    def _render_tabs(
        self, screen: pygame.Surface, tab_id: int, tabs: Sequence[Tab], width: int
    ) -> None:
        bar = pygame.Rect(0, 0, width, self.theme.tab_bar_height)
        pygame.draw.rect(screen, self.theme.surface, bar)

        left = "<" if tab_id > 0 else " "
        right = ">" if tab_id < len(tabs) - 1 else " "
        title = f"{left} {tabs[tab_id].name} {right}"
        font = self.get_font(self.theme.font_size_md)
        surface = font.render(title, True, self.theme.text_primary)
        screen.blit(surface, surface.get_rect(center=bar.center))

    def _render_menu(
        self, screen: pygame.Surface, menu: MenuOpen, width: int, height: int
    ) -> None:
        labels = menu_labels(menu)
        item_height = self.theme.font_size_md + self.theme.padding_sm
        menu_rect = pygame.Rect(
            width - self.theme.menu_width - self.theme.padding_sm,
            self.theme.tab_bar_height + self.theme.padding_sm,
            self.theme.menu_width,
            item_height * len(labels) + self.theme.padding_sm,
        )
        pygame.draw.rect(screen, self.theme.background, menu_rect)
        pygame.draw.rect(screen, self.theme.foreground, menu_rect, 2)

        for i, label in enumerate(labels):
            prefix = ">" if i == menu.index else " "
            self._text(
                screen,
                f"{prefix} {label}",
                (
                    menu_rect.left + self.theme.padding_sm,
                    menu_rect.top + self.theme.padding_xs + i * item_height,
                ),
                self.theme.font_size_md,
                self.theme.text_primary,
            )

    def _text(self, screen, text, position, size, color) -> pygame.Rect:
        surface = self.get_font(size).render(text, True, color)
        return screen.blit(surface, position)
