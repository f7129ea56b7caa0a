"""
Rename modal - Text input used by the file menu's Rename action.
"""

import pygame
from typing import Callable, Optional

from browser.file_menu import TextInput
from ui.theme import Theme, default_theme


class RenameModal(TextInput):
    """
    Keyboard text entry.

    While active it consumes key events: printable characters are appended,
    Backspace deletes, Enter completes (calling the result callback) and
    Escape cancels without calling it.
    """

    def __init__(self, theme: Theme = default_theme):
        self.theme = theme
        self.active = False
        self.header = ""
        self.text = ""
        self.max_len = 0
        self._on_done: Optional[Callable[[str], None]] = None
        self._font: Optional[pygame.font.Font] = None

    def prompt(
        self,
        header: str,
        initial: str,
        max_len: int,
        on_done: Callable[[str], None],
    ) -> None:
        self.active = True
        self.header = header
        self.max_len = max_len
        self.text = initial[:max_len]
        self._on_done = on_done

    def cancel(self) -> None:
        self.active = False
        self._on_done = None

    def handle_event(self, event: pygame.event.Event) -> bool:
        """
        Process a key event.

        Returns:
            True if the event was consumed by the modal
        """
        if not self.active or event.type != pygame.KEYDOWN:
            return False

        if event.key == pygame.K_RETURN:
            callback = self._on_done
            text = self.text
            self.cancel()
            if callback:
                callback(text)
        elif event.key == pygame.K_ESCAPE:
            self.cancel()
        elif event.key == pygame.K_BACKSPACE:
            self.text = self.text[:-1]
        elif event.unicode and event.unicode.isprintable() and event.unicode not in "/\\":
            if len(self.text) < self.max_len:
                self.text += event.unicode
        return True

    def render(self, screen: pygame.Surface) -> None:
        """Draw the modal over the current screen."""
        if not self.active:
            return
        if self._font is None:
            self._font = pygame.font.Font(self.theme.font_path, self.theme.font_size_md)

        width, height = screen.get_size()
        rect = pygame.Rect(
            self.theme.padding_md,
            height // 2 - 50,
            width - self.theme.padding_md * 2,
            100,
        )
        pygame.draw.rect(screen, self.theme.background, rect)
        pygame.draw.rect(screen, self.theme.foreground, rect, 2)

        header = self._font.render(self.header, True, self.theme.text_primary)
        screen.blit(header, (rect.left + self.theme.padding_sm, rect.top + self.theme.padding_sm))
        value = self._font.render(self.text + "_", True, self.theme.text_primary)
        screen.blit(value, (rect.left + self.theme.padding_sm, rect.top + 50))
