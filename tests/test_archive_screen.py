"""Tests for the archive screen renderer."""

import os
import sys

import pygame
import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from browser.archive import BrowserCommand
from config.browser import DEFAULT_TABS
from constants import SCREEN_HEIGHT, SCREEN_WIDTH, VISIBLE_ROWS
from state import BrowserState, FileEntry, FileKind, Listing
from ui.screens.archive_screen import ArchiveScreen


@pytest.fixture
def surface():
    pygame.font.init()
    yield pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT))
    pygame.font.quit()


def _state(count, selected, offset):
    entries = tuple(FileEntry(f"f{i}.nfc", FileKind.NFC) for i in range(count))
    return BrowserState(
        tab_id=2,
        path="/ext/nfc",
        listing=Listing("/ext/nfc", entries),
        selected_index=selected,
        scroll_offset=offset,
    )


def test_visible_rows_follow_scroll_offset():
    rows = ArchiveScreen().visible_rows(_state(10, 7, 5))
    assert [index for index, _ in rows] == [5, 6, 7, 8]


def test_visible_rows_on_short_listing():
    rows = ArchiveScreen().visible_rows(_state(2, 0, 0))
    assert [entry.name for _, entry in rows] == ["f0.nfc", "f1.nfc"]


def test_render_draws_one_rect_per_visible_row(surface):
    rects = ArchiveScreen().render(surface, _state(10, 3, 2), DEFAULT_TABS)
    assert len(rects) == VISIBLE_ROWS


def test_render_empty_listing(surface):
    state = BrowserState(tab_id=0, path="/ext/favorites")
    assert ArchiveScreen().render(surface, state, DEFAULT_TABS) == []


def test_render_with_open_menu(surface, storage, make_browser):
    storage.add_file("/ext/nfc/card.nfc")
    browser = make_browser(start_tab=2)
    browser.handle_command(BrowserCommand.OK)
    assert browser.state.menu_open

    rects = ArchiveScreen().render(surface, browser.state, browser.config.tabs)
    assert len(rects) == 1
