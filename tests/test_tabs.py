"""Tests for tab selection and tab cycling."""

import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from browser.archive import BrowserCommand
from config.browser import DEFAULT_TABS


def _populate_device(storage):
    storage.add_file("/ext/favorites/home.nfc")
    storage.add_file("/ext/ibutton/door.ibtn")
    storage.add_file("/ext/nfc/card.nfc")
    storage.add_file("/ext/nfc/notes.txt")
    storage.add_dir("/ext/nfc/saved")
    storage.add_file("/ext/nfc/saved/old.nfc")


def test_open_shows_start_tab(storage, make_browser):
    _populate_device(storage)
    browser = make_browser(start_tab=2)

    assert browser.state.tab_id == 2
    assert browser.state.path == "/ext/nfc"
    assert browser.state.listing.names() == ["card.nfc", "saved"]


def test_select_tab_resets_navigation(storage, make_browser):
    _populate_device(storage)
    browser = make_browser(start_tab=2)
    state = browser.state

    state.selected_index = 1
    browser.navigation.enter_dir("saved")
    assert state.depth == 1

    browser.tabs.select_tab(1)

    assert state.tab_id == 1
    assert state.depth == 0
    assert state.path == "/ext/ibutton"
    assert state.selected_index == 0
    assert state.scroll_offset == 0
    assert all(slot == 0 for slot in state.last_index)
    assert state.listing.names() == ["door.ibtn"]


def test_invalid_tab_fails_fast(storage, make_browser):
    browser = make_browser()

    with pytest.raises(ValueError):
        browser.tabs.select_tab(len(DEFAULT_TABS))
    with pytest.raises(ValueError):
        browser.tabs.select_tab(-1)


def test_left_right_clamp_at_the_ends(storage, make_browser):
    _populate_device(storage)
    browser = make_browser()

    browser.handle_command(BrowserCommand.LEFT)
    assert browser.state.tab_id == 0

    browser.handle_command(BrowserCommand.RIGHT)
    assert browser.state.tab_id == 1
    assert browser.state.path == "/ext/ibutton"

    for _ in range(len(DEFAULT_TABS) + 2):
        browser.handle_command(BrowserCommand.RIGHT)
    assert browser.state.tab_id == len(DEFAULT_TABS) - 1
    assert browser.state.path == "/ext"


def test_tab_change_from_subdirectory(storage, make_browser):
    _populate_device(storage)
    browser = make_browser(start_tab=2)

    browser.handle_command(BrowserCommand.DOWN)
    browser.handle_command(BrowserCommand.OK)
    assert browser.state.path == "/ext/nfc/saved"

    browser.handle_command(BrowserCommand.LEFT)
    assert browser.state.depth == 0
    assert browser.state.path == "/ext/ibutton"


def test_browser_tab_lists_everything(storage, make_browser):
    _populate_device(storage)
    browser = make_browser(start_tab=len(DEFAULT_TABS) - 1)

    assert browser.state.listing.names() == ["favorites", "ibutton", "nfc"]
