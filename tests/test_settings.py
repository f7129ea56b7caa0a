"""Tests for settings persistence and browser configuration."""

import json
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from config.browser import DEFAULT_TABS, BrowserConfig
from config.settings import Settings, load_settings, save_settings
from constants import MAX_DEPTH, MAX_FILES


def test_missing_config_is_created_with_defaults(tmp_path):
    config_file = str(tmp_path / "config.json")

    settings = load_settings(config_file)

    assert os.path.exists(config_file)
    assert settings["max_files"] == MAX_FILES
    assert settings["max_depth"] == MAX_DEPTH
    assert settings["start_tab"] == 0


def test_saved_values_override_defaults(tmp_path):
    config_file = str(tmp_path / "config.json")
    with open(config_file, "w") as f:
        json.dump({"start_tab": 2, "loader_commands": {"NFC": ["nfc-tool"]}}, f)

    settings = load_settings(config_file)

    assert settings["start_tab"] == 2
    assert settings["loader_commands"] == {"NFC": ["nfc-tool"]}
    assert settings["max_files"] == MAX_FILES


def test_corrupt_config_falls_back_to_defaults(tmp_path):
    config_file = tmp_path / "config.json"
    config_file.write_text("{not json")

    settings = load_settings(str(config_file))

    assert settings["start_tab"] == 0


def test_save_round_trip(tmp_path):
    config_file = str(tmp_path / "nested" / "config.json")
    settings = Settings(work_dir="/w", storage_root="/s", start_tab=3).to_dict()

    assert save_settings(settings, config_file)
    assert load_settings(config_file)["start_tab"] == 3


def test_from_dict_ignores_unknown_keys():
    settings = Settings.from_dict({"start_tab": 1, "theme": "dark"})
    assert settings.start_tab == 1
    assert settings.work_dir


def test_browser_config_from_settings():
    config = BrowserConfig.from_settings(
        {"start_tab": 5, "max_files": 20, "max_depth": 4}
    )
    assert config.start_tab == 5
    assert config.max_files == 20
    assert config.max_depth == 4
    assert config.tabs == DEFAULT_TABS


def test_out_of_range_start_tab_falls_back_to_first():
    assert BrowserConfig.from_settings({"start_tab": 99}).start_tab == 0
