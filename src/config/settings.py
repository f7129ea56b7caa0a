"""
Settings management for Archive Browser.
Handles loading, saving, and managing application settings.
"""

import json
import os
import traceback
from dataclasses import dataclass, field, asdict
from typing import Dict, Any, List

from constants import CONFIG_FILE, SCRIPT_DIR, DEV_MODE, MAX_DEPTH, MAX_FILES


@dataclass
class Settings:
    """Application settings with default values."""

    work_dir: str = ""
    storage_root: str = ""  # Host directory that holds the device's /ext tree
    start_tab: int = 0
    max_files: int = MAX_FILES
    max_depth: int = MAX_DEPTH
    # App name -> command template, "{path}" is replaced by the host file path
    loader_commands: Dict[str, List[str]] = field(default_factory=dict)

    def __post_init__(self):
        """Set default paths if not specified."""
        if not self.work_dir:
            self.work_dir = _get_default_work_dir()
        if not self.storage_root:
            self.storage_root = _get_default_storage_root()

    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Settings":
        """Create Settings from dictionary."""
        # Filter out unknown keys
        valid_keys = {f.name for f in cls.__dataclass_fields__.values()}
        filtered_data = {k: v for k, v in data.items() if k in valid_keys}
        return cls(**filtered_data)


def _get_default_work_dir() -> str:
    """Get the default work directory based on environment."""
    if DEV_MODE:
        return os.path.join(SCRIPT_DIR, "..", "workdir")
    elif os.path.exists("/userdata") and os.access("/userdata", os.W_OK):
        return "/userdata/archive"
    else:
        return os.path.join(SCRIPT_DIR, "workdir")


def _get_default_storage_root() -> str:
    """Get the default storage root based on environment."""
    if DEV_MODE:
        return os.path.join(SCRIPT_DIR, "..", "storage")
    elif os.path.exists("/userdata") and os.access("/userdata", os.W_OK):
        return "/userdata"
    else:
        return os.path.join(SCRIPT_DIR, "storage")


def get_default_settings() -> Dict[str, Any]:
    """Get default settings as a dictionary."""
    return Settings().to_dict()


def load_settings(config_file: str = CONFIG_FILE) -> Dict[str, Any]:
    """
    Load settings from config file.

    Args:
        config_file: Path of the JSON config file

    Returns:
        Dictionary of settings with defaults for missing values
    """
    default_settings = get_default_settings()

    try:
        if os.path.exists(config_file):
            with open(config_file, "r") as f:
                loaded_settings = json.load(f)
                # Merge with defaults to handle new settings
                default_settings.update(loaded_settings)
        else:
            # Create config file with defaults
            save_settings(default_settings, config_file)
    except Exception as e:
        from utils.logging import log_error

        log_error(
            "Failed to load settings, using defaults",
            type(e).__name__,
            traceback.format_exc(),
        )

    return default_settings


def save_settings(
    settings_to_save: Dict[str, Any], config_file: str = CONFIG_FILE
) -> bool:
    """
    Save settings to config file.

    Args:
        settings_to_save: Dictionary of settings to save
        config_file: Path of the JSON config file

    Returns:
        True if successful, False otherwise
    """
    try:
        # Create directory if it doesn't exist
        config_dir = os.path.dirname(config_file)
        if config_dir:
            os.makedirs(config_dir, exist_ok=True)

        with open(config_file, "w") as f:
            json.dump(settings_to_save, f, indent=2)
        return True
    except Exception as e:
        from utils.logging import log_error

        log_error("Failed to save settings", type(e).__name__, traceback.format_exc())
        return False


# ---- Controller Mapping ---- #

_controller_mapping: Dict[str, Any] = {}


def _mapping_file() -> str:
    return os.path.join(os.path.dirname(CONFIG_FILE), "controller_mapping.json")


def get_controller_mapping() -> Dict[str, Any]:
    """Get the current controller mapping."""
    return _controller_mapping


def load_controller_mapping() -> bool:
    """
    Load controller mapping from file.

    Returns:
        True if mapping was loaded, False otherwise
    """
    global _controller_mapping

    mapping_file = _mapping_file()

    try:
        if os.path.exists(mapping_file):
            with open(mapping_file, "r") as f:
                _controller_mapping = json.load(f)
                print("Controller mapping loaded from file")
                return True
        else:
            print("No controller mapping found, using keyboard defaults")
            _controller_mapping = {}
            return False
    except Exception as e:
        from utils.logging import log_error

        log_error(
            "Failed to load controller mapping",
            type(e).__name__,
            traceback.format_exc(),
        )
        _controller_mapping = {}
        return False
