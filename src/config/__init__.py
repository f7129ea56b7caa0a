"""
Configuration management for Archive Browser.
"""

from .settings import (
    load_settings,
    save_settings,
    get_default_settings,
    load_controller_mapping,
    get_controller_mapping,
    Settings,
)
from .browser import (
    BrowserConfig,
    KnownExtension,
    Tab,
    DEFAULT_TABS,
    KNOWN_EXTENSIONS,
    FAVORITES_PATH,
    WILDCARD,
)

__all__ = [
    'load_settings',
    'save_settings',
    'get_default_settings',
    'load_controller_mapping',
    'get_controller_mapping',
    'Settings',
    'BrowserConfig',
    'KnownExtension',
    'Tab',
    'DEFAULT_TABS',
    'KNOWN_EXTENSIONS',
    'FAVORITES_PATH',
    'WILDCARD',
]
