"""
UI components for Archive Browser.
Screens and modals drawn with pygame on top of the shared theme.
"""

from .theme import Theme, default_theme

__all__ = ["Theme", "default_theme"]
