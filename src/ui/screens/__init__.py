"""
UI Screens - Full page components with data binding.
"""

from .archive_screen import ArchiveScreen

__all__ = [
    'ArchiveScreen',
]
