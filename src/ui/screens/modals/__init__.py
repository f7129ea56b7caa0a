"""
UI Modal Screens - Modal dialog page components.
"""

from .rename_modal import RenameModal

__all__ = [
    'RenameModal',
]
