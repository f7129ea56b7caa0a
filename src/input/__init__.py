"""
Input handling for Archive Browser.
Handles keyboard and controller input.
"""

from .controller import ControllerHandler

__all__ = [
    "ControllerHandler",
]
