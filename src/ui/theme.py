"""
Theme and design tokens for Archive Browser.
Centralizes all visual constants for consistent styling.
"""

from dataclasses import dataclass
from typing import Tuple, Optional

# Type alias for colors
Color = Tuple[int, int, int]


@dataclass(frozen=True)
class Theme:
    """
    Design tokens for the browser UI.

    Immutable to prevent accidental modifications.
    """

    # ---- Base Colors ---- #
    background: Color = (255, 130, 0)  # Orange monochrome LCD
    surface: Color = (240, 115, 0)
    foreground: Color = (0, 0, 0)

    # ---- Text Colors ---- #
    text_primary: Color = (0, 0, 0)
    text_inverse: Color = (255, 130, 0)
    text_secondary: Color = (90, 45, 0)

    # ---- Spacing ---- #
    padding_xs: int = 4
    padding_sm: int = 8
    padding_md: int = 16

    # ---- Typography ---- #
    font_size_sm: int = 20
    font_size_md: int = 28
    font_path: Optional[str] = None  # pygame default font

    # ---- Component Sizes ---- #
    tab_bar_height: int = 40
    path_bar_height: int = 28
    menu_width: int = 220


# Default theme instance
default_theme = Theme()
