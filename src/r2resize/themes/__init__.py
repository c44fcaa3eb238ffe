"""Bundled CSS/JS themes and their loader.

The .css and .js files in this package are templates with placeholder
tokens; see each component for the tokens it substitutes.
"""

from r2resize.themes.loader import (
    BUNDLED_THEMES_DIR,
    ThemeLoader,
    get_theme_loader,
    reset_theme_loader,
)

__all__ = [
    "BUNDLED_THEMES_DIR",
    "ThemeLoader",
    "get_theme_loader",
    "reset_theme_loader",
]
