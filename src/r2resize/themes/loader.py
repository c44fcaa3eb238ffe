"""Theme file loading.

Themes are static CSS/JS files bundled next to this module. Each carries
placeholder tokens that components replace with caller options before
embedding the result in a <style> or <script> block.
"""

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from r2resize.errors import ThemeNotFoundError
from r2resize.renderers.substitute import substitute_tokens

logger = logging.getLogger(__name__)

BUNDLED_THEMES_DIR = Path(__file__).resolve().parent

THEME_SUFFIXES = (".css", ".js")


class ThemeLoader:
    """Loads theme files from the bundled or a configured directory.

    Missing files are skipped with a warning, so a component still renders
    its markup without styling. With ``strict=True`` they raise instead.

    Usage:
        loader = ThemeLoader()
        css = loader.style_block("splitCard.css", {"sib53lver": "#ffffff"})
    """

    def __init__(self, directory: Path | None = None, strict: bool = False) -> None:
        """Initialize theme loader.

        Args:
            directory: Theme directory (defaults to bundled themes)
            strict: Raise ThemeNotFoundError for missing themes
        """
        self.directory = directory or BUNDLED_THEMES_DIR
        self.strict = strict
        self._cache: dict[str, list[str]] = {}

    def exists(self, name: str) -> bool:
        """Return True if the theme file exists."""
        return (self.directory / name).is_file()

    def available(self) -> list[str]:
        """List theme files in the theme directory."""
        if not self.directory.is_dir():
            return []
        return sorted(
            p.name for p in self.directory.iterdir()
            if p.is_file() and p.suffix in THEME_SUFFIXES
        )

    def load_lines(self, name: str) -> list[str] | None:
        """Load a theme file as a list of lines (without line endings).

        Args:
            name: Theme file name (e.g., "splitCard.css")

        Returns:
            Lines of the theme, or None if missing and not strict

        Raises:
            ThemeNotFoundError: If missing and strict mode is on
        """
        if name in self._cache:
            return self._cache[name]

        theme_path = self.directory / name
        if not theme_path.is_file():
            if self.strict:
                raise ThemeNotFoundError(name, self.directory)
            logger.warning("Theme not found, rendering without it: %s", theme_path)
            return None

        lines = theme_path.read_text(encoding="utf-8").splitlines()
        self._cache[name] = lines
        logger.debug("Loaded theme %s (%d lines)", name, len(lines))
        return lines

    def load(self, name: str) -> str | None:
        """Load a theme file as text."""
        lines = self.load_lines(name)
        if lines is None:
            return None
        return "\n".join(lines)

    def style_block(
        self,
        name: str,
        replacements: Mapping[str, Any] | None = None,
    ) -> str:
        """Build a <style> block from a CSS theme.

        Lines are joined without a separator.

        Args:
            name: CSS theme file name
            replacements: Token substitutions

        Returns:
            Style block, or "" if the theme is missing
        """
        lines = self.load_lines(name)
        if lines is None:
            return ""
        css = "".join(["<style>", *lines, "</style>"])
        return substitute_tokens(css, replacements or {})

    def script_block(
        self,
        name: str,
        replacements: Mapping[str, Any] | None = None,
    ) -> str:
        """Build a <script> block from a JS theme.

        Lines are joined with single spaces.

        Args:
            name: JS theme file name
            replacements: Token substitutions

        Returns:
            Script block, or "" if the theme is missing
        """
        lines = self.load_lines(name)
        if lines is None:
            return ""
        script = " ".join(["<script>", *lines, "</script>"])
        return substitute_tokens(script, replacements or {})


_loader: ThemeLoader | None = None


def get_theme_loader() -> ThemeLoader:
    """Get the shared theme loader built from the active configuration."""
    global _loader
    if _loader is None:
        from r2resize.config import get_config

        themes = get_config().themes
        _loader = ThemeLoader(directory=themes.path, strict=themes.strict)
    return _loader


def reset_theme_loader() -> None:
    """Drop the shared loader (e.g., after the configuration changed)."""
    global _loader
    _loader = None
