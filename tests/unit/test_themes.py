"""Unit tests for theme loading."""

import logging
from pathlib import Path

import pytest

from r2resize.config import R2ResizeConfig, ThemeConfig, set_config
from r2resize.errors import ThemeNotFoundError
from r2resize.themes import BUNDLED_THEMES_DIR, ThemeLoader, get_theme_loader

BUNDLED = [
    "default.css",
    "default_bottom.js",
    "default_top.js",
    "divsplitter.js",
    "empahsisCard.css",
    "expandingAccordian.css",
    "expandingAccordian.js",
    "imgviewer.css",
    "rezcontCard.css",
    "rezcontCard.js",
    "splitCard.css",
    "splitCard2.css",
    "splitCard2.js",
    "windowCard.css",
    "windowCard.js",
]


class TestBundledThemes:
    """Tests for the themes shipped with the package."""

    def test_all_bundled_themes_present(self) -> None:
        """Test that every theme a component uses is bundled."""
        loader = ThemeLoader()

        assert loader.directory == BUNDLED_THEMES_DIR
        assert set(BUNDLED) <= set(loader.available())

    def test_available_lists_only_themes(self) -> None:
        """Test that Python modules are not listed as themes."""
        available = ThemeLoader().available()

        assert "loader.py" not in available
        assert "__init__.py" not in available

    @pytest.mark.parametrize("name", [n for n in BUNDLED if n.endswith(".js")])
    def test_scripts_have_no_line_comments(self, name: str) -> None:
        """Test that scripts survive joining their lines with spaces."""
        text = (BUNDLED_THEMES_DIR / name).read_text(encoding="utf-8")

        assert "//" not in text.replace("://", "")


class TestThemeLoader:
    """Tests for ThemeLoader against a custom directory."""

    def test_load_returns_text(self, theme_dir: Path) -> None:
        """Test loading a theme file."""
        loader = ThemeLoader(directory=theme_dir)

        text = loader.load("sample.css")

        assert text is not None
        assert "sib53lver" in text

    def test_style_block_joins_without_separator(self, theme_dir: Path) -> None:
        """Test that CSS lines are concatenated inside a style tag."""
        loader = ThemeLoader(directory=theme_dir)

        block = loader.style_block("sample.css", {"sib53lver": "red"})

        assert block == "<style>.box87n767m08o {  border: 1px solid red;}</style>"

    def test_script_block_joins_with_spaces(self, theme_dir: Path) -> None:
        """Test that JS lines are joined with single spaces."""
        loader = ThemeLoader(directory=theme_dir)

        block = loader.script_block("sample.js", {"resizepanelwhich": "panel-a"})

        assert block == "<script> var panel = 'panel-a'; console.log(panel); </script>"

    def test_missing_theme_warns(
        self, theme_dir: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Test that a missing theme renders empty with a warning."""
        loader = ThemeLoader(directory=theme_dir)

        with caplog.at_level(logging.WARNING, logger="r2resize"):
            block = loader.style_block("missing.css")

        assert block == ""
        assert loader.load("missing.css") is None
        assert "Theme not found" in caplog.text

    def test_missing_theme_strict_raises(self, theme_dir: Path) -> None:
        """Test that strict mode raises for missing themes."""
        loader = ThemeLoader(directory=theme_dir, strict=True)

        with pytest.raises(ThemeNotFoundError, match="missing.js"):
            loader.script_block("missing.js")

    def test_theme_not_found_is_file_not_found(self, theme_dir: Path) -> None:
        """Test that ThemeNotFoundError can be caught as FileNotFoundError."""
        loader = ThemeLoader(directory=theme_dir, strict=True)

        with pytest.raises(FileNotFoundError):
            loader.load("missing.css")

    def test_cache(self, theme_dir: Path) -> None:
        """Test that theme files are read once per loader."""
        loader = ThemeLoader(directory=theme_dir)
        loader.load("sample.css")

        (theme_dir / "sample.css").write_text("changed", encoding="utf-8")

        assert "sib53lver" in (loader.load("sample.css") or "")
        assert ThemeLoader(directory=theme_dir).load("sample.css") == "changed"

    def test_exists(self, theme_dir: Path) -> None:
        """Test theme existence checks."""
        loader = ThemeLoader(directory=theme_dir)

        assert loader.exists("sample.js")
        assert not loader.exists("other.js")


class TestSharedLoader:
    """Tests for the configured shared loader."""

    def test_follows_active_config(self, theme_dir: Path) -> None:
        """Test that set_config rebuilds the shared loader."""
        assert get_theme_loader().directory == BUNDLED_THEMES_DIR

        set_config(R2ResizeConfig(themes=ThemeConfig(directory=str(theme_dir), strict=True)))
        loader = get_theme_loader()

        assert loader.directory == theme_dir
        assert loader.strict is True

    def test_shared_instance(self) -> None:
        """Test that the shared loader is reused."""
        assert get_theme_loader() is get_theme_loader()
