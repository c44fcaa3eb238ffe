"""Shared pytest fixtures for r2resize tests.

Fixtures are organized by category:
- State fixtures: Reset the active configuration and registries
- Theme fixtures: Override theme directories with small test themes
- Configuration fixtures: Config dictionaries and files
- Card fixtures: Sample flex/elastic card items
"""

import logging
from pathlib import Path
from typing import Any

import pytest

from r2resize.config import R2ResizeConfig, ThemeConfig, reset_config, set_config
from r2resize.registry import reset_registry

# =============================================================================
# State Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def clean_state() -> Any:
    """Start and end every test with the default configuration."""
    reset_config()
    reset_registry()
    yield
    reset_config()
    reset_registry()
    # CLI runs attach handlers to streams that close with the run
    logging.getLogger("r2resize").handlers.clear()
    logging.getLogger("r2resize").setLevel(logging.NOTSET)


# =============================================================================
# Theme Fixtures
# =============================================================================


@pytest.fixture
def theme_dir(tmp_path: Path) -> Path:
    """Create a theme directory with two small token themes."""
    directory = tmp_path / "themes"
    directory.mkdir()
    (directory / "sample.css").write_text(
        ".box87n767m08o {\n  border: 1px solid sib53lver;\n}\n", encoding="utf-8"
    )
    (directory / "sample.js").write_text(
        "var panel = 'resizepanelwhich';\nconsole.log(panel);\n", encoding="utf-8"
    )
    return directory


@pytest.fixture
def empty_theme_config(tmp_path: Path) -> R2ResizeConfig:
    """Activate a configuration whose theme directory is empty."""
    directory = tmp_path / "no-themes"
    directory.mkdir()
    config = R2ResizeConfig(themes=ThemeConfig(directory=str(directory)))
    set_config(config)
    return config


@pytest.fixture
def strict_empty_theme_config(tmp_path: Path) -> R2ResizeConfig:
    """Activate a strict configuration whose theme directory is empty."""
    directory = tmp_path / "no-themes"
    directory.mkdir()
    config = R2ResizeConfig(themes=ThemeConfig(directory=str(directory), strict=True))
    set_config(config)
    return config


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture
def full_config() -> dict[str, Any]:
    """Return a configuration dictionary touching every section."""
    return {
        "themes": {"directory": None, "strict": True},
        "assets": {
            "jquery_cdn": "https://cdn.example.com/",
            "jquery_version": "3.6.0",
            "font_awesome": "https://cdn.example.com/fa.css",
        },
        "output": {
            "path": "out/preview.html",
            "title": "Preview",
            "include_jquery": False,
        },
        "defaults": {
            "window_card": {"bg_color": "#fafafa", "border_color": "#333333"},
            "split_card": {"min_height": "300px"},
        },
    }


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """Write a small YAML configuration file."""
    path = tmp_path / "r2resize.yaml"
    path.write_text(
        "output:\n"
        "  title: From file\n"
        "defaults:\n"
        "  emphasis_card:\n"
        '    bg_color: "#abcdef"\n',
        encoding="utf-8",
    )
    return path


# =============================================================================
# Card Fixtures
# =============================================================================


@pytest.fixture
def card_items() -> list[dict[str, Any]]:
    """Return three card items in the shapes callers use."""
    return [
        {
            "bg": "https://example.com/one.jpg",
            "icon": "chart-line",
            "title": "One",
            "subtitle": "First",
            "icon.color": "#ff0000",
        },
        {"bg": "https://example.com/two.jpg", "title": "Two", "text_color": "#111111"},
        {"title": "Three", "desc": "Third <card>"},
    ]
