"""r2resize configuration system.

Configuration is YAML-based. Components read the active configuration for
theme location, CDN assets and per-component option defaults; the CLI adds
per-run overrides (--config, --output).
Supports environment variable substitution (${VAR}) in config files.

Configuration file discovery (in priority order):
1. CLI --config argument
2. ./.r2resize/config.yaml
3. ./r2resize.yaml
"""

import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

# =============================================================================
# Configuration Dataclasses
# =============================================================================

DEFAULT_GALLERY_STYLESHEETS = [
    "https://cdnjs.cloudflare.com/ajax/libs/justifiedGallery/3.8.1/css/justifiedGallery.min.css",
    "https://cdnjs.cloudflare.com/ajax/libs/lightgallery/1.10.0/css/lightgallery.min.css",
]

DEFAULT_GALLERY_SCRIPTS = [
    "https://cdnjs.cloudflare.com/ajax/libs/justifiedGallery/3.8.1/js/jquery.justifiedGallery.min.js",
    "https://cdnjs.cloudflare.com/ajax/libs/lightgallery/1.10.0/js/lightgallery-all.min.js",
]

DEFAULT_FONT_AWESOME = "https://cdnjs.cloudflare.com/ajax/libs/font-awesome/5.15.4/css/all.min.css"


@dataclass
class ThemeConfig:
    """Theme file configuration.

    Attributes:
        directory: Directory holding theme files (None = bundled themes)
        strict: Raise ThemeNotFoundError instead of skipping missing themes
    """

    directory: str | None = None
    strict: bool = False

    @property
    def path(self) -> Path | None:
        """Return the override directory as a Path."""
        return Path(self.directory).expanduser() if self.directory else None


@dataclass
class AssetConfig:
    """External script and stylesheet locations.

    Attributes:
        jquery_cdn: Base URL serving jquery-<version>.min.js
        jquery_version: Default jQuery version for add_jquery
        gallery_stylesheets: Stylesheets needed by the image viewer
        gallery_scripts: Scripts needed by the image viewer
        font_awesome: Icon stylesheet linked by flex cards with icons
    """

    jquery_cdn: str = "https://code.jquery.com"
    jquery_version: str = "3.5.1"
    gallery_stylesheets: list[str] = field(
        default_factory=lambda: list(DEFAULT_GALLERY_STYLESHEETS)
    )
    gallery_scripts: list[str] = field(default_factory=lambda: list(DEFAULT_GALLERY_SCRIPTS))
    font_awesome: str = DEFAULT_FONT_AWESOME

    def __post_init__(self) -> None:
        """Validate asset locations and normalize the CDN base URL."""
        for name in ("jquery_cdn", "jquery_version", "font_awesome"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value.strip():
                raise ValueError(f"assets.{name} must be a non-empty string (got {value!r})")
        for name in ("gallery_stylesheets", "gallery_scripts"):
            value = getattr(self, name)
            if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
                raise ValueError(f"assets.{name} must be a list of URLs (got {value!r})")
        self.jquery_cdn = self.jquery_cdn.rstrip("/")


@dataclass
class OutputConfig:
    """Preview page output configuration.

    Attributes:
        path: Output file path for rendered previews
        title: Page title for standalone previews
        include_jquery: Whether previews load jQuery first
    """

    path: str = "r2resize-preview.html"
    title: str = "r2resize preview"
    include_jquery: bool = True


@dataclass
class R2ResizeConfig:
    """Top-level r2resize configuration.

    Attributes:
        themes: Theme file location and strictness
        assets: CDN assets
        output: Preview page settings
        defaults: Per-component option defaults (component -> option -> value)
    """

    themes: ThemeConfig = field(default_factory=ThemeConfig)
    assets: AssetConfig = field(default_factory=AssetConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    defaults: dict[str, dict[str, Any]] = field(default_factory=dict)

    # Runtime overrides (set by loader)
    _config_path: Path | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        """Validate per-component defaults."""
        for component, options in self.defaults.items():
            if not isinstance(options, dict):
                raise ValueError(
                    f"Defaults for {component} must be a mapping (got {type(options).__name__})"
                )

    @property
    def config_path(self) -> Path | None:
        """Get the path to the config file that was loaded."""
        return self._config_path

    def default_for(self, component: str, option: str) -> Any:
        """Return the configured default for a component option, or None."""
        return self.defaults.get(component, {}).get(option)


# =============================================================================
# Environment Variable Substitution
# =============================================================================


def substitute_env_vars(value: Any) -> Any:
    """Substitute environment variables in config values.

    Supports ${VAR} syntax for environment variable substitution.
    Example: ${R2RESIZE_THEMES} -> value of R2RESIZE_THEMES

    Args:
        value: Config value (string, dict, list, or other)

    Returns:
        Value with environment variables substituted
    """
    if isinstance(value, str):
        pattern = re.compile(r"\$\{([^}]+)\}")

        def replace_var(match: re.Match[str]) -> str:
            var_name = match.group(1)
            env_value = os.environ.get(var_name)
            if env_value is None:
                raise ValueError(f"Environment variable not set: {var_name}")
            return env_value

        return pattern.sub(replace_var, value)

    elif isinstance(value, dict):
        return {k: substitute_env_vars(v) for k, v in value.items()}

    elif isinstance(value, list):
        return [substitute_env_vars(v) for v in value]

    return value


# =============================================================================
# Config File Discovery
# =============================================================================


def find_config_file(start_path: Path | None = None) -> Path | None:
    """Find configuration file in standard locations.

    Search order:
    1. ./.r2resize/config.yaml
    2. ./r2resize.yaml

    Args:
        start_path: Starting directory for search (defaults to cwd)

    Returns:
        Path to config file if found, None otherwise
    """
    if start_path is None:
        start_path = Path.cwd()

    start_path = start_path.resolve()

    candidates = [
        start_path / ".r2resize" / "config.yaml",
        start_path / "r2resize.yaml",
    ]

    for candidate in candidates:
        if candidate.exists():
            return candidate

    return None


# =============================================================================
# Config Loading
# =============================================================================


def load_config_from_dict(data: dict[str, Any]) -> R2ResizeConfig:
    """Load configuration from a dictionary.

    Args:
        data: Configuration dictionary

    Returns:
        R2ResizeConfig instance
    """
    data = substitute_env_vars(data)

    config = R2ResizeConfig()

    if "themes" in data:
        themes_data = data["themes"] or {}
        config.themes = ThemeConfig(
            directory=themes_data.get("directory"),
            strict=bool(themes_data.get("strict", False)),
        )

    if "assets" in data:
        assets_data = data["assets"] or {}
        if not isinstance(assets_data, dict):
            raise ValueError("assets must be a mapping")
        jquery_version = assets_data.get("jquery_version", config.assets.jquery_version)
        # YAML reads 3.5 as a float
        if isinstance(jquery_version, (int, float)) and not isinstance(jquery_version, bool):
            jquery_version = str(jquery_version)
        config.assets = AssetConfig(
            jquery_cdn=assets_data.get("jquery_cdn", config.assets.jquery_cdn),
            jquery_version=jquery_version,
            gallery_stylesheets=assets_data.get(
                "gallery_stylesheets", config.assets.gallery_stylesheets
            ),
            gallery_scripts=assets_data.get("gallery_scripts", config.assets.gallery_scripts),
            font_awesome=assets_data.get("font_awesome", config.assets.font_awesome),
        )

    if "output" in data:
        output_data = data["output"] or {}
        config.output = OutputConfig(
            path=output_data.get("path", config.output.path),
            title=output_data.get("title", config.output.title),
            include_jquery=bool(output_data.get("include_jquery", True)),
        )

    if "defaults" in data:
        defaults_data = data["defaults"] or {}
        if not isinstance(defaults_data, dict):
            raise ValueError("defaults must be a mapping of component -> options")
        config.defaults = {}
        for component, options in defaults_data.items():
            if not isinstance(options, dict):
                raise ValueError(f"Defaults for {component} must be a mapping")
            config.defaults[component] = dict(options)

    return config


def load_config(
    config_path: Path | None = None,
    auto_discover: bool = True,
) -> R2ResizeConfig:
    """Load configuration from file.

    Args:
        config_path: Explicit path to config file
        auto_discover: Whether to search for config file if not specified

    Returns:
        R2ResizeConfig instance

    Raises:
        FileNotFoundError: If config_path specified but doesn't exist
    """
    if config_path is not None:
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
        found_path = config_path
    elif auto_discover:
        found_path = find_config_file()
    else:
        found_path = None

    if found_path is not None:
        with open(found_path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        config = load_config_from_dict(data)
        config._config_path = found_path
    else:
        config = R2ResizeConfig()

    return config


def create_default_config() -> str:
    """Create default configuration YAML content.

    Returns:
        YAML string with default configuration and comments
    """
    return '''# r2resize Configuration

# Theme files (CSS/JS templates with placeholder tokens)
themes:
  directory: null   # null = themes bundled with the package
  strict: false     # true = fail when a theme file is missing

# External assets
assets:
  jquery_cdn: "https://code.jquery.com"
  jquery_version: "3.5.1"
  # font_awesome: "https://cdnjs.cloudflare.com/ajax/libs/font-awesome/5.15.4/css/all.min.css"

# Preview pages written by `r2resize render`
output:
  path: "r2resize-preview.html"
  title: "r2resize preview"
  include_jquery: true

# Per-component option defaults (used when the caller passes nothing)
# defaults:
#   window_card:
#     bg_color: "#ffffff"
#     border_color: "#333333"
#   split_card:
#     min_height: "300px"
'''


# =============================================================================
# Active Configuration
# =============================================================================

_active_config: R2ResizeConfig | None = None


def get_config() -> R2ResizeConfig:
    """Return the active configuration (built-in defaults until set)."""
    global _active_config
    if _active_config is None:
        _active_config = R2ResizeConfig()
    return _active_config


def set_config(config: R2ResizeConfig) -> None:
    """Make a configuration active for subsequent component calls."""
    global _active_config
    _active_config = config

    # Theme loader caches depend on the theme settings
    from r2resize.themes import reset_theme_loader

    reset_theme_loader()


def reset_config() -> None:
    """Drop the active configuration and fall back to defaults."""
    set_config(R2ResizeConfig())
