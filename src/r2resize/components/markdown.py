"""Document-wide resize toolbar for rendered documents.

add_resizer() injects a toolbar with sliders that resize every image and
table on the page. Unlike the card components it has no container markup:
the returned fragment is a style block and a script block that build the
toolbar once the document has loaded.
"""

import logging
from typing import Any

from markupsafe import Markup

from r2resize.models.options import (
    UNSET,
    ToolbarPosition,
    check_non_negative,
    format_number,
    match_choice,
    resolve,
)
from r2resize.renderers.substitute import as_html, substitute_tokens
from r2resize.themes.loader import get_theme_loader

logger = logging.getLogger(__name__)

TOOLBAR_CSS = "default.css"


def _size(value: Any, units: str, default: str, extra: float = 0) -> str:
    """Format a slider dimension, falling back to its default."""
    if value is None:
        return default
    return f"{format_number(float(value) + extra)}{units}"


def add_resizer(
    theme_color: str | None = None,
    position: ToolbarPosition | str = UNSET,
    font_size: str | None = None,
    font_color: str | None = None,
    tables: bool = UNSET,
    images: bool = UNSET,
    line_color: str | None = None,
    thumb_width: float | None = None,
    thumb_height: float | None = None,
    line_width: float | None = None,
    line_height: float | None = None,
    dim_units: str = UNSET,
    default_image_width: str | None = None,
) -> Markup:
    """Add a resize toolbar for the images and tables of a document.

    Args:
        theme_color: Toolbar and slider thumb color (default "gray")
        position: "top" (sticky, default) or "bottom" (fixed) toolbar
        font_size: Toolbar font size (e.g., "14px")
        font_color: Toolbar text color
        tables: Whether tables get a resize slider (default True)
        images: Whether images get a resize slider (default True)
        line_color: Slider track color (default "#cfae7c")
        thumb_width: Slider thumb width in dim_units (default 20px)
        thumb_height: Slider thumb height in dim_units (default 20px)
        line_width: Slider track width in dim_units (default 170px)
        line_height: Slider track height in dim_units (default 7px)
        dim_units: Units of the numeric slider options (default "px")
        default_image_width: Width applied to every image on load

    Returns:
        Style and script fragment as Markup

    Raises:
        InvalidOptionError: If position is unknown or a numeric option is
            negative or not a number
    """
    component = "add_resizer"
    position = resolve(component, "position", position, ToolbarPosition.TOP)
    toolbar = match_choice("position", position, ToolbarPosition)
    tables = resolve(component, "tables", tables, True)
    images = resolve(component, "images", images, True)
    dim_units = resolve(component, "dim_units", dim_units, "px")
    theme_color = resolve(component, "theme_color", theme_color)
    font_size = resolve(component, "font_size", font_size)
    font_color = resolve(component, "font_color", font_color)
    line_color = resolve(component, "line_color", line_color)
    default_image_width = resolve(component, "default_image_width", default_image_width)

    thumb_width = check_non_negative("thumb_width", resolve(component, "thumb_width", thumb_width))
    thumb_height = check_non_negative(
        "thumb_height", resolve(component, "thumb_height", thumb_height)
    )
    line_width = check_non_negative("line_width", resolve(component, "line_width", line_width))
    line_height = check_non_negative(
        "line_height", resolve(component, "line_height", line_height)
    )

    # Pressed thumbs grow by 6 units in each direction
    sizes = {
        "thumb.2width": _size(thumb_width, dim_units, "26px", extra=6),
        "thumb.2height": _size(thumb_height, dim_units, "26px", extra=6),
        "thumb.width": _size(thumb_width, dim_units, "20px"),
        "thumb.height": _size(thumb_height, dim_units, "20px"),
        "line.width": _size(line_width, dim_units, "170px"),
        "line.height": _size(line_height, dim_units, "7px"),
    }

    loader = get_theme_loader()
    content = loader.style_block(TOOLBAR_CSS, None) + loader.script_block(
        f"default_{toolbar.value}.js", None
    )

    replacements: dict[str, Any] = {"listgroupixon": "xxxxx"}
    if default_image_width is not None:
        replacements["'pre3e2423'"] = f"'{default_image_width}'"
    replacements["fontsizedefault"] = font_size
    replacements["fontcolordefault"] = font_color
    content = substitute_tokens(content, replacements)

    if not tables:
        content = substitute_tokens(content, {"table": "rm12table"})
    if not images:
        content = substitute_tokens(content, {"img": "rm12img"})

    content = substitute_tokens(
        content,
        {
            "gray": theme_color,
            "#cfae7c": line_color,
            "fontcolorplaceholder": font_color,
        },
    )
    content = substitute_tokens(content, sizes)

    logger.debug("Built %s resize toolbar (%d characters)", toolbar.value, len(content))
    return as_html(content)
