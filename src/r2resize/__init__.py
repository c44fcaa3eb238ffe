"""r2resize - resizable, split and expandable HTML containers.

Each component reads a bundled CSS/JS theme, substitutes the caller's
styling options into it and returns the container markup as trusted HTML
(markupsafe.Markup), ready to embed in a page, a Jinja2 template or another
component.

Example:
    from r2resize import split_card, window_card

    html = split_card("Left text", window_card("Body", title="Notes"))
"""

__version__ = "0.1.0"
__author__ = "r2resize Contributors"

from r2resize.components import (
    add_jquery,
    add_resizer,
    elasti_card,
    emphasis_card,
    empahsis_card,
    expand_image,
    flex_card,
    sizeable_card,
    split_card,
    split_card2,
    window_card,
)
from r2resize.errors import (
    ComponentNotFoundError,
    InvalidOptionError,
    R2ResizeError,
    ThemeNotFoundError,
)
from r2resize.models import CardItem
from r2resize.templates import render_page

__all__ = [
    "__version__",
    "CardItem",
    "ComponentNotFoundError",
    "InvalidOptionError",
    "R2ResizeError",
    "ThemeNotFoundError",
    "add_jquery",
    "add_resizer",
    "elasti_card",
    "emphasis_card",
    "empahsis_card",
    "expand_image",
    "flex_card",
    "render_page",
    "sizeable_card",
    "split_card",
    "split_card2",
    "window_card",
]
