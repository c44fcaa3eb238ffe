"""Expanding flex cards and elastic cards.

Both components take a list of card items and render one panel per item.
Clicking a panel expands it; ``active_panel`` picks the panel that starts
expanded (1-based, 0 for none).
"""

import logging
from typing import Any

from markupsafe import Markup

from r2resize.components.base import UID_TOKEN, render_component, theme_assets
from r2resize.config import get_config
from r2resize.ids import unique_number
from r2resize.models.cards import CardItem
from r2resize.models.options import check_non_negative, check_whole_number, format_number, resolve
from r2resize.renderers.substitute import css_declaration

logger = logging.getLogger(__name__)

ACCORDION_CSS = "expandingAccordian.css"
ACCORDION_JS = "expandingAccordian.js"

DEFAULT_ICON_COLOR = "#000"
DEFAULT_TEXT_COLOR = "#FFF"


def icon_class(icon: str | None) -> str | None:
    """Font Awesome class list for an icon name.

    Examples:
        >>> icon_class("chart-line")
        'fas fa-chart-line'
        >>> icon_class("fab fa-github")
        'fab fa-github'
    """
    if not icon:
        return None
    icon = icon.strip()
    if " " in icon:
        return icon
    if icon.startswith("fa-"):
        return f"fas {icon}"
    return f"fas fa-{icon}"


def _card_options(
    component: str,
    height_px: Any,
    width_px: Any,
    border_color: str | None,
    border_width_px: Any,
    active_panel: Any,
) -> tuple[list[str], str, str, int]:
    """Resolve and validate the options shared by flex and elastic cards."""
    height_px = check_non_negative("height_px", resolve(component, "height_px", height_px))
    width_px = check_non_negative("width_px", resolve(component, "width_px", width_px))
    border_width_px = check_non_negative(
        "border_width_px", resolve(component, "border_width_px", border_width_px, 1)
    )
    active_panel = check_whole_number(
        "active_panel", resolve(component, "active_panel", active_panel, 1)
    )
    border_color = resolve(component, "border_color", border_color, "white")

    size = [
        css_declaration("height", None if height_px is None else f"{format_number(height_px)}px"),
        css_declaration("width", None if width_px is None else f"{format_number(width_px)}px"),
    ]
    return [d for d in size if d], border_color, format_number(border_width_px), active_panel


def flex_card(
    *items: Any,
    height_px: float | None = None,
    width_px: float | None = None,
    border_color: str | None = None,
    border_width_px: float | None = None,
    active_panel: int | None = None,
) -> Markup:
    """Expanding accordion of image panels with icons.

    Args:
        *items: Card items (CardItem, mapping or key/value pairs) with bg,
            icon, title, subtitle, icon_color and text_color
        height_px: Card height in pixels
        width_px: Card width in pixels
        border_color: Panel border color (default "white")
        border_width_px: Panel border width in pixels (default 1)
        active_panel: Panel expanded initially, 1-based (0 = none, default 1)

    Returns:
        Card markup with its styles and script

    Raises:
        InvalidOptionError: If an item cannot be read, a numeric option
            is negative or active_panel is not a whole number
    """
    component = "flex_card"
    options_style, border_color, border_width, active = _card_options(
        component, height_px, width_px, border_color, border_width_px, active_panel
    )
    cards = [CardItem.from_value(item) for item in items]
    if active > len(cards):
        logger.debug("active_panel %d exceeds %d items; none expanded", active, len(cards))

    assets = theme_assets(
        css=ACCORDION_CSS,
        css_tokens={"sib53lpxver": border_width, "sib53lver": border_color},
        js=ACCORDION_JS,
        js_tokens={"resizepanelwhich": active},
        scope_tokens={UID_TOKEN: unique_number()},
    )

    rendered = []
    for index, card in enumerate(cards, start=1):
        bg = f"--optionBackground:url({card.bg});" if card.bg else ""
        rendered.append(
            {
                "active": index == active,
                "style": [f"--bgcolorEA:{border_width}px solid {border_color};", bg],
                "icon_style": f"--defaultIconBg1:{card.icon_color or DEFAULT_ICON_COLOR}",
                "icon_class": icon_class(card.icon),
                "icon": card.icon,
                "info_style": f"--defaulttEXTbG1:{card.text_color or DEFAULT_TEXT_COLOR}",
                "title": card.title,
                "subtitle": card.subtitle,
            }
        )

    has_icons = any(card.icon for card in cards)
    return render_component(
        "flex_card.html.j2",
        icon_stylesheet=get_config().assets.font_awesome if has_icons else None,
        options_style=options_style,
        items=rendered,
        assets=assets,
    )


def elasti_card(
    *items: Any,
    height_px: float | None = None,
    width_px: float | None = None,
    border_color: str | None = None,
    border_width_px: float | None = None,
    active_panel: int | None = None,
) -> Markup:
    """Row of elastic image cards that widen when selected.

    Args:
        *items: Card items with bg, title, subtitle, desc and text_color
        height_px: Card height in pixels
        width_px: Card width in pixels
        border_color: Section border color (default "white")
        border_width_px: Section border width in pixels (default 1)
        active_panel: Card expanded initially, 1-based (0 = none, default 1)

    Returns:
        Card markup with its styles and script
    """
    component = "elasti_card"
    size_style, border_color, border_width, active = _card_options(
        component, height_px, width_px, border_color, border_width_px, active_panel
    )
    cards = [CardItem.from_value(item) for item in items]

    assets = theme_assets(
        css=ACCORDION_CSS,
        js=ACCORDION_JS,
        js_tokens={"resizepanelwhich": active},
        scope_tokens={UID_TOKEN: unique_number()},
    )

    rendered = [
        {
            "style": css_declaration("background-image", f"url({card.bg})" if card.bg else None),
            "info_style": f"color:{card.text_color or DEFAULT_TEXT_COLOR}",
            "title": card.title,
            "subtitle": card.subtitle,
            "desc": card.desc,
        }
        for card in cards
    ]

    return render_component(
        "elasti_card.html.j2",
        section_style=[*size_style, f"border:{border_width}px solid {border_color};"],
        items=rendered,
        assets=assets,
    )
