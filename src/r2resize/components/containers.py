"""Resizable, split, sizeable, window and emphasis containers.

All functions accept arbitrary content (strings are escaped, Markup and
other component output are embedded as-is) and return Markup.
"""

import logging
from typing import Any

from markupsafe import Markup

from r2resize.components.base import UID_TOKEN, render_component, theme_assets
from r2resize.ids import unique_number
from r2resize.models.options import (
    UNSET,
    SplitPosition,
    match_choice,
    match_slider_position,
    resolve,
)
from r2resize.renderers.substitute import css_declaration, join_styles

logger = logging.getLogger(__name__)

BG_COLOR = "background-color"
TEXT_COLOR = "color"

# Class name stems per splitter orientation: holder, first panel, splitter,
# second panel, and the dimension the splitter drags
SPLIT_CLASSES: dict[SplitPosition, tuple[str, str, str, str, str]] = {
    SplitPosition.VERTICAL: ("container", "left", "splitter", "right", "Height"),
    SplitPosition.HORIZONTAL: (
        "container-horizontal",
        "top",
        "splitter-horizontal",
        "bottom",
        "Width",
    ),
}


def _panel_style(bg_color: str | None, bg_url: str | None, text_color: str | None) -> str:
    """Style attribute of a split card panel."""
    image = f"background-size: cover;background-image:url({bg_url});" if bg_url else ""
    return join_styles(
        css_declaration(BG_COLOR, bg_color),
        image,
        css_declaration(TEXT_COLOR, text_color),
    )


def _text_color(component: str, option: str, value: str | None) -> str | None:
    """Panel text color; an explicit None omits the declaration."""
    if value is None:
        return None
    return resolve(component, option, value, "black")


def split_card(
    left: Any,
    right: Any,
    splitter_color: str | None = None,
    bg_left_color: str | None = None,
    left_bg_url: str | None = None,
    right_bg_url: str | None = None,
    bg_right_color: str | None = None,
    border_color: str | None = None,
    position: SplitPosition | str = UNSET,
    text_left_color: str | None = UNSET,
    text_right_color: str | None = UNSET,
    min_height: str | None = None,
    left_width: str | None = None,
) -> Markup:
    """Resizable split screen container.

    Two panels side by side (``position="vertical"``) or stacked
    (``position="horizontal"``), separated by a draggable splitter.

    Args:
        left: Content of the left (or top) panel
        right: Content of the right (or bottom) panel
        splitter_color: Color of the draggable splitter
        bg_left_color: Background color of the left panel
        left_bg_url: Background image URL of the left panel
        right_bg_url: Background image URL of the right panel
        bg_right_color: Background color of the right panel
        border_color: Border color of the container (default "#ffffff")
        position: "vertical" or "horizontal" (default "vertical")
        text_left_color: Text color of the left panel (default "black",
            None omits it)
        text_right_color: Text color of the right panel (default "black",
            None omits it)
        min_height: Minimum height of the container (default "200px")
        left_width: Initial width (or height) of the first panel (default "50%")

    Returns:
        Container markup with its styles and script

    Raises:
        InvalidOptionError: If position is not "vertical" or "horizontal"
    """
    component = "split_card"
    position = resolve(component, "position", position, SplitPosition.VERTICAL)
    split = match_choice("position", position, SplitPosition)
    text_left_color = _text_color(component, "text_left_color", text_left_color)
    text_right_color = _text_color(component, "text_right_color", text_right_color)

    min_height = resolve(component, "min_height", min_height, "200px")
    left_width = resolve(component, "left_width", left_width, "50%")
    border_color = resolve(component, "border_color", border_color, "#ffffff")
    splitter_color = resolve(component, "splitter_color", splitter_color)
    bg_left_color = resolve(component, "bg_left_color", bg_left_color)
    bg_right_color = resolve(component, "bg_right_color", bg_right_color)
    uid = unique_number()

    holder_cls, first_cls, splitter_cls, second_cls, dimension = (
        f"{stem}{uid}" for stem in SPLIT_CLASSES[split]
    )
    holder = f"r2resize-resizablediv-panel-{holder_cls}"
    panel_a = f"r2resize-resizablediv-panel-{first_cls}"
    splitter = f"r2resize-resizablediv-{splitter_cls}"
    panel_b = f"r2resize-resizablediv-panel-{second_cls}"

    assets = theme_assets(
        css="splitCard.css",
        css_tokens={
            "sib53lver": border_color,
            "mhw20x03": min_height,
            "lws50x73": left_width,
        },
        js="divsplitter.js",
        js_tokens={
            "resizepanelwhich": panel_a,
            "resizesplitterwhich": splitter,
            "HeWigdht": dimension,
        },
        scope_tokens={UID_TOKEN: uid},
    )

    return render_component(
        "split_card.html.j2",
        holder=holder,
        panel_a=panel_a,
        splitter=splitter,
        panel_b=panel_b,
        left=left,
        right=right,
        left_style=_panel_style(bg_left_color, left_bg_url, text_left_color),
        right_style=_panel_style(bg_right_color, right_bg_url, text_right_color),
        splitter_style=css_declaration(BG_COLOR, splitter_color, terminate=False),
        assets=assets,
    )


def split_card2(
    left: Any,
    right: Any,
    bg_left_color: str | None = None,
    bg_right_color: str | None = None,
    border_color: str | None = None,
    text_left_color: str | None = UNSET,
    text_right_color: str | None = UNSET,
    slider_position: int | str = UNSET,
) -> Markup:
    """Split screen container with a fixed divider.

    Args:
        left: Content of the left panel
        right: Content of the right panel
        bg_left_color: Background color of the left panel
        bg_right_color: Background color of the right panel
        border_color: Border color (default "#ffffff")
        text_left_color: Text color of the left panel (default "black")
        text_right_color: Text color of the right panel (default "black")
        slider_position: Left panel width in percent, 1 to 100 (default 80)

    Returns:
        Container markup with its styles and script

    Raises:
        InvalidOptionError: If slider_position is outside 1..100
    """
    component = "split_card2"
    position = match_slider_position(
        resolve(component, "slider_position", slider_position, "80")
    )
    text_left_color = _text_color(component, "text_left_color", text_left_color)
    text_right_color = _text_color(component, "text_right_color", text_right_color)
    border_color = resolve(component, "border_color", border_color, "#ffffff")
    bg_left_color = resolve(component, "bg_left_color", bg_left_color)
    bg_right_color = resolve(component, "bg_right_color", bg_right_color)
    scope = f"r2rsC2{unique_number()}"

    assets = theme_assets(
        css="splitCard2.css",
        css_tokens={"sib534lver": border_color, "slidepos1232": position},
        js="splitCard2.js",
        js_tokens={"slidepos1232": position},
        scope_tokens={"c87n767m08o": scope},
    )

    sides = [
        {
            "name": "left",
            "bg_style": css_declaration(BG_COLOR, bg_left_color),
            "text_style": css_declaration(TEXT_COLOR, text_left_color),
            "content": left,
        },
        {
            "name": "right",
            "bg_style": css_declaration(BG_COLOR, bg_right_color),
            "text_style": css_declaration(TEXT_COLOR, text_right_color),
            "content": right,
        },
    ]

    return render_component("split_card2.html.j2", scope=scope, sides=sides, assets=assets)


def sizeable_card(
    *content: Any,
    bg_color: str | None = None,
    border_color: str | None = None,
) -> Markup:
    """Content holder with a small/medium/large size toolbar.

    Args:
        *content: Card content
        bg_color: Background color of the content area (default "#ffffff")
        border_color: Border and toolbar color (default "#ffffff")

    Returns:
        Card markup with its styles and script
    """
    component = "sizeable_card"
    border_color = resolve(component, "border_color", border_color, "#ffffff")
    bg_color = resolve(component, "bg_color", bg_color, "#ffffff")
    uid = unique_number()

    assets = theme_assets(
        css="rezcontCard.css",
        css_tokens={"bgheaderbordercolor": border_color, "contentbgcolor": bg_color},
        js="rezcontCard.js",
        scope_tokens={UID_TOKEN: uid},
    )

    return render_component(
        "sizeable_card.html.j2",
        uid=uid,
        sizes=("small", "medium", "large"),
        content=list(content),
        assets=assets,
    )


def window_card(
    *content: Any,
    title: Any = "Sample title",
    width: str = UNSET,
    bg_color: str | None = None,
    border_color: str | None = None,
    header_text_color: str | None = None,
    body_text_color: str | None = None,
) -> Markup:
    """Moveable, resizable and expandable window.

    The window is dragged by its title bar and expands to full screen on
    double click. Its script addresses fixed element ids, so only one
    window card works per page.

    Args:
        *content: Window body content
        title: Title bar text
        width: Initial width, e.g. "600px" (default "50%")
        bg_color: Body background color (default "#f1f1f1")
        border_color: Border and title bar color (default "#999999")
        header_text_color: Title text color (default "#000000")
        body_text_color: Body text color (default "#000000")

    Returns:
        Window markup with its styles and script
    """
    component = "window_card"
    border_color = resolve(component, "border_color", border_color, "#999999")
    bg_color = resolve(component, "bg_color", bg_color, "#f1f1f1")
    body_text_color = resolve(component, "body_text_color", body_text_color, "#000000")
    header_text_color = resolve(component, "header_text_color", header_text_color, "#000000")
    width = resolve(component, "width", width, "50%")

    logger.debug("window_card uses fixed element ids; render one per page")

    assets = theme_assets(
        css="windowCard.css",
        css_tokens={
            "bgheaderbordercolor": border_color,
            "contentbgcolor": bg_color,
            "contentwidth": width,
            "body1text1color": body_text_color,
            "header1text1color": header_text_color,
        },
        js="windowCard.js",
    )

    return render_component(
        "window_card.html.j2",
        title=title,
        content=list(content),
        assets=assets,
    )


def emphasis_card(*content: Any, bg_color: str | None = None) -> Markup:
    """Container that draws attention with an animated border.

    Args:
        *content: Card content
        bg_color: Background color (default "#f5f5f5")

    Returns:
        Card markup with its styles
    """
    bg_color = resolve("emphasis_card", "bg_color", bg_color, "#f5f5f5")

    assets = theme_assets(css="empahsisCard.css", css_tokens={"contentbgcolor": bg_color})

    return render_component("emphasis_card.html.j2", content=list(content), assets=assets)


# Original spelling, kept for compatibility
empahsis_card = emphasis_card
