"""Shared steps of every component.

Each component fetches its theme files, substitutes option tokens, tags
the combined <style>/<script> text as trusted HTML and renders it next to
its container markup.
"""

from collections.abc import Mapping
from typing import Any

from markupsafe import Markup

from r2resize.renderers.substitute import as_html, substitute_tokens
from r2resize.templates.renderer import get_renderer
from r2resize.themes.loader import get_theme_loader

# Token carrying the per-instance unique number in most themes
UID_TOKEN = "87n767m08o"


def theme_assets(
    css: str | None = None,
    css_tokens: Mapping[str, Any] | None = None,
    js: str | None = None,
    js_tokens: Mapping[str, Any] | None = None,
    scope_tokens: Mapping[str, Any] | None = None,
) -> Markup:
    """Build the trusted <style>/<script> fragment of a component.

    Args:
        css: CSS theme file name
        css_tokens: Substitutions applied to the CSS only
        js: JS theme file name
        js_tokens: Substitutions applied to the JS only
        scope_tokens: Substitutions applied to CSS and JS together, last

    Returns:
        Style block followed by script block, as Markup
    """
    loader = get_theme_loader()
    style = loader.style_block(css, css_tokens) if css else ""
    script = loader.script_block(js, js_tokens) if js else ""
    return as_html(substitute_tokens(style + script, scope_tokens or {}))


def render_component(template_name: str, **context: Any) -> Markup:
    """Render a component's container markup."""
    return get_renderer().render(template_name, **context)
