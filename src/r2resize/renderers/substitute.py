"""Placeholder token substitution for theme templates.

Theme files carry literal placeholder tokens (e.g. ``sib53lver`` for a
border color). Components swap them for caller options before the theme
is embedded in the page.
"""

from collections.abc import Mapping
from typing import Any

from markupsafe import Markup


def substitute_tokens(text: str, replacements: Mapping[str, Any]) -> str:
    """Replace every occurrence of each token with its value.

    Replacements are applied in mapping order, so a later token sees the
    output of earlier ones. Tokens mapped to ``None`` are left in place.

    Args:
        text: Template text
        replacements: Token to replacement value

    Returns:
        Substituted text

    Examples:
        >>> substitute_tokens("border: sib53lver;", {"sib53lver": "red"})
        'border: red;'
        >>> substitute_tokens("width: lws50x73;", {"lws50x73": None})
        'width: lws50x73;'
    """
    for token, value in replacements.items():
        if value is None:
            continue
        text = text.replace(token, str(value))
    return text


def as_html(text: str) -> Markup:
    """Tag a string as trusted HTML."""
    return Markup(text)


def css_declaration(prop: str, value: Any, terminate: bool = True) -> str:
    """Build a single ``prop:value;`` declaration.

    Returns an empty string when value is None.
    """
    if value is None:
        return ""
    return f"{prop}:{value}{';' if terminate else ''}"


def join_styles(*declarations: str | None) -> str:
    """Join non-empty declarations into one style attribute value.

    Examples:
        >>> join_styles("color:red;", "", None, "width:10px;")
        'color:red; width:10px;'
    """
    return " ".join(d for d in declarations if d)
