"""String-level helpers shared by the components."""

from r2resize.renderers.substitute import (
    as_html,
    css_declaration,
    join_styles,
    substitute_tokens,
)

__all__ = ["as_html", "css_declaration", "join_styles", "substitute_tokens"]
