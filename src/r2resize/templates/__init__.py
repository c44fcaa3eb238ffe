"""r2resize markup templates.

Jinja2 templates for the container markup of each component, plus the
standalone page used for previews.
"""

from r2resize.templates.renderer import MarkupRenderer, get_renderer, render_content, render_page

__all__ = ["MarkupRenderer", "get_renderer", "render_content", "render_page"]
