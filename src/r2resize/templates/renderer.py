"""Markup renderer for component containers.

Renders the container markup of each component with Jinja2 templates.
Caller content is escaped unless it is already trusted HTML (Markup or
anything with __html__), so components nest inside each other freely.
"""

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from jinja2 import Environment, PackageLoader, TemplateError, TemplateNotFound, select_autoescape
from markupsafe import Markup, escape

from r2resize.config import get_config
from r2resize.renderers.substitute import join_styles

logger = logging.getLogger(__name__)


def render_content(value: Any) -> Markup:
    """Render caller content as HTML.

    Lists and tuples are flattened, None is dropped, strings are escaped
    and trusted HTML passes through unchanged.

    Examples:
        >>> render_content(["a < b", Markup("<b>c</b>"), None])
        Markup('a &lt; b<b>c</b>')
    """
    if value is None:
        return Markup("")
    if isinstance(value, (list, tuple)):
        return Markup("").join(render_content(v) for v in value)
    return escape(value)


def style_attr(declarations: Iterable[str] | str | None) -> str:
    """Template filter form of join_styles."""
    if declarations is None:
        return ""
    if isinstance(declarations, str):
        return declarations
    return join_styles(*declarations)


class MarkupRenderer:
    """Renders component markup and standalone pages.

    Usage:
        renderer = MarkupRenderer()
        html = renderer.render("window_card.html.j2", title="Hi", content="Body", ...)
        page = renderer.render_page(html, title="Demo")
    """

    def __init__(self) -> None:
        """Initialize the renderer with the package templates."""
        self._env = Environment(
            loader=PackageLoader("r2resize", "templates"),
            autoescape=select_autoescape(["html", "xml", "html.j2"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )

        self._env.filters["content"] = render_content
        self._env.filters["style"] = style_attr

    def render(self, template_name: str, **context: Any) -> Markup:
        """Render a markup template.

        Args:
            template_name: Template file to use
            **context: Template variables

        Returns:
            Rendered HTML as Markup

        Raises:
            ValueError: If the template is missing or fails to render
        """
        try:
            template = self._env.get_template(template_name)
        except TemplateNotFound as e:
            logger.error("Failed to load template %s: %s", template_name, e)
            raise ValueError(f"Template not found: {template_name}") from e

        try:
            rendered = template.render(**context)
        except TemplateError as e:
            logger.error("Template rendering failed: %s", e)
            raise ValueError(f"Template rendering failed: {e}") from e

        logger.debug("Rendered %s (%d characters)", template_name, len(rendered))
        return Markup(rendered)

    def render_page(
        self,
        *children: Any,
        title: str | None = None,
        include_jquery: bool | None = None,
    ) -> Markup:
        """Render a standalone HTML document around component output.

        Args:
            *children: Page body content
            title: Page title (defaults to the configured output title)
            include_jquery: Load jQuery in the head (defaults to config)

        Returns:
            Complete HTML document
        """
        from r2resize.components.scripts import add_jquery

        output = get_config().output
        if include_jquery is None:
            include_jquery = output.include_jquery

        return self.render(
            "page.html.j2",
            title=title or output.title,
            head=add_jquery() if include_jquery else Markup(""),
            body=list(children),
        )

    def render_to_file(
        self,
        output_path: Path,
        *children: Any,
        title: str | None = None,
        include_jquery: bool | None = None,
    ) -> Path:
        """Render a standalone page and write it to a file.

        Args:
            output_path: Path to write output file
            *children: Page body content
            title: Page title
            include_jquery: Load jQuery in the head

        Returns:
            Path to written file
        """
        content = self.render_page(*children, title=title, include_jquery=include_jquery)

        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(str(content), encoding="utf-8")
        logger.info("Wrote page to %s", output_path)

        return output_path


_renderer: MarkupRenderer | None = None


def get_renderer() -> MarkupRenderer:
    """Get the shared renderer instance."""
    global _renderer
    if _renderer is None:
        _renderer = MarkupRenderer()
    return _renderer


def render_page(*children: Any, title: str | None = None, include_jquery: bool | None = None) -> Markup:
    """Render a standalone HTML page with the shared renderer."""
    return get_renderer().render_page(*children, title=title, include_jquery=include_jquery)
