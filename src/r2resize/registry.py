"""Component registry.

The registry maps component names to their functions so that the CLI (and
any other caller working from names, e.g. a YAML page description) can look
components up, list them and check that their theme files are present.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from markupsafe import Markup

from r2resize.components import (
    add_jquery,
    add_resizer,
    elasti_card,
    emphasis_card,
    expand_image,
    flex_card,
    sizeable_card,
    split_card,
    split_card2,
    window_card,
)
from r2resize.errors import ComponentNotFoundError

logger = logging.getLogger(__name__)

# How a component takes its positional arguments
KINDS = ("split", "content", "items", "page", "ids")


@dataclass
class ComponentSpec:
    """A registered component.

    Attributes:
        name: Component name (e.g., "split_card")
        func: Function rendering the component
        kind: Positional argument shape: "split" (left, right), "content"
            (*content), "items" (*card items), "page" (none) or "ids"
            (container ids)
        description: One-line description
        themes: Theme files the component reads
    """

    name: str
    func: Callable[..., Markup]
    kind: str
    description: str = ""
    themes: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        """Validate the argument kind."""
        if self.kind not in KINDS:
            raise ValueError(f"Invalid component kind: {self.kind}. Must be one of {KINDS}")

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON output."""
        return {
            "name": self.name,
            "kind": self.kind,
            "description": self.description,
            "themes": list(self.themes),
        }


class ComponentRegistry:
    """Registry of available components by name.

    Adding a new component:
        1. Write the component function (returns Markup)
        2. Register it with its argument kind and theme files
        3. The CLI picks it up for list, render and check
    """

    def __init__(self) -> None:
        """Initialize empty registry."""
        self._components: dict[str, ComponentSpec] = {}

    def register(self, spec: ComponentSpec) -> None:
        """Register a component, replacing any with the same name."""
        if spec.name in self._components:
            logger.debug("Replacing registered component: %s", spec.name)
        self._components[spec.name] = spec

    def get(self, name: str) -> ComponentSpec:
        """Look up a component by name.

        Raises:
            ComponentNotFoundError: If no component has that name
        """
        try:
            return self._components[name]
        except KeyError:
            raise ComponentNotFoundError(name, self.names()) from None

    def names(self) -> list[str]:
        """Registered component names, in registration order."""
        return list(self._components)

    def specs(self) -> list[ComponentSpec]:
        """Registered components, in registration order."""
        return list(self._components.values())

    def render(self, name: str, *args: Any, **kwargs: Any) -> Markup:
        """Render a component by name."""
        spec = self.get(name)
        logger.debug("Rendering component %s", name)
        return spec.func(*args, **kwargs)

    def required_themes(self) -> list[str]:
        """Every theme file used by a registered component, sorted."""
        return sorted({theme for spec in self._components.values() for theme in spec.themes})

    def __contains__(self, name: object) -> bool:
        return name in self._components

    def __len__(self) -> int:
        return len(self._components)


def setup_default_components(registry: ComponentRegistry) -> None:
    """Register the bundled components."""
    defaults = [
        ComponentSpec(
            "split_card", split_card, "split",
            "Resizable split screen with a draggable splitter",
            ("splitCard.css", "divsplitter.js"),
        ),
        ComponentSpec(
            "split_card2", split_card2, "split",
            "Split screen with a fixed divider position",
            ("splitCard2.css", "splitCard2.js"),
        ),
        ComponentSpec(
            "sizeable_card", sizeable_card, "content",
            "Content holder with a small/medium/large toolbar",
            ("rezcontCard.css", "rezcontCard.js"),
        ),
        ComponentSpec(
            "window_card", window_card, "content",
            "Moveable, resizable and expandable window",
            ("windowCard.css", "windowCard.js"),
        ),
        ComponentSpec(
            "emphasis_card", emphasis_card, "content",
            "Container with an animated attention border",
            ("empahsisCard.css",),
        ),
        ComponentSpec(
            "flex_card", flex_card, "items",
            "Expanding accordion of image panels with icons",
            ("expandingAccordian.css", "expandingAccordian.js"),
        ),
        ComponentSpec(
            "elasti_card", elasti_card, "items",
            "Row of elastic image cards",
            ("expandingAccordian.css", "expandingAccordian.js"),
        ),
        ComponentSpec(
            "add_resizer", add_resizer, "page",
            "Document-wide resize toolbar for images and tables",
            ("default.css", "default_top.js", "default_bottom.js"),
        ),
        ComponentSpec(
            "expand_image", expand_image, "ids",
            "Image viewer with zoom and thumbnails for image containers",
            ("imgviewer.css",),
        ),
        ComponentSpec("add_jquery", add_jquery, "page", "jQuery script tag"),
    ]
    for spec in defaults:
        registry.register(spec)


# Global registry instance
_registry: ComponentRegistry | None = None


def get_registry() -> ComponentRegistry:
    """Get the global component registry, with the bundled components."""
    global _registry
    if _registry is None:
        _registry = ComponentRegistry()
        setup_default_components(_registry)
    return _registry


def reset_registry() -> None:
    """Reset the global registry (primarily for testing)."""
    global _registry
    _registry = None
