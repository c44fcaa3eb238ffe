"""Card item entities for flex and elastic cards."""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, fields
from typing import Any

from markupsafe import Markup

from r2resize.errors import InvalidOptionError

logger = logging.getLogger(__name__)


@dataclass
class CardItem:
    """A single panel of a flex or elastic card.

    Attributes:
        bg: Background image URL
        icon: Font Awesome icon name (e.g., "chart-line")
        title: Main heading (text, or Markup to embed HTML)
        subtitle: Secondary heading
        desc: Longer description (elastic cards only)
        icon_color: Icon color
        text_color: Text color
    """

    bg: str | None = None
    icon: str | None = None
    title: str | Markup | None = None
    subtitle: str | Markup | None = None
    desc: str | Markup | None = None
    icon_color: str | None = None
    text_color: str | None = None

    @classmethod
    def field_names(cls) -> set[str]:
        """Return the accepted item keys."""
        return {f.name for f in fields(cls)}

    @classmethod
    def from_value(cls, value: Any) -> "CardItem":
        """Build a card item from a CardItem, mapping or key/value pairs.

        Keys may be written in snake_case ("icon_color") or dotted form
        ("icon.color"). Unknown keys are ignored. Values are converted to str,
        except trusted HTML (anything with __html__), which is kept as is.

        Raises:
            InvalidOptionError: If value cannot be read as an item
        """
        if isinstance(value, cls):
            return value

        if isinstance(value, Mapping):
            pairs: Iterable[tuple[Any, Any]] = value.items()
        elif isinstance(value, (list, tuple)) and all(
            isinstance(p, (list, tuple)) and len(p) == 2 for p in value
        ):
            pairs = value
        else:
            raise InvalidOptionError(
                "item", value,
                message=f"Card items must be mappings of properties (got {type(value).__name__})",
            )

        known = cls.field_names()
        data: dict[str, Any] = {}
        for key, item_value in pairs:
            name = str(key).replace(".", "_").replace("-", "_")
            if name not in known:
                logger.debug("Ignoring unknown card item key: %s", key)
                continue
            if item_value is None or hasattr(item_value, "__html__"):
                data[name] = item_value
            else:
                data[name] = str(item_value)
        return cls(**data)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {f.name: getattr(self, f.name) for f in fields(self)}
