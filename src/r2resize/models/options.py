"""Component option enums and default filling.

Options arrive as plain keyword arguments. Enumerated options are matched
against their allowed values; anything the caller leaves as None is filled
from the active configuration's per-component defaults, then from the
component's built-in fallback.
"""

import re
from enum import Enum
from numbers import Real
from typing import Any, TypeVar

from r2resize.config import get_config
from r2resize.errors import InvalidOptionError


class SplitPosition(Enum):
    """Orientation of a split card splitter."""

    VERTICAL = "vertical"  # left / right panels
    HORIZONTAL = "horizontal"  # top / bottom panels


class ToolbarPosition(Enum):
    """Where the document resize toolbar is placed."""

    TOP = "top"
    BOTTOM = "bottom"


E = TypeVar("E", bound=Enum)

SLIDER_POSITIONS = range(1, 101)
DEFAULT_SLIDER_POSITION = "80"

_VERSION_RE = re.compile(r"^\d+(\.\d+)*$")


class _Unset:
    """Marker for options the caller did not pass."""

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


# Default for options where None already means "omit"
UNSET: Any = _Unset()


def match_choice(option: str, value: E | str, enum_cls: type[E]) -> E:
    """Match an option value against an enum.

    Args:
        option: Option name (for error messages)
        value: Enum member or its string value (case-insensitive)
        enum_cls: Enum class listing allowed values

    Returns:
        Matched enum member

    Raises:
        InvalidOptionError: If value is not an allowed choice
    """
    if isinstance(value, enum_cls):
        return value
    allowed = [member.value for member in enum_cls]
    if isinstance(value, str):
        normalized = value.strip().lower()
        for member in enum_cls:
            if member.value == normalized:
                return member
    raise InvalidOptionError(option, value, allowed)


def match_slider_position(value: int | str | None) -> str:
    """Validate a fixed slider position and return it as a percentage.

    Args:
        value: Integer or digit string from 1 to 100 (None = default "80")

    Returns:
        Percentage string, e.g. "40%"

    Raises:
        InvalidOptionError: If value is outside 1..100
    """
    if value is None:
        value = DEFAULT_SLIDER_POSITION
    if isinstance(value, bool):
        raise InvalidOptionError("slider_position", value, message=(
            "Invalid value for slider_position: expected a number from 1 to 100"
        ))
    text = str(value).strip().rstrip("%")
    if not text.isdigit() or int(text) not in SLIDER_POSITIONS:
        raise InvalidOptionError("slider_position", value, message=(
            f"Invalid value for slider_position: {value!r}. Expected a number from 1 to 100"
        ))
    return f"{int(text)}%"


def check_non_negative(option: str, value: Any) -> Any:
    """Ensure a numeric option is a non-negative number (None passes).

    Raises:
        InvalidOptionError: If value is not a non-negative number
    """
    if value is None:
        return None
    if isinstance(value, bool):
        raise InvalidOptionError(
            option, value, message=f"Invalid value for {option}: {value!r} is not a number"
        )
    if not isinstance(value, Real):
        try:
            number = float(value)
        except (TypeError, ValueError):
            raise InvalidOptionError(
                option, value, message=f"Invalid value for {option}: {value!r} is not a number"
            ) from None
    else:
        number = float(value)
    if number < 0:
        raise InvalidOptionError(
            option, value, message=f"Invalid value for {option}: {value!r} must not be negative"
        )
    return value


def check_whole_number(option: str, value: Any) -> int:
    """Ensure an option is a non-negative whole number and return it as int.

    Raises:
        InvalidOptionError: If value is negative, not a number or has a
            fractional part
    """
    check_non_negative(option, value)
    number = float(value)
    if not number.is_integer():
        raise InvalidOptionError(
            option, value, message=f"Invalid value for {option}: {value!r} must be a whole number"
        )
    return int(number)


def format_number(value: Any) -> str:
    """Format a numeric option without a trailing ".0"."""
    number = float(value)
    return str(int(number)) if number.is_integer() else str(number)


def check_version(value: str) -> str:
    """Validate a dotted version string such as "3.5.1"."""
    text = str(value).strip()
    if not _VERSION_RE.match(text):
        raise InvalidOptionError(
            "version", value, message=f"Invalid version: {value!r}. Expected e.g. 3.5.1"
        )
    return text


def resolve(component: str, option: str, value: Any, fallback: Any = None) -> Any:
    """Fill an option left as None or UNSET.

    Args:
        component: Component name (e.g., "window_card")
        option: Option name (e.g., "bg_color")
        value: Caller-supplied value
        fallback: Built-in default

    Returns:
        value, else the configured default, else fallback
    """
    if value is not None and value is not UNSET:
        return value
    configured = get_config().default_for(component, option)
    if configured is not None:
        return configured
    return fallback
