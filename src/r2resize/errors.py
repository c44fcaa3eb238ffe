"""Exceptions raised by r2resize components.

Components fail fast on options outside their allowed set. Missing theme
files only raise when strict theme loading is enabled.
"""

from collections.abc import Iterable
from pathlib import Path
from typing import Any


class R2ResizeError(Exception):
    """Base class for all r2resize errors."""


class InvalidOptionError(R2ResizeError, ValueError):
    """Raised when a component option is outside its allowed values."""

    def __init__(
        self,
        option: str,
        value: Any,
        allowed: Iterable[Any] | None = None,
        message: str | None = None,
    ) -> None:
        self.option = option
        self.value = value
        self.allowed = list(allowed) if allowed is not None else None
        if message is None:
            message = f"Invalid value for {option}: {value!r}"
            if self.allowed:
                message += f". Valid: {', '.join(str(a) for a in self.allowed)}"
        self.message = message
        super().__init__(message)


class ThemeNotFoundError(R2ResizeError, FileNotFoundError):
    """Raised when a theme file is missing and strict loading is on."""

    def __init__(self, theme: str, directory: Path | None = None) -> None:
        self.theme = theme
        self.directory = directory
        location = f" in {directory}" if directory is not None else ""
        self.message = f"Theme not found: {theme}{location}"
        super().__init__(self.message)


class ComponentNotFoundError(R2ResizeError, KeyError):
    """Raised when a component name is not registered."""

    def __init__(self, name: str, available: Iterable[str] | None = None) -> None:
        self.name = name
        self.available = sorted(available) if available is not None else []
        message = f"Unknown component: {name}"
        if self.available:
            message += f". Available: {', '.join(self.available)}"
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        return self.message
