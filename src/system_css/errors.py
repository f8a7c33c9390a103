"""Error types raised while loading themes and generating stylesheets."""

from __future__ import annotations


class SystemCSSError(Exception):
    """Base class for all system-css errors."""


class ThemeError(SystemCSSError):
    """Raised when a theme object has the wrong shape."""


class ThemeLoadError(SystemCSSError):
    """Raised when a theme file cannot be read or decoded."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Could not load theme {path!r}: {reason}")


class UnknownStyleFunctionError(SystemCSSError):
    """Raised when a style prop names a style function that does not exist."""

    def __init__(self, name: str, available: list[str] | None = None) -> None:
        self.name = name
        self.available = available or []
        message = f"Unknown style function: {name!r}"
        if self.available:
            message += f" (available: {', '.join(self.available)})"
        super().__init__(message)
