"""Exceptions raised at the edges of the theme subsystem."""

from __future__ import annotations


class ThemeFormatError(ValueError):
    """Raised when a theme file or payload cannot be turned into a theme."""

    def __init__(self, message: str, *, source: str | None = None, line: int | None = None) -> None:
        self.source = source
        self.line = line
        prefix = f"{source}: " if source else ""
        suffix = f" (line {line})" if line is not None else ""
        super().__init__(f"{prefix}{message}{suffix}")


class UnknownThemeError(KeyError):
    """Raised when a theme name is required to exist but is not registered."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Unknown theme '{self.name}'"


__all__ = ["ThemeFormatError", "UnknownThemeError"]
