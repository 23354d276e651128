"""Theme module consolidating display attributes, token lists and registry helpers."""

from .errors import ThemeFormatError, UnknownThemeError
from .models import Color, ColorTuple, DisplayAttribute, SyntaxTheme, ThemeCategory, normalize_color
from .manager import (
    DEFAULT_THEME_NAME,
    ThemeManager,
    available_themes,
    build_java_theme,
    load_theme,
    theme_manager,
)

__all__ = [
    "Color",
    "ColorTuple",
    "DEFAULT_THEME_NAME",
    "DisplayAttribute",
    "SyntaxTheme",
    "ThemeCategory",
    "ThemeFormatError",
    "ThemeManager",
    "UnknownThemeError",
    "available_themes",
    "build_java_theme",
    "load_theme",
    "normalize_color",
    "theme_manager",
]
