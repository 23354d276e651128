"""Theme registry, built-in token lists, and table population helpers."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Dict, Iterable, List

from .errors import ThemeFormatError, UnknownThemeError
from .models import Color, DisplayAttribute, SyntaxTheme, ThemeCategory
from .schema import read_theme_file, write_theme_file

if TYPE_CHECKING:
    from ..editor.syntax.classification import ClassificationTable

LOGGER = logging.getLogger(__name__)

DEFAULT_THEME_NAME = "java"

_JAVA_KEYWORDS: tuple[str, ...] = (
    "boolean", "byte", "short", "int", "long", "char", "float",
    "double", "void", "new",
    "static", "final", "volatile", "synchronized", "abstract",
    "public", "private", "protected",
    "class", "interface", "extends", "implements",
    "if", "else", "do", "while", "for", "break", "continue",
    "switch", "case", "default",
)

_JAVA_OPERATORS: tuple[str, ...] = (
    "[", "]", "(", ")", "{", "}",
    "*", "-", "+", "/", "=", "%",
    "^", "&", "!", "<<", ">>", "<<<", ">>>",
    "&&", "||",
    ">", "<", ">=", "<=", "!=", "==",
    ",", ";", ".", "?", ":",
)

_JAVA_PACKAGE_KEYWORDS: tuple[str, ...] = ("package", "import")


def build_java_theme() -> SyntaxTheme:
    """Keyword theme with colors resembling the Borland IDE."""

    return SyntaxTheme(
        name=DEFAULT_THEME_NAME,
        title="Java Keywords",
        description="Bold keywords, operators and package statements on a blue field.",
        categories=[
            ThemeCategory(
                name="keyword",
                attribute=DisplayAttribute(Color.WHITE, Color.BLUE, bold=True),
                tokens=_JAVA_KEYWORDS,
            ),
            ThemeCategory(
                name="operator",
                attribute=DisplayAttribute(Color.CYAN, Color.BLUE, bold=True),
                tokens=_JAVA_OPERATORS,
            ),
            ThemeCategory(
                name="package",
                attribute=DisplayAttribute(Color.GREEN, Color.BLUE, bold=True),
                tokens=_JAVA_PACKAGE_KEYWORDS,
            ),
        ],
        metadata={"language": "java"},
    )


class ThemeManager:
    """Registry that resolves, populates and serializes syntax themes."""

    def __init__(
        self, themes: Iterable[SyntaxTheme] | None = None, *, default_name: str = DEFAULT_THEME_NAME
    ) -> None:
        self._themes: Dict[str, SyntaxTheme] = {}
        self._default_name = default_name.lower()
        if themes:
            for theme in themes:
                self.register(theme)
        if not self._themes:
            self.register(build_java_theme())
        if self._default_name not in self._themes:
            self._default_name = next(iter(self._themes))

    def register(self, theme: SyntaxTheme, *, overwrite: bool = True) -> None:
        key = theme.name.lower()
        if not overwrite and key in self._themes:
            raise ValueError(f"Theme '{theme.name}' already registered")
        self._themes[key] = theme
        LOGGER.debug("Registered theme %s (%d tokens)", key, theme.token_count())

    def available(self) -> List[SyntaxTheme]:
        return [self._themes[name] for name in sorted(self._themes.keys())]

    def available_names(self) -> List[str]:
        return [theme.name for theme in self.available()]

    def get(self, name: str) -> SyntaxTheme:
        key = name.strip().lower()
        try:
            return self._themes[key]
        except KeyError:
            raise UnknownThemeError(name) from None

    def resolve(self, theme: SyntaxTheme | str | None = None) -> SyntaxTheme:
        """Return ``theme`` as a registered theme, falling back to the default."""

        if isinstance(theme, SyntaxTheme):
            return theme
        key = (theme or self._default_name).strip().lower()
        resolved = self._themes.get(key)
        if resolved is None:
            LOGGER.warning("Unknown theme %r requested; using %r", theme, self._default_name)
            resolved = self._themes[self._default_name]
        return resolved

    def default(self) -> SyntaxTheme:
        return self._themes[self._default_name]

    def set_default(self, theme_name: str) -> None:
        key = theme_name.strip().lower()
        if key not in self._themes:
            raise UnknownThemeError(theme_name)
        self._default_name = key

    def populate(self, table: "ClassificationTable", theme: SyntaxTheme | str | None = None) -> SyntaxTheme:
        """Bind every token of ``theme`` into ``table``; later categories win on overlap."""

        resolved = self.resolve(theme)
        for category in resolved.categories:
            table.register_many(category.tokens, category.attribute)
        LOGGER.debug("Loaded theme %s into table (%d entries)", resolved.name, len(table))
        return resolved

    def export_theme(self, theme: SyntaxTheme | str | None, destination: str | Path, *, indent: int = 2) -> Path:
        resolved = self.resolve(theme)
        return write_theme_file(resolved.to_dict(), destination, indent=indent)

    def import_theme(self, source: str | Path, *, activate: bool = False) -> SyntaxTheme:
        payload = read_theme_file(source)
        try:
            theme = SyntaxTheme.from_dict(payload)
        except (TypeError, ValueError) as exc:
            raise ThemeFormatError(str(exc), source=str(source)) from exc
        self.register(theme)
        if activate:
            self.set_default(theme.name)
        return theme

    def import_directory(self, directory: str | Path) -> List[SyntaxTheme]:
        """Import every ``*.yaml``, ``*.yml`` and ``*.json`` theme file in ``directory``.

        Unreadable or malformed files are logged and skipped; the rest still load.
        """

        root = Path(directory).expanduser()
        if not root.is_dir():
            LOGGER.warning("Theme directory %s does not exist", root)
            return []
        imported: List[SyntaxTheme] = []
        for path in sorted(root.iterdir()):
            if path.suffix.lower() not in {".yaml", ".yml", ".json"}:
                continue
            try:
                imported.append(self.import_theme(path))
            except (ThemeFormatError, OSError) as exc:
                LOGGER.warning("Skipping theme file %s: %s", path, exc)
        return imported


_BUILTIN_THEMES = [build_java_theme()]

theme_manager = ThemeManager(_BUILTIN_THEMES)


def load_theme(table: "ClassificationTable", theme_name: SyntaxTheme | str | None = None) -> SyntaxTheme:
    """Populate ``table`` with the named theme from the shared registry."""

    return theme_manager.populate(table, theme_name)


def available_themes() -> List[str]:
    return theme_manager.available_names()


__all__ = [
    "DEFAULT_THEME_NAME",
    "ThemeManager",
    "available_themes",
    "build_java_theme",
    "load_theme",
    "theme_manager",
]
