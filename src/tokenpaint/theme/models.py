"""Data structures describing syntax highlighting themes."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, List, Mapping, Tuple

ColorTuple = Tuple[int, int, int]


class Color(Enum):
    """The eight named terminal colors a display attribute can use."""

    BLACK = "black"
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    MAGENTA = "magenta"
    CYAN = "cyan"
    WHITE = "white"

    @property
    def ansi_index(self) -> int:
        return _ANSI_ORDER.index(self)

    @property
    def rgb(self) -> ColorTuple:
        return _RGB_VALUES[self]


_ANSI_ORDER: Tuple[Color, ...] = (
    Color.BLACK,
    Color.RED,
    Color.GREEN,
    Color.YELLOW,
    Color.BLUE,
    Color.MAGENTA,
    Color.CYAN,
    Color.WHITE,
)

_RGB_VALUES: Dict[Color, ColorTuple] = {
    Color.BLACK: (0, 0, 0),
    Color.RED: (168, 0, 0),
    Color.GREEN: (0, 168, 0),
    Color.YELLOW: (168, 84, 0),
    Color.BLUE: (0, 0, 168),
    Color.MAGENTA: (168, 0, 168),
    Color.CYAN: (0, 168, 168),
    Color.WHITE: (168, 168, 168),
}


def normalize_color(value: Any) -> Color:
    """Convert ``value`` into a :class:`Color`, accepting names or ANSI indexes."""

    if isinstance(value, Color):
        return value
    if isinstance(value, bool):
        raise TypeError(f"Cannot convert {type(value)!r} to a color")
    if isinstance(value, int):
        if 0 <= value < len(_ANSI_ORDER):
            return _ANSI_ORDER[value]
        raise ValueError(f"ANSI color index {value} is out of range")
    if isinstance(value, str):
        text = value.strip().lower()
        if not text:
            raise ValueError("Color strings cannot be empty")
        try:
            return Color(text)
        except ValueError:
            raise ValueError(f"Unsupported color name: {value!r}") from None
    raise TypeError(f"Cannot convert {type(value)!r} to a color")


@dataclass(slots=True, frozen=True)
class DisplayAttribute:
    """Foreground, background and boldness used to paint one token."""

    foreground: Color = Color.WHITE
    background: Color = Color.BLACK
    bold: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "foreground", normalize_color(self.foreground))
        object.__setattr__(self, "background", normalize_color(self.background))
        object.__setattr__(self, "bold", bool(self.bold))

    def __str__(self) -> str:
        weight = "bold " if self.bold else ""
        return f"{weight}{self.foreground.value} on {self.background.value}"


@dataclass(slots=True)
class ThemeCategory:
    """A group of literal token strings that share one display attribute."""

    name: str
    attribute: DisplayAttribute
    tokens: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        self.name = (self.name or "").strip().lower()
        if not self.name:
            raise ValueError("Theme categories require a name")
        # Keep first occurrence order; duplicates collapse.
        self.tokens = tuple(dict.fromkeys(str(token) for token in self.tokens))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "foreground": self.attribute.foreground.value,
            "background": self.attribute.background.value,
            "bold": self.attribute.bold,
            "tokens": list(self.tokens),
        }

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "ThemeCategory":
        attribute = DisplayAttribute(
            foreground=payload.get("foreground", Color.WHITE),
            background=payload.get("background", Color.BLACK),
            bold=bool(payload.get("bold", False)),
        )
        return cls(name=str(payload["name"]), attribute=attribute, tokens=tuple(payload.get("tokens") or ()))


@dataclass(slots=True)
class SyntaxTheme:
    """Serializable set of token categories loaded into a classification table."""

    name: str
    title: str
    categories: List[ThemeCategory] = field(default_factory=list)
    description: str | None = None
    version: str = "1.0.0"
    metadata: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.name = (self.name or "default").strip().lower() or "default"
        self.title = (self.title or self.name.title()).strip()
        self.categories = list(self.categories or [])
        self.metadata = dict(self.metadata or {})

    def category(self, name: str) -> ThemeCategory:
        lookup = name.strip().lower()
        for category in self.categories:
            if category.name == lookup:
                return category
        raise KeyError(f"Theme '{self.name}' has no category '{name}'")

    def bindings(self) -> Iterable[tuple[str, DisplayAttribute]]:
        """Yield ``(token, attribute)`` pairs in registration order."""

        for category in self.categories:
            for token in category.tokens:
                yield token, category.attribute

    def token_count(self) -> int:
        return len({token for token, _ in self.bindings()})

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "title": self.title,
            "description": self.description,
            "version": self.version,
            "metadata": dict(self.metadata),
            "categories": [category.to_dict() for category in self.categories],
        }

    def to_json(self, *, indent: int | None = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "SyntaxTheme":
        if "name" not in payload:
            raise ValueError("Theme payload missing 'name'")
        description = payload.get("description")
        return cls(
            name=str(payload["name"]),
            title=str(payload.get("title") or payload["name"]),
            categories=[ThemeCategory.from_dict(item) for item in payload.get("categories") or []],
            description=str(description) if description is not None else None,
            version=str(payload.get("version") or "1.0.0"),
            metadata=dict(payload.get("metadata") or {}),
        )

    @classmethod
    def from_json(cls, text: str) -> "SyntaxTheme":
        data = json.loads(text)
        if not isinstance(data, Mapping):
            raise ValueError("Theme JSON root must be an object")
        return cls.from_dict(data)


__all__ = [
    "Color",
    "ColorTuple",
    "DisplayAttribute",
    "SyntaxTheme",
    "ThemeCategory",
    "normalize_color",
]
