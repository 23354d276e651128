"""Exact-match token classification and the punctuation split rule."""

from __future__ import annotations

from typing import Dict, Iterable, List, Protocol, runtime_checkable

from ...theme.models import DisplayAttribute

SPLIT_CHARACTERS: frozenset[str] = frozenset("'\"\\<>{}[]!@#$%^&*();:.,-+/?")


def is_split_character(ch: str) -> bool:
    """Return ``True`` when ``ch`` always terminates a token and stands alone."""

    return ch in SPLIT_CHARACTERS


@runtime_checkable
class ClassificationLookup(Protocol):
    """Read-only surface a rendering loop needs from a classification table."""

    def is_split_character(self, ch: str) -> bool:
        ...

    def lookup(self, token_text: str) -> DisplayAttribute | None:
        ...


class ClassificationTable:
    """Maps exact token text to the display attribute used to paint it.

    Tables are filled once by a theme load and read afterwards. Lookups are
    case-sensitive and never raise; a miss returns ``None`` so callers fall
    back to their own default styling.
    """

    __slots__ = ("_colors",)

    def __init__(self) -> None:
        self._colors: Dict[str, DisplayAttribute] = {}

    def __len__(self) -> int:
        return len(self._colors)

    def __contains__(self, token_text: object) -> bool:
        return token_text in self._colors

    def __repr__(self) -> str:
        return f"ClassificationTable(entries={len(self._colors)})"

    def is_split_character(self, ch: str) -> bool:
        return is_split_character(ch)

    def lookup(self, token_text: str) -> DisplayAttribute | None:
        return self._colors.get(token_text)

    def register(self, token_text: str, attribute: DisplayAttribute) -> None:
        self._colors[token_text] = attribute

    def register_many(self, tokens: Iterable[str], attribute: DisplayAttribute) -> None:
        for token_text in tokens:
            self._colors[token_text] = attribute

    def tokens(self) -> List[str]:
        return sorted(self._colors)

    def copy(self) -> "ClassificationTable":
        clone = ClassificationTable()
        clone._colors = dict(self._colors)
        return clone


__all__ = [
    "ClassificationLookup",
    "ClassificationTable",
    "SPLIT_CHARACTERS",
    "is_split_character",
]
