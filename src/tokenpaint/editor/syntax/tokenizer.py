"""Line scanning helpers used by rendering surfaces to carve and style tokens."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Literal

from ...theme.models import DisplayAttribute
from .classification import ClassificationLookup

TokenKind = Literal["word", "punctuation", "whitespace"]


@dataclass(slots=True, frozen=True)
class Token:
    """A slice of one line with absolute column offsets."""

    text: str
    start: int
    end: int
    kind: TokenKind = "word"


@dataclass(slots=True, frozen=True)
class StyledSpan:
    """A token paired with the attribute it should be painted with."""

    token: Token
    attribute: DisplayAttribute | None
    classified: bool = False

    @property
    def text(self) -> str:
        return self.token.text


def split_line(line: str, lookup: ClassificationLookup) -> List[Token]:
    """Split ``line`` into words, single split characters and whitespace runs.

    Offsets are contiguous so joining every token's text reproduces ``line``.
    """

    tokens: List[Token] = []
    start = 0
    kind: TokenKind | None = None
    for index, ch in enumerate(line):
        if lookup.is_split_character(ch):
            if kind is not None:
                tokens.append(Token(line[start:index], start, index, kind))
            tokens.append(Token(ch, index, index + 1, "punctuation"))
            kind = None
            start = index + 1
            continue
        current: TokenKind = "whitespace" if ch.isspace() else "word"
        if kind is not None and current != kind:
            tokens.append(Token(line[start:index], start, index, kind))
            start = index
        kind = current
    if kind is not None:
        tokens.append(Token(line[start:], start, len(line), kind))
    return tokens


def classify_line(
    line: str,
    lookup: ClassificationLookup,
    default: DisplayAttribute | None = None,
) -> List[StyledSpan]:
    """Return every token of ``line`` with its theme attribute or ``default``."""

    spans: List[StyledSpan] = []
    for token in split_line(line, lookup):
        attribute = None if token.kind == "whitespace" else lookup.lookup(token.text)
        if attribute is None:
            spans.append(StyledSpan(token, default, classified=False))
        else:
            spans.append(StyledSpan(token, attribute, classified=True))
    return spans


__all__ = ["StyledSpan", "Token", "TokenKind", "classify_line", "split_line"]
