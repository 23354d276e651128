"""Render classified spans as ANSI SGR escape sequences for terminals."""

from __future__ import annotations

from typing import Iterable, List

from ...theme.models import Color, DisplayAttribute
from .classification import ClassificationLookup
from .tokenizer import StyledSpan, classify_line

RESET = "\x1b[0m"


def _color_codes(color: Color, base: int, *, true_color: bool) -> str:
    if true_color:
        r, g, b = color.rgb
        # 38 selects foreground, 48 background.
        return f"{base + 8};2;{r};{g};{b}"
    return str(base + color.ansi_index)


def sgr_sequence(attribute: DisplayAttribute, *, true_color: bool = False) -> str:
    """Escape sequence selecting ``attribute``; 24-bit colors when ``true_color`` is set."""

    codes: List[str] = []
    if attribute.bold:
        codes.append("1")
    codes.append(_color_codes(attribute.foreground, 30, true_color=true_color))
    codes.append(_color_codes(attribute.background, 40, true_color=true_color))
    return f"\x1b[{';'.join(codes)}m"


def render_spans(spans: Iterable[StyledSpan], *, true_color: bool = False) -> str:
    parts: List[str] = []
    for span in spans:
        if span.attribute is None:
            parts.append(span.text)
        else:
            parts.append(f"{sgr_sequence(span.attribute, true_color=true_color)}{span.text}{RESET}")
    return "".join(parts)


def render_line(
    line: str,
    lookup: ClassificationLookup,
    default: DisplayAttribute | None = None,
    *,
    true_color: bool = False,
) -> str:
    return render_spans(classify_line(line, lookup, default), true_color=true_color)


def render_text(
    text: str,
    lookup: ClassificationLookup,
    default: DisplayAttribute | None = None,
    *,
    true_color: bool = False,
) -> str:
    """Highlight each line of ``text`` independently, keeping line endings."""

    rendered: List[str] = []
    for line in text.splitlines(keepends=True):
        body = line.rstrip("\r\n")
        rendered.append(render_line(body, lookup, default, true_color=true_color) + line[len(body) :])
    return "".join(rendered)


__all__ = ["RESET", "render_line", "render_spans", "render_text", "sgr_sequence"]
