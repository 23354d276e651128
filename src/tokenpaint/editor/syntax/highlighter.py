"""Live highlighter that swaps whole classification tables on theme change."""

from __future__ import annotations

import logging
import threading
from typing import List

from ...theme import SyntaxTheme, ThemeManager, theme_manager
from ...theme.models import DisplayAttribute
from .classification import ClassificationTable
from .tokenizer import StyledSpan, classify_line

LOGGER = logging.getLogger(__name__)


def build_table(theme: SyntaxTheme | str | None = None, *, manager: ThemeManager | None = None) -> ClassificationTable:
    """Return a fresh table populated with ``theme``."""

    table = ClassificationTable()
    (manager or theme_manager).populate(table, theme)
    return table


class Highlighter:
    """Holds the active table for a rendering surface.

    ``switch_theme`` fills a new table off to the side and replaces the
    reference while holding the writer lock, so a reader that grabbed
    :attr:`table` keeps a complete, unchanging view for the whole line.
    """

    def __init__(
        self,
        theme: SyntaxTheme | str | None = None,
        *,
        manager: ThemeManager | None = None,
        default: DisplayAttribute | None = None,
    ) -> None:
        self._manager = manager or theme_manager
        self._write_lock = threading.Lock()
        self._theme = self._manager.resolve(theme)
        self._table = build_table(self._theme, manager=self._manager)
        self.default = default

    @property
    def table(self) -> ClassificationTable:
        return self._table

    @property
    def theme(self) -> SyntaxTheme:
        return self._theme

    def switch_theme(self, theme: SyntaxTheme | str | None) -> SyntaxTheme:
        with self._write_lock:
            resolved = self._manager.resolve(theme)
            table = build_table(resolved, manager=self._manager)
            self._table = table
            self._theme = resolved
        LOGGER.debug("Switched highlighter to theme %s", resolved.name)
        return resolved

    def highlight_line(self, line: str) -> List[StyledSpan]:
        return classify_line(line, self._table, self.default)

    def highlight_lines(self, lines: List[str]) -> List[List[StyledSpan]]:
        table = self._table
        return [classify_line(line, table, self.default) for line in lines]


__all__ = ["Highlighter", "build_table"]
