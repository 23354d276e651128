"""CLI helper to print source text with keyword highlighting."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from ..editor.syntax.ansi import render_text
from ..editor.syntax.highlighter import Highlighter
from ..editor.syntax.tokenizer import classify_line
from ..services.settings import Settings, SettingsStore
from ..theme import ThemeFormatError, ThemeManager, build_java_theme
from ..utils.logging import setup_logging

LOGGER = logging.getLogger(__name__)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Highlight source text using a keyword theme.")
    parser.add_argument("--theme", help="Theme name to highlight with. Defaults to the configured theme.")
    parser.add_argument(
        "--theme-file",
        type=Path,
        action="append",
        default=[],
        help="YAML or JSON theme file to register before highlighting. May be repeated.",
    )
    parser.add_argument(
        "--file",
        type=Path,
        help="File containing the text to highlight. Reads stdin when omitted and --text not provided.",
    )
    parser.add_argument("--text", help="Inline text to highlight. Overrides --file when provided.")
    parser.add_argument("--settings", type=Path, help="Settings file to read instead of the default location.")
    parser.add_argument("--list-themes", action="store_true", help="Print registered theme names and exit.")
    parser.add_argument("--export-theme", type=Path, help="Write the selected theme to PATH (.yaml or .json) and exit.")
    parser.add_argument("--tokens", action="store_true", help="Print one token per line with its classification.")
    parser.add_argument("--no-color", action="store_true", help="Disable ANSI escapes in the output.")
    parser.add_argument("--true-color", action="store_true", help="Emit 24-bit color escapes instead of the 8-color palette.")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging.")
    args = parser.parse_args(argv)

    settings = SettingsStore(args.settings).load(overrides={"theme": args.theme})
    setup_logging(settings, debug=args.debug)

    manager = ThemeManager([build_java_theme()])
    try:
        for directory in settings.theme_paths:
            manager.import_directory(directory)
        for path in args.theme_file:
            manager.import_theme(path)
    except (ThemeFormatError, OSError) as exc:
        LOGGER.error("Unable to load theme: %s", exc)
        return 1

    if args.list_themes:
        for theme in manager.available():
            print(f"{theme.name}: {theme.title}")
        return 0

    if args.export_theme:
        try:
            target = manager.export_theme(settings.theme, args.export_theme)
        except OSError as exc:
            LOGGER.error("Unable to export theme: %s", exc)
            return 1
        print(f"exported: {target}")
        return 0

    try:
        payload = _load_text(args.text, args.file)
    except (OSError, UnicodeDecodeError) as exc:
        LOGGER.error("Unable to read input: %s", exc)
        return 1
    if not payload:
        print("No input text provided.", file=sys.stderr)
        return 1

    highlighter = Highlighter(settings.theme, manager=manager, default=_default_attribute(settings, args.no_color))
    if args.tokens:
        _print_tokens(payload, highlighter)
    elif args.no_color:
        sys.stdout.write(payload)
    else:
        sys.stdout.write(render_text(payload, highlighter.table, highlighter.default, true_color=args.true_color))
    return 0


def _load_text(inline: str | None, path: Path | None) -> str:
    if inline:
        return inline
    if path:
        return path.read_text(encoding="utf-8")
    return sys.stdin.read()


def _default_attribute(settings: Settings, no_color: bool):
    if no_color:
        return None
    return settings.default_attribute()


def _print_tokens(payload: str, highlighter: Highlighter) -> None:
    categories = {}
    for category in highlighter.theme.categories:
        for token in category.tokens:
            categories[token] = category.name
    for number, line in enumerate(payload.splitlines(), start=1):
        for span in classify_line(line, highlighter.table):
            if span.token.kind == "whitespace":
                continue
            label = categories.get(span.text, "-") if span.classified else "-"
            print(f"{number}:{span.token.start}\t{span.text}\t{label}")


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
