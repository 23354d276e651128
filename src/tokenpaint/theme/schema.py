"""Schema validation and YAML/JSON decoding for theme description files."""

from __future__ import annotations

import json
from json import JSONDecodeError
from pathlib import Path
from typing import Any, Mapping, Sequence

import jsonschema
from ruamel.yaml import YAML
from ruamel.yaml.error import MarkedYAMLError, YAMLError

from .errors import ThemeFormatError

_COLOR_NAMES = ["black", "red", "green", "yellow", "blue", "magenta", "cyan", "white"]
_YAML_SUFFIXES = {".yaml", ".yml"}

THEME_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "required": ["name", "categories"],
    "properties": {
        "name": {"type": "string", "minLength": 1},
        "title": {"type": ["string", "null"]},
        "description": {"type": ["string", "null"]},
        "version": {"type": ["string", "null"]},
        "metadata": {"type": ["object", "null"]},
        "categories": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["name", "tokens"],
                "properties": {
                    "name": {"type": "string", "minLength": 1},
                    "foreground": {
                        "anyOf": [
                            {"type": "string", "enum": _COLOR_NAMES},
                            {"type": "integer", "minimum": 0, "maximum": 7},
                        ]
                    },
                    "background": {
                        "anyOf": [
                            {"type": "string", "enum": _COLOR_NAMES},
                            {"type": "integer", "minimum": 0, "maximum": 7},
                        ]
                    },
                    "bold": {"type": "boolean"},
                    "tokens": {"type": "array", "items": {"type": "string"}},
                },
                "additionalProperties": False,
            },
        },
    },
}


def validate_theme_payload(payload: Any, *, source: str | None = None) -> Mapping[str, Any]:
    """Check ``payload`` against :data:`THEME_SCHEMA`, raising on the first problem."""

    validator = jsonschema.Draft202012Validator(THEME_SCHEMA)
    issue = jsonschema.exceptions.best_match(validator.iter_errors(payload))
    if issue is not None:
        path = _format_schema_path(issue.absolute_path)
        message = f"{path}: {issue.message}" if path else issue.message
        raise ThemeFormatError(message, source=source)
    return payload


def parse_theme_text(text: str, *, fmt: str = "yaml", source: str | None = None) -> Mapping[str, Any]:
    """Decode YAML or JSON ``text`` and validate the resulting payload."""

    if fmt == "json":
        try:
            payload = json.loads(text)
        except JSONDecodeError as exc:
            raise ThemeFormatError(exc.msg, source=source, line=exc.lineno) from exc
    elif fmt == "yaml":
        parser = _create_yaml_parser()
        try:
            payload = parser.load(text)
        except MarkedYAMLError as exc:
            mark = exc.problem_mark or exc.context_mark
            line = int(mark.line) + 1 if mark is not None else None
            raise ThemeFormatError(exc.problem or "Invalid YAML content", source=source, line=line) from exc
        except YAMLError as exc:
            raise ThemeFormatError(str(exc) or "Invalid YAML content", source=source) from exc
    else:
        raise ValueError(f"Unsupported theme format: {fmt!r}")
    return validate_theme_payload(payload, source=source)


def read_theme_file(path: str | Path) -> Mapping[str, Any]:
    target = Path(path)
    try:
        text = target.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise ThemeFormatError(f"not valid UTF-8: {exc.reason}", source=str(target)) from exc
    return parse_theme_text(
        text,
        fmt=format_for_path(target),
        source=str(target),
    )


def write_theme_file(payload: Mapping[str, Any], path: str | Path, *, indent: int = 2) -> Path:
    target = Path(path)
    if format_for_path(target) == "json":
        target.write_text(json.dumps(dict(payload), indent=indent), encoding="utf-8")
        return target
    parser = _create_yaml_parser()
    with target.open("w", encoding="utf-8") as handle:
        parser.dump(dict(payload), handle)
    return target


def format_for_path(path: Path) -> str:
    return "yaml" if path.suffix.lower() in _YAML_SUFFIXES else "json"


def _create_yaml_parser() -> YAML:
    parser = YAML(typ="safe")
    parser.allow_duplicate_keys = False
    parser.default_flow_style = False
    parser.width = 4096
    return parser


def _format_schema_path(path: Sequence[Any]) -> str:
    if not path:
        return ""
    components: list[str] = []
    for segment in path:
        if isinstance(segment, int):
            if components:
                components[-1] = f"{components[-1]}[{segment}]"
            else:
                components.append(f"[{segment}]")
        else:
            components.append(str(segment))
    return ".".join(filter(None, components))


__all__ = [
    "THEME_SCHEMA",
    "format_for_path",
    "parse_theme_text",
    "read_theme_file",
    "validate_theme_payload",
    "write_theme_file",
]
