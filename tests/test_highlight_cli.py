"""Tests for the highlight CLI script."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from tokenpaint.scripts import highlight


def test_highlight_inline_text(capsys: pytest.CaptureFixture[str], settings_path: Path) -> None:
    exit_code = highlight.main(["--text", "if x", "--settings", str(settings_path)])

    assert exit_code == 0
    out = capsys.readouterr().out
    assert "\x1b[1;37;44mif\x1b[0m" in out
    assert "\x1b[37;44mx\x1b[0m" in out


def test_highlight_reads_file_without_color(
    capsys: pytest.CaptureFixture[str], tmp_path: Path, settings_path: Path
) -> None:
    source = tmp_path / "Main.java"
    source.write_text("package demo;\n", encoding="utf-8")

    exit_code = highlight.main(["--file", str(source), "--no-color", "--settings", str(settings_path)])

    assert exit_code == 0
    assert capsys.readouterr().out == "package demo;\n"


def test_tokens_dump_labels_categories(capsys: pytest.CaptureFixture[str], settings_path: Path) -> None:
    exit_code = highlight.main(["--text", "import a;", "--tokens", "--settings", str(settings_path)])

    assert exit_code == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == ["1:0\timport\tpackage", "1:7\ta\t-", "1:8\t;\toperator"]


def test_list_themes_includes_imported_file(
    capsys: pytest.CaptureFixture[str], tmp_path: Path, settings_path: Path
) -> None:
    theme_file = tmp_path / "shell.json"
    theme_file.write_text(
        json.dumps({"name": "shell", "title": "Shell", "categories": [{"name": "keyword", "tokens": ["fi"]}]}),
        encoding="utf-8",
    )

    exit_code = highlight.main(["--list-themes", "--theme-file", str(theme_file), "--settings", str(settings_path)])

    assert exit_code == 0
    assert capsys.readouterr().out.splitlines() == ["java: Java Keywords", "shell: Shell"]


def test_export_theme_writes_yaml(tmp_path: Path, settings_path: Path) -> None:
    target = tmp_path / "java.yaml"

    exit_code = highlight.main(["--export-theme", str(target), "--settings", str(settings_path)])

    assert exit_code == 0
    assert "name: java" in target.read_text(encoding="utf-8")


def test_invalid_theme_file_returns_error(tmp_path: Path, settings_path: Path) -> None:
    theme_file = tmp_path / "broken.json"
    theme_file.write_text('{"categories": []}', encoding="utf-8")

    exit_code = highlight.main(["--list-themes", "--theme-file", str(theme_file), "--settings", str(settings_path)])

    assert exit_code == 1


def test_theme_env_override_selects_theme(
    capsys: pytest.CaptureFixture[str],
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
    settings_path: Path,
) -> None:
    theme_file = tmp_path / "shell.yaml"
    theme_file.write_text(
        "name: shell\ncategories:\n  - name: keyword\n    foreground: red\n    tokens: [fi]\n",
        encoding="utf-8",
    )
    monkeypatch.setenv("TOKENPAINT_THEME", "shell")

    exit_code = highlight.main(["--text", "fi if", "--theme-file", str(theme_file), "--settings", str(settings_path)])

    assert exit_code == 0
    out = capsys.readouterr().out
    assert "\x1b[31;40mfi\x1b[0m" in out
    assert "\x1b[1;37;44mif" not in out


def test_theme_file_with_invalid_utf8_returns_error(tmp_path: Path, settings_path: Path) -> None:
    theme_file = tmp_path / "latin1.yaml"
    theme_file.write_bytes("name: café\ncategories: []\n".encode("latin-1"))

    exit_code = highlight.main(["--list-themes", "--theme-file", str(theme_file), "--settings", str(settings_path)])

    assert exit_code == 1


def test_theme_file_with_control_character_returns_error(tmp_path: Path, settings_path: Path) -> None:
    theme_file = tmp_path / "control.yaml"
    theme_file.write_text("name: a\x01b\ncategories: []\n", encoding="utf-8")

    exit_code = highlight.main(["--list-themes", "--theme-file", str(theme_file), "--settings", str(settings_path)])

    assert exit_code == 1


def test_input_file_with_invalid_utf8_returns_error(tmp_path: Path, settings_path: Path) -> None:
    source = tmp_path / "Main.java"
    source.write_bytes("// café\n".encode("latin-1"))

    exit_code = highlight.main(["--file", str(source), "--settings", str(settings_path)])

    assert exit_code == 1


def test_bad_file_in_theme_directory_is_skipped(
    capsys: pytest.CaptureFixture[str], tmp_path: Path, settings_path: Path
) -> None:
    themes = tmp_path / "themes"
    themes.mkdir()
    (themes / "broken.yaml").write_text("categories: [\n", encoding="utf-8")
    (themes / "shell.json").write_text(
        json.dumps({"name": "shell", "categories": [{"name": "keyword", "tokens": ["fi"]}]}),
        encoding="utf-8",
    )
    settings_path.write_text(json.dumps({"theme_paths": str(themes)}), encoding="utf-8")

    exit_code = highlight.main(["--list-themes", "--settings", str(settings_path)])

    assert exit_code == 0
    assert capsys.readouterr().out.splitlines() == ["java: Java Keywords", "shell: shell"]


def test_true_color_output(capsys: pytest.CaptureFixture[str], settings_path: Path) -> None:
    exit_code = highlight.main(["--text", "if", "--true-color", "--settings", str(settings_path)])

    assert exit_code == 0
    assert "\x1b[1;38;2;168;168;168;48;2;0;0;168mif\x1b[0m" in capsys.readouterr().out
