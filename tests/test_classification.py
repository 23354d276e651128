"""Tests for the classification table and punctuation split rule."""

from __future__ import annotations

import string

import pytest

from tokenpaint.editor.syntax.classification import (
    ClassificationLookup,
    ClassificationTable,
    SPLIT_CHARACTERS,
    is_split_character,
)
from tokenpaint.theme import Color, DisplayAttribute, load_theme

PUNCTUATION = "'\"\\<>{}[]!@#$%^&*();:.,-+/?"


def test_split_set_contains_exactly_the_listed_punctuation() -> None:
    assert SPLIT_CHARACTERS == frozenset(PUNCTUATION)
    # Twenty-eight listed characters, "*" appears twice.
    assert len(SPLIT_CHARACTERS) == 27


@pytest.mark.parametrize("ch", list(PUNCTUATION))
def test_listed_punctuation_splits(ch: str) -> None:
    assert is_split_character(ch) is True


@pytest.mark.parametrize(
    "ch",
    list(string.ascii_letters + string.digits) + [" ", "\t", "\n", "_", "=", "|", "~", "`", "é", "λ", ""],
)
def test_other_characters_do_not_split(ch: str) -> None:
    assert is_split_character(ch) is False


def test_table_method_matches_module_rule() -> None:
    table = ClassificationTable()

    assert table.is_split_character("(") is True
    assert table.is_split_character("x") is False


def test_lookup_miss_returns_none_before_and_after_theme_load() -> None:
    table = ClassificationTable()
    assert table.lookup("myVariable") is None

    load_theme(table, "java")

    assert table.lookup("myVariable") is None


def test_lookup_is_case_sensitive() -> None:
    table = ClassificationTable()
    load_theme(table)

    assert table.lookup("if") is not None
    assert table.lookup("If") is None
    assert table.lookup("IMPORT") is None


def test_register_overwrites_previous_binding() -> None:
    table = ClassificationTable()
    first = DisplayAttribute(Color.RED, Color.BLACK)
    second = DisplayAttribute(Color.YELLOW, Color.BLACK, bold=True)

    table.register("token", first)
    table.register("token", second)

    assert table.lookup("token") is second
    assert len(table) == 1


def test_register_accepts_empty_text() -> None:
    table = ClassificationTable()
    attribute = DisplayAttribute()

    table.register("", attribute)

    assert table.lookup("") is attribute
    assert "" in table


def test_register_many_shares_one_attribute_instance() -> None:
    table = ClassificationTable()
    attribute = DisplayAttribute(Color.GREEN, Color.BLUE, bold=True)

    table.register_many(["package", "import"], attribute)

    assert table.lookup("package") is table.lookup("import") is attribute
    assert table.tokens() == ["import", "package"]


def test_copy_is_independent() -> None:
    table = ClassificationTable()
    table.register("a", DisplayAttribute())
    clone = table.copy()

    clone.register("b", DisplayAttribute())

    assert "b" not in table
    assert clone.lookup("a") is table.lookup("a")


def test_table_satisfies_lookup_protocol() -> None:
    assert isinstance(ClassificationTable(), ClassificationLookup)
