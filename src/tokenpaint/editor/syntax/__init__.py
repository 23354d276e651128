"""Token classification, line scanning and terminal rendering."""

from .classification import ClassificationLookup, ClassificationTable, SPLIT_CHARACTERS, is_split_character
from .tokenizer import StyledSpan, Token, classify_line, split_line

__all__ = [
    "ClassificationLookup",
    "ClassificationTable",
    "SPLIT_CHARACTERS",
    "StyledSpan",
    "Token",
    "classify_line",
    "is_split_character",
    "split_line",
]
