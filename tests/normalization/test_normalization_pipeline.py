"""Tests for normalizer selection and the normalization pipeline."""

import pytest

from markup2text.normalization import normalize, normalize_token_sequence, select_normalizers
from markup2text.normalization.pipeline import (
    NORMALIZERS_IF_EXPLICIT_HYPHENS,
    NORMALIZERS_IF_NO_EXPLICIT_HYPHENS,
)
from markup2text.tokens import PARAGRAPH_BOUNDARY, WHITESPACE, Token, TokenType

pytestmark = pytest.mark.unit

HYPHENATION = Token(TokenType.HYPHENATION, "¬")
MINUS = Token(TokenType.POSSIBLE_HYPHENATION, "-")
IMPLICIT = Token(TokenType.IMPLICIT_LINE_BREAK, "\n")
SPACE = Token(TokenType.WHITESPACE, " ")


def text(value: str) -> Token:
    return Token(TokenType.TEXT, value)


class TestSelection:
    def test_explicit_hyphens_select_literal_pipeline(self):
        tokens = [text("far"), HYPHENATION, IMPLICIT, text("fetched")]
        assert select_normalizers(tokens) is NORMALIZERS_IF_EXPLICIT_HYPHENS

    def test_without_explicit_hyphens(self):
        tokens = [text("herum"), MINUS, IMPLICIT, text("lagen")]
        assert select_normalizers(tokens) is NORMALIZERS_IF_NO_EXPLICIT_HYPHENS

    def test_pipeline_order(self):
        assert [repr(n) for n in NORMALIZERS_IF_EXPLICIT_HYPHENS] == [
            "ExplicitHyphensNormalizer()",
            "ImplicitHyphensNormalizer(heuristic=False)",
            "EllipsisCharacterNormalizer()",
        ]
        assert [repr(n) for n in NORMALIZERS_IF_NO_EXPLICIT_HYPHENS] == [
            "ImplicitHyphensNormalizer(heuristic=True)",
            "EllipsisCharacterNormalizer()",
        ]


class TestNormalize:
    def test_empty(self):
        assert normalize([]) == []

    def test_heuristic_applies_without_explicit_hyphens(self):
        tokens = [SPACE, text("herum"), MINUS, SPACE, IMPLICIT, SPACE, text("lagen"), SPACE]
        assert normalize(tokens) == [text("herum"), text("lagen")]

    def test_plain_hyphens_kept_with_explicit_hyphens(self):
        tokens = [
            text("far"),
            HYPHENATION,
            IMPLICIT,
            text("fetched"),
            SPACE,
            text("herum"),
            MINUS,
            IMPLICIT,
            text("lagen"),
        ]
        assert normalize(tokens) == [
            text("far"),
            text("fetched"),
            SPACE,
            text("herum"),
            MINUS,
            text("lagen"),
        ]

    def test_conjunction_whitespace_is_collapsed(self):
        tokens = [text("Haupt"), MINUS, IMPLICIT, text("und"), SPACE, text("Neben")]
        assert normalize(tokens) == [text("Haupt"), MINUS, WHITESPACE, text("und"), SPACE, text("Neben")]

    def test_ellipsis_and_paragraphs(self):
        tokens = [PARAGRAPH_BOUNDARY, text(". . ."), SPACE, PARAGRAPH_BOUNDARY, IMPLICIT, text("x")]
        assert normalize(tokens) == [text("…"), Token(TokenType.PARAGRAPH_BOUNDARY), text("x")]

    def test_without_normalizers_only_collapses(self):
        tokens = [SPACE, text("a"), SPACE, SPACE, text("b"), IMPLICIT]
        assert normalize_token_sequence(tokens, []) == [text("a"), SPACE, text("b")]

    def test_normalized_sequences_are_stable(self):
        tokens = [text("Haupt"), MINUS, IMPLICIT, text("und"), SPACE, PARAGRAPH_BOUNDARY, text("x...")]
        once = normalize(tokens)
        assert normalize(once) == once
