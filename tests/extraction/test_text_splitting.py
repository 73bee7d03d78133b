"""Tests for splitting text nodes into tokens."""

import pytest

from markup2text.adapters import tei, xhtml
from markup2text.extraction import process_text
from markup2text.tokens import Token, TokenType

pytestmark = pytest.mark.unit


def split(text, classify):
    tokens: list[Token] = []
    process_text(text, classify, tokens.append)
    return tokens


def simple(tokens):
    return [(token.type, token.text) for token in tokens]


class TestProcessText:
    def test_text_runs_between_tokens(self):
        def classify(text, index, char):
            return Token(TokenType.WHITESPACE, char) if char == " " else char

        assert simple(split("ab cd", classify)) == [
            (TokenType.TEXT, "ab"),
            (TokenType.WHITESPACE, " "),
            (TokenType.TEXT, "cd"),
        ]

    def test_no_empty_text_tokens(self):
        def classify(text, index, char):
            return Token(TokenType.WHITESPACE, char)

        assert simple(split("  ", classify)) == [
            (TokenType.WHITESPACE, " "),
            (TokenType.WHITESPACE, " "),
        ]

    def test_dropped_characters(self):
        assert simple(split("a¦b", lambda text, index, char: "" if char == "¦" else char)) == [
            (TokenType.TEXT, "ab")
        ]

    def test_text_is_nfc_normalized(self):
        decomposed = "Mu\u0308ller"
        tokens = split(decomposed, lambda text, index, char: char)
        assert tokens == [Token(TokenType.TEXT, "M\u00fcller")]


class TestTeiCharacters:
    def test_line_feed_is_implicit_line_break(self):
        assert simple(split("a\nb", tei.classify_char)) == [
            (TokenType.TEXT, "a"),
            (TokenType.IMPLICIT_LINE_BREAK, "\n"),
            (TokenType.TEXT, "b"),
        ]

    def test_long_s(self):
        assert split("Wa\u017f\u017fer", tei.classify_char) == [Token(TokenType.TEXT, "Wasser")]

    def test_hyphens(self):
        assert simple(split("Haupt\u00ac", tei.classify_char)) == [
            (TokenType.TEXT, "Haupt"),
            (TokenType.HYPHENATION, "\u00ac"),
        ]
        assert simple(split("Baden-Baden", tei.classify_char)) == [
            (TokenType.TEXT, "Baden"),
            (TokenType.POSSIBLE_HYPHENATION, "-"),
            (TokenType.TEXT, "Baden"),
        ]

    def test_unicode_separators(self):
        assert simple(split("a\u00a0b\u2028c\u2029d", tei.classify_char)) == [
            (TokenType.TEXT, "a"),
            (TokenType.WHITESPACE, "\u00a0"),
            (TokenType.TEXT, "b"),
            (TokenType.IMPLICIT_LINE_BREAK, "\u2028"),
            (TokenType.TEXT, "c"),
            (TokenType.PARAGRAPH_BOUNDARY, "\u2029"),
            (TokenType.TEXT, "d"),
        ]

    def test_tab_stays_text(self):
        assert split("a\tb", tei.classify_char) == [Token(TokenType.TEXT, "a\tb")]


class TestXhtmlCharacters:
    def test_line_feed_is_whitespace(self):
        assert simple(split("a\nb", xhtml.classify_char)) == [
            (TokenType.TEXT, "a"),
            (TokenType.WHITESPACE, None),
            (TokenType.TEXT, "b"),
        ]

    def test_only_final_hyphen_is_possible_hyphenation(self):
        assert simple(split("Baden-Baden", xhtml.classify_char)) == [(TokenType.TEXT, "Baden-Baden")]
        assert simple(split("Um-", xhtml.classify_char)) == [
            (TokenType.TEXT, "Um"),
            (TokenType.POSSIBLE_HYPHENATION, "-"),
        ]

    def test_ocr_replacements(self):
        assert split("Ca\u00a4on \u02cd\u00bf", xhtml.classify_char)[0] == Token(TokenType.TEXT, "Ca\u00f1on")
        assert split("a\u0303", xhtml.classify_char) == [Token(TokenType.TEXT, "a\u0342")]

    def test_control_characters_keep_their_character(self):
        assert simple(split("a\tb", xhtml.classify_char)) == [
            (TokenType.TEXT, "a"),
            (TokenType.WHITESPACE, "\t"),
            (TokenType.TEXT, "b"),
        ]
