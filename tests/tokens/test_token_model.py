"""Tests for the token vocabulary."""

import dataclasses

import pytest

from markup2text.tokens import (
    EXPLICIT_LINE_BREAK,
    HUMAN_ONLY_WHITESPACE,
    Conversion,
    Token,
    TokenType,
    TokenTypeClass,
    class_of,
)

pytestmark = pytest.mark.unit


@pytest.mark.parametrize(
    "token_type, expected",
    [
        (TokenType.EXPLICIT_LINE_BREAK, TokenTypeClass.LINEBREAKS),
        (TokenType.IMPLICIT_LINE_BREAK, TokenTypeClass.LINEBREAKS),
        (TokenType.PAGE_BREAK, TokenTypeClass.LINEBREAKS),
        (TokenType.PARAGRAPH_BOUNDARY, TokenTypeClass.LINEBREAKS),
        (TokenType.WHITESPACE, TokenTypeClass.WHITESPACE),
        (TokenType.HYPHENATION, TokenTypeClass.TEXT),
        (TokenType.POSSIBLE_HYPHENATION, TokenTypeClass.TEXT),
        (TokenType.TEXT, TokenTypeClass.TEXT),
    ],
)
def test_class_of(token_type, expected):
    assert class_of(token_type) is expected
    assert token_type.token_class is expected


def test_every_type_has_a_class():
    for token_type in TokenType:
        assert isinstance(class_of(token_type), TokenTypeClass)


def test_conversion_flags():
    assert Conversion.ALL == Conversion.HUMAN | Conversion.TOOLS
    assert not Conversion.HUMAN & Conversion.TOOLS


def test_token_defaults():
    token = Token(TokenType.TEXT, "Wort")
    assert token.conversions == Conversion.ALL
    assert token.visible_in(Conversion.HUMAN)
    assert token.visible_in(Conversion.TOOLS)


def test_tokens_are_immutable():
    token = Token(TokenType.TEXT, "Wort")
    with pytest.raises(dataclasses.FrozenInstanceError):
        token.text = "anders"  # type: ignore[misc]


def test_prebuilt_tokens():
    assert EXPLICIT_LINE_BREAK == Token(TokenType.EXPLICIT_LINE_BREAK, None, Conversion.ALL)

    assert HUMAN_ONLY_WHITESPACE.type is TokenType.WHITESPACE
    assert HUMAN_ONLY_WHITESPACE.text is None
    assert HUMAN_ONLY_WHITESPACE.visible_in(Conversion.HUMAN)
    assert not HUMAN_ONLY_WHITESPACE.visible_in(Conversion.TOOLS)
