"""Token sequence rewriters.

Each normalizer is a callable taking a collapsed token sequence and returning
a new one. Normalizers keep no state between calls.
"""

import re
from typing import Protocol

from ..tokens import WHITESPACE, Token, TokenType

ELLIPSIS = "…"
ELLIPSIS_PATTERN = re.compile(r"(\.\s*){2,}")

# Coordinating conjunctions after a line-final hyphen, as in
# "Haupt-<lb/>und Nebensatz": the hyphen stands for an elided word part.
CONJUNCTIONS = ("und", "oder")

# Breaks a hyphenated word may span. Page breaks reach the normalizers only
# merged into one of these; paragraph boundaries always separate words.
LINE_BREAKS = frozenset({TokenType.EXPLICIT_LINE_BREAK, TokenType.IMPLICIT_LINE_BREAK})
_LAYOUT_AFTER_HYPHEN = LINE_BREAKS | {TokenType.WHITESPACE}


class TokenSequenceNormalizer(Protocol):
    def __call__(self, tokens: list[Token]) -> list[Token]: ...


class ExplicitHyphensNormalizer:
    """Join words split by hyphenation marked up as such.

    The hyphen and the whitespace and line breaks after it are layout
    artifacts and get removed. A paragraph boundary ends the word.
    """

    def __call__(self, tokens: list[Token]) -> list[Token]:
        result: list[Token] = []
        after_hyphen = False

        for token in tokens:
            if token.type is TokenType.HYPHENATION:
                after_hyphen = True
                continue
            if token.type in _LAYOUT_AFTER_HYPHEN:
                if after_hyphen:
                    continue
            else:
                after_hyphen = False
            result.append(token)

        return result

    def __repr__(self) -> str:
        return "ExplicitHyphensNormalizer()"


class ImplicitHyphensNormalizer:
    """Resolve plain hyphens at the end of a line.

    A possible hyphenation followed by line breaks and text is joined with
    that text; a paragraph boundary after the hyphen keeps both apart.
    Whether the hyphen itself is kept depends on the text:

    - "und"/"oder" as a whole word: keep it and add a space
      ("Haupt- und Nebensatz")
    - ``heuristic`` off: keep it
    - otherwise keep it only before a capitalized word that is no acronym
      ("Tabak-Cigaretten" vs. "herumlagen")

    The heuristic is tuned for German orthography.
    """

    def __init__(self, heuristic: bool = True):
        self.heuristic = heuristic

    def __call__(self, tokens: list[Token]) -> list[Token]:
        result: list[Token] = []
        pending_minus: Token | None = None
        pending_breaks: list[Token] = []

        for token in tokens:
            if pending_minus is None:
                if token.type is TokenType.POSSIBLE_HYPHENATION:
                    pending_minus = token
                else:
                    result.append(token)
                continue

            if token.type in LINE_BREAKS:
                pending_breaks.append(token)
                continue

            if token.type is TokenType.TEXT and pending_breaks:
                result.extend(self._resolve(pending_minus, token.text or ""))
                result.append(token)
            else:
                result.append(pending_minus)
                result.extend(pending_breaks)
                if token.type is TokenType.POSSIBLE_HYPHENATION:
                    pending_minus = token
                    pending_breaks = []
                    continue
                result.append(token)
            pending_minus = None
            pending_breaks = []

        if pending_minus is not None:
            result.append(pending_minus)
            result.extend(pending_breaks)
        return result

    def _resolve(self, minus: Token, next_text: str) -> list[Token]:
        if starts_with_conjunction(next_text):
            return [minus, WHITESPACE]
        if not self.heuristic or starts_with_capitalized_word(next_text):
            return [minus]
        return []

    def __repr__(self) -> str:
        return f"ImplicitHyphensNormalizer(heuristic={self.heuristic})"


def starts_with_word(text: str, word: str) -> bool:
    """Whether ``text`` starts with ``word`` not followed by another letter."""
    if not text.startswith(word):
        return False
    rest = text[len(word) :]
    return not (rest and rest[0].isalpha())


def starts_with_conjunction(text: str) -> bool:
    return any(starts_with_word(text, word) for word in CONJUNCTIONS)


def starts_with_capitalized_word(text: str) -> bool:
    """Uppercase first letter, but not an acronym like "UNESCO"."""
    if not text or not text[0].isupper():
        return False
    return not (len(text) > 1 and text[1].isupper())


class EllipsisCharacterNormalizer:
    """Replace runs of two or more full stops by U+2026 HORIZONTAL ELLIPSIS.

    Whitespace between and after the stops belongs to the run: ". . ." and
    "..." both become a single ellipsis character.
    """

    def __call__(self, tokens: list[Token]) -> list[Token]:
        result: list[Token] = []
        for token in tokens:
            if token.text is not None:
                text = ELLIPSIS_PATTERN.sub(ELLIPSIS, token.text)
                if text != token.text:
                    token = Token(token.type, text, token.conversions)
            result.append(token)
        return result

    def __repr__(self) -> str:
        return "EllipsisCharacterNormalizer()"
