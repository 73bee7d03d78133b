"""Splitting of text nodes into tokens.

Each format classifies the characters of a text node. A classifier returns
either a string to append to the current text run (possibly empty, to drop
the character) or a token; a token ends the current run, which is emitted as
a TEXT token in Unicode NFC first.
"""

import unicodedata
from collections.abc import Callable

from ..tokens import Token, TokenType
from .traversal import Emit

CharClassifier = Callable[[str, int, str], Token | str]


def process_text(text: str, classify: CharClassifier, emit: Emit) -> None:
    """Split ``text`` into tokens according to ``classify``."""
    buffer: list[str] = []
    for index, char in enumerate(text):
        result = classify(text, index, char)
        if isinstance(result, Token):
            flush_text(buffer, emit)
            emit(result)
        else:
            buffer.append(result)
    flush_text(buffer, emit)


def flush_text(buffer: list[str], emit: Emit) -> None:
    """Emit the buffered run as one TEXT token and clear the buffer."""
    text = "".join(buffer)
    buffer.clear()
    if text:
        emit(Token(TokenType.TEXT, unicodedata.normalize("NFC", text)))
