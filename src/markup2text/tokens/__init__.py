"""Token model."""

from .model import (
    EXPLICIT_LINE_BREAK,
    HUMAN_ONLY_WHITESPACE,
    PAGE_BREAK,
    PARAGRAPH_BOUNDARY,
    WHITESPACE,
    Conversion,
    Token,
    TokenType,
    TokenTypeClass,
    class_of,
)

__all__ = [
    "EXPLICIT_LINE_BREAK",
    "HUMAN_ONLY_WHITESPACE",
    "PAGE_BREAK",
    "PARAGRAPH_BOUNDARY",
    "WHITESPACE",
    "Conversion",
    "Token",
    "TokenType",
    "TokenTypeClass",
    "class_of",
]
