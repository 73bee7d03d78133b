"""Normalization pipeline: collapsing interleaved with rewriters."""

from collections.abc import Iterable

from ..tokens import Token, TokenType
from .collapse import collapse
from .normalizers import (
    EllipsisCharacterNormalizer,
    ExplicitHyphensNormalizer,
    ImplicitHyphensNormalizer,
    TokenSequenceNormalizer,
)

_ELLIPSIS = EllipsisCharacterNormalizer()

# Documents with marked-up hyphenation do their syllabification explicitly,
# so remaining plain hyphens are real hyphens.
NORMALIZERS_IF_EXPLICIT_HYPHENS: tuple[TokenSequenceNormalizer, ...] = (
    ExplicitHyphensNormalizer(),
    ImplicitHyphensNormalizer(heuristic=False),
    _ELLIPSIS,
)
NORMALIZERS_IF_NO_EXPLICIT_HYPHENS: tuple[TokenSequenceNormalizer, ...] = (
    ImplicitHyphensNormalizer(heuristic=True),
    _ELLIPSIS,
)


def normalize_token_sequence(
    tokens: list[Token], normalizers: Iterable[TokenSequenceNormalizer]
) -> list[Token]:
    """Run ``normalizers`` in order, collapsing before each and at the end."""
    for normalizer in normalizers:
        tokens = normalizer(collapse(tokens))
    return collapse(tokens)


def contains_explicit_hyphens(tokens: list[Token]) -> bool:
    return any(token.type is TokenType.HYPHENATION for token in tokens)


def select_normalizers(tokens: list[Token]) -> tuple[TokenSequenceNormalizer, ...]:
    if contains_explicit_hyphens(tokens):
        return NORMALIZERS_IF_EXPLICIT_HYPHENS
    return NORMALIZERS_IF_NO_EXPLICIT_HYPHENS


def normalize(tokens: list[Token]) -> list[Token]:
    """Normalize a raw token sequence with the normalizers it calls for."""
    return normalize_token_sequence(tokens, select_normalizers(tokens))
