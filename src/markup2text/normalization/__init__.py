"""Token sequence normalization."""

from .collapse import collapse
from .normalizers import (
    EllipsisCharacterNormalizer,
    ExplicitHyphensNormalizer,
    ImplicitHyphensNormalizer,
    TokenSequenceNormalizer,
)
from .pipeline import normalize, normalize_token_sequence, select_normalizers

__all__ = [
    "EllipsisCharacterNormalizer",
    "ExplicitHyphensNormalizer",
    "ImplicitHyphensNormalizer",
    "TokenSequenceNormalizer",
    "collapse",
    "normalize",
    "normalize_token_sequence",
    "select_normalizers",
]
