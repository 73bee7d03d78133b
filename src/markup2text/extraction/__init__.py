"""Tree traversal and text splitting."""

from .text import process_text
from .traversal import (
    RECURSE_PARAGRAPH,
    SIMPLY_RECURSE,
    SKIP,
    ActionType,
    Emit,
    NodeAction,
    NodePolicy,
    extract,
    extract_from_document,
)

__all__ = [
    "RECURSE_PARAGRAPH",
    "SIMPLY_RECURSE",
    "SKIP",
    "ActionType",
    "Emit",
    "NodeAction",
    "NodePolicy",
    "extract",
    "extract_from_document",
    "process_text",
]
