"""Node policy for TEI documents.

Tags are matched by local name, so documents with and without the TEI
namespace convert alike.
"""

import unicodedata

from ..extraction import RECURSE_PARAGRAPH, SIMPLY_RECURSE, SKIP, Emit, NodeAction, process_text
from ..tokens import (
    EXPLICIT_LINE_BREAK,
    PAGE_BREAK,
    PARAGRAPH_BOUNDARY,
    WHITESPACE,
    Token,
    TokenType,
)
from ..tree import NodeKind, XmlNode
from .common import Labels, human_text, put_footnote, put_skip_notification

TAGS_TO_SKIP = frozenset(
    {
        "teiHeader",
        "front",
        "back",
        "date",
        "sic",
        "fw",
        "ptr",
        "milestone",
        "title",
    }
)
LINE_ELEMENTS = frozenset({"l", "row", "item"})
PARAGRAPH_ELEMENTS = frozenset(
    {"div", "p", "list", "dateline", "postscript", "salute", "table", "head"}
)
IMAGE_ELEMENTS = frozenset({"figure", "graphic"})

CELL_SEPARATOR = Token(TokenType.WHITESPACE, "\t")
HYPHENATION = Token(TokenType.HYPHENATION, "¬")
POSSIBLE_HYPHENATION = Token(TokenType.POSSIBLE_HYPHENATION, "-")


def classify_char(text: str, index: int, char: str) -> Token | str:
    """Character classification for TEI text nodes."""
    if char in "\n\r":
        return Token(TokenType.IMPLICIT_LINE_BREAK, char)
    if char == "ſ":  # long s
        return "s"
    if char == "¬":  # not sign, used for hyphenation in transcriptions
        return HYPHENATION
    if char == "-":
        return POSSIBLE_HYPHENATION

    category = unicodedata.category(char)
    if category == "Zl":
        return Token(TokenType.IMPLICIT_LINE_BREAK, char)
    if category == "Zp":
        return Token(TokenType.PARAGRAPH_BOUNDARY, char)
    if category == "Zs":
        return Token(TokenType.WHITESPACE, char)
    return char


class TeiPolicy:
    """Converts TEI nodes to tokens."""

    root_name = "TEI"

    def __init__(self, labels: Labels | None = None):
        self.labels = labels or Labels()
        self._gap = human_text(self.labels.gap)

    def decide(self, node: XmlNode, emit: Emit) -> NodeAction:
        if node.kind is NodeKind.ELEMENT:
            return self._element(node, node.name or "", emit)
        if node.kind is NodeKind.TEXT:
            process_text(node.text or "", classify_char, emit)
            return SKIP  # no child nodes anyway
        if node.kind is NodeKind.COMMENT:
            return SKIP
        return SIMPLY_RECURSE

    def _element(self, node: XmlNode, name: str, emit: Emit) -> NodeAction:
        if name in TAGS_TO_SKIP:
            return SKIP

        if name == "space":
            emit(WHITESPACE)
            return SKIP
        if name == "lb":
            emit(EXPLICIT_LINE_BREAK)
            return SIMPLY_RECURSE
        if name == "pb":
            emit(PAGE_BREAK)
            return SIMPLY_RECURSE
        if name in LINE_ELEMENTS:
            emit(EXPLICIT_LINE_BREAK)
            return NodeAction.recurse(EXPLICIT_LINE_BREAK)
        if name == "div" and node.has_attribute("type", "contents"):
            return SKIP
        if name in PARAGRAPH_ELEMENTS:
            emit(PARAGRAPH_BOUNDARY)
            return RECURSE_PARAGRAPH
        if name == "cell":
            emit(CELL_SEPARATOR)
            return SIMPLY_RECURSE
        if name == "note":
            return self._note(node, emit)
        if name == "gap":
            emit(self._gap)
            return SKIP
        if name in IMAGE_ELEMENTS:
            put_skip_notification(self.labels.image, emit)
            return SKIP
        if name == "formula":
            put_skip_notification(self.labels.formula, emit)
            return SKIP
        return SIMPLY_RECURSE

    def _note(self, node: XmlNode, emit: Emit) -> NodeAction:
        place = node.get("place")
        if place is None:
            return SIMPLY_RECURSE
        if place == "foot":
            return put_footnote(self.labels.footnote, emit)
        # Marginal and other notes are not part of the running text
        return SKIP
