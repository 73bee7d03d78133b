"""Node policy for XHTML documents."""

import unicodedata

from ..extraction import RECURSE_PARAGRAPH, SIMPLY_RECURSE, SKIP, Emit, NodeAction, process_text
from ..tokens import EXPLICIT_LINE_BREAK, PARAGRAPH_BOUNDARY, WHITESPACE, Token, TokenType
from ..tree import NodeKind, XmlNode
from .common import Labels, put_footnote, put_skip_notification

TAGS_TO_SKIP = frozenset({"head"})
BLOCK_ELEMENTS = frozenset(
    {"div", "p", "h1", "h2", "h3", "h4", "h5", "h6", "ol", "ul", "blockquote"}
)

CELL_SEPARATOR = Token(TokenType.WHITESPACE, "\t")
POSSIBLE_HYPHENATION = Token(TokenType.POSSIBLE_HYPHENATION, "-")

# OCR artifacts in the digitized sources
_REPLACEMENTS = {
    "\u017f": "s",  # long s
    "\u00a4": "\u00f1",  # currency sign for n with tilde
    "\u0303": "\u0342",  # combining tilde for combining perispomeni
    "\u02cd": "",
    "\u00a6": "",
    "\u00bf": "",
}


def classify_char(text: str, index: int, char: str) -> Token | str:
    """Character classification for XHTML text nodes.

    Line feeds are source formatting, not line breaks, and render as plain
    spaces. Other control characters such as tabs are whitespace that keeps
    its character. Only a hyphen closing the text node can be syllabification.
    """
    if char in "\n\r":
        return WHITESPACE
    replacement = _REPLACEMENTS.get(char)
    if replacement is not None:
        return replacement
    if char == "-" and index == len(text) - 1:
        return POSSIBLE_HYPHENATION

    category = unicodedata.category(char)
    if category in ("Zs", "Cc"):
        return Token(TokenType.WHITESPACE, char)
    return char


class XhtmlPolicy:
    """Converts XHTML nodes to tokens."""

    root_name = "html"

    def __init__(self, labels: Labels | None = None):
        self.labels = labels or Labels()

    def decide(self, node: XmlNode, emit: Emit) -> NodeAction:
        if node.kind is NodeKind.ELEMENT:
            return self._element(node, node.name or "", emit)
        if node.kind is NodeKind.TEXT:
            process_text(node.text or "", classify_char, emit)
            return SKIP
        if node.kind is NodeKind.COMMENT:
            return SKIP
        return SIMPLY_RECURSE

    def _element(self, node: XmlNode, name: str, emit: Emit) -> NodeAction:
        if name in TAGS_TO_SKIP:
            return SKIP

        if name in ("br", "tr"):
            emit(EXPLICIT_LINE_BREAK)
            return SIMPLY_RECURSE
        if name == "img":
            put_skip_notification(self.labels.image, emit)
            return SKIP
        if name == "a":
            if node.has_attribute("class", "pageref"):
                return SKIP
            return SIMPLY_RECURSE
        if name in ("div", "table"):
            if node.has_attribute("class", "toc"):
                return SKIP
            emit(PARAGRAPH_BOUNDARY)
            return RECURSE_PARAGRAPH
        if name == "span":
            if node.has_attribute("class", "footnote"):
                return put_footnote(self.labels.footnote, emit)
            return SIMPLY_RECURSE
        if name == "td":
            emit(CELL_SEPARATOR)
            return SIMPLY_RECURSE
        if name == "hr":
            emit(PARAGRAPH_BOUNDARY)
            return SIMPLY_RECURSE
        if name == "li":
            emit(EXPLICIT_LINE_BREAK)
            return NodeAction.recurse(EXPLICIT_LINE_BREAK)
        if name in BLOCK_ELEMENTS:
            emit(PARAGRAPH_BOUNDARY)
            return RECURSE_PARAGRAPH
        return SIMPLY_RECURSE
