"""Token vocabulary for the intermediate representation between tree and text.

A document tree is converted to a flat sequence of tokens:
- line and page breaks, paragraph boundaries
- intra-line whitespace
- text runs, including hyphens that may be syllabification

Every token type belongs to exactly one coarse class. The classes drive
run merging and boundary trimming during normalization.
"""

from dataclasses import dataclass
from enum import Enum, IntFlag


class Conversion(IntFlag):
    """Output variants a token is intended for (bit flags)."""

    HUMAN = 0b01  # readable text, placeholders for images etc.
    TOOLS = 0b10  # text for processing tools, no placeholders
    ALL = HUMAN | TOOLS


class TokenTypeClass(Enum):
    """Coarse categories of token types."""

    LINEBREAKS = "linebreaks"
    WHITESPACE = "whitespace"
    TEXT = "text"


class TokenType(Enum):
    """Basic token types.

    Some types are not yet treated differently during conversion but keep
    distinctions of the input that later steps may care about.
    """

    # line/page breaks
    EXPLICIT_LINE_BREAK = "explicit_line_break"  # <lb/> in TEI, <br/> in XHTML
    IMPLICIT_LINE_BREAK = "implicit_line_break"  # line feed in document text
    PAGE_BREAK = "page_break"  # <pb/> in TEI
    PARAGRAPH_BOUNDARY = "paragraph_boundary"

    # text and intra-line whitespace
    HYPHENATION = "hyphenation"  # syllabification marked up as such
    POSSIBLE_HYPHENATION = "possible_hyphenation"  # '-' that may be syllabification
    WHITESPACE = "whitespace"
    TEXT = "text"

    @property
    def token_class(self) -> TokenTypeClass:
        return _TOKEN_TYPE_CLASSES[self]


_TOKEN_TYPE_CLASSES: dict[TokenType, TokenTypeClass] = {
    TokenType.EXPLICIT_LINE_BREAK: TokenTypeClass.LINEBREAKS,
    TokenType.IMPLICIT_LINE_BREAK: TokenTypeClass.LINEBREAKS,
    TokenType.PAGE_BREAK: TokenTypeClass.LINEBREAKS,
    TokenType.PARAGRAPH_BOUNDARY: TokenTypeClass.LINEBREAKS,
    TokenType.HYPHENATION: TokenTypeClass.TEXT,
    TokenType.POSSIBLE_HYPHENATION: TokenTypeClass.TEXT,
    TokenType.WHITESPACE: TokenTypeClass.WHITESPACE,
    TokenType.TEXT: TokenTypeClass.TEXT,
}


def class_of(token_type: TokenType) -> TokenTypeClass:
    """Return the coarse class of a token type."""
    return _TOKEN_TYPE_CLASSES[token_type]


@dataclass(frozen=True)
class Token:
    """An output material token.

    ``text`` is ``None`` for tokens rendered by a type-specific default
    (see ``markup2text.rendering``).
    """

    type: TokenType
    text: str | None = None
    conversions: Conversion = Conversion.ALL

    @property
    def token_class(self) -> TokenTypeClass:
        return _TOKEN_TYPE_CLASSES[self.type]

    def visible_in(self, variant: Conversion) -> bool:
        """Whether the token belongs in the output of ``variant``."""
        return bool(self.conversions & variant)


# Typical tokens, shared instead of re-created per node
EXPLICIT_LINE_BREAK = Token(TokenType.EXPLICIT_LINE_BREAK)
PAGE_BREAK = Token(TokenType.PAGE_BREAK)
PARAGRAPH_BOUNDARY = Token(TokenType.PARAGRAPH_BOUNDARY)
WHITESPACE = Token(TokenType.WHITESPACE)
HUMAN_ONLY_WHITESPACE = Token(TokenType.WHITESPACE, None, Conversion.HUMAN)
