"""Selection of output variants and rendering of token sequences to text."""

from .tokens import Conversion, Token, TokenType


class UnrenderableTokenError(Exception):
    """Raised for a token without text whose type has no default rendering."""

    def __init__(self, token: Token):
        super().__init__(f"Token of type {token.type.name} has no text and no default rendering")
        self.token = token


_DEFAULT_RENDERINGS = {
    TokenType.WHITESPACE: " ",
    TokenType.EXPLICIT_LINE_BREAK: "\n",
    TokenType.IMPLICIT_LINE_BREAK: "\n",
    TokenType.PARAGRAPH_BOUNDARY: "\n\n",
}


def filter_tokens(tokens: list[Token], variant: Conversion) -> list[Token]:
    """Keep the tokens intended for output variant ``variant``."""
    return [token for token in tokens if token.visible_in(variant)]


def render_token(token: Token) -> str:
    if token.text is not None:
        return token.text
    try:
        return _DEFAULT_RENDERINGS[token.type]
    except KeyError:
        raise UnrenderableTokenError(token) from None


def render(tokens: list[Token]) -> str:
    """Flatten a (normalized) token sequence to a string."""
    return "".join(render_token(token) for token in tokens)
