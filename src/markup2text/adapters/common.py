"""Token patterns shared by the format policies."""

from dataclasses import dataclass

from ..core.config import Settings
from ..extraction import ActionType, Emit, NodeAction
from ..tokens import HUMAN_ONLY_WHITESPACE, PARAGRAPH_BOUNDARY, Conversion, Token, TokenType

FOOTNOTE_CLOSE = Token(TokenType.TEXT, "]", Conversion.HUMAN)


@dataclass(frozen=True)
class Labels:
    """Placeholder texts for material without textual form."""

    image: str = "[Bild]"
    formula: str = "[Formel]"
    gap: str = "[…]"
    footnote: str = "[Fußnote:"

    @classmethod
    def from_settings(cls, settings: Settings) -> "Labels":
        return cls(
            image=settings.IMAGE_LABEL,
            formula=settings.FORMULA_LABEL,
            gap=settings.GAP_LABEL,
            footnote=settings.FOOTNOTE_LABEL,
        )


def human_text(text: str) -> Token:
    return Token(TokenType.TEXT, text, Conversion.HUMAN)


def put_skip_notification(label: str, emit: Emit) -> None:
    """Stand-in paragraph for skipped material, e.g. an image."""
    emit(PARAGRAPH_BOUNDARY)
    emit(human_text(label))
    emit(PARAGRAPH_BOUNDARY)


def put_footnote(label: str, emit: Emit) -> NodeAction:
    """Bracket a footnote inline, visible in human output only."""
    emit(HUMAN_ONLY_WHITESPACE)
    emit(human_text(label))
    emit(HUMAN_ONLY_WHITESPACE)
    return NodeAction(ActionType.RECURSE, FOOTNOTE_CLOSE)
