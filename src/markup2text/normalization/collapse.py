"""Collapsing of token sequences.

Collapsing merges runs of line-break and whitespace tokens and trims
whitespace and line breaks where they carry no meaning:

1. consecutive tokens of the same non-text class become one token
   (empty text tokens are dropped on the way)
2. whitespace next to line breaks and at either end is removed
3. line breaks at either end are removed

Merge precedence for line breaks is paragraph boundary > explicit line break
> implicit line break. Page breaks rank like implicit line breaks, so a run
of nothing but page breaks becomes an implicit line break. Whitespace runs
keep the text of their first token unless one of them is a tab.
"""

from ..tokens import Conversion, Token, TokenType, TokenTypeClass

TAB = "\t"

_LINE_BREAK_RANK = {
    TokenType.PAGE_BREAK: 0,
    TokenType.IMPLICIT_LINE_BREAK: 0,
    TokenType.EXPLICIT_LINE_BREAK: 1,
    TokenType.PARAGRAPH_BOUNDARY: 2,
}
_RANKED_LINE_BREAKS = {
    0: TokenType.IMPLICIT_LINE_BREAK,
    1: TokenType.EXPLICIT_LINE_BREAK,
    2: TokenType.PARAGRAPH_BOUNDARY,
}


def collapse(tokens: list[Token]) -> list[Token]:
    """Merge runs and trim boundaries. Idempotent."""
    merged = merge_runs(tokens)
    trimmed = remove_boundary_whitespace(merged)
    if len(trimmed) != len(merged):
        # Removed whitespace may have separated two line-break runs
        trimmed = merge_runs(trimmed)
    return remove_boundary_line_breaks(trimmed)


def merge_runs(tokens: list[Token]) -> list[Token]:
    result: list[Token] = []
    run: list[Token] = []

    for token in tokens:
        token_class = token.token_class
        if run and run[0].token_class is not token_class:
            result.append(_merge_run(run))
            run = []

        if token_class is TokenTypeClass.TEXT:
            if token.text == "":
                continue
            result.append(token)
        else:
            run.append(token)

    if run:
        result.append(_merge_run(run))
    return result


def _merge_run(run: list[Token]) -> Token:
    if run[0].token_class is TokenTypeClass.LINEBREAKS:
        return _merge_line_breaks(run)
    return _merge_whitespace(run)


def _merge_line_breaks(run: list[Token]) -> Token:
    rank = max(_LINE_BREAK_RANK[token.type] for token in run)
    merged_type = _RANKED_LINE_BREAKS[rank]

    first = run[0]
    if len(run) == 1 and first.type is merged_type:
        return first
    return Token(merged_type, None, _union_conversions(run))


def _merge_whitespace(run: list[Token]) -> Token:
    first = run[0]
    if len(run) == 1:
        return first

    text = first.text
    if any(token.text == TAB for token in run):
        text = TAB
    return Token(TokenType.WHITESPACE, text, _union_conversions(run))


def _union_conversions(run: list[Token]) -> Conversion:
    conversions = run[0].conversions
    for token in run[1:]:
        conversions |= token.conversions
    return conversions


def remove_boundary_whitespace(tokens: list[Token]) -> list[Token]:
    """Drop whitespace next to line breaks or at either end."""
    return _remove_boundary_items(tokens, TokenTypeClass.WHITESPACE, TokenTypeClass.LINEBREAKS)


def remove_boundary_line_breaks(tokens: list[Token]) -> list[Token]:
    """Drop line breaks at either end."""
    return _remove_boundary_items(tokens, TokenTypeClass.LINEBREAKS, None)


def _remove_boundary_items(
    tokens: list[Token],
    class_to_remove: TokenTypeClass,
    boundary_class: TokenTypeClass | None,
) -> list[Token]:
    """Remove tokens of ``class_to_remove`` unless enclosed by other tokens.

    Removable tokens are held back until a token of a third class follows;
    a token of ``boundary_class`` discards them instead.
    """
    result: list[Token] = []
    pending: list[Token] = []
    seen_anchor = False

    for token in tokens:
        token_class = token.token_class
        if token_class is class_to_remove:
            if seen_anchor:
                pending.append(token)
        elif token_class is boundary_class:
            pending.clear()
            seen_anchor = False
            result.append(token)
        else:
            result.extend(pending)
            pending.clear()
            seen_anchor = True
            result.append(token)

    return result
