"""
Parenthesis resolution.

Partitions a flat token list into pending items. Tokens outside any group
pass through unreduced; the tokens of each outermost ``( ... )`` group are
parsed by the full pipeline and replaced by a single reduced item. Inner
groups are captured verbatim and re-discovered by that recursive parse.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from pemdas.core.errors import InvalidExpressionError
from pemdas.core.expression_lang.pending import PendingItem, Reduced, Unreduced
from pemdas.core.expression_lang.tokenizer import Token, TokenKind
from pemdas.core.ir import Expr

GroupParser = Callable[[list[Token]], Expr]


def resolve_parentheses(tokens: Sequence[Token], parse_group: GroupParser) -> list[PendingItem]:
    """Reduce every outermost parenthesised group to a sub-tree.

    Args:
        tokens: Token list as produced by the tokenizer.
        parse_group: Parses the tokens found between a matched pair.

    Raises:
        InvalidExpressionError: On an unmatched ``(`` or ``)``.
    """
    items: list[PendingItem] = []
    inner: list[Token] = []
    nesting = 0

    for token in tokens:
        if token.kind == TokenKind.LPAREN:
            if nesting > 0:
                inner.append(token)
            nesting += 1
        elif token.kind == TokenKind.RPAREN:
            nesting -= 1
            if nesting < 0:
                raise InvalidExpressionError(f"Unmatched ')' at position {token.pos}")
            if nesting == 0:
                items.append(Reduced(parse_group(inner)))
                inner = []
            else:
                inner.append(token)
        elif nesting == 0:
            items.append(Unreduced(token))
        else:
            inner.append(token)

    if nesting != 0:
        raise InvalidExpressionError("Unmatched '(': missing closing parenthesis")

    return items
