"""
Operator precedence reduction (the EMDAS in PEMDAS).

Reduces a pending-item sequence, with parentheses and function calls
already resolved, into a single tree. Each slice is split at its weakest
operators:

1. ``+`` and ``-``
2. ``*`` and ``/``
3. a leading unary ``-``
4. ``^``

Operands of ``+ - * /`` are folded from the left, so those operators are
left-associative; the operand after a ``^`` is reduced as a slice of its
own, so power is right-associative. A ``-`` directly after another
operator is unary and never a split point.

Runs of same-precedence operators are folded in a loop, so recursion only
goes as deep as the number of precedence levels, however long the run.
"""

from __future__ import annotations

from collections.abc import Sequence

from pemdas.core.errors import (
    BranchEvaluatedToNoneError,
    InvalidExpressionError,
    InvalidTokenError,
)
from pemdas.core.expression_lang.pending import PendingItem, Reduced, Unreduced, is_operator_item
from pemdas.core.expression_lang.tokenizer import TokenKind
from pemdas.core.ir import (
    BinaryExpr,
    BinaryOp,
    EConstant,
    Expr,
    NumberLiteral,
    PiConstant,
    UnaryExpr,
    UnaryOp,
    Variable,
)

_ADDITIVE: dict[TokenKind, BinaryOp] = {
    TokenKind.PLUS: BinaryOp.ADD,
    TokenKind.MINUS: BinaryOp.SUB,
}
_MULTIPLICATIVE: dict[TokenKind, BinaryOp] = {
    TokenKind.STAR: BinaryOp.MUL,
    TokenKind.SLASH: BinaryOp.DIV,
}


def reduce_precedence(items: Sequence[PendingItem]) -> Expr:
    """Reduce ``items`` to a single expression tree.

    Args:
        items: Pending items with parentheses and functions resolved.

    Raises:
        BranchEvaluatedToNoneError: An operator has no operand on one side.
        InvalidTokenError: A lone token cannot stand as a leaf.
        InvalidExpressionError: No operator or leaf reading fits the slice.
    """
    if not items:
        raise BranchEvaluatedToNoneError()

    if len(items) == 1:
        return _leaf(items[0])

    splits = [i for i in range(1, len(items)) if _is_additive_split(items, i)]
    if splits:
        return _fold_left(items, splits, _ADDITIVE)

    splits = [i for i in range(1, len(items)) if _kind_of(items[i]) in _MULTIPLICATIVE]
    if splits:
        return _fold_left(items, splits, _MULTIPLICATIVE)

    return _reduce_power_chain(items)


def _kind_of(item: PendingItem) -> TokenKind | None:
    if isinstance(item, Unreduced):
        return item.token.kind
    return None


def _is_additive_split(items: Sequence[PendingItem], i: int) -> bool:
    kind = _kind_of(items[i])
    if kind == TokenKind.MINUS:
        return not is_operator_item(items[i - 1])
    return kind == TokenKind.PLUS


def _fold_left(
    items: Sequence[PendingItem],
    splits: list[int],
    ops: dict[TokenKind, BinaryOp],
) -> Expr:
    """Combine the operands between ``splits`` from left to right."""
    node = reduce_precedence(items[: splits[0]])
    for n, i in enumerate(splits):
        end = splits[n + 1] if n + 1 < len(splits) else len(items)
        right = reduce_precedence(items[i + 1 : end])
        node = BinaryExpr(op=ops[_kind_of(items[i])], left=node, right=right)
    return node


def _reduce_power_chain(items: Sequence[PendingItem]) -> Expr:
    """Reduce a slice holding only unary minus and ``^``.

    Each pass strips leading minus signs, then splits at the first ``^``;
    what follows the ``^`` is handled by the next pass.
    """
    # (leading negations, left operand) for every ``^`` passed so far
    frames: list[tuple[int, Expr]] = []
    negations = 0
    rest = items

    while True:
        if not rest:
            raise BranchEvaluatedToNoneError()
        if len(rest) == 1:
            node = _leaf(rest[0])
            break
        if _kind_of(rest[0]) == TokenKind.MINUS:
            negations += 1
            rest = rest[1:]
            continue

        i = next((j for j in range(1, len(rest)) if _kind_of(rest[j]) == TokenKind.CARET), None)
        if i is None:
            raise InvalidExpressionError()
        frames.append((negations, reduce_precedence(rest[:i])))
        negations = 0
        rest = rest[i + 1 :]

    node = _negate(node, negations)
    for count, left in reversed(frames):
        node = _negate(BinaryExpr(op=BinaryOp.POW, left=left, right=node), count)
    return node


def _negate(node: Expr, count: int) -> Expr:
    for _ in range(count):
        node = UnaryExpr(op=UnaryOp.NEG, operand=node)
    return node


def _leaf(item: PendingItem) -> Expr:
    """Interpret a single remaining item as a tree."""
    if isinstance(item, Reduced):
        return item.node

    token = item.token
    if token.kind == TokenKind.NUMBER and token.number is not None:
        return NumberLiteral(value=token.number)
    if token.kind == TokenKind.VARIABLE:
        return Variable(name=token.value)
    if token.kind == TokenKind.PI:
        return PiConstant()
    if token.kind == TokenKind.E:
        return EConstant()
    raise InvalidTokenError(token)
