"""
Function-call reduction.

Binds each function keyword (``ln``, ``sin``, ``cos``, ``tan``, ``sqrt``) to
the reduced item right after it. This runs before operator precedence, so
``sin(x) + 1`` is ``sin(x)`` plus one, never ``sin(x + 1)``.
"""

from __future__ import annotations

from collections.abc import Sequence

from pemdas.core.errors import InvalidFunctionCallError
from pemdas.core.expression_lang.pending import PendingItem, Reduced, Unreduced
from pemdas.core.expression_lang.tokenizer import TokenKind
from pemdas.core.ir import UnaryExpr, UnaryOp

FUNCTION_OPS: dict[TokenKind, UnaryOp] = {
    TokenKind.LN: UnaryOp.LOG,
    TokenKind.SIN: UnaryOp.SIN,
    TokenKind.COS: UnaryOp.COS,
    TokenKind.TAN: UnaryOp.TAN,
    TokenKind.SQRT: UnaryOp.SQRT,
}


def reduce_functions(items: Sequence[PendingItem]) -> list[PendingItem]:
    """Fold every function keyword together with its argument.

    A function keyword in last position has no argument to take and is
    passed through unchanged.

    Raises:
        InvalidFunctionCallError: The item after a function keyword is not
            a reduced sub-tree.
    """
    output: list[PendingItem] = []
    i = 0
    last = len(items) - 1

    while i < last:
        item = items[i]
        if isinstance(item, Unreduced) and item.token.kind in FUNCTION_OPS:
            argument = items[i + 1]
            if not isinstance(argument, Reduced):
                raise InvalidFunctionCallError(item.token.value)
            op = FUNCTION_OPS[item.token.kind]
            output.append(Reduced(UnaryExpr(op=op, operand=argument.node)))
            i += 2
            continue
        output.append(item)
        i += 1

    if i == last:
        output.append(items[last])

    return output
