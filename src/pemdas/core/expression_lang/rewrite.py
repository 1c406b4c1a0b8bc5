"""
Exponential-form rewrite.

Replaces every ``e ^ x`` with ``exp(x)``, recursively, so that nested powers
of e collapse into nested exponentials: ``e^(e^x)`` becomes
``exp(exp(x))``. The rewrite never fails and is idempotent.
"""

from __future__ import annotations

from pemdas.core.ir import BinaryExpr, BinaryOp, EConstant, Expr, UnaryExpr, UnaryOp, fold_tree


def _rebuild(node: Expr, rewritten: list[Expr]) -> Expr:
    if isinstance(node, BinaryExpr):
        left, right = rewritten
        if node.op == BinaryOp.POW and isinstance(left, EConstant):
            return UnaryExpr(op=UnaryOp.EXP, operand=right)
        return BinaryExpr(op=node.op, left=left, right=right)

    if isinstance(node, UnaryExpr):
        return UnaryExpr(op=node.op, operand=rewritten[0])

    # Leaves are immutable and returned as they are
    return node


def rewrite_exponentials(expr: Expr) -> Expr:
    """Return ``expr`` with every power of e in exponential form."""
    return fold_tree(expr, _rebuild)
