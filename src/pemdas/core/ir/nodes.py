"""
Expression AST for PEMDAS.

A closed set of immutable node types forming a tree:

- Leaves: number literals, free variables, and the constants pi and e
- Binary operations: +, -, *, /, ^
- Unary operations: negation, exp, ln, sin, cos, tan, sqrt

The constants stay symbolic rather than being folded into number literals
so later evaluation or simplification can treat them exactly. Every node
owns its children; nodes are created bottom-up and never mutated.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from enum import StrEnum
from typing import TypeVar

from pydantic import BaseModel, ConfigDict, Field

from pemdas.core.number import Number

T = TypeVar("T")

# ---------------------------------------------------------------------------
# Operators
# ---------------------------------------------------------------------------


class BinaryOp(StrEnum):
    """Binary operators."""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    POW = "^"


class UnaryOp(StrEnum):
    """Unary operators and single-argument functions."""

    NEG = "-"
    EXP = "exp"
    LOG = "ln"
    SIN = "sin"
    COS = "cos"
    TAN = "tan"
    SQRT = "sqrt"


# ---------------------------------------------------------------------------
# Leaves
# ---------------------------------------------------------------------------


class NumberLiteral(BaseModel):
    """A numeric literal such as ``2`` or ``1.5``."""

    value: Number = Field(description="The literal value")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return str(self.value)


class Variable(BaseModel):
    """A free variable, bound later by an evaluation environment."""

    name: str = Field(description="Variable name as written")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return self.name


class PiConstant(BaseModel):
    """The constant pi."""

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return "pi"


class EConstant(BaseModel):
    """Euler's number e."""

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return "e"


# ---------------------------------------------------------------------------
# Operations
# ---------------------------------------------------------------------------


class BinaryExpr(BaseModel):
    """Binary operation: left op right."""

    op: BinaryOp
    left: Expr
    right: Expr

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return render(self)


class UnaryExpr(BaseModel):
    """Unary operation: negation or a function applied to one operand."""

    op: UnaryOp
    operand: Expr

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return render(self)


# ---------------------------------------------------------------------------
# Union type
# ---------------------------------------------------------------------------

Leaf = NumberLiteral | Variable | PiConstant | EConstant

Expr = NumberLiteral | Variable | PiConstant | EConstant | BinaryExpr | UnaryExpr

# Rebuild models for recursive forward references
BinaryExpr.model_rebuild()
UnaryExpr.model_rebuild()


def iter_leaves(expr: Expr) -> Iterator[Leaf]:
    """Yield the leaves of ``expr`` from left to right."""
    stack: list[Expr] = [expr]
    while stack:
        node = stack.pop()
        kids = children(node)
        if kids:
            stack.extend(reversed(kids))
        else:
            yield node


def children(expr: Expr) -> tuple[Expr, ...]:
    """Direct children of a node, left to right."""
    if isinstance(expr, BinaryExpr):
        return (expr.left, expr.right)
    if isinstance(expr, UnaryExpr):
        return (expr.operand,)
    return ()


def fold_tree(expr: Expr, combine: Callable[[Expr, list[T]], T]) -> T:
    """Combine a tree bottom-up without recursion.

    ``combine`` receives each node together with the results already
    computed for its children, and its return value becomes the node's
    result. Tall trees, such as a long flat sum, are walked with an explicit
    stack so their height is not bound by the interpreter's recursion limit.
    """
    results: list[T] = []
    stack: list[tuple[Expr, bool]] = [(expr, False)]
    while stack:
        node, expanded = stack.pop()
        kids = children(node)
        if expanded or not kids:
            start = len(results) - len(kids)
            values = results[start:]
            del results[start:]
            results.append(combine(node, values))
        else:
            stack.append((node, True))
            stack.extend((kid, False) for kid in reversed(kids))
    return results[0]


def depth(expr: Expr) -> int:
    """Height of the tree; a single leaf has depth 1."""
    return fold_tree(expr, lambda node, heights: 1 + max(heights, default=0))


def _render_node(node: Expr, parts: list[str]) -> str:
    if isinstance(node, BinaryExpr):
        return f"({parts[0]} {node.op.value} {parts[1]})"
    if isinstance(node, UnaryExpr):
        if node.op == UnaryOp.NEG:
            return f"-{parts[0]}"
        return f"{node.op.value}({parts[0]})"
    return str(node)


def render(expr: Expr) -> str:
    """Fully parenthesised infix form, e.g. ``(sin(x) - cos(pi))``."""
    return fold_tree(expr, _render_node)
