"""
PEMDAS intermediate representation.

The expression AST produced by the parser and consumed by evaluators.
"""

from .nodes import (
    BinaryExpr,
    BinaryOp,
    EConstant,
    Expr,
    Leaf,
    NumberLiteral,
    PiConstant,
    UnaryExpr,
    UnaryOp,
    Variable,
    children,
    depth,
    fold_tree,
    iter_leaves,
    render,
)

__all__ = [
    "BinaryExpr",
    "BinaryOp",
    "EConstant",
    "Expr",
    "Leaf",
    "NumberLiteral",
    "PiConstant",
    "UnaryExpr",
    "UnaryOp",
    "Variable",
    "children",
    "depth",
    "fold_tree",
    "iter_leaves",
    "render",
]
