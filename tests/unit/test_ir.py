"""Tests for the expression AST types."""

from __future__ import annotations

import pytest

from pemdas.core.ir import (
    BinaryExpr,
    BinaryOp,
    EConstant,
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
from pemdas.core.number import Number


def _n(value: float) -> NumberLiteral:
    return NumberLiteral(value=Number(value=value))


class TestNodeEquality:
    def test_structural_equality(self) -> None:
        a = BinaryExpr(op=BinaryOp.ADD, left=_n(1), right=Variable(name="x"))
        b = BinaryExpr(op=BinaryOp.ADD, left=_n(1), right=Variable(name="x"))
        assert a == b

    def test_operator_matters(self) -> None:
        a = BinaryExpr(op=BinaryOp.ADD, left=_n(1), right=_n(2))
        b = BinaryExpr(op=BinaryOp.SUB, left=_n(1), right=_n(2))
        assert a != b

    def test_constants_are_distinct(self) -> None:
        assert PiConstant() != EConstant()
        assert PiConstant() == PiConstant()

    def test_constant_kept_in_union_slot(self) -> None:
        expr = UnaryExpr(op=UnaryOp.NEG, operand=EConstant())
        assert isinstance(expr.operand, EConstant)

    def test_frozen(self) -> None:
        expr = Variable(name="x")
        with pytest.raises(Exception):
            expr.name = "y"  # type: ignore[misc]


class TestNodeRendering:
    def test_binary(self) -> None:
        expr = BinaryExpr(op=BinaryOp.POW, left=Variable(name="x"), right=_n(2))
        assert str(expr) == "(x ^ 2)"

    def test_negation(self) -> None:
        assert str(UnaryExpr(op=UnaryOp.NEG, operand=PiConstant())) == "-pi"

    def test_function(self) -> None:
        assert str(UnaryExpr(op=UnaryOp.LOG, operand=_n(1.5))) == "ln(1.5)"

    def test_exp(self) -> None:
        assert str(UnaryExpr(op=UnaryOp.EXP, operand=EConstant())) == "exp(e)"


class TestTreeHelpers:
    def test_iter_leaves_in_order(self) -> None:
        expr = BinaryExpr(
            op=BinaryOp.MUL,
            left=UnaryExpr(op=UnaryOp.SIN, operand=Variable(name="a")),
            right=BinaryExpr(op=BinaryOp.ADD, left=PiConstant(), right=_n(3)),
        )
        assert list(iter_leaves(expr)) == [Variable(name="a"), PiConstant(), _n(3)]

    def test_depth(self) -> None:
        assert depth(_n(1)) == 1
        expr = UnaryExpr(
            op=UnaryOp.NEG,
            operand=BinaryExpr(op=BinaryOp.ADD, left=_n(1), right=_n(2)),
        )
        assert depth(expr) == 3

    def test_children(self) -> None:
        add = BinaryExpr(op=BinaryOp.ADD, left=_n(1), right=_n(2))
        neg = UnaryExpr(op=UnaryOp.NEG, operand=add)
        assert children(add) == (_n(1), _n(2))
        assert children(neg) == (add,)
        assert children(PiConstant()) == ()

    def test_fold_tree_visits_children_before_parent(self) -> None:
        expr = BinaryExpr(
            op=BinaryOp.SUB,
            left=UnaryExpr(op=UnaryOp.SQRT, operand=Variable(name="a")),
            right=EConstant(),
        )
        order: list[str] = []

        def visit(node: object, values: list[int]) -> int:
            order.append(type(node).__name__)
            return 1 + sum(values)

        assert fold_tree(expr, visit) == 4
        assert order == ["Variable", "UnaryExpr", "EConstant", "BinaryExpr"]

    def test_tall_tree(self) -> None:
        expr = _n(0)
        for i in range(1, 5000):
            expr = BinaryExpr(op=BinaryOp.ADD, left=expr, right=_n(i))
        assert depth(expr) == 5000
        assert sum(1 for _ in iter_leaves(expr)) == 5000
        assert render(expr).startswith("(" * 4999 + "0 + 1)")
        assert str(expr).endswith(" + 4999)")
