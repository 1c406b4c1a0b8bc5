"""
Pending items: the intermediate form between tokens and the final tree.

While parentheses and function calls are being resolved, the parser works
on a sequence where each entry is either a token that has not been reduced
yet or a sub-tree that already has. Order in the sequence is significant.
"""

from __future__ import annotations

from dataclasses import dataclass

from pemdas.core.expression_lang.tokenizer import Token
from pemdas.core.ir import Expr


@dataclass(frozen=True, slots=True)
class Unreduced:
    """A token that still needs to be reduced."""

    token: Token


@dataclass(frozen=True, slots=True)
class Reduced:
    """A fully reduced sub-tree."""

    node: Expr


PendingItem = Unreduced | Reduced


def is_operator_item(item: PendingItem) -> bool:
    """True for an unreduced binary-operator token."""
    return isinstance(item, Unreduced) and item.token.is_operator
