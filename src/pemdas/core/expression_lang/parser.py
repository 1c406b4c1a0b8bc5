"""
Multi-pass parser for PEMDAS expressions.

Pipeline for one token list:

    tokens
      → resolve_parentheses   (each group parsed recursively by this pipeline)
      → reduce_functions      (ln, sin, cos, tan, sqrt bound to their argument)
      → reduce_precedence     (+ -, then * /, then unary -, then ^)
      → rewrite_exponentials  (e ^ x → exp(x))
      → tree
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from pemdas.core.errors import NestingTooDeepError
from pemdas.core.expression_lang.functions import reduce_functions
from pemdas.core.expression_lang.parentheses import resolve_parentheses
from pemdas.core.expression_lang.precedence import reduce_precedence
from pemdas.core.expression_lang.rewrite import rewrite_exponentials
from pemdas.core.expression_lang.tokenizer import Token, tokenize
from pemdas.core.ir import Expr
from pemdas.core.settings import load_settings

logger = logging.getLogger(__name__)


def _parse_tokens(tokens: Sequence[Token], depth: int, max_depth: int) -> Expr:
    # Only parenthesis levels recurse through here
    if depth > max_depth:
        raise NestingTooDeepError(max_depth)

    items = resolve_parentheses(
        tokens,
        lambda inner: _parse_tokens(inner, depth + 1, max_depth),
    )
    items = reduce_functions(items)
    node = reduce_precedence(items)
    return rewrite_exponentials(node)


def parse(tokens: Sequence[Token], *, max_depth: int | None = None) -> Expr:
    """Parse a token list into an expression tree.

    Args:
        tokens: Tokens from ``tokenize``.
        max_depth: Limit on nested parenthesis levels; defaults to
            ``PEMDAS_MAX_DEPTH`` or 200. Operators do not count.

    Returns:
        The root of the parsed tree.

    Raises:
        ParserError: If the tokens do not form a valid expression. The
            subclass names the failure kind.
    """
    if max_depth is None:
        max_depth = load_settings().max_depth

    logger.debug("Parsing %d tokens (max depth %d)", len(tokens), max_depth)
    expr = _parse_tokens(tokens, 0, max_depth)
    logger.debug("Parsed expression: %s", expr)
    return expr


def parse_expr(source: str, *, max_depth: int | None = None) -> Expr:
    """Tokenize and parse an expression string.

    Args:
        source: Expression string (e.g., "7 * (8 + 1)")

    Returns:
        Parsed expression AST.

    Raises:
        LexerError: If tokenization fails.
        ParserError: If the expression is invalid.
    """
    return parse(tokenize(source), max_depth=max_depth)
