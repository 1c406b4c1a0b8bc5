"""
PEMDAS expression language.

Tokenizer and multi-pass parser turning math expressions into an AST.

Usage:
    from pemdas.core.expression_lang import parse, tokenize

    expr = parse(tokenize("sin(x) - cos(pi)"))
    str(expr)
    # "(sin(x) - cos(pi))"
"""

from pemdas.core.expression_lang.parser import parse, parse_expr
from pemdas.core.expression_lang.tokenizer import Token, TokenKind, tokenize

__all__ = ["Token", "TokenKind", "parse", "parse_expr", "tokenize"]
