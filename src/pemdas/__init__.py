"""
PEMDAS - a multi-pass parser for mathematical expressions.

Turns text such as ``7*(8+1)`` or ``sin(x) - cos(pi)`` into an abstract
syntax tree ready for numeric evaluation.
"""

from __future__ import annotations

import re
from importlib.metadata import version as _metadata_version
from pathlib import Path as _Path

from .core import ir
from .core.errors import ErrorKind, LexerError, ParserError, PemdasError
from .core.expression_lang import Token, TokenKind, parse, parse_expr, tokenize
from .core.number import Number


def _get_version() -> str:
    """Get version from pyproject.toml (editable) or importlib.metadata (installed)."""
    pyproject = _Path(__file__).parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        content = pyproject.read_text()
        if match := re.search(r'^version\s*=\s*["\']([^"\']+)["\']', content, re.MULTILINE):
            return match.group(1)

    try:
        return _metadata_version("pemdas")
    except Exception:
        return "0.0.0"


__version__ = _get_version()

__all__ = [
    "__version__",
    "ir",
    "ErrorKind",
    "LexerError",
    "Number",
    "ParserError",
    "PemdasError",
    "Token",
    "TokenKind",
    "parse",
    "parse_expr",
    "tokenize",
]
