"""
Tokenizer for PEMDAS expressions.

Scans raw text character by character into a flat list of tokens. Letters
accumulate into names, digits and ``.`` accumulate into numbers, and each
operator or parenthesis is a token of its own. Names matching a known
function or constant keyword get a dedicated token kind; any other name is
a free variable.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum, StrEnum, auto

from pemdas.core.errors import InvalidCharacterError, InvalidNumberError
from pemdas.core.number import Number, NumberFormatError

logger = logging.getLogger(__name__)


class TokenKind(StrEnum):
    """Token types for the expression language."""

    # Literals and names
    NUMBER = auto()
    VARIABLE = auto()

    # Function keywords
    LN = auto()
    SIN = auto()
    COS = auto()
    TAN = auto()
    SQRT = auto()

    # Constant keywords
    PI = auto()
    E = auto()

    # Operators
    PLUS = auto()
    MINUS = auto()
    STAR = auto()
    SLASH = auto()
    CARET = auto()

    # Grouping
    LPAREN = auto()
    RPAREN = auto()


OPERATOR_KINDS = frozenset(
    {TokenKind.PLUS, TokenKind.MINUS, TokenKind.STAR, TokenKind.SLASH, TokenKind.CARET}
)


@dataclass(frozen=True, slots=True)
class Token:
    """A single token from the expression tokenizer."""

    kind: TokenKind
    value: str  # source text, e.g. "1.50", "+", "sin"
    number: Number | None = None  # parsed value of NUMBER tokens
    pos: int = field(default=0, compare=False)

    @property
    def is_operator(self) -> bool:
        return self.kind in OPERATOR_KINDS

    def __repr__(self) -> str:
        return f"Token({self.kind}, {self.value!r}, pos={self.pos})"


_KEYWORDS: dict[str, TokenKind] = {
    "ln": TokenKind.LN,
    "sin": TokenKind.SIN,
    "cos": TokenKind.COS,
    "tan": TokenKind.TAN,
    "sqrt": TokenKind.SQRT,
    "pi": TokenKind.PI,
    "e": TokenKind.E,
}

_SINGLE_CHAR: dict[str, TokenKind] = {
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.STAR,
    "/": TokenKind.SLASH,
    "^": TokenKind.CARET,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
}


class _Mode(Enum):
    NONE = auto()
    NAME = auto()
    NUMBER = auto()


def _is_number_char(c: str) -> bool:
    return c.isnumeric() or c == "."


class _Scanner:
    """Accumulates name and number runs and flushes them into tokens."""

    def __init__(self) -> None:
        self.tokens: list[Token] = []
        self.mode = _Mode.NONE
        self.buffer: list[str] = []
        self.start = 0

    def begin(self, mode: _Mode, pos: int) -> None:
        self.flush()
        self.mode = mode
        self.start = pos

    def flush(self) -> None:
        """Finalize the current run, if any, into a token."""
        if not self.buffer:
            self.mode = _Mode.NONE
            return

        text = "".join(self.buffer)
        if self.mode == _Mode.NAME:
            kind = _KEYWORDS.get(text, TokenKind.VARIABLE)
            self.tokens.append(Token(kind, text, pos=self.start))
        elif self.mode == _Mode.NUMBER:
            try:
                number = Number.from_str(text)
            except NumberFormatError as e:
                raise InvalidNumberError(text, self.start) from e
            self.tokens.append(Token(TokenKind.NUMBER, text, number, pos=self.start))

        self.buffer.clear()
        self.mode = _Mode.NONE

    def push(self, c: str) -> None:
        self.buffer.append(c)


def tokenize(source: str) -> list[Token]:
    """Tokenize an expression string into a list of tokens.

    Args:
        source: Expression text (e.g., "sin(x) - cos(pi)")

    Returns:
        Tokens in source order. Whitespace produces no tokens.

    Raises:
        InvalidCharacterError: A character is not whitespace, a letter, a
            digit, ``.``, an operator or a parenthesis.
        InvalidNumberError: A number run such as ``1.2.3`` does not parse.
    """
    scanner = _Scanner()

    for i, c in enumerate(source):
        if c.isspace():
            scanner.flush()
            continue

        if c.isalpha():
            if scanner.mode != _Mode.NAME:
                scanner.begin(_Mode.NAME, i)
            scanner.push(c)
            continue

        if _is_number_char(c):
            if scanner.mode != _Mode.NUMBER:
                scanner.begin(_Mode.NUMBER, i)
            scanner.push(c)
            continue

        kind = _SINGLE_CHAR.get(c)
        if kind is None:
            raise InvalidCharacterError(c, i)
        scanner.flush()
        scanner.tokens.append(Token(kind, c, pos=i))

    scanner.flush()
    logger.debug("Tokenized %r into %d tokens", source, len(scanner.tokens))
    return scanner.tokens
