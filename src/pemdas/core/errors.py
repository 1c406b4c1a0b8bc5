"""
Error types for PEMDAS tokenizing and parsing.

Every failure is terminal for the current call: errors raised inside a
parenthesised sub-expression propagate unchanged to the caller of
``parse``.
"""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pemdas.core.expression_lang.tokenizer import Token


class ErrorKind(StrEnum):
    """The single failure kind reported for a tokenize or parse call."""

    INVALID_CHARACTER = "invalid_character"
    INVALID_NUMBER = "invalid_number"
    INVALID_EXPRESSION = "invalid_expression"
    INVALID_FUNCTION_CALL = "invalid_function_call"
    INVALID_TOKEN = "invalid_token"
    BRANCH_EVALUATED_TO_NONE = "branch_evaluated_to_none"
    NESTING_TOO_DEEP = "nesting_too_deep"


class PemdasError(Exception):
    """Base exception for all PEMDAS errors."""

    kind: ErrorKind

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class LexerError(PemdasError):
    """Raised when raw text cannot be split into tokens."""

    def __init__(self, message: str, pos: int) -> None:
        self.pos = pos
        super().__init__(message)


class InvalidCharacterError(LexerError):
    """A character is not whitespace, a letter, a digit, or an operator."""

    kind = ErrorKind.INVALID_CHARACTER

    def __init__(self, char: str, pos: int) -> None:
        self.char = char
        super().__init__(f"Invalid character: {char!r}", pos)


class InvalidNumberError(LexerError):
    """An accumulated number run is not a valid numeric literal."""

    kind = ErrorKind.INVALID_NUMBER

    def __init__(self, text: str, pos: int) -> None:
        self.text = text
        super().__init__(f"Invalid number: {text!r}", pos)


class ParserError(PemdasError):
    """Raised when a token sequence does not form a valid expression."""


class InvalidExpressionError(ParserError):
    """
    Raised when the structure of the expression is invalid.

    Examples:
    - Unmatched opening or closing parenthesis
    - No operator or leaf interpretation fits a token slice
    """

    kind = ErrorKind.INVALID_EXPRESSION

    def __init__(self, message: str = "Invalid expression") -> None:
        super().__init__(message)


class InvalidFunctionCallError(ParserError):
    """A function keyword is not followed by a reduced argument."""

    kind = ErrorKind.INVALID_FUNCTION_CALL

    def __init__(self, function: str) -> None:
        self.function = function
        super().__init__(f"Invalid function call: {function} expects a parenthesised argument")


class InvalidTokenError(ParserError):
    """A bare token was left over that cannot stand alone as a leaf."""

    kind = ErrorKind.INVALID_TOKEN

    def __init__(self, token: Token) -> None:
        self.token = token
        super().__init__(f"Invalid token: {token.value!r}")


class BranchEvaluatedToNoneError(ParserError):
    """An operator split left one of its operands empty."""

    kind = ErrorKind.BRANCH_EVALUATED_TO_NONE

    def __init__(self) -> None:
        super().__init__("Branch evaluated to none: operator is missing an operand")


class NestingTooDeepError(ParserError):
    """The expression nests deeper than the configured limit."""

    kind = ErrorKind.NESTING_TOO_DEEP

    def __init__(self, limit: int) -> None:
        self.limit = limit
        super().__init__(f"Expression nesting exceeds the maximum depth of {limit}")
