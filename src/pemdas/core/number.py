"""
Scalar numeric value used by number literals.

``Number`` wraps a single float. It parses from text and implements the
five arithmetic operations an evaluator needs; results follow IEEE float
semantics rather than raising on division by zero or domain errors.
"""

from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict, Field


class NumberFormatError(ValueError):
    """Raised when text is not a valid numeric literal."""


def _signed_infinity(base: float, exponent: float) -> float:
    """Infinity with the sign IEEE pow gives for ``base`` and ``exponent``."""
    odd = exponent.is_integer() and exponent % 2 == 1
    if odd and math.copysign(1.0, base) < 0:
        return -math.inf
    return math.inf


class Number(BaseModel):
    """An immutable scalar value."""

    value: float = Field(description="The scalar value")

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_str(cls, text: str) -> Number:
        """Parse a numeric literal such as ``"42"``, ``"1.50"`` or ``".5"``."""
        if not text or text != text.strip() or "_" in text:
            raise NumberFormatError(f"Not a number: {text!r}")
        try:
            return cls(value=float(text))
        except ValueError as e:
            raise NumberFormatError(f"Not a number: {text!r}") from e

    def add(self, other: Number) -> Number:
        return Number(value=self.value + other.value)

    def sub(self, other: Number) -> Number:
        return Number(value=self.value - other.value)

    def mul(self, other: Number) -> Number:
        return Number(value=self.value * other.value)

    def div(self, other: Number) -> Number:
        try:
            return Number(value=self.value / other.value)
        except ZeroDivisionError:
            if self.value == 0 or math.isnan(self.value):
                return Number(value=math.nan)
            sign = math.copysign(1.0, self.value) * math.copysign(1.0, other.value)
            return Number(value=math.copysign(math.inf, sign))

    def pow(self, other: Number) -> Number:
        try:
            return Number(value=math.pow(self.value, other.value))
        except OverflowError:
            return Number(value=_signed_infinity(self.value, other.value))
        except ValueError:
            # Negative base with a fractional exponent, or 0 to a negative power
            if self.value == 0:
                return Number(value=_signed_infinity(self.value, other.value))
            return Number(value=math.nan)

    __add__ = add
    __sub__ = sub
    __mul__ = mul
    __truediv__ = div
    __pow__ = pow

    def __float__(self) -> float:
        return self.value

    def __str__(self) -> str:
        if self.value.is_integer():
            return str(int(self.value))
        return repr(self.value)
