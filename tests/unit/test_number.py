"""Tests for the Number value type."""

from __future__ import annotations

import math

import pytest

from pemdas.core.number import Number, NumberFormatError


class TestFromStr:
    def test_integer(self) -> None:
        assert Number.from_str("42").value == 42.0

    def test_trailing_zero_equals_short_form(self) -> None:
        assert Number.from_str("1.50") == Number.from_str("1.5")

    def test_leading_dot(self) -> None:
        assert Number.from_str(".5").value == 0.5

    def test_trailing_dot(self) -> None:
        assert Number.from_str("3.").value == 3.0

    @pytest.mark.parametrize("text", ["", ".", "1.2.3", "abc", " 1", "1_000"])
    def test_invalid(self, text: str) -> None:
        with pytest.raises(NumberFormatError):
            Number.from_str(text)

    def test_format_error_is_value_error(self) -> None:
        assert issubclass(NumberFormatError, ValueError)


class TestArithmetic:
    def test_add(self) -> None:
        assert Number(value=2).add(Number(value=3)) == Number(value=5)

    def test_sub_uses_receiver_as_left_operand(self) -> None:
        assert Number(value=2).sub(Number(value=3)) == Number(value=-1)

    def test_mul(self) -> None:
        assert Number(value=4) * Number(value=2.5) == Number(value=10)

    def test_div(self) -> None:
        assert Number(value=1) / Number(value=4) == Number(value=0.25)

    def test_pow(self) -> None:
        assert Number(value=2) ** Number(value=10) == Number(value=1024)

    def test_div_by_zero_is_signed_infinity(self) -> None:
        assert Number(value=1).div(Number(value=0)).value == math.inf
        assert Number(value=-1).div(Number(value=0)).value == -math.inf

    def test_zero_over_zero_is_nan(self) -> None:
        assert math.isnan(Number(value=0).div(Number(value=0)).value)

    def test_pow_negative_base_fractional_exponent_is_nan(self) -> None:
        assert math.isnan(Number(value=-8).pow(Number(value=0.5)).value)

    def test_pow_overflow_is_infinity(self) -> None:
        assert Number(value=10).pow(Number(value=1000)).value == math.inf

    def test_zero_to_negative_power_is_infinity(self) -> None:
        assert Number(value=0).pow(Number(value=-1)).value == math.inf

    def test_pow_overflow_keeps_sign_of_odd_power(self) -> None:
        assert Number(value=-10).pow(Number(value=309)).value == -math.inf
        assert Number(value=-10).pow(Number(value=310)).value == math.inf

    def test_negative_zero_to_negative_power(self) -> None:
        assert Number(value=-0.0).pow(Number(value=-1)).value == -math.inf
        assert Number(value=-0.0).pow(Number(value=-2)).value == math.inf
        assert Number(value=0).pow(Number(value=-3)).value == math.inf


class TestValueSemantics:
    def test_frozen(self) -> None:
        n = Number(value=1)
        with pytest.raises(Exception):
            n.value = 2.0  # type: ignore[misc]

    def test_copy_is_equal(self) -> None:
        n = Number(value=1.25)
        assert n.model_copy() == n

    def test_hashable(self) -> None:
        assert len({Number(value=1), Number(value=1.0)}) == 1

    def test_str_integral(self) -> None:
        assert str(Number(value=7)) == "7"

    def test_str_fractional(self) -> None:
        assert str(Number(value=1.5)) == "1.5"

    def test_float(self) -> None:
        assert float(Number(value=2.5)) == 2.5
