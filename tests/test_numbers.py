from __future__ import annotations

import pytest

from shunt.core.numbers import format_decimal, parse_decimal


@pytest.mark.parametrize("digits", ["0", "7", "1234567890", "9" * 999, "1" * 1000, "1" + "0" * 1000])
def test_decimal_conversion_small_and_boundary(digits: str) -> None:
    assert format_decimal(parse_decimal(digits)) == digits


def test_decimal_conversion_past_interpreter_digit_limit() -> None:
    digits = "31415926535" * 500 + "0" * 1001 + "7"

    value = parse_decimal(digits)

    assert value % 10 == 7
    assert value // 10 ** 1002 == parse_decimal("31415926535" * 500)
    assert format_decimal(value) == digits


def test_decimal_leading_zeros_are_dropped() -> None:
    assert format_decimal(parse_decimal("0" * 5000 + "42")) == "42"
