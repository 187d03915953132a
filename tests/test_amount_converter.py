"""
Fixed-point amount conversion.

Raw reward amounts are integers in the token's smallest unit; the report shows
them divided by 10**18 with exactly 18 fractional digits and no precision loss.
"""

import pytest
from decimal import Decimal

from src.domain.errors import InvalidRawAmountError
from src.processing.amount_converter import (
    convert_raw_amount,
    raw_amount_to_decimal,
    is_negative_raw_amount,
)


class TestConvertRawAmount:

    def test_one_token_and_a_bit(self):
        assert convert_raw_amount("1234567890123456789") == "1.234567890123456789"

    def test_exactly_one_token(self):
        assert convert_raw_amount("1000000000000000000") == "1.000000000000000000"

    def test_zero_is_zero_padded(self):
        assert convert_raw_amount("0") == "0.000000000000000000"

    def test_smallest_unit(self):
        assert convert_raw_amount("1") == "0.000000000000000001"

    def test_leading_zeros_are_ignored(self):
        assert convert_raw_amount("000000000000000000000042") == "0.000000000000000042"

    def test_explicit_plus_sign(self):
        assert convert_raw_amount("+5") == "0.000000000000000005"

    def test_no_separators_or_exponent(self):
        result = convert_raw_amount("98765432109876543210987654321")
        assert result == "98765432109.876543210987654321"
        assert "," not in result
        assert "E" not in result.upper()

    def test_exactly_18_fractional_digits(self):
        for raw in ["1", "10", "999999999999999999", "1000000000000000001", "7" * 40]:
            integer_part, fraction = convert_raw_amount(raw).split(".")
            assert len(fraction) == 18
            assert integer_part.isdigit()

    def test_float_would_have_lost_precision(self):
        raw = "1234567890123456789"
        assert convert_raw_amount(raw) != f"{int(raw) / 1e18:.18f}"

    def test_custom_decimals(self):
        assert convert_raw_amount("123456", decimals=6) == "0.123456"
        assert convert_raw_amount("123456", decimals=0) == "123456"

    def test_negative_decimals_rejected(self):
        with pytest.raises(ValueError):
            convert_raw_amount("1", decimals=-1)


class TestRoundTrip:
    """Rendering and then dropping the decimal point must give back the original integer."""

    @pytest.mark.parametrize("n", [
        0,
        1,
        10**18 - 1,
        10**18,
        123456789012345678901234567890,            # 30 digits
        987654321098765432109876543210987654321,   # 39 digits
        10**60 + 7,
        2**256 - 1,
    ])
    def test_round_trip(self, n):
        rendered = convert_raw_amount(str(n))
        integer_part, fraction = rendered.split(".")
        assert len(fraction) == 18
        assert int(integer_part + fraction) == n

    def test_many_thousand_digits(self):
        # Longer than int()'s default string conversion limit on recent Pythons
        raw = "9" * 5000
        rendered = convert_raw_amount(raw)
        assert rendered == "9" * (5000 - 18) + "." + "9" * 18


class TestNegativeAmounts:

    def test_negative_converts_mathematically(self):
        assert convert_raw_amount("-1") == "-0.000000000000000001"
        assert convert_raw_amount("-1500000000000000000") == "-1.500000000000000000"

    def test_negative_zero_is_plain_zero(self):
        assert convert_raw_amount("-0") == "0.000000000000000000"
        assert not is_negative_raw_amount("-0")

    def test_is_negative(self):
        assert is_negative_raw_amount("-42")
        assert not is_negative_raw_amount("42")
        assert not is_negative_raw_amount("abc")


class TestMalformedAmounts:

    @pytest.mark.parametrize("raw", ["", "abc", "1.5", "1e18", " 12", "12 ", "1_000", "0x10", "--1", "+", "NaN", "Infinity", None, 12])
    def test_rejected(self, raw):
        with pytest.raises(InvalidRawAmountError) as exc_info:
            convert_raw_amount(raw)
        assert exc_info.value.raw_value == raw

    def test_error_is_a_value_error(self):
        with pytest.raises(ValueError):
            raw_amount_to_decimal("abc")


class TestRawAmountToDecimal:

    def test_exponent_is_fixed(self):
        value = raw_amount_to_decimal("5")
        assert value == Decimal("0.000000000000000005")
        assert value.as_tuple().exponent == -18

    def test_exact_for_long_values(self):
        value = raw_amount_to_decimal("1" * 50)
        assert format(value, "f").replace(".", "") == "1" * 50
