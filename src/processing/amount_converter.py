# src/processing/amount_converter.py
from decimal import Decimal, Context, MAX_EMAX, MIN_EMIN, ROUND_HALF_UP
from typing import Any

import src.config as config
from src.domain.errors import InvalidRawAmountError
from src.utils.type_utils import is_base10_integer_string, split_signed_digits

DEFAULT_TOKEN_DECIMALS = config.TOKEN_DECIMALS


def _exact_context(digit_count: int) -> Context:
    """
    A context wide enough to hold every digit of the coefficient, so scaling never rounds.
    """
    return Context(prec=max(digit_count, 1), rounding=ROUND_HALF_UP, Emax=MAX_EMAX, Emin=MIN_EMIN)


def raw_amount_to_decimal(raw_amount: Any, decimals: int = DEFAULT_TOKEN_DECIMALS) -> Decimal:
    """
    Returns raw_amount / 10**decimals as an exact Decimal with exponent -decimals.
    raw_amount must be a base-10 integer string of any length. The string goes
    straight into Decimal (no int() round trip) so there is no digit limit and
    no float anywhere.
    Raises InvalidRawAmountError for anything that is not a base-10 integer string.
    """
    if decimals < 0:
        raise ValueError(f"decimals cannot be negative: {decimals}")
    if not is_base10_integer_string(raw_amount):
        raise InvalidRawAmountError(f"raw amount {raw_amount!r} is not a base-10 integer", raw_value=raw_amount)

    is_negative, digits = split_signed_digits(raw_amount)
    ctx = _exact_context(len(digits))
    coefficient = Decimal(f"-{digits}" if is_negative else digits)
    return coefficient.scaleb(-decimals, context=ctx)


def convert_raw_amount(raw_amount: Any, decimals: int = DEFAULT_TOKEN_DECIMALS) -> str:
    """
    Converts a raw integer token amount (smallest on-chain unit) into a plain
    decimal string with exactly `decimals` fractional digits.

        convert_raw_amount("1234567890123456789") -> "1.234567890123456789"
        convert_raw_amount("5")                   -> "0.000000000000000005"
        convert_raw_amount("-1")                  -> "-0.000000000000000001"

    No thousands separators, no exponent notation, '.' as decimal separator.
    """
    value = raw_amount_to_decimal(raw_amount, decimals)
    # 'f' without a precision renders the coefficient at its own exponent, i.e. exactly `decimals` places
    return format(value, "f")


def is_negative_raw_amount(raw_amount: Any) -> bool:
    """True for well-formed raw amounts below zero. Malformed input is never reported as negative."""
    if not is_base10_integer_string(raw_amount):
        return False
    is_negative, _ = split_signed_digits(raw_amount)
    return is_negative
