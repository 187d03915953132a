# src/utils/type_utils.py
import re
from typing import Any, Optional

# Base-10 integer with an optional sign. No whitespace, no underscores, no exponent.
_BASE10_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def is_base10_integer_string(value: Any) -> bool:
    """True if value is a str holding nothing but an optionally signed run of ASCII digits."""
    return isinstance(value, str) and _BASE10_INTEGER_PATTERN.fullmatch(value) is not None


def split_signed_digits(value: str) -> tuple[bool, str]:
    """
    Splits a validated base-10 integer string into (is_negative, digits).
    Leading zeros are stripped, zero is returned as '0' and never negative.
    Raises ValueError if value is not a base-10 integer string.
    """
    if not is_base10_integer_string(value):
        raise ValueError(f"Not a base-10 integer: {value!r}")
    is_negative = value.startswith("-")
    digits = value.lstrip("+-").lstrip("0") or "0"
    if digits == "0":
        is_negative = False
    return is_negative, digits


def safe_int(value: Any, default: Optional[int] = None, raise_error: bool = False) -> Optional[int]:
    """
    Strictly converts a value to an int.
    Accepts ints (bools excluded) and base-10 integer strings only; floats and
    float-looking strings are rejected rather than truncated.
    If raise_error is True, raises ValueError instead of returning default.
    """
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if is_base10_integer_string(value):
        return int(value)
    if raise_error:
        raise ValueError(f"Not a base-10 integer: {value!r}")
    return default


def optional_str(value: Any) -> Optional[str]:
    """Normalizes JSON scalars to str, keeping None and empty strings as None."""
    if value is None:
        return None
    s_value = str(value).strip()
    return s_value or None
