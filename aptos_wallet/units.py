"""Exact conversion between decimal amount strings and integer base units.

A token with ``decimals`` of precision stores ``display * 10**decimals`` as an
integer on the ledger. Both directions work on Python integers only, so any
amount at any precision converts without binary floating point error.
"""

import re

from aptos_wallet.exceptions import InvalidDecimalsError, InvalidDecimalStringError

# Native APT coin precision (1 APT = 10^8 octas)
APT_DECIMALS = 8

# [-]digits[.digits], with a bare leading or trailing point allowed
_DECIMAL_RE = re.compile(r"-?(?:[0-9]+\.?[0-9]*|\.[0-9]+)")

# CPython refuses int <-> str conversions above 4300 digits by default
_CHUNK_DIGITS = 4000
_CHUNK = 10**_CHUNK_DIGITS


def _digits_to_int(digits: str) -> int:
    value = 0
    for start in range(0, len(digits), _CHUNK_DIGITS):
        chunk = digits[start : start + _CHUNK_DIGITS]
        value = value * 10 ** len(chunk) + int(chunk)
    return value


def _int_to_digits(value: int) -> str:
    """Decimal digits of a non-negative integer of any size."""
    chunks = []
    while value >= _CHUNK:
        value, low = divmod(value, _CHUNK)
        chunks.append(str(low).rjust(_CHUNK_DIGITS, "0"))
    chunks.append(str(value))
    return "".join(reversed(chunks))


def _check_decimals(decimals: int) -> None:
    if isinstance(decimals, bool) or not isinstance(decimals, int) or decimals < 0:
        raise InvalidDecimalsError(decimals)


def format_units(value: int, decimals: int) -> str:
    """Render an integer base-unit amount as a decimal string.

    Never loses precision: only genuine trailing zeros of the fraction are
    dropped, and the point is omitted when nothing remains after it.

    Args:
        value: Amount in base units (may be negative).
        decimals: Token precision.

    Returns:
        The decimal representation, e.g. ``format_units(-50000000, 8) == "-0.5"``.

    Raises:
        TypeError: If value is not an integer.
        InvalidDecimalsError: If decimals is negative or not an integer.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"value must be an int, got {type(value).__name__}")
    _check_decimals(decimals)

    digits = _int_to_digits(abs(value)).rjust(decimals, "0")
    split = len(digits) - decimals
    integer, fraction = digits[:split], digits[split:].rstrip("0")

    sign = "-" if value < 0 else ""
    if fraction:
        return f"{sign}{integer or '0'}.{fraction}"
    return f"{sign}{integer or '0'}"


def parse_units(value: str, decimals: int) -> int:
    """Parse a decimal amount string into integer base units.

    Fractions longer than ``decimals`` are rounded half away from zero on the
    first dropped digit; a carry may ripple into the integer part
    (``parse_units("1.999999999", 8) == 200000000``). With ``decimals == 0``
    the whole fraction is rounded away (``parse_units("0.6", 0) == 1``).

    Args:
        value: Amount string of the form ``[-]digits[.digits]``.
        decimals: Token precision.

    Returns:
        The amount in base units.

    Raises:
        InvalidDecimalStringError: If value is not a decimal string.
        InvalidDecimalsError: If decimals is negative or not an integer.
    """
    _check_decimals(decimals)
    if not isinstance(value, str) or _DECIMAL_RE.fullmatch(value) is None:
        raise InvalidDecimalStringError(value)

    negative = value.startswith("-")
    integer, _, fraction = value.lstrip("-").partition(".")
    fraction = fraction.rstrip("0")

    kept, dropped = fraction[:decimals], fraction[decimals:]
    units = _digits_to_int(integer + kept.ljust(decimals, "0"))
    # Trailing zeros are gone, so a non-empty remainder is never all zeros
    if dropped and dropped[0] >= "5":
        units += 1

    return -units if negative else units
