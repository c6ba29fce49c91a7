"""Integer to text conversions."""

from __future__ import annotations

MIN_INT = -2147483648
MAX_INT = 2147483647
MIN_INT_STR = "-2147483648"

BASE_OCTAL = "01234567"
BASE_10 = "0123456789"
HEX_LOWER = "0123456789abcdef"
HEX_UPPER = "0123456789ABCDEF"

_U64_MASK = (1 << 64) - 1


def itochar(n: int) -> str:
    """Return the character for the decimal digit ``n``."""
    if not 0 <= n <= 9:
        raise ValueError(f"not a decimal digit: {n}")
    return chr(n + ord("0"))


def itoa(value: int) -> str:
    """Return the decimal representation of ``value``."""
    if value == 0:
        return "0"
    if value == MIN_INT:
        return MIN_INT_STR
    digits = []
    magnitude = abs(value)
    while magnitude:
        magnitude, digit = divmod(magnitude, 10)
        digits.append(itochar(digit))
    if value < 0:
        digits.append("-")
    return "".join(reversed(digits))


def itohex(value: int, base: str) -> str:
    """Return ``value`` as an unsigned 64-bit number written with ``base``.

    ``base`` supplies the 16 digit characters, e.g. :data:`HEX_LOWER`.
    """
    if len(base) < 16:
        raise ValueError("base must provide at least 16 digits")
    value &= _U64_MASK
    digits = [base[value & 0xF]]
    value >>= 4
    while value:
        digits.append(base[value & 0xF])
        value >>= 4
    return "".join(reversed(digits))