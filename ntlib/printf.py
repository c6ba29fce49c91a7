"""A small formatted printer writing to standard output."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any

from ntlib.conversion import (
    BASE_10,
    BASE_OCTAL,
    HEX_LOWER,
    HEX_UPPER,
    MAX_INT,
    MIN_INT,
    itoa,
)

_U32_MASK = (1 << 32) - 1
_U64_MASK = (1 << 64) - 1


def _in_base(number: int, base: str) -> str:
    radix = len(base)
    sign = "-" if number < 0 else ""
    number = abs(number)
    digits = [base[number % radix]]
    number //= radix
    while number:
        digits.append(base[number % radix])
        number //= radix
    return sign + "".join(reversed(digits))


def _int_arg(arg: Any, spec: str) -> int:
    if isinstance(arg, bool) or not isinstance(arg, int):
        raise TypeError(f"%{spec} expects an integer, got {type(arg).__name__}")
    return arg


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    try:
        arg = next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None
    if spec == "c":
        if isinstance(arg, str):
            if len(arg) != 1:
                raise TypeError("%c expects a single character")
            return arg
        return chr(_int_arg(arg, spec) & 0xFF)
    if spec in ("d", "i"):
        n = _int_arg(arg, spec)
        if not MIN_INT <= n <= MAX_INT:
            raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
        return itoa(n)
    if spec == "s":
        if not isinstance(arg, str):
            raise TypeError("%s expects a string")
        return arg
    if spec == "p":
        address = arg if isinstance(arg, int) and not isinstance(arg, bool) else id(arg)
        return "0x" + _in_base(address & _U64_MASK, HEX_LOWER)
    if spec == "x":
        return _in_base(_int_arg(arg, spec) & _U32_MASK, HEX_LOWER)
    if spec == "X":
        return _in_base(_int_arg(arg, spec) & _U32_MASK, HEX_UPPER)
    if spec == "u":
        return _in_base(_int_arg(arg, spec) & _U64_MASK, BASE_10)
    if spec == "o":
        return _in_base(_int_arg(arg, spec) & _U32_MASK, BASE_OCTAL)
    raise ValueError(f"unknown conversion specifier %{spec}")


def _render(fmt: str, args: tuple[Any, ...]) -> str:
    pieces = []
    arg_iter = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        pieces.append(_convert(spec, arg_iter))
    return "".join(pieces)


def printf(fmt: str, *args: Any) -> int:
    """Format ``args`` according to ``fmt`` and write to standard output.

    Supports %c %d %i %s %p %x %X %u %o and %%. Returns the number of
    characters written. Nothing is written if formatting fails.
    """
    if not fmt:
        raise ValueError("format string must not be empty")
    text = _render(fmt, args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text)