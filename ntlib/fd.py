"""Writing to and reading lines from raw file descriptors."""

from __future__ import annotations

import os

from ntlib.conversion import MAX_INT, MIN_INT, itoa


def putchar_fd(c: str, fd: int) -> int:
    """Write one character to ``fd``; return the number of bytes written."""
    if len(c) != 1:
        raise ValueError("putchar_fd expects exactly one character")
    return os.write(fd, c.encode())


def putstr_fd(s: str, fd: int) -> int:
    """Write a string to ``fd``; return the number of bytes written."""
    if s is None:
        raise TypeError("putstr_fd expects a string, not None")
    return os.write(fd, s.encode())


def putnbr_fd(n: int, fd: int) -> int:
    """Write a 32-bit signed integer in decimal; return bytes written."""
    if not MIN_INT <= n <= MAX_INT:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return putstr_fd(itoa(n), fd)


def read_line(fd: int) -> str | None:
    """Read one line (without its newline) from ``fd``.

    Returns ``None`` at end of input when nothing was read.
    """
    if fd < 0:
        raise ValueError("invalid file descriptor")
    data = bytearray()
    while True:
        byte = os.read(fd, 1)
        if not byte:
            if not data:
                return None
            break
        if byte == b"\n":
            break
        data += byte
    return data.decode(errors="surrogateescape")


def read_lines(fd: int) -> list[str]:
    """Read every remaining line from ``fd``."""
    lines = []
    while (line := read_line(fd)) is not None:
        lines.append(line)
    return lines