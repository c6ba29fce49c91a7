"""A growable character buffer with an explicit, doubling capacity."""

from __future__ import annotations

INIT_CAPACITY = 16


class CharBuffer:
    """Accumulates characters one at a time, doubling its capacity when full.

    The capacity always stays strictly greater than the number of stored
    characters, which leaves room for a terminator.
    """

    def __init__(self, capacity: int = INIT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._chars: list[str] = []

    def add_char(self, c: str) -> None:
        """Append a single character, growing the capacity if needed."""
        if len(c) != 1:
            raise ValueError("add_char expects exactly one character")
        if self.capacity <= 0:
            self.capacity = INIT_CAPACITY
        if len(self._chars) + 1 >= self.capacity:
            self.capacity *= 2
        self._chars.append(c)

    def __len__(self) -> int:
        return len(self._chars)

    def __str__(self) -> str:
        return "".join(self._chars)

    def __repr__(self) -> str:
        return f"CharBuffer({str(self)!r}, capacity={self.capacity})"