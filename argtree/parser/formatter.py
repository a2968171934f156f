# Argtree CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Bounded text sink used to render usage and error text.

A `Formatter` accepts text until its capacity is reached and silently
truncates anything beyond it. Every write returns the number of characters
actually stored so callers can track how much of a message made it out.
"""
from __future__ import annotations

from typing import Any


class Formatter:
    """
    Append-only text buffer with a fixed capacity.

    Args:
        capacity (int): Maximum number of characters the buffer holds.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")
        self.capacity = capacity
        self._parts: list[str] = []
        self._length = 0
        self.truncated = False

    def puts(self, text: str) -> int:
        """Append `text`, returning how many characters were written."""
        if not text:
            return 0
        room = self.capacity - self._length
        if room <= 0:
            self.truncated = True
            return 0
        if len(text) > room:
            text = text[:room]
            self.truncated = True
        self._parts.append(text)
        self._length += len(text)
        return len(text)

    def printf(self, fmt: str, *args: Any) -> int:
        """Append `fmt % args`."""
        return self.puts(fmt % args if args else fmt)

    def putc(self, char: str) -> int:
        return self.puts(char[:1])

    def pad(self, column: int, label_width: int) -> int:
        """Write spaces so text of width `label_width` ends at `column`."""
        return self.puts(" " * max(column - label_width, 0))

    @property
    def remaining(self) -> int:
        return self.capacity - self._length

    def getvalue(self) -> str:
        return "".join(self._parts)

    def __len__(self) -> int:
        return self._length

    def __str__(self) -> str:
        return self.getvalue()
