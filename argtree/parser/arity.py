# Argtree CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Option arity (`nargs`) for argtree.

An option consumes either an exact number of following arguments or a minimum
number followed by any further arguments up to the next dash-prefixed
argument:

- `Exactly(n)`: exactly `n` arguments, taken without inspecting their content.
- `AtLeast(n)`: `n` or more arguments, stopping at the next argument that
  begins with `-` or at the end of input.

`coerce_arity()` accepts the shorthand used in specification files:

    coerce_arity(2)     → Exactly(2)
    coerce_arity("2+")  → AtLeast(2)
    coerce_arity("+")   → AtLeast(1)
    coerce_arity("*")   → AtLeast(0)
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class Exactly:
    """Consume exactly `n` arguments."""

    n: int = 0

    def __post_init__(self) -> None:
        if not isinstance(self.n, int) or isinstance(self.n, bool) or self.n < 0:
            raise ValueError(f"Exactly() requires a non-negative integer, got {self.n!r}")

    @property
    def minimum(self) -> int:
        return self.n

    @property
    def variadic(self) -> bool:
        return False

    def __str__(self) -> str:
        return str(self.n)


@dataclass(frozen=True)
class AtLeast:
    """Consume `n` or more arguments."""

    n: int = 0

    def __post_init__(self) -> None:
        if not isinstance(self.n, int) or isinstance(self.n, bool) or self.n < 0:
            raise ValueError(f"AtLeast() requires a non-negative integer, got {self.n!r}")

    @property
    def minimum(self) -> int:
        return self.n

    @property
    def variadic(self) -> bool:
        return True

    def __str__(self) -> str:
        return f"{self.n}+"


Arity = Union[Exactly, AtLeast]


def coerce_arity(value: Any) -> Arity:
    """
    Convert an arity shorthand to an `Exactly` or `AtLeast` instance.

    Args:
        value (Any): An arity instance, a non-negative int, or one of
            `"N"`, `"N+"`, `"+"`, `"*"`.

    Returns:
        Arity: The corresponding arity.

    Raises:
        ValueError: If the value is not a recognised arity.
    """
    if isinstance(value, (Exactly, AtLeast)):
        return value
    if value is None:
        return Exactly(0)
    if isinstance(value, bool):
        raise ValueError(f"Invalid nargs value: {value!r}")
    if isinstance(value, int):
        return Exactly(value)
    if isinstance(value, str):
        text = value.strip()
        if text == "+":
            return AtLeast(1)
        if text == "*":
            return AtLeast(0)
        if text.endswith("+") and text[:-1].isdigit():
            return AtLeast(int(text[:-1]))
        if text.isdigit():
            return Exactly(int(text))
    raise ValueError(
        f"Invalid nargs value: {value!r}. Use an integer, 'N+', '+' or '*'."
    )
