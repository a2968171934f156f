# Argtree CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Collects parse failures and renders them as error text.

Diagnostics are keyed by `(category, kind, short_name, name)`. The parser
seeds one MISSING_REQUIRED_ARGUMENT entry per required argument when it enters
a command level and removes the entry as soon as the argument is seen, so the
entries left at the end of a parse are exactly what went wrong.

Rendering groups entries by category:

    tool: error: option -t/--target expected 1 argument
    tool: error: the following arguments are required: SRC, -o/--out
    tool: error: unrecognized option: --bogus
    tool: error: internal error - invalid argument string detected
"""
from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from typing import Iterator

from argtree.logger import logger
from argtree.parser.formatter import Formatter
from argtree.parser.parser_types import ArgumentKind, ErrorCategory

DiagnosticKey = tuple[ErrorCategory, ArgumentKind, str | None, str]


@dataclass(frozen=True)
class Diagnostic:
    """
    A single parse failure.

    Attributes:
        category (ErrorCategory): What went wrong.
        kind (ArgumentKind): The kind of argument it concerns.
        short_name (str | None): Short flag of the option, if any.
        name (str): Long name, positional name, or the offending raw text.
        value (int): Integer payload, e.g. the expected number of arguments.
    """

    category: ErrorCategory
    kind: ArgumentKind
    short_name: str | None
    name: str
    value: int = 0

    @property
    def key(self) -> DiagnosticKey:
        return (self.category, self.kind, self.short_name, self.name)

    @property
    def flag_name(self) -> str:
        """Display form of an option, e.g. `-o/--out`."""
        if self.short_name and self.name:
            return f"-{self.short_name}/--{self.name}"
        if self.short_name:
            return f"-{self.short_name}"
        return f"--{self.name}"

    @property
    def display_name(self) -> str:
        if self.kind in (ArgumentKind.OPTION, ArgumentKind.OPTION_AT_LEAST):
            return self.flag_name
        return self.name

    def message(self) -> str:
        """Render this diagnostic as a single message without the program prefix."""
        if self.category is ErrorCategory.MISSING_REQUIRED_ARGUMENT:
            return f"the following arguments are required: {self.display_name}"
        if self.category is ErrorCategory.INVALID_ARITY:
            at_least = "at least " if self.kind is ArgumentKind.OPTION_AT_LEAST else ""
            plural = "s" if self.value > 1 else ""
            return (
                f"option {self.flag_name} expected {at_least}{self.value} argument{plural}"
            )
        if self.category is ErrorCategory.UNRECOGNIZED_ARGUMENT:
            return f"unrecognized {self.kind.label}: {self.name}"
        return f"internal error - {self.name}"


class Diagnostics:
    """
    Bounded collection of `Diagnostic`s.

    Args:
        capacity (int): Maximum number of entries. Entries added beyond it are
            dropped with a logged warning.
    """

    def __init__(self, capacity: int = 64) -> None:
        self.capacity = capacity
        self._entries: list[Diagnostic] = []
        self.dropped = 0

    def add(
        self,
        category: ErrorCategory,
        kind: ArgumentKind,
        short_name: str | None,
        name: str,
        value: int = 0,
    ) -> Diagnostic | None:
        """Record a diagnostic. Returns None if the collection is full."""
        if len(self._entries) >= self.capacity:
            self.dropped += 1
            logger.warning(
                "[Diagnostics] Too many errors (capacity %d), dropping: %s",
                self.capacity,
                name,
            )
            return None
        diagnostic = Diagnostic(category, kind, short_name, name, value)
        self._entries.append(diagnostic)
        return diagnostic

    def remove(
        self,
        category: ErrorCategory,
        kind: ArgumentKind,
        short_name: str | None,
        name: str,
    ) -> bool:
        """Remove the first entry with the given key. Order of the rest is not kept."""
        key = (category, kind, short_name, name)
        for index, diagnostic in enumerate(self._entries):
            if diagnostic.key == key:
                self._entries[index] = self._entries[-1]
                self._entries.pop()
                return True
        return False

    def find(self, category: ErrorCategory) -> list[Diagnostic]:
        return [entry for entry in self._entries if entry.category is category]

    def grouped(self) -> list[tuple[ErrorCategory, list[Diagnostic]]]:
        """Entries bucketed by category, in ascending category order."""
        buckets: dict[ErrorCategory, list[Diagnostic]] = defaultdict(list)
        for entry in self._entries:
            buckets[entry.category].append(entry)
        return [(category, buckets[category]) for category in sorted(buckets)]

    def render(self, program_name: str, formatter: Formatter) -> int:
        """Write all entries as error text, returning characters written."""
        start = len(formatter)
        prefix = f"{program_name}: error: "
        for category, entries in self.grouped():
            if category is ErrorCategory.MISSING_REQUIRED_ARGUMENT:
                names = ", ".join(entry.display_name for entry in entries)
                formatter.printf(
                    "%sthe following arguments are required: %s\n", prefix, names
                )
                continue
            for entry in entries:
                formatter.printf("%s%s\n", prefix, entry.message())
        return len(formatter) - start

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def __repr__(self) -> str:
        return f"Diagnostics({self._entries!r})"
