# Argtree CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Result types produced by `argtree.parse`.

- `ParsedOption`: one option occurrence and the arguments it consumed.
- `CommandResult`: what was bound at one level of the command chain.
- `ParseResult`: the whole parse: every level, the flat option list, the
  terminal status, diagnostics and rendered usage/error text.

Consumed argument strings are the very `str` objects from `argv`; nothing is
copied.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable

from argtree.parser.arity import Arity
from argtree.parser.diagnostics import Diagnostics
from argtree.parser.parser_types import Status

if TYPE_CHECKING:
    from argtree.command import Command


@dataclass(frozen=True)
class ParsedOption:
    """
    An option as it appeared on the command line.

    Attributes:
        short_name (str | None): Declared short flag.
        long_name (str): Declared long name.
        nargs (int): Number of arguments actually consumed.
        args (tuple[str, ...]): The consumed arguments.
        index (int): Position of the option token in `argv`.
        arity (Arity | None): The declared arity.
    """

    short_name: str | None
    long_name: str
    nargs: int
    args: tuple[str, ...]
    index: int
    arity: Arity | None = None

    @property
    def value(self) -> str | None:
        """First consumed argument, or None for flags."""
        return self.args[0] if self.args else None

    def matches(self, name: str) -> bool:
        if len(name) == 1:
            return self.short_name == name
        return self.long_name == name


@dataclass
class CommandResult:
    """Positionals and options bound at one level of the command chain."""

    name: str | None
    spec: Command
    positionals: list[str] = field(default_factory=list)
    options: list[ParsedOption] = field(default_factory=list)
    run: Callable[..., Any] | None = None

    @property
    def all_positionals_bound(self) -> bool:
        return len(self.positionals) >= len(self.spec.positionals)

    def has_option(self, name: str) -> bool:
        return self.get_option(name) is not None

    def get_option(self, name: str) -> ParsedOption | None:
        """
        Return the first occurrence of an option.

        A single character is matched against short names, anything longer
        against long names exactly.
        """
        return next((option for option in self.options if option.matches(name)), None)

    def get_options(self, name: str) -> list[ParsedOption]:
        return [option for option in self.options if option.matches(name)]

    def has_positional(self, index: int) -> bool:
        return 0 <= index < len(self.positionals)

    def get_positional(self, index: int) -> str | None:
        if not self.has_positional(index):
            return None
        return self.positionals[index]

    def as_dict(self) -> dict[str, Any]:
        """Bound values keyed by positional name and option long name."""
        values: dict[str, Any] = {
            positional.name: value
            for positional, value in zip(self.spec.positionals, self.positionals)
        }
        for option in self.options:
            values[option.long_name] = option.args if option.args else True
        return values


@dataclass
class ParseResult:
    """
    Outcome of a single `parse` call.

    `usage` is always rendered. `error` is rendered only when `status` is
    `Status.ERROR`. `remainder` holds the arguments after a `--` delimiter.
    """

    program_name: str
    program_path: str
    options: list[ParsedOption] = field(default_factory=list)
    commands: list[CommandResult] = field(default_factory=list)
    diagnostics: Diagnostics = field(default_factory=Diagnostics)
    status: Status = Status.SUCCESS
    usage: str = ""
    error: str = ""
    remainder: list[str] = field(default_factory=list)

    @property
    def commands_count(self) -> int:
        return len(self.commands)

    @property
    def program_command(self) -> CommandResult | None:
        """Result for the root command."""
        return self.commands[0] if self.commands else None

    @property
    def command(self) -> CommandResult | None:
        """Result for the deepest command reached."""
        return self.commands[-1] if self.commands else None

    def get_command(self, name: str) -> CommandResult | None:
        return next((command for command in self.commands if command.name == name), None)

    @property
    def chain(self) -> list[Command]:
        return [command.spec for command in self.commands]

    @property
    def ok(self) -> bool:
        return self.status is Status.SUCCESS
