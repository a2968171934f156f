# Argtree CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""command.py

Defines the `Command` specification model for argtree.

A `Command` is one node of a program's command tree: an optional name, help
text, its positionals and options, its subcommands and an optional run
callback. Trees are declared once by the caller (in code or in a YAML/TOML
specification file) and are only ever read by the parser.

Validation happens at construction time. Specification-authoring mistakes,
such as duplicate flags or a flag that shadows the built-in `-h/--help`,
raise `pydantic.ValidationError` instead of surfacing as parse errors.

Example:
    cli = Command(
        name="tool",
        help="Does things",
        options=[Option(short_name="v", long_name="verbose")],
        subcommands=[
            Command(
                name="build",
                options=[Option(long_name="target", nargs=1, required=True)],
                run=build,
            )
        ],
    )
"""
from __future__ import annotations

from typing import Any, Callable

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from argtree.parser.argument import Option, Positional
from argtree.parser.parser_types import Token, TokenType
from argtree.utils import import_callback

HELP_SHORT_NAME = "h"
HELP_LONG_NAME = "help"


class Command(BaseModel):
    """
    Represents one level of a command tree.

    Attributes:
        name (str | None): Command name. The root may be unnamed, in which case
            the program name is used for display.
        help (str | None): Help text shown under the usage line.
        positionals (tuple[Positional, ...]): Positionals in binding order.
        options (tuple[Option, ...]): Options declared at this level.
        subcommands (tuple[Command, ...]): Child commands.
        run (Callable | None): Callback invoked by `run` / `run_all`. May be
            given as a dotted import path.
    """

    name: str | None = None
    help: str | None = None
    positionals: tuple[Positional, ...] = Field(default_factory=tuple)
    options: tuple[Option, ...] = Field(default_factory=tuple)
    subcommands: tuple[Command, ...] = Field(default_factory=tuple)
    run: Callable[..., Any] | None = None

    model_config = ConfigDict(frozen=True)

    @field_validator("run", mode="before")
    @classmethod
    def resolve_run(cls, value: Any) -> Any:
        if isinstance(value, str):
            return import_callback(value)
        return value

    @model_validator(mode="after")
    def validate_arguments(self) -> Command:
        long_names: set[str] = set()
        short_names: set[str] = set()
        for option in self.options:
            if option.long_name == HELP_LONG_NAME or option.short_name == HELP_SHORT_NAME:
                raise ValueError(
                    f"Option '{option.display_name}' conflicts with the built-in -h/--help"
                )
            if option.long_name in long_names:
                raise ValueError(f"Flag '--{option.long_name}' is already used")
            if option.short_name and option.short_name in short_names:
                raise ValueError(f"Flag '-{option.short_name}' is already used")
            long_names.add(option.long_name)
            if option.short_name:
                short_names.add(option.short_name)

        positional_names = [positional.name for positional in self.positionals]
        if len(set(positional_names)) != len(positional_names):
            raise ValueError(f"Duplicate positional names in {positional_names}")

        subcommand_names: set[str] = set()
        for subcommand in self.subcommands:
            if not subcommand.name:
                raise ValueError("Subcommands must have a name")
            if subcommand.name.startswith("-"):
                raise ValueError(
                    f"Subcommand name '{subcommand.name}' must not start with '-'"
                )
            if subcommand.name in subcommand_names:
                raise ValueError(f"Subcommand '{subcommand.name}' is already defined")
            subcommand_names.add(subcommand.name)
        return self

    def depth(self) -> int:
        """Return the nesting depth of this tree. A command without subcommands is 1."""
        if not self.subcommands:
            return 1
        return 1 + max(subcommand.depth() for subcommand in self.subcommands)

    def find_option(self, token: Token) -> Option | None:
        """
        Look up the option named by an option token.

        Short tokens match a declared short name exactly. Long tokens match an
        exact long name first. Failing that, the first declared long name that
        starts with the token value is used, so `--out` finds `--output`.
        """
        value = token.value
        if not value:
            return None
        if token.type == TokenType.SHORT_OPTION:
            for option in self.options:
                if option.short_name == value:
                    return option
        elif token.type == TokenType.LONG_OPTION:
            for option in self.options:
                if option.long_name == value:
                    return option
        else:
            return None
        return next(
            (option for option in self.options if option.long_name.startswith(value)),
            None,
        )

    def find_subcommand(self, value: str) -> Command | None:
        """Return the subcommand called `value`, or the first one it abbreviates."""
        if not value:
            return None
        for subcommand in self.subcommands:
            if subcommand.name == value:
                return subcommand
        return next(
            (
                subcommand
                for subcommand in self.subcommands
                if subcommand.name and subcommand.name.startswith(value)
            ),
            None,
        )

    def required_options(self) -> list[Option]:
        return [option for option in self.options if option.required]

    def __str__(self) -> str:
        return (
            f"Command(name={self.name!r}, positionals={len(self.positionals)}, "
            f"options={len(self.options)}, subcommands={len(self.subcommands)})"
        )
