# Argtree CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the `Positional` and `Option` models that make up the argument
surface of an argtree `Command`.

Both are frozen pydantic models: a specification is built once by the caller
and only ever read by the parser.

Key Attributes:
- `Positional.name`: Name shown in usage and in missing-argument errors.
- `Option.short_name`: Optional single character (`-v`).
- `Option.long_name`: Required long name without dashes (`verbose`).
- `Option.nargs`: An `Exactly` or `AtLeast` arity (shorthand accepted).
- `Option.required`: Whether the option must appear.

Specification files may use `short` / `long` in place of the field names.
"""
from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from argtree.parser.arity import Arity, Exactly, coerce_arity


class Positional(BaseModel):
    """
    A positional argument, bound by position rather than by flag.

    Every declared positional is required. Positionals bind in declaration
    order and take precedence over subcommand dispatch.
    """

    name: str
    help: str = ""

    model_config = ConfigDict(frozen=True)

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("positional name must not be empty")
        if value.startswith("-"):
            raise ValueError(f"positional name '{value}' must not start with '-'")
        return value


class Option(BaseModel):
    """
    A flagged argument such as `-o/--output`.

    Attributes:
        long_name (str): Long flag name without the leading `--`.
        short_name (str | None): Single character short flag without the `-`.
        help (str): Help text shown in the Options block.
        nargs (Arity): Number of arguments consumed after the flag.
        required (bool): True if the option must be supplied.
    """

    long_name: str = Field(validation_alias=AliasChoices("long_name", "long"))
    short_name: str | None = Field(
        default=None, validation_alias=AliasChoices("short_name", "short")
    )
    help: str = ""
    nargs: Arity = Field(default_factory=Exactly)
    required: bool = False

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @field_validator("nargs", mode="before")
    @classmethod
    def validate_nargs(cls, value: object) -> Arity:
        return coerce_arity(value)

    @field_validator("long_name")
    @classmethod
    def validate_long_name(cls, value: str) -> str:
        if not value:
            raise ValueError("long_name must not be empty")
        if value.startswith("-"):
            raise ValueError(
                f"long_name '{value}' must be given without leading dashes"
            )
        if any(char.isspace() for char in value):
            raise ValueError(f"long_name '{value}' must not contain whitespace")
        return value

    @field_validator("short_name")
    @classmethod
    def validate_short_name(cls, value: str | None) -> str | None:
        if value is None:
            return None
        if len(value) != 1:
            raise ValueError(f"short_name '{value}' must be a single character")
        if value == "-" or value.isspace():
            raise ValueError(f"short_name '{value}' is not a valid flag character")
        return value

    @property
    def label(self) -> str:
        """Flags as shown in the Options block, e.g. `-o, --output`."""
        if self.short_name:
            return f"-{self.short_name}, --{self.long_name}"
        return f"--{self.long_name}"

    @property
    def display_name(self) -> str:
        """Flags as shown in error messages, e.g. `-o/--output`."""
        if self.short_name:
            return f"-{self.short_name}/--{self.long_name}"
        return f"--{self.long_name}"

    def display_length(self) -> int:
        """Width of `label`, used to compute the help column."""
        return len(self.label)
