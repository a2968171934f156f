# Argtree CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Enums and small value types shared across the argtree parser.

Contents:
- `Status`: Terminal status of a parse or a run callback.
- `TokenType`: Semantic class of a single raw argument.
- `ArgumentKind`: The kind of argument a diagnostic refers to.
- `ErrorCategory`: Diagnostic categories, in rendering order.
- `Token`: A classified raw argument.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum


class Status(Enum):
    """Outcome of `parse`, `run` and `run_all`."""

    SUCCESS = "success"
    ERROR = "error"
    HELP = "help"

    def __str__(self) -> str:
        return self.value


class TokenType(Enum):
    SHORT_OPTION = "short_option"
    LONG_OPTION = "long_option"
    POSITIONAL = "positional"
    SUBCOMMAND = "subcommand"
    DELIMITER = "delimiter"
    INVALID = "invalid"


class ArgumentKind(Enum):
    """
    The kind of argument a diagnostic concerns.

    `OPTION_AT_LEAST` marks arity failures of "N or more" options so the
    rendered message can say "at least".
    """

    OPTION = "option"
    OPTION_AT_LEAST = "option_at_least"
    POSITIONAL = "positional"
    SUBCOMMAND = "subcommand"
    INVALID = "invalid"

    @property
    def label(self) -> str:
        """Return the word used for this kind in error messages."""
        if self in (ArgumentKind.OPTION, ArgumentKind.OPTION_AT_LEAST):
            return "option"
        if self is ArgumentKind.INVALID:
            return "<#INVALID>"
        return self.value


class ErrorCategory(IntEnum):
    """Diagnostic categories. Rendering groups diagnostics by ascending value."""

    INVALID_ARITY = 1
    MISSING_REQUIRED_ARGUMENT = 2
    UNRECOGNIZED_ARGUMENT = 3
    INTERNAL = 4


@dataclass(frozen=True)
class Token:
    """A raw argument together with its classification."""

    type: TokenType
    value: str = ""
    raw: str | None = None

    @property
    def is_option(self) -> bool:
        return self.type in (TokenType.SHORT_OPTION, TokenType.LONG_OPTION)
