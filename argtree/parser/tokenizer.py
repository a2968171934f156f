# Argtree CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Classifies raw command-line arguments into `Token`s.

Classification depends only on the raw string and on two facts about the
current command level: whether all of its positionals are bound and whether a
subcommand has already been dispatched from it.

    -v          → SHORT_OPTION  ("v")
    -abc        → SHORT_OPTION  ("a")   no bundling
    --output    → LONG_OPTION   ("output")
    --          → DELIMITER
    build       → SUBCOMMAND or POSITIONAL
    ---x        → SUBCOMMAND or POSITIONAL
"""
from __future__ import annotations

from dataclasses import dataclass

from argtree.parser.parser_types import Token, TokenType


@dataclass(frozen=True)
class LevelState:
    """Read-only view of a command level used by `classify`."""

    all_positionals_bound: bool = False
    subcommand_dispatched: bool = False


def leading_dashes(raw: str) -> int:
    return len(raw) - len(raw.lstrip("-"))


def classify(state: LevelState, raw: str | None) -> Token:
    """Classify a single raw argument for the given level state."""
    if not raw:
        return Token(TokenType.INVALID, "", raw)

    dashes = leading_dashes(raw)
    if dashes == 1:
        return Token(TokenType.SHORT_OPTION, raw[1:2], raw)
    if dashes == 2:
        if len(raw) == 2:
            return Token(TokenType.DELIMITER, "", raw)
        return Token(TokenType.LONG_OPTION, raw[2:], raw)

    if state.all_positionals_bound and not state.subcommand_dispatched:
        return Token(TokenType.SUBCOMMAND, raw, raw)
    return Token(TokenType.POSITIONAL, raw, raw)


def is_help(token: Token) -> bool:
    """True if the token names the built-in `-h` / `--help` flag."""
    if token.type == TokenType.SHORT_OPTION:
        return token.value == "h"
    if token.type == TokenType.LONG_OPTION:
        return bool(token.value) and "help".startswith(token.value)
    return False
