# Argtree CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Renders usage and help text for a resolved command chain.

The chain runs from the root command to the leaf command help is shown for.
Output layout:

    usage: tool build --target ARGS [options...] SRC <command>

    Builds things

    Arguments:
      SRC             Source directory

    Options:
      -h, --help      Show this help message and exit
      -t, --target    Build target

    Commands:
      docs            Build the docs

Only the leaf contributes to the Arguments/Options/Commands blocks and to the
help column width.
"""
from __future__ import annotations

from typing import Sequence

from argtree.command import Command
from argtree.parser.arity import Exactly
from argtree.parser.formatter import Formatter

HELP_LABEL = "-h, --help"
HELP_TEXT = "Show this help message and exit"
MIN_HELP_COLUMN = 16
HELP_COLUMN_GAP = 4
INDENT = "  "


def help_column(command: Command) -> int:
    """Column at which help text starts for the given leaf command."""
    widths = [len(positional.name) for positional in command.positionals]
    widths.extend(option.display_length() for option in command.options)
    widths.extend(len(subcommand.name or "") for subcommand in command.subcommands)
    return max(MIN_HELP_COLUMN, max(widths, default=0) + HELP_COLUMN_GAP)


def usage_line(chain: Sequence[Command], program_name: str) -> str:
    parts: list[str] = ["usage:"]
    for depth, command in enumerate(chain):
        name = command.name if command.name else (program_name if depth == 0 else "")
        if name:
            parts.append(name)
        for option in command.required_options():
            parts.append(f"--{option.long_name}")
            if option.nargs != Exactly(0):
                parts.append("ARGS")
        if command.options:
            parts.append("[options...]")
        parts.extend(positional.name for positional in command.positionals)
    if chain and chain[-1].subcommands:
        parts.append("<command>")
    return " ".join(parts)


def _write_entry(formatter: Formatter, label: str, help_text: str, column: int) -> None:
    formatter.puts(INDENT)
    formatter.puts(label)
    if help_text:
        formatter.pad(column, len(label))
        formatter.puts(help_text)
    formatter.putc("\n")


def write_usage(
    formatter: Formatter, chain: Sequence[Command], program_name: str
) -> int:
    """Render usage text for `chain` into `formatter`, returning characters written."""
    if not chain:
        return 0
    start = len(formatter)
    leaf = chain[-1]
    column = help_column(leaf)

    formatter.puts(usage_line(chain, program_name))
    formatter.putc("\n")

    if leaf.help:
        formatter.printf("\n%s\n", leaf.help)

    if leaf.positionals:
        formatter.puts("\nArguments:\n")
        for positional in leaf.positionals:
            _write_entry(formatter, positional.name, positional.help, column)

    formatter.puts("\nOptions:\n")
    _write_entry(formatter, HELP_LABEL, HELP_TEXT, column)
    for option in leaf.options:
        _write_entry(formatter, option.label, option.help, column)

    if leaf.subcommands:
        formatter.puts("\nCommands:\n")
        for subcommand in leaf.subcommands:
            _write_entry(formatter, subcommand.name or "", subcommand.help or "", column)

    return len(formatter) - start


def generate_usage(
    chain: Sequence[Command], program_name: str, capacity: int = 4096
) -> str:
    """Render usage text for `chain`, truncated to `capacity` characters."""
    formatter = Formatter(capacity)
    write_usage(formatter, chain, program_name)
    return formatter.getvalue()
