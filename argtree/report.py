# Argtree CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Prints the outcome of a parse.

On `Status.HELP` the usage text goes to stdout. On `Status.ERROR` the error
text goes to stderr followed by a hint pointing at `--help`. Nothing is
printed on success. The parser itself never prints.
"""
from __future__ import annotations

from rich.console import Console
from rich.text import Text

from argtree.console import console as default_console
from argtree.console import err_console as default_err_console
from argtree.parser.parser_types import Status
from argtree.parser.result import ParseResult
from argtree.parser.runner import exit_code


def help_hint(result: ParseResult) -> str:
    names = [command.name for command in result.commands if command.name]
    return f"Try '{' '.join(names) or result.program_name} --help' for more information."


def report(
    result: ParseResult,
    console: Console | None = None,
    err_console: Console | None = None,
) -> int:
    """Print usage or error text for `result` and return its exit code."""
    console = console or default_console
    err_console = err_console or default_err_console

    if result.status is Status.HELP:
        console.print(Text(result.usage.rstrip("\n")), highlight=False)
    elif result.status is Status.ERROR:
        err_console.print(
            Text(result.error.rstrip("\n"), style="argtree.error"), highlight=False
        )
        err_console.print(Text(help_hint(result), style="argtree.muted"), highlight=False)
    return exit_code(result.status)
