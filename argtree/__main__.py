"""
Argtree CLI Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""
from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Sequence

from rich.markup import escape
from rich.table import Table
from rich.tree import Tree

from argtree.command import Command
from argtree.config import find_spec_file, load_command
from argtree.console import console, err_console
from argtree.exceptions import ConfigError
from argtree.parser.argument import Option, Positional
from argtree.parser.command_parser import parse
from argtree.parser.parser_types import Status
from argtree.parser.result import CommandResult, ParseResult
from argtree.parser.runner import exit_code, run
from argtree.report import report
from argtree.utils import setup_logging

AUTO_SPEC = "auto"


def resolve_spec_path(command: CommandResult) -> Path:
    spec = command.get_positional(0)
    if spec and spec != AUTO_SPEC:
        path = Path(spec)
    else:
        found = find_spec_file()
        if found is None:
            raise ConfigError(
                "No spec file given and none found (argtree.yaml / argtree.toml)"
            )
        path = found
    return bootstrap(path)


def bootstrap(spec_path: Path) -> Path:
    """Make callbacks that live next to the spec file importable."""
    spec_dir = str(spec_path.resolve().parent)
    if spec_dir not in sys.path:
        sys.path.insert(0, spec_dir)
    return spec_path


def build_tree(command: Command, label: str | None = None) -> Tree:
    """Render a command specification as a rich `Tree`."""
    title = f"[argtree.command]{escape(label or command.name or '<root>')}[/]"
    if command.help:
        title += f" [argtree.muted]{escape(command.help)}[/]"
    tree = Tree(title)
    for positional in command.positionals:
        tree.add(
            f"[argtree.positional]{escape(positional.name)}[/] "
            f"{escape(positional.help)}".rstrip()
        )
    for option in command.options:
        details = [f"nargs={option.nargs}"]
        if option.required:
            details.append("required")
        tree.add(
            f"[argtree.option]{option.label}[/] ({', '.join(details)}) {escape(option.help)}".rstrip()
        )
    for subcommand in command.subcommands:
        tree.add(build_tree(subcommand))
    return tree


def build_table(result: ParseResult) -> Table:
    """Summarize a successful parse, one row per command level."""
    table = Table(title=f"{result.program_name}: {result.status}", show_lines=True)
    table.add_column("Command", style="argtree.command")
    table.add_column("Positionals", style="argtree.positional")
    table.add_column("Options", style="argtree.option")
    for command in result.commands:
        positionals = "\n".join(
            f"{spec.name}={value}"
            for spec, value in zip(command.spec.positionals, command.positionals)
        )
        options = "\n".join(
            f"--{option.long_name}" + (f" {' '.join(option.args)}" if option.args else "")
            for option in command.options
        )
        table.add_row(command.name or "", positionals, options)
    if result.remainder:
        table.caption = f"remainder: {' '.join(result.remainder)}"
    return table


def show_usage(result: ParseResult, command: CommandResult) -> Status:
    console.print(result.usage.rstrip("\n"), highlight=False, markup=False)
    return Status.SUCCESS


def tree_callback(result: ParseResult, command: CommandResult) -> Status:
    path = resolve_spec_path(command)
    spec = load_command(path)
    console.print(build_tree(spec, label=spec.name or path.stem))
    return Status.SUCCESS


def check_callback(result: ParseResult, command: CommandResult) -> Status:
    path = resolve_spec_path(command)
    spec = load_command(path)
    checked = parse([spec.name or path.stem, *result.remainder], spec)
    if checked.status is Status.SUCCESS:
        console.print(build_table(checked))
    else:
        report(checked)
    return checked.status


ARGTREE = Command(
    name="argtree",
    help="Inspect argtree command specifications.",
    options=(
        Option(short_name="v", long_name="verbose", help="Enable debug logging"),
        Option(long_name="log-mode", nargs=1, help="Logging mode: cli or json"),
    ),
    subcommands=(
        Command(
            name="tree",
            help="Print the command tree of a spec file",
            positionals=(Positional(name="SPEC", help="Spec file, or 'auto' to search"),),
            run=tree_callback,
        ),
        Command(
            name="check",
            help="Parse the arguments after '--' against a spec file",
            positionals=(Positional(name="SPEC", help="Spec file, or 'auto' to search"),),
            run=check_callback,
        ),
    ),
    run=show_usage,
)


def main(argv: Sequence[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    result = parse(["argtree", *args], ARGTREE)
    if result.status is not Status.SUCCESS:
        return report(result)

    root = result.commands[0]
    log_mode = root.get_option("log-mode")
    try:
        setup_logging(
            mode=log_mode.value if log_mode else None,
            console_log_level=logging.DEBUG if root.has_option("verbose") else logging.WARNING,
        )
    except ValueError as error:
        err_console.print(f"argtree: error: {error}", style="argtree.error", markup=False)
        return exit_code(Status.ERROR)

    try:
        status = run(result)
    except ConfigError as error:
        err_console.print(f"argtree: error: {error}", style="argtree.error", markup=False)
        return exit_code(Status.ERROR)
    return exit_code(status)


if __name__ == "__main__":
    sys.exit(main())
