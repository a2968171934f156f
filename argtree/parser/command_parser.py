# Argtree CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
The argtree command parser.

`CommandParser` walks an argument vector through a `Command` tree one level at
a time. At each level it:

- seeds a missing-required diagnostic for every positional and every required
  option, retracting each one as the argument is bound;
- consumes options with their declared arity (`Exactly` or `AtLeast`);
- binds positionals in declaration order;
- once all positionals are bound, dispatches the next bare word to a
  subcommand and recurses into it.

Parsing stops at the first unrecognized argument, arity failure or invalid
argument, at `-h/--help`, or at a `--` delimiter (everything after it is kept
as `ParseResult.remainder`). Missing required arguments are reported together.

Usage text for the resolved chain is always rendered; error text is rendered
when the status is `Status.ERROR`.

Example:
    result = parse(sys.argv, cli)
    if result.status is Status.SUCCESS:
        run(result)
"""
from __future__ import annotations

from typing import Sequence

from argtree.command import Command
from argtree.config import ParseConfig
from argtree.exceptions import ResultCapacityError, SpecificationError
from argtree.logger import logger
from argtree.parser.diagnostics import Diagnostics
from argtree.parser.formatter import Formatter
from argtree.parser.parser_types import ArgumentKind, ErrorCategory, Status, Token, TokenType
from argtree.parser.result import CommandResult, ParsedOption, ParseResult
from argtree.parser.tokenizer import LevelState, classify, is_help
from argtree.parser.usage import write_usage
from argtree.utils import program_name_from_path

DELIMITER = "--"


class CommandParser:
    """
    Parses argument vectors against a `Command` tree.

    A parser holds only its `ParseConfig`; every `parse` call builds fresh
    result and diagnostics storage, so one instance may be reused freely.

    Args:
        config (ParseConfig | None): Limits and platform settings. Defaults to
            `ParseConfig()`.
    """

    def __init__(self, config: ParseConfig | None = None) -> None:
        self.config = config or ParseConfig()

    def parse(self, argv: Sequence[str], command: Command) -> ParseResult:
        """
        Parse `argv` against `command`.

        Args:
            argv (Sequence[str]): Full argument vector. `argv[0]`, if present,
                is the program path.
            command (Command): Root of the command tree.

        Returns:
            ParseResult: Bound values, status, diagnostics, usage and error text.

        Raises:
            SpecificationError: If the tree is deeper than `config.max_depth`.
            ResultCapacityError: If more than `config.max_options` options are
                parsed, or a level declares more required arguments than
                `config.max_errors` can hold.
        """
        depth = command.depth()
        if depth > self.config.max_depth:
            raise SpecificationError(
                f"Command tree depth {depth} exceeds max_depth={self.config.max_depth}"
            )

        argv = list(argv)
        program_path = argv[0] if argv else ""
        program_name = program_name_from_path(
            program_path,
            separator=self.config.path_separator,
            max_length=self.config.program_name_max,
        )
        result = ParseResult(
            program_name=program_name,
            program_path=program_path,
            diagnostics=Diagnostics(self.config.max_errors),
        )
        logger.debug("[%s] Parsing %d argument(s)", program_name, max(len(argv) - 1, 0))

        status = self._parse_level(result, command, argv, 1 if argv else 0)
        result.status = status

        usage = Formatter(self.config.usage_capacity)
        write_usage(usage, result.chain, program_name)
        result.usage = usage.getvalue()

        if status is Status.ERROR:
            error = Formatter(self.config.error_capacity)
            result.diagnostics.render(program_name, error)
            result.error = error.getvalue()

        logger.debug(
            "[%s] Parse finished with status '%s' at depth %d",
            program_name,
            status,
            result.commands_count,
        )
        return result

    def _enter_level(self, result: ParseResult, command: Command) -> CommandResult:
        name = command.name
        if name is None and not result.commands:
            name = result.program_name
        level = CommandResult(name=name, spec=command, run=command.run)
        result.commands.append(level)

        for positional in command.positionals:
            self._seed_missing(
                result, ArgumentKind.POSITIONAL, None, positional.name, 1
            )
        for option in command.required_options():
            self._seed_missing(
                result,
                ArgumentKind.OPTION,
                option.short_name,
                option.long_name,
                option.nargs.minimum,
            )
        return level

    def _seed_missing(
        self,
        result: ParseResult,
        kind: ArgumentKind,
        short_name: str | None,
        name: str,
        value: int,
    ) -> None:
        """Record a required argument as missing until it is bound."""
        added = result.diagnostics.add(
            ErrorCategory.MISSING_REQUIRED_ARGUMENT, kind, short_name, name, value
        )
        if added is None:
            raise ResultCapacityError(
                f"Required argument '{name}' does not fit in "
                f"max_errors={self.config.max_errors}"
            )

    def _parse_level(
        self, result: ParseResult, command: Command, argv: list[str], index: int
    ) -> Status:
        level = self._enter_level(result, command)
        diagnostics = result.diagnostics

        while index < len(argv):
            raw = argv[index]
            token = classify(
                LevelState(all_positionals_bound=level.all_positionals_bound), raw
            )
            option_index = index
            index += 1

            if token.type is TokenType.INVALID:
                diagnostics.add(
                    ErrorCategory.INTERNAL,
                    ArgumentKind.INVALID,
                    None,
                    "invalid argument string detected",
                )
                return Status.ERROR

            if token.type is TokenType.DELIMITER:
                result.remainder = argv[index:]
                logger.debug(
                    "[%s] Delimiter reached, %d argument(s) left unparsed",
                    level.name,
                    len(result.remainder),
                )
                return Status.ERROR if diagnostics else Status.SUCCESS

            if token.is_option:
                if is_help(token):
                    logger.debug("[%s] Help requested", level.name)
                    return Status.HELP
                index = self._consume_option(result, level, token, argv, option_index)
                if index < 0:
                    return Status.ERROR
                continue

            if token.type is TokenType.POSITIONAL:
                positional = command.positionals[len(level.positionals)]
                level.positionals.append(raw)
                diagnostics.remove(
                    ErrorCategory.MISSING_REQUIRED_ARGUMENT,
                    ArgumentKind.POSITIONAL,
                    None,
                    positional.name,
                )
                continue

            subcommand = command.find_subcommand(token.value)
            if subcommand is None:
                diagnostics.add(
                    ErrorCategory.UNRECOGNIZED_ARGUMENT,
                    ArgumentKind.SUBCOMMAND,
                    None,
                    raw,
                )
                return Status.ERROR
            if diagnostics:
                return Status.ERROR
            logger.debug("[%s] Dispatching subcommand '%s'", level.name, subcommand.name)
            return self._parse_level(result, subcommand, argv, index)

        return Status.ERROR if diagnostics else Status.SUCCESS

    def _consume_option(
        self,
        result: ParseResult,
        level: CommandResult,
        token: Token,
        argv: list[str],
        option_index: int,
    ) -> int:
        """Bind one option and its arguments. Returns the next index, or -1 on error."""
        diagnostics = result.diagnostics
        option = level.spec.find_option(token)
        if option is None:
            diagnostics.add(
                ErrorCategory.UNRECOGNIZED_ARGUMENT,
                ArgumentKind.OPTION,
                None,
                token.raw or token.value,
            )
            return -1

        if option.required:
            diagnostics.remove(
                ErrorCategory.MISSING_REQUIRED_ARGUMENT,
                ArgumentKind.OPTION,
                option.short_name,
                option.long_name,
            )

        start = option_index + 1
        nargs = option.nargs
        if nargs.variadic:
            end = start
            while end < len(argv) and argv[end] and not argv[end].startswith("-"):
                end += 1
            if end - start < nargs.minimum:
                diagnostics.add(
                    ErrorCategory.INVALID_ARITY,
                    ArgumentKind.OPTION_AT_LEAST,
                    option.short_name,
                    option.long_name,
                    nargs.minimum,
                )
                return -1
        else:
            available = argv[start:]
            if DELIMITER in available:
                available = available[: available.index(DELIMITER)]
            if len(available) < nargs.minimum:
                diagnostics.add(
                    ErrorCategory.INVALID_ARITY,
                    ArgumentKind.OPTION,
                    option.short_name,
                    option.long_name,
                    nargs.minimum,
                )
                return -1
            end = start + nargs.minimum

        if len(result.options) >= self.config.max_options:
            raise ResultCapacityError(
                f"More than max_options={self.config.max_options} options parsed"
            )
        parsed = ParsedOption(
            short_name=option.short_name,
            long_name=option.long_name,
            nargs=end - start,
            args=tuple(argv[start:end]),
            index=option_index,
            arity=nargs,
        )
        level.options.append(parsed)
        result.options.append(parsed)
        logger.debug(
            "[%s] Parsed option '%s' with %d argument(s)",
            level.name,
            option.display_name,
            parsed.nargs,
        )
        return end


def parse(
    argv: Sequence[str], command: Command, config: ParseConfig | None = None
) -> ParseResult:
    """Parse `argv` against `command` with a one-off `CommandParser`."""
    return CommandParser(config).parse(argv, command)
