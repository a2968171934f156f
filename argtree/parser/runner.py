# Argtree CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Run dispatch for parsed command chains.

- `run()`: invokes the callback of the deepest command reached.
- `run_all()`: invokes every callback from the root down, stopping at the
  first one that does not succeed.
- `exit_code()`: maps a `Status` to a process exit code.

Callbacks receive the whole `ParseResult` and the `CommandResult` of their own
level and return a `Status`. Returning `None` counts as success.
"""
from __future__ import annotations

from argtree.exceptions import ArgTreeError
from argtree.logger import logger
from argtree.parser.parser_types import Status
from argtree.parser.result import CommandResult, ParseResult

EXIT_CODES = {
    Status.SUCCESS: 0,
    Status.ERROR: 1,
    Status.HELP: 0,
}


def exit_code(status: Status) -> int:
    return EXIT_CODES[status]


def _ensure_runnable(result: ParseResult) -> None:
    if result.status is not Status.SUCCESS:
        raise ArgTreeError(
            f"Cannot run a parse result with status '{result.status}'"
        )
    if not result.commands:
        raise ArgTreeError("Cannot run a parse result without commands")


def _invoke(result: ParseResult, command: CommandResult) -> Status:
    if command.run is None:
        return Status.SUCCESS
    logger.debug(
        "[%s] Running callback %s",
        command.name,
        getattr(command.run, "__name__", command.run),
    )
    status = command.run(result, command)
    if status is None:
        return Status.SUCCESS
    if not isinstance(status, Status):
        raise ArgTreeError(
            f"Callback for '{command.name}' returned {status!r}, expected a Status"
        )
    return status


def run(result: ParseResult) -> Status:
    """Run the deepest command's callback. Commands without one succeed."""
    _ensure_runnable(result)
    return _invoke(result, result.commands[-1])


def run_all(result: ParseResult) -> Status:
    """Run every callback from root to leaf, stopping at the first failure."""
    _ensure_runnable(result)
    for command in result.commands:
        status = _invoke(result, command)
        if status is not Status.SUCCESS:
            logger.debug("[%s] Stopping run_all with status '%s'", command.name, status)
            return status
    return Status.SUCCESS
