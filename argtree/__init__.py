"""
Argtree CLI Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .command import Command
from .config import ParseConfig, load_command
from .exceptions import ArgTreeError, ConfigError, ResultCapacityError, SpecificationError
from .parser import AtLeast, Exactly, Option, Positional, Status
from .parser.command_parser import CommandParser, parse
from .parser.result import CommandResult, ParsedOption, ParseResult
from .parser.runner import exit_code, run, run_all
from .parser.usage import generate_usage
from .version import __version__

logger = logging.getLogger("argtree")


__all__ = [
    "ArgTreeError",
    "AtLeast",
    "Command",
    "CommandParser",
    "CommandResult",
    "ConfigError",
    "Exactly",
    "Option",
    "ParseConfig",
    "ParseResult",
    "ParsedOption",
    "Positional",
    "ResultCapacityError",
    "SpecificationError",
    "Status",
    "__version__",
    "exit_code",
    "generate_usage",
    "load_command",
    "parse",
    "run",
    "run_all",
]
