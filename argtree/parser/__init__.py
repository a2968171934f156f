"""
Argtree CLI Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .argument import Option, Positional
from .arity import AtLeast, Exactly, coerce_arity
from .diagnostics import Diagnostic, Diagnostics
from .formatter import Formatter
from .parser_types import ArgumentKind, ErrorCategory, Status, Token, TokenType
from .tokenizer import LevelState, classify

__all__ = [
    "ArgumentKind",
    "AtLeast",
    "Diagnostic",
    "Diagnostics",
    "ErrorCategory",
    "Exactly",
    "Formatter",
    "LevelState",
    "Option",
    "Positional",
    "Status",
    "Token",
    "TokenType",
    "classify",
    "coerce_arity",
]
