# Argtree CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by argtree.

User input problems (unknown options, missing arguments, bad arity) are never
raised: they are collected as diagnostics and reported through the parse
status. The exceptions below signal programming errors in the caller, such as
a malformed command tree or undersized result storage, and are meant to abort.

Exception Hierarchy:
- ArgTreeError
    ├── SpecificationError
    ├── ResultCapacityError
    └── ConfigError
"""


class ArgTreeError(Exception):
    """Base exception for argtree."""


class SpecificationError(ArgTreeError):
    """Exception raised when a command specification cannot be parsed against."""


class ResultCapacityError(ArgTreeError):
    """Exception raised when parse results outgrow the configured capacity."""


class ConfigError(ArgTreeError):
    """Exception raised when a specification file cannot be loaded."""
