# Argtree CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Configuration for argtree.

Two concerns live here:

- `ParseConfig`: the limits a `CommandParser` works within (tree depth,
  parsed options, diagnostics, rendered text capacity) and the platform
  path separator used to derive the program name.
- `load_command()`: builds a `Command` tree from a YAML or TOML
  specification file. `run` callbacks are given as dotted import paths.

Example YAML:
    name: tool
    help: Does things
    options:
      - short: v
        long: verbose
        help: Verbose output
    subcommands:
      - name: build
        run: mypkg.cli.build
        positionals:
          - name: SRC
        options:
          - long: target
            nargs: 1
            required: true
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import toml
import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from argtree.command import Command
from argtree.exceptions import ConfigError
from argtree.logger import logger

SPEC_FILENAMES = ("argtree.yaml", "argtree.yml", "argtree.toml")


class ParseConfig(BaseModel):
    """
    Limits and platform settings for a `CommandParser`.

    Attributes:
        max_depth (int): Deepest command tree accepted.
        max_options (int): Maximum options parsed in a single call.
        max_errors (int): Diagnostics capacity.
        usage_capacity (int): Maximum length of rendered usage text.
        error_capacity (int): Maximum length of rendered error text.
        program_name_max (int): Maximum length of the derived program name.
        path_separator (str): Separator used to strip the program path.
    """

    max_depth: int = Field(default=8, gt=0)
    max_options: int = Field(default=64, gt=0)
    max_errors: int = Field(default=64, gt=0)
    usage_capacity: int = Field(default=4096, gt=0)
    error_capacity: int = Field(default=4096, gt=0)
    program_name_max: int = Field(default=256, gt=0)
    path_separator: str = Field(default=os.sep, min_length=1, max_length=1)

    model_config = ConfigDict(frozen=True)


def _load_raw(path: Path) -> dict[str, Any]:
    suffix = path.suffix.lower()
    try:
        with path.open("r", encoding="UTF-8") as spec_file:
            if suffix in (".yaml", ".yml"):
                raw = yaml.safe_load(spec_file)
            elif suffix == ".toml":
                raw = toml.load(spec_file)
            else:
                raise ConfigError(f"Unsupported spec file format: {suffix}")
    except (yaml.YAMLError, toml.TomlDecodeError) as error:
        logger.error("[Config] Failed to read %s: %s", path, error)
        raise ConfigError(f"Could not parse {path}: {error}") from error
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"{path} must contain a mapping at the top level")
    if "command" in raw and isinstance(raw["command"], dict):
        raw = raw["command"]
    return raw


def load_command(path: Path | str) -> Command:
    """
    Load a `Command` tree from a YAML or TOML specification file.

    A top-level `command:` table is unwrapped, which lets TOML files use
    `[command]` / `[[command.subcommands]]` sections.

    Raises:
        ConfigError: If the file is missing, unreadable, or does not describe a
            valid command tree.
    """
    path = Path(path) if isinstance(path, str) else path
    if not path.is_file():
        raise ConfigError(f"Spec file not found: {path}")

    raw = _load_raw(path)
    try:
        command = Command.model_validate(raw)
    except ValidationError as error:
        logger.error("[Config] Invalid command specification in %s", path)
        raise ConfigError(f"Invalid command specification in {path}:\n{error}") from error

    logger.debug("[Config] Loaded %s from %s", command, path)
    return command


def find_spec_file() -> Path | None:
    """
    Locate a specification file.

    Looks at `ARGTREE_SPEC`, then the current directory, then
    `~/.config/argtree/`.
    """
    env_path = os.getenv("ARGTREE_SPEC")
    if env_path:
        candidate = Path(env_path).expanduser()
        if candidate.is_file():
            return candidate

    search_dirs = (Path.cwd(), Path.home() / ".config" / "argtree")
    for directory in search_dirs:
        for filename in SPEC_FILENAMES:
            candidate = directory / filename
            if candidate.is_file():
                logger.debug("[Config] Found spec file: %s", candidate)
                return candidate
    return None
