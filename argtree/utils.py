# Argtree CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""utils.py"""
from __future__ import annotations

import importlib
import logging
import os
from typing import Any, Callable

import pythonjsonlogger.json
from rich.logging import RichHandler

from argtree.exceptions import ConfigError
from argtree.logger import logger


def program_name_from_path(
    program_path: str, separator: str = os.sep, max_length: int = 256
) -> str:
    """
    Derive a display name from a program path.

    Strips trailing separators and everything up to the last remaining
    separator, truncates to `max_length`, then drops everything from the last
    `.` onwards:

        /usr/local/bin/tool.py → tool
        C:\\tools\\tool.exe    → tool   (separator "\\")
        /usr/bin/              → bin
    """
    trimmed = program_path.rstrip(separator)
    name = trimmed[trimmed.rfind(separator) + 1 :]
    name = name[:max_length]
    last_dot = name.rfind(".")
    if last_dot >= 0:
        name = name[:last_dot]
    return name


def import_callback(dotted_path: str) -> Callable[..., Any]:
    """Dynamically imports a callable from a dotted path like 'my.module.func'."""
    module_path, _, attr = dotted_path.rpartition(".")
    if not module_path:
        raise ConfigError(f"Invalid callback path: '{dotted_path}'")
    try:
        module = importlib.import_module(module_path)
    except ModuleNotFoundError as error:
        logger.error("Failed to import module '%s': %s", module_path, error)
        raise ConfigError(
            f"Could not import '{dotted_path}': {error}. Ensure the module is "
            "installed and discoverable via PYTHONPATH."
        ) from error
    try:
        callback = getattr(module, attr)
    except AttributeError as error:
        logger.error(
            "Module '%s' does not have attribute '%s': %s", module_path, attr, error
        )
        raise ConfigError(
            f"Module '{module_path}' has no attribute '{attr}'"
        ) from error
    if not callable(callback):
        raise ConfigError(f"'{dotted_path}' is not callable")
    return callback


def running_in_container() -> bool:
    try:
        with open("/proc/1/cgroup", "r", encoding="UTF-8") as f:
            content = f.read()
            return (
                "docker" in content
                or "kubepods" in content
                or "containerd" in content
                or "podman" in content
            )
    except OSError:
        return False


def setup_logging(
    mode: str | None = None,
    log_filename: str | None = None,
    json_log_to_file: bool = False,
    file_log_level: int = logging.DEBUG,
    console_log_level: int = logging.WARNING,
) -> None:
    """
    Configure logging for argtree with support for both CLI-friendly and
    structured JSON output.

    Args:
        mode (str | None):
            Logging output mode. Can be:
                - "cli": human-readable Rich console logs (default outside containers)
                - "json": machine-readable JSON logs (default inside containers)
            If not provided, it will use the `ARGTREE_LOG_MODE` environment variable
            or fallback based on container detection.
        log_filename (str | None):
            Path to a log file. No file handler is installed when None.
        json_log_to_file (bool):
            Whether to format file logs as JSON instead of plain text.
        file_log_level (int):
            Logging level for file output. Defaults to `logging.DEBUG`.
        console_log_level (int):
            Logging level for console output. Defaults to `logging.WARNING`.

    Raises:
        ValueError: If an invalid logging `mode` is passed.
    """
    if not mode:
        mode = os.getenv("ARGTREE_LOG_MODE") or (
            "json" if running_in_container() else "cli"
        )

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    if root.hasHandlers():
        root.handlers.clear()

    if mode == "cli":
        console_handler: RichHandler | logging.StreamHandler = RichHandler(
            rich_tracebacks=True,
            show_time=True,
            show_level=True,
            show_path=False,
            markup=False,
            log_time_format="[%Y-%m-%d %H:%M:%S]",
        )
    elif mode == "json":
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(
            pythonjsonlogger.json.JsonFormatter(
                "%(asctime)s %(name)s %(levelname)s %(message)s"
            )
        )
    else:
        raise ValueError(f"Invalid log mode: {mode}")

    console_handler.setLevel(console_log_level)
    root.addHandler(console_handler)

    if log_filename:
        file_handler = logging.FileHandler(log_filename, "a", "UTF-8")
        file_handler.setLevel(file_log_level)
        if json_log_to_file:
            file_handler.setFormatter(
                pythonjsonlogger.json.JsonFormatter(
                    "%(asctime)s %(name)s %(levelname)s %(message)s"
                )
            )
        else:
            file_handler.setFormatter(
                logging.Formatter(
                    "%(asctime)s [%(name)s] [%(levelname)s] %(message)s",
                    datefmt="%Y-%m-%d %H:%M:%S",
                )
            )
        root.addHandler(file_handler)

    argtree_logger = logging.getLogger("argtree")
    argtree_logger.propagate = True
    argtree_logger.debug("Logging initialized in '%s' mode.", mode)
