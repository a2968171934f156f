import logging

import pytest
from rich.logging import RichHandler

from argtree.exceptions import ConfigError
from argtree.utils import import_callback, program_name_from_path, setup_logging


@pytest.mark.parametrize(
    "path, expected",
    [
        ("/usr/local/bin/tool.py", "tool"),
        ("tool", "tool"),
        ("./tool.tar.gz", "tool.tar"),
        ("/opt/tool/", "tool"),
        ("/usr/bin//", "bin"),
        (".hidden", ""),
        ("", ""),
    ],
)
def test_program_name_from_path(path, expected):
    assert program_name_from_path(path, separator="/") == expected


def test_program_name_windows_separator():
    assert program_name_from_path("C:\\bin\\app.exe", separator="\\") == "app"


def test_program_name_truncated_before_extension_strip():
    assert program_name_from_path("/bin/abc.defgh", separator="/", max_length=5) == "abc"


def test_import_callback():
    assert import_callback("argtree.utils.program_name_from_path") is program_name_from_path
    with pytest.raises(ConfigError):
        import_callback("nodots")


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def test_setup_logging_cli(restore_root_logger):
    setup_logging(mode="cli")
    assert any(isinstance(h, RichHandler) for h in restore_root_logger.handlers)


def test_setup_logging_json(restore_root_logger, monkeypatch):
    monkeypatch.setenv("ARGTREE_LOG_MODE", "json")
    setup_logging()
    handler = restore_root_logger.handlers[0]
    assert type(handler).__name__ == "StreamHandler"
    assert type(handler.formatter).__name__ == "JsonFormatter"


def test_setup_logging_file(restore_root_logger, tmp_path):
    log_file = tmp_path / "argtree.log"
    setup_logging(mode="cli", log_filename=str(log_file))
    logging.getLogger("argtree").info("hello from test")
    for handler in restore_root_logger.handlers:
        handler.flush()
    assert "hello from test" in log_file.read_text()


def test_setup_logging_invalid_mode(restore_root_logger):
    with pytest.raises(ValueError):
        setup_logging(mode="xml")
