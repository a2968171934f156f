import pytest
from pydantic import ValidationError

from argtree import Command, ConfigError, Option, Positional
from argtree.parser import Token, TokenType


def test_command_defaults():
    command = Command()
    assert command.name is None
    assert command.positionals == ()
    assert command.options == ()
    assert command.subcommands == ()
    assert command.run is None
    assert command.depth() == 1


def test_command_is_frozen():
    command = Command(name="tool")
    with pytest.raises(ValidationError):
        command.name = "other"


def test_depth():
    tree = Command(
        subcommands=[
            Command(name="a"),
            Command(name="b", subcommands=[Command(name="c")]),
        ]
    )
    assert tree.depth() == 3


def test_duplicate_long_names_rejected():
    with pytest.raises(ValidationError, match="already used"):
        Command(options=[Option(long_name="out"), Option(long_name="out")])


def test_duplicate_short_names_rejected():
    with pytest.raises(ValidationError, match="already used"):
        Command(
            options=[
                Option(short_name="o", long_name="out"),
                Option(short_name="o", long_name="other"),
            ]
        )


@pytest.mark.parametrize(
    "option",
    [
        {"long_name": "help"},
        {"short_name": "h", "long_name": "host"},
    ],
)
def test_builtin_help_is_reserved(option):
    with pytest.raises(ValidationError, match="built-in"):
        Command(options=[option])


def test_subcommands_need_unique_names():
    with pytest.raises(ValidationError):
        Command(subcommands=[Command()])
    with pytest.raises(ValidationError, match="already defined"):
        Command(subcommands=[Command(name="run"), Command(name="run")])


def test_duplicate_positionals_rejected():
    with pytest.raises(ValidationError):
        Command(positionals=[Positional(name="a"), Positional(name="a")])


@pytest.mark.parametrize("name", ["", "-a", "--long"])
def test_bad_positional_names(name):
    with pytest.raises(ValidationError):
        Positional(name=name)


@pytest.mark.parametrize(
    "fields",
    [
        {"long_name": ""},
        {"long_name": "--out"},
        {"long_name": "two words"},
        {"long_name": "out", "short_name": "ab"},
        {"long_name": "out", "short_name": "-"},
    ],
)
def test_bad_option_names(fields):
    with pytest.raises(ValidationError):
        Option(**fields)


def test_option_aliases_and_labels():
    option = Option.model_validate({"short": "o", "long": "output", "nargs": 1})
    assert option.short_name == "o"
    assert option.long_name == "output"
    assert option.label == "-o, --output"
    assert option.display_name == "-o/--output"
    assert option.display_length() == 12
    assert Option(long_name="output").label == "--output"


def test_find_option():
    command = Command(
        options=[
            Option(short_name="o", long_name="output"),
            Option(long_name="verbose"),
            Option(long_name="outer"),
        ]
    )
    short = Token(TokenType.SHORT_OPTION, "o", "-o")
    assert command.find_option(short).long_name == "output"
    assert command.find_option(Token(TokenType.LONG_OPTION, "outer")).long_name == "outer"
    assert command.find_option(Token(TokenType.LONG_OPTION, "out")).long_name == "output"
    assert command.find_option(Token(TokenType.SHORT_OPTION, "v")).long_name == "verbose"
    assert command.find_option(Token(TokenType.LONG_OPTION, "nope")) is None
    assert command.find_option(Token(TokenType.SHORT_OPTION, "")) is None
    assert command.find_option(Token(TokenType.POSITIONAL, "output")) is None


def test_find_subcommand():
    command = Command(subcommands=[Command(name="build"), Command(name="b")])
    assert command.find_subcommand("b").name == "b"
    assert command.find_subcommand("bu").name == "build"
    assert command.find_subcommand("x") is None
    assert command.find_subcommand("") is None


def test_run_dotted_path_errors():
    with pytest.raises(ConfigError):
        Command(run="no_dots")
    with pytest.raises(ConfigError):
        Command(run="argtree.does_not_exist.func")
    with pytest.raises(ConfigError):
        Command(run="argtree.utils.nothing_here")
    with pytest.raises(ConfigError):
        Command(run="argtree.version.__version__")
