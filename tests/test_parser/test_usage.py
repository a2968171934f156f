from argtree import Command, Option, Positional
from argtree.parser.usage import generate_usage, help_column, usage_line


def build_command() -> Command:
    return Command(
        help="Builds things",
        positionals=[Positional(name="SRC", help="Source directory")],
        options=[
            Option(
                short_name="t",
                long_name="target",
                nargs=1,
                required=True,
                help="Build target",
            ),
            Option(long_name="dry-run", help="Do nothing"),
        ],
    )


def test_generate_usage_layout():
    """Usage line, help text, Arguments and Options blocks in order."""
    text = generate_usage([build_command()], "tool")
    assert text == (
        "usage: tool --target ARGS [options...] SRC\n"
        "\n"
        "Builds things\n"
        "\n"
        "Arguments:\n"
        "  SRC" + " " * 13 + "Source directory\n"
        "\n"
        "Options:\n"
        "  -h, --help" + " " * 6 + "Show this help message and exit\n"
        "  -t, --target" + " " * 4 + "Build target\n"
        "  --dry-run" + " " * 7 + "Do nothing\n"
    )


def test_help_column_minimum():
    """A required option of display width 10 still gets the 16 column minimum."""
    command = Command(
        options=[Option(short_name="o", long_name="out1", nargs=1, required=True)]
    )
    assert Option(short_name="o", long_name="out1").display_length() == 10
    assert help_column(command) == 16


def test_help_column_grows_with_longest_label():
    command = Command(
        options=[Option(short_name="a", long_name="a-very-long-option")],
        positionals=[Positional(name="X")],
    )
    assert help_column(command) == len("-a, --a-very-long-option") + 4
    text = generate_usage([command], "tool")
    assert "  X\n" in text
    assert "  -a, --a-very-long-option\n" in text


def test_usage_for_subcommand_chain():
    docs = Command(name="docs", help="Build the docs")
    build = Command(
        name="build",
        positionals=[Positional(name="SRC")],
        subcommands=[docs, Command(name="wheel")],
    )
    root = Command(
        name="tool",
        options=[Option(short_name="v", long_name="verbose")],
        subcommands=[build],
    )
    assert usage_line([root, build], "ignored") == (
        "usage: tool [options...] build SRC <command>"
    )
    text = generate_usage([root, build], "ignored")
    assert "Commands:\n  docs" + " " * 12 + "Build the docs\n  wheel\n" in text
    assert "  -v, --verbose" not in text


def test_unnamed_root_uses_program_name():
    root = Command(subcommands=[Command(name="run")])
    assert usage_line([root], "prog") == "usage: prog <command>"


def test_required_flag_without_args():
    command = Command(options=[Option(long_name="force", required=True)])
    assert usage_line([command], "tool") == "usage: tool --force [options...]"


def test_usage_truncated_to_capacity():
    text = generate_usage([build_command()], "tool", capacity=20)
    assert text == "usage: tool --target"
