import pytest

from argtree import (
    ArgTreeError,
    Command,
    Option,
    Positional,
    Status,
    exit_code,
    parse,
    run,
    run_all,
)


def test_accessors():
    command = Command(
        positionals=[Positional(name="SRC")],
        options=[
            Option(short_name="o", long_name="output", nargs=1),
            Option(long_name="dry"),
        ],
    )
    result = parse(["prog", "-o", "out.txt", "src", "--dry"], command)
    level = result.command
    assert level.has_option("o")
    assert level.has_option("output")
    assert level.get_option("o") is level.get_option("output")
    assert len(level.get_options("output")) == 1
    assert level.get_option("out") is None
    assert level.get_option("dry").value is None
    assert level.has_positional(0)
    assert not level.has_positional(1)
    assert level.get_positional(0) == "src"
    assert level.get_positional(1) is None
    assert level.get_positional(-1) is None
    assert level.as_dict() == {"SRC": "src", "output": ("out.txt",), "dry": True}


def test_get_command():
    tree = Command(name="prog", subcommands=[Command(name="sub")])
    result = parse(["prog", "sub"], tree)
    assert result.get_command("sub") is result.command
    assert result.get_command("prog") is result.program_command
    assert result.get_command("missing") is None


def test_exit_codes():
    assert exit_code(Status.SUCCESS) == 0
    assert exit_code(Status.ERROR) == 1
    assert exit_code(Status.HELP) == 0


def chain_tree(calls: list[str], failing: str | None = None) -> Command:
    def make(name: str):
        def callback(result, command):
            calls.append(command.name)
            return Status.ERROR if name == failing else None

        return callback

    return Command(
        name="root",
        run=make("root"),
        subcommands=[
            Command(
                name="mid",
                run=make("mid"),
                subcommands=[Command(name="leaf", run=make("leaf"))],
            )
        ],
    )


def test_run_invokes_deepest_only():
    calls: list[str] = []
    result = parse(["prog", "mid", "leaf"], chain_tree(calls))
    assert run(result) is Status.SUCCESS
    assert calls == ["leaf"]


def test_run_all_in_order():
    calls: list[str] = []
    result = parse(["prog", "mid", "leaf"], chain_tree(calls))
    assert run_all(result) is Status.SUCCESS
    assert calls == ["root", "mid", "leaf"]


def test_run_all_stops_at_first_failure():
    calls: list[str] = []
    result = parse(["prog", "mid", "leaf"], chain_tree(calls, failing="mid"))
    assert run_all(result) is Status.ERROR
    assert calls == ["root", "mid"]


def test_run_without_callback_succeeds():
    result = parse(["prog"], Command())
    assert run(result) is Status.SUCCESS


def test_callback_receives_results():
    seen = {}

    def callback(result, command):
        seen["program"] = result.program_name
        seen["value"] = command.get_positional(0)
        return Status.SUCCESS

    command = Command(positionals=[Positional(name="V")], run=callback)
    result = parse(["tool", "value"], command)
    run(result)
    assert seen == {"program": "tool", "value": "value"}


def test_run_rejects_failed_parse():
    result = parse(["prog", "--bogus"], Command())
    with pytest.raises(ArgTreeError):
        run(result)
    with pytest.raises(ArgTreeError):
        run_all(result)


def test_callback_must_return_status():
    result = parse(["prog"], Command(run=lambda result, command: 0))
    with pytest.raises(ArgTreeError):
        run(result)


def test_run_from_dotted_path():
    command = Command(run="argtree.parser.runner.exit_code")
    assert command.run is exit_code
