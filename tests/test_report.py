from io import StringIO

from rich.console import Console

from argtree import Command, Option, parse
from argtree.console import ARGTREE_THEME
from argtree.report import help_hint, report


def make_consoles():
    out = Console(file=StringIO(), theme=ARGTREE_THEME, width=120)
    err = Console(file=StringIO(), theme=ARGTREE_THEME, width=120)
    return out, err


def test_report_help_goes_to_stdout():
    out, err = make_consoles()
    result = parse(["prog", "--help"], Command(options=[Option(long_name="out")]))
    assert report(result, out, err) == 0
    assert out.file.getvalue().startswith("usage: prog [options...]\n")
    assert err.file.getvalue() == ""


def test_report_error_goes_to_stderr():
    out, err = make_consoles()
    result = parse(["prog", "--bogus"], Command())
    assert report(result, out, err) == 1
    assert out.file.getvalue() == ""
    assert err.file.getvalue() == (
        "prog: error: unrecognized option: --bogus\n"
        "Try 'prog --help' for more information.\n"
    )


def test_report_success_is_silent():
    out, err = make_consoles()
    assert report(parse(["prog"], Command()), out, err) == 0
    assert out.file.getvalue() == ""
    assert err.file.getvalue() == ""


def test_help_hint_uses_command_chain():
    build = Command(name="build", options=[Option(long_name="xx", required=True)])
    tree = Command(name="tool", subcommands=[build])
    result = parse(["tool", "build"], tree)
    assert help_hint(result) == "Try 'tool build --help' for more information."
