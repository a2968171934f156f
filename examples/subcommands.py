import random
import sys
from pathlib import Path

from argtree import AtLeast, Command, Option, Positional, Status, parse, run
from argtree.report import report
from argtree.utils import setup_logging

setup_logging()


def print_string(result, command) -> Status:
    verbose = result.program_command.has_option("verbose")
    always = command.has_option("a")
    text = command.get_positional(0)
    if verbose:
        action = "printing" if always else "attempting to print"
        print(f"{result.program_name} [verbose]: {action} {text!r}...")
    print(text if always or random.random() < 0.25 else "...")
    return Status.SUCCESS


def dump_files(result, command) -> Status:
    verbose = result.program_command.has_option("verbose")
    text = command.get_option("input").value
    for path in command.get_option("output").args:
        if verbose:
            print(f"{result.program_name} [verbose]: dumping to {path}")
        Path(path).write_text(text, encoding="UTF-8")
    return Status.SUCCESS


cli = Command(
    name="program-name",
    help="A program for doing things",
    options=[
        Option(short_name="v", long_name="verbose", help="Prints status of the commands"),
    ],
    subcommands=[
        Command(
            name="dump-files",
            help="Dumps input to a given set of file paths",
            run=dump_files,
            options=[
                Option(
                    short_name="i",
                    long_name="input",
                    help="String to dump to the file/s",
                    nargs=1,
                    required=True,
                ),
                Option(
                    short_name="o",
                    long_name="output",
                    help="File/s to dump to",
                    nargs=AtLeast(1),
                    required=True,
                ),
            ],
        ),
        Command(
            name="print-string",
            help="Prints a string, sometimes",
            run=print_string,
            positionals=[Positional(name="string", help="The string to print")],
            options=[
                Option(
                    short_name="a",
                    long_name="always",
                    help="Always print the string instead of leaving it to chance",
                ),
            ],
        ),
    ],
)

if __name__ == "__main__":
    parsed = parse(sys.argv, cli)
    if parsed.status is not Status.SUCCESS:
        sys.exit(report(parsed))
    sys.exit(0 if run(parsed) is Status.SUCCESS else 1)
