import sys

from argtree import Command, Option, Positional, parse
from argtree.report import report

cli = Command(
    help="Greets someone",
    positionals=[Positional(name="name", help="Who to greet")],
    options=[
        Option(short_name="g", long_name="greeting", nargs=1, help="Greeting to use"),
        Option(short_name="s", long_name="shout", help="Print in upper case"),
    ],
)

if __name__ == "__main__":
    result = parse(sys.argv, cli)
    if not result.ok:
        sys.exit(report(result))

    command = result.command
    greeting = command.get_option("greeting")
    message = f"{greeting.value if greeting else 'Hello'}, {command.get_positional(0)}!"
    print(message.upper() if command.has_option("shout") else message)
