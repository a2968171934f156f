"""Run callbacks referenced from argtree.yaml."""
from argtree import Status


def build(result, command) -> Status:
    target = command.get_option("target")
    print(f"building {command.get_positional(0)} for {target.value}")
    return Status.SUCCESS


def clean(result, command) -> Status:
    print("cleaning", " ".join(command.get_option("paths").args))
    return Status.SUCCESS
