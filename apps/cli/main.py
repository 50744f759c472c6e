import argparse
import signal
import sys
from typing import Any

from catalog.logging import LogLevel, setup_logging

from .commands import get, list_products, put, search

COMMANDS = [
    get,
    list_products,
    put,
    search,
]

COMMON_ARGUMENTS = [
    {
        "name": "log-level",
        "type": str,
        "required": False,
        "choices": [level.value for level in LogLevel],
        "default": LogLevel.WARNING.value,
        "help": "Set the logging level (default: WARNING)",
    },
    {
        "name": "no-timestamp",
        "action": "store_true",
        "default": False,
        "help": "Disable timestamps in log output",
    },
]


def signal_handler(sig: int, _: Any) -> None:
    """
    Handle Ctrl+C gracefully.

    Args:
        sig: Signal number
    """
    print("\n\nAborting...\n", file=sys.stderr)
    sys.exit(130)


def validate_command_import(command):
    if not hasattr(command, "DEFINITION"):
        raise ValueError(f"Command {command} does not have DEFINITION")
    if not isinstance(command.DEFINITION, dict):
        raise ValueError(f"Command {command} DEFINITION is not a dictionary")

    if not hasattr(command, "main"):
        raise ValueError(f"Command {command} DEFINITION does not have main function")
    if not callable(command.main):
        raise ValueError(f"Command {command} DEFINITION main function is not callable")

    for argument in command.DEFINITION["arguments"]:
        if "name" not in argument:
            raise ValueError(f"Command {command} DEFINITION has an argument without a 'name'")
    return True


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Catalog CLI for storing, browsing and searching products")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    for command in COMMANDS:
        validate_command_import(command)

        command_parser = subparsers.add_parser(
            command.DEFINITION["name"],
            help=command.DEFINITION["description"],
        )

        # Common arguments and command arguments, sorted alphabetically
        arguments = sorted(
            [*COMMON_ARGUMENTS, *command.DEFINITION["arguments"]],
            key=lambda x: x["name"],
        )

        for argument in arguments:
            kwargs = {k: v for k, v in argument.items() if k != "name"}
            command_parser.add_argument(f"--{argument['name']}", **kwargs)

    return parser


def run(argv: list[str] | None = None) -> None:
    # Also the console-script entry point, which never runs the __main__ block
    signal.signal(signal.SIGINT, signal_handler)

    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(0)

    setup_logging(level=args.log_level, include_timestamp=not args.no_timestamp)

    for command in COMMANDS:
        if args.command == command.DEFINITION["name"]:
            valid_argument_names = [
                arg["name"].replace("-", "_") for arg in command.DEFINITION["arguments"]
            ]
            command.main(
                **{key: value for key, value in vars(args).items() if key in valid_argument_names}
            )
            sys.exit(0)


if __name__ == "__main__":
    run()
