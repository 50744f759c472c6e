import sys

from catalog.console_reporter import ConsoleReporter

from apps.cli.utils import COMMAND_ERRORS, CONNECTION_ARGUMENTS, format_product, open_catalog

DEFINITION = {
    "name": "list",
    "description": "List products",
    "arguments": [
        *CONNECTION_ARGUMENTS,
        {
            "name": "skip",
            "type": int,
            "required": False,
            "default": 0,
            "help": "Number of products to skip (default: 0)",
        },
        {
            "name": "take",
            "type": int,
            "required": False,
            "default": 10,
            "help": "Maximum number of products to return (default: 10)",
        },
    ],
}


def main(
    *,
    assume_role: str | None = None,
    index: str | None = None,
    opensearch_host: str | None = None,
    opensearch_port: int | None = None,
    profile: str | None = None,
    region: str | None = None,
    skip: int = 0,
    sniff: bool | None = None,
    take: int = 10,
) -> None:
    """Main entry point for the list command."""
    reporter = ConsoleReporter()

    try:
        with open_catalog(
            assume_role=assume_role,
            index=index,
            opensearch_host=opensearch_host,
            opensearch_port=opensearch_port,
            profile=profile,
            region=region,
            sniff=sniff,
        ) as catalog:
            products = catalog.products.list(skip=skip, take=take)
    except COMMAND_ERRORS as e:
        reporter.on_error(str(e))
        sys.exit(1)

    for product in products:
        reporter.on_message(format_product(product))
