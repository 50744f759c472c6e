import sys

from catalog.console_reporter import ConsoleReporter

from apps.cli.utils import COMMAND_ERRORS, CONNECTION_ARGUMENTS, format_product, open_catalog

DEFINITION = {
    "name": "get",
    "description": "Fetch a product by id",
    "arguments": [
        *CONNECTION_ARGUMENTS,
        {
            "name": "id",
            "type": str,
            "required": True,
            "help": "Product id",
        },
    ],
}


def main(
    *,
    assume_role: str | None = None,
    id: str,  # noqa: A002
    index: str | None = None,
    opensearch_host: str | None = None,
    opensearch_port: int | None = None,
    profile: str | None = None,
    region: str | None = None,
    sniff: bool | None = None,
) -> None:
    """Main entry point for the get command."""
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
            product = catalog.products.get_by_id(id)
    except COMMAND_ERRORS as e:
        reporter.on_error(str(e))
        sys.exit(1)

    reporter.on_message(format_product(product))
