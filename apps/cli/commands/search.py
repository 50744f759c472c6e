import sys

from catalog.console_reporter import ConsoleReporter

from apps.cli.utils import COMMAND_ERRORS, CONNECTION_ARGUMENTS, format_product, open_catalog

DEFINITION = {
    "name": "search",
    "description": "Search product names and descriptions",
    "arguments": [
        *CONNECTION_ARGUMENTS,
        {
            "name": "query",
            "type": str,
            "required": True,
            "help": "Query to search",
        },
        {
            "name": "skip",
            "type": int,
            "required": False,
            "default": 0,
            "help": "Number of results to skip (default: 0)",
        },
        {
            "name": "take",
            "type": int,
            "required": False,
            "default": 10,
            "help": "Maximum number of results to return (default: 10)",
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
    query: str,
    region: str | None = None,
    skip: int = 0,
    sniff: bool | None = None,
    take: int = 10,
) -> None:
    """
    Main entry point for the search command.

    Args:
        assume_role: AWS role to assume for OpenSearch operations
        index: Catalog index name
        opensearch_host: OpenSearch host
        opensearch_port: OpenSearch port
        profile: AWS profile to use
        query: Query to search
        region: AWS region
        skip: Number of results to skip
        sniff: Discover cluster nodes
        take: Maximum number of results to return
    """
    reporter = ConsoleReporter()

    if not query:
        reporter.on_error("Query is required for search command")
        sys.exit(1)

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
            products = catalog.products.search(query, skip=skip, take=take)
    except COMMAND_ERRORS as e:
        reporter.on_error(str(e))
        sys.exit(1)

    for product in products:
        reporter.on_message(format_product(product))
