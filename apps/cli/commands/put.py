import sys
from pathlib import Path

from pydantic import ValidationError

from catalog.console_reporter import ConsoleReporter
from catalog.entities import Product
from catalog.interfaces import ICatalogRepository, IReporter

from apps.cli.utils import COMMAND_ERRORS, CONNECTION_ARGUMENTS, open_catalog

DEFINITION = {
    "name": "put",
    "description": "Store products, replacing existing ones with the same id",
    "arguments": [
        *CONNECTION_ARGUMENTS,
        {
            "name": "description",
            "type": str,
            "required": False,
            "default": "",
            "help": "Product description",
        },
        {
            "name": "file",
            "type": Path,
            "required": False,
            "help": "JSON-lines file with one product per line",
        },
        {
            "name": "id",
            "type": str,
            "required": False,
            "help": "Product id",
        },
        {
            "name": "name",
            "type": str,
            "required": False,
            "default": "",
            "help": "Product name",
        },
        {
            "name": "price",
            "type": float,
            "required": False,
            "default": 0.0,
            "help": "Product price",
        },
        {
            "name": "refresh",
            "action": "store_true",
            "default": None,
            "help": "Make stored products searchable immediately",
        },
    ],
}


def read_products(file: Path) -> list[Product]:
    """Read products from a JSON-lines file, skipping blank lines.

    Raises:
        ValueError: If a line is not a valid product
    """
    products: list[Product] = []
    with file.open(encoding="utf-8") as f:
        for line_number, line in enumerate(f, 1):
            if not line.strip():
                continue
            try:
                products.append(Product.model_validate_json(line))
            except ValidationError as e:
                raise ValueError(f"{file}:{line_number}: invalid product: {e}") from e
    return products


def put_products(
    *, products: list[Product], repository: ICatalogRepository, reporter: IReporter
) -> None:
    """Store products one by one, reporting progress."""
    reporter.start_progress(len(products))
    try:
        for product in products:
            repository.put(product)
            reporter.on_progress(1)
    finally:
        reporter.stop_progress()


def main(
    *,
    assume_role: str | None = None,
    description: str = "",
    file: Path | None = None,
    id: str | None = None,  # noqa: A002
    index: str | None = None,
    name: str = "",
    opensearch_host: str | None = None,
    opensearch_port: int | None = None,
    price: float = 0.0,
    profile: str | None = None,
    refresh: bool | None = None,
    region: str | None = None,
    sniff: bool | None = None,
) -> None:
    """
    Main entry point for the put command.

    Args:
        assume_role: AWS role to assume for OpenSearch operations
        description: Product description
        file: JSON-lines file with one product per line
        id: Product id
        index: Catalog index name
        name: Product name
        opensearch_host: OpenSearch host
        opensearch_port: OpenSearch port
        price: Product price
        profile: AWS profile to use
        refresh: Make stored products searchable immediately
        region: AWS region
        sniff: Discover cluster nodes
    """
    reporter = ConsoleReporter()

    if (file is None) == (id is None):
        reporter.on_error("Pass either --id or --file")
        sys.exit(1)

    try:
        products = (
            read_products(file)
            if file is not None
            else [Product(id=id, name=name, description=description, price=price)]
        )
        with open_catalog(
            assume_role=assume_role,
            index=index,
            opensearch_host=opensearch_host,
            opensearch_port=opensearch_port,
            profile=profile,
            region=region,
            sniff=sniff,
            refresh=refresh,
        ) as catalog:
            put_products(products=products, repository=catalog.products, reporter=reporter)
    except (OSError, *COMMAND_ERRORS) as e:
        reporter.on_error(str(e))
        sys.exit(1)

    reporter.on_message(f"Stored {len(products)} product(s)")
