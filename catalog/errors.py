"""Errors raised by the catalog package.

Engine failures are not part of this hierarchy: they surface unchanged as
`opensearchpy.exceptions.TransportError` and its subclasses.
"""


class CatalogError(Exception):
    """Base class for catalog errors."""


class ProductNotFoundError(CatalogError):
    """No product is stored under the requested id."""

    def __init__(self, product_id: str) -> None:
        super().__init__(f"Product '{product_id}' not found")
        self.product_id = product_id


class ProductDecodeError(CatalogError):
    """A stored document could not be decoded into a product."""


class CatalogConnectionError(CatalogError):
    """The search cluster could not be reached."""


class CatalogConfigurationError(CatalogError):
    """Catalog settings are invalid."""
