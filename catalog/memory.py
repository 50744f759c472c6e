"""In-memory catalog repository."""

from __future__ import annotations

import re
from collections.abc import Sequence

from catalog.entities import Product
from catalog.errors import ProductNotFoundError
from catalog.interfaces import ICatalogRepository, validate_window

TOKEN_PATTERN = re.compile(r"\w+")


def _tokens(text: str) -> set[str]:
    return {token.lower() for token in TOKEN_PATTERN.findall(text)}


class InMemoryCatalogRepository(ICatalogRepository):
    """Catalog repository holding products in a dict.

    A stand-in for the OpenSearch repository in tests and local tooling.
    Listing follows insertion order; search matches any query token against
    the tokens of the name or description, case-insensitively.
    `timeout` is accepted for interface compatibility and ignored.
    """

    def __init__(self, products: Sequence[Product] = ()) -> None:
        self._products: dict[str, Product] = {}
        for product in products:
            self.put(product)

    def put(self, product: Product, *, timeout: float | None = None) -> None:
        self._products[product.id] = product

    def get_by_id(self, product_id: str, *, timeout: float | None = None) -> Product:
        try:
            return self._products[product_id].model_copy()
        except KeyError:
            raise ProductNotFoundError(product_id) from None

    def list(
        self, *, skip: int = 0, take: int = 10, timeout: float | None = None
    ) -> list[Product]:
        validate_window(skip=skip, take=take)
        products = list(self._products.values())[skip : skip + take]
        return [product.model_copy() for product in products]

    def list_by_ids(
        self, ids: Sequence[str], *, timeout: float | None = None
    ) -> list[Product]:
        return [self._products[i].model_copy() for i in ids if i in self._products]

    def search(
        self, query: str, *, skip: int = 0, take: int = 10, timeout: float | None = None
    ) -> list[Product]:
        validate_window(skip=skip, take=take)
        query_tokens = _tokens(query)
        matches = [
            product
            for product in self._products.values()
            if query_tokens & (_tokens(product.name) | _tokens(product.description))
        ]
        return [product.model_copy() for product in matches[skip : skip + take]]
