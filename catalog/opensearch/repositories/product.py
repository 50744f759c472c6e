"""Product repository."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING, Any

from opensearchpy.exceptions import NotFoundError, TransportError

from catalog.entities import Product
from catalog.errors import ProductDecodeError, ProductNotFoundError
from catalog.interfaces import ICatalogRepository, SearchQuery, validate_window
from catalog.logging import get_logger
from catalog.opensearch.codec import decode, encode
from catalog.opensearch.repositories.base_repository import BaseRepository
from catalog.opensearch.services.search_query_builder import SearchQueryBuilder
from catalog.utils import request_options

if TYPE_CHECKING:
    from opensearchpy import OpenSearch

logger = get_logger(__name__)

DEFAULT_INDEX = "catalog"
SEARCH_FIELDS = ["name", "description"]


class ProductRepository(BaseRepository, ICatalogRepository):
    """Catalog repository backed by an OpenSearch index.

    Products are stored as documents whose `_id` is the product id. Each
    operation issues exactly one request. Transport errors from opensearch-py
    are propagated unchanged.
    """

    def __init__(
        self,
        *,
        client: OpenSearch,
        index: str = DEFAULT_INDEX,
        refresh: bool = False,
    ) -> None:
        """Initialize the repository.

        Args:
            client: Shared OpenSearch client
            index: Name of the catalog index (default: catalog)
            refresh: Refresh the index after each put so the product is searchable at once
        """
        super().__init__(client=client, index=index)
        self._refresh = refresh

    def put(self, product: Product, *, timeout: float | None = None) -> None:
        """Index the product under its id, replacing any previous version."""
        options = request_options(timeout)
        if self._refresh:
            options["refresh"] = True

        self._client.index(
            index=self._index,
            id=product.id,
            body=encode(product),
            **options,
        )

    def get_by_id(self, product_id: str, *, timeout: float | None = None) -> Product:
        """Get a product by id.

        Raises:
            ProductNotFoundError: If the index holds no document with this id
            ProductDecodeError: If the document body cannot be decoded
        """
        try:
            response = self._client.get(
                index=self._index,
                id=product_id,
                **request_options(timeout),
            )
        except NotFoundError as e:
            # A missing index is also a 404, but without a `found` flag
            if isinstance(e.info, dict) and e.info.get("found") is False:
                raise ProductNotFoundError(product_id) from e
            raise

        if not response.get("found", False):
            raise ProductNotFoundError(product_id)

        return decode(response.get("_source"), product_id)

    def list(
        self, *, skip: int = 0, take: int = 10, timeout: float | None = None
    ) -> list[Product]:
        """List products in index order."""
        validate_window(skip=skip, take=take)
        query = (
            SearchQueryBuilder(index=self._index)
            .match_all()
            .skip_results(skip)
            .limit_results(take)
            .build()
        )
        return self._query(query, operation="list", timeout=timeout)

    def list_by_ids(
        self, ids: Sequence[str], *, timeout: float | None = None
    ) -> list[Product]:
        """Get the products stored under `ids` with a single multi-get.

        Results follow the order of the multi-get response.
        """
        if not ids:
            return []

        options = request_options(timeout)
        try:
            response = self._client.mget(index=self._index, body={"ids": list(ids)}, **options)
        except TransportError as e:
            logger.error("Catalog list_by_ids on index '%s' failed: %s", self._index, e)
            raise
        found = [doc for doc in response.get("docs", []) if doc.get("found")]
        return self._decode_documents(found, operation="list_by_ids")

    def search(
        self, query: str, *, skip: int = 0, take: int = 10, timeout: float | None = None
    ) -> list[Product]:
        """Search product names and descriptions, most relevant first."""
        validate_window(skip=skip, take=take)
        search_query = (
            SearchQueryBuilder(index=self._index)
            .multi_match(fields=SEARCH_FIELDS, value=query)
            .skip_results(skip)
            .limit_results(take)
            .build()
        )
        return self._query(search_query, operation="search", timeout=timeout)

    def _query(
        self, query: SearchQuery, *, operation: str, timeout: float | None
    ) -> list[Product]:
        try:
            results = self._search.query(query, timeout=timeout)
        except TransportError as e:
            logger.error("Catalog %s on index '%s' failed: %s", operation, self._index, e)
            raise
        return self._decode_documents(results.hits, operation=operation)

    def _decode_documents(
        self, documents: Iterable[dict[str, Any]], *, operation: str
    ) -> list[Product]:
        """Decode hits or multi-get documents, dropping the ones that do not decode."""
        products: list[Product] = []
        dropped = 0
        for document in documents:
            try:
                products.append(decode(document.get("_source"), document["_id"]))
            except ProductDecodeError as e:
                dropped += 1
                logger.debug("Skipping document: %s", e)

        if dropped:
            logger.warning(
                "Catalog %s on index '%s' dropped %d undecodable document(s)",
                operation,
                self._index,
                dropped,
            )
        return products
