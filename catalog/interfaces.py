"""Type definitions and interfaces for the catalog."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from catalog.entities import Product


class IReporter(ABC):
    """Reporter interface."""

    @abstractmethod
    def on_message(self, *messages: str) -> None:
        """On message callback."""

    @abstractmethod
    def on_error(self, *messages: str) -> None:
        """On error callback."""

    @abstractmethod
    def start_progress(self, total: int) -> None:
        """On start progress callback."""

    @abstractmethod
    def stop_progress(self) -> None:
        """On stop progress callback."""

    @abstractmethod
    def on_progress(self, value: int) -> None:
        """On progress callback."""


@dataclass
class SearchResults:
    """Search result."""

    hits: list[dict[str, Any]]
    count: int


@dataclass
class SearchQuery:
    """Search query."""

    index: Any
    body: Any
    params: Any


class ISearchService(ABC):
    """Search service interface."""

    @abstractmethod
    def query(self, query: SearchQuery, *, timeout: float | None = None) -> SearchResults:
        """Run the query and return the raw hits."""


class ICatalogRepository(ABC):
    """Store, fetch, browse and search catalog products.

    Every operation is a single request/response against the backing store.
    Implementations hold no product state between calls.

    `timeout` bounds the single outbound call, in seconds. `skip` and `take`
    are the zero-based offset and the maximum number of results.
    """

    @abstractmethod
    def put(self, product: Product, *, timeout: float | None = None) -> None:
        """Insert the product, or replace the one stored under the same id."""

    @abstractmethod
    def get_by_id(self, product_id: str, *, timeout: float | None = None) -> Product:
        """Fetch one product.

        Raises:
            ProductNotFoundError: If nothing is stored under `product_id`
            ProductDecodeError: If the stored document cannot be decoded
        """

    @abstractmethod
    def list(
        self, *, skip: int = 0, take: int = 10, timeout: float | None = None
    ) -> list[Product]:
        """List products in the store's default order.

        Undecodable documents are left out of the result.
        """

    @abstractmethod
    def list_by_ids(
        self, ids: Sequence[str], *, timeout: float | None = None
    ) -> list[Product]:
        """Fetch the products stored under `ids` in one request.

        Missing and undecodable documents are left out. The result order is not
        guaranteed to follow `ids`.
        """

    @abstractmethod
    def search(
        self, query: str, *, skip: int = 0, take: int = 10, timeout: float | None = None
    ) -> list[Product]:
        """Full-text search over product names and descriptions.

        Undecodable documents are left out of the result.
        """

    def close(self) -> None:
        """Release resources owned by the repository."""


def validate_window(*, skip: int, take: int) -> None:
    """Check a skip/take pagination window."""
    if skip < 0:
        raise ValueError(f"skip must be non-negative, got {skip}")
    if take < 0:
        raise ValueError(f"take must be non-negative, got {take}")
