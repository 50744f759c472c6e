"""Pytest fixtures for CLI command tests."""

from unittest.mock import MagicMock

import pytest

from catalog.entities import Product
from catalog.memory import InMemoryCatalogRepository


@pytest.fixture
def repository() -> InMemoryCatalogRepository:
    """A catalog with two products."""
    return InMemoryCatalogRepository(
        [
            Product(id="p1", name="Red Mug", description="Ceramic mug, red glaze", price=9.99),
            Product(id="p2", name="Teapot", description="Cast iron", price=30.0),
        ]
    )


@pytest.fixture
def mock_catalog(repository: InMemoryCatalogRepository) -> MagicMock:
    """A stand-in for OpenSearchClient used as a context manager."""
    catalog = MagicMock()
    catalog.products = repository
    catalog.__enter__.return_value = catalog
    return catalog
