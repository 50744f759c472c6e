"""
OpenSearch entity repositories.

Repositories handle persistence operations and return domain model instances.
"""

from catalog.opensearch.repositories.base_repository import BaseRepository
from catalog.opensearch.repositories.product import ProductRepository

__all__ = [
    "BaseRepository",
    "ProductRepository",
]
