"""
Catalog domain entities.

Entities are immutable value objects. They carry no reference to a
repository; persistence is the caller's concern.
"""

from catalog.entities.product import Product

__all__ = [
    "Product",
]
