"""Mapping between products and their stored OpenSearch documents.

The document body never carries the product id: OpenSearch addresses the
document by `_id`, so the id is dropped on encode and reattached on decode.
"""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, ValidationInfo, field_validator

from catalog.entities import Product
from catalog.errors import ProductDecodeError


class ProductDocument(BaseModel):
    """Stored shape of a product."""

    model_config = ConfigDict(strict=True, extra="ignore", frozen=True)

    name: str = ""
    description: str = ""
    price: float = 0.0

    @field_validator("name", "description", "price", mode="before")
    @classmethod
    def null_as_default(cls, value: Any, info: ValidationInfo) -> Any:
        """Read an explicit JSON null as the field default."""
        if value is None:
            return cls.model_fields[info.field_name].default
        return value


def encode(product: Product) -> dict[str, Any]:
    """Encode a product as a document body."""
    return ProductDocument(
        name=product.name,
        description=product.description,
        price=product.price,
    ).model_dump()


def decode(source: Mapping[str, Any] | str | bytes | None, product_id: str) -> Product:
    """Decode a document body into the product stored under `product_id`.

    Args:
        source: The document `_source`, either parsed or as raw JSON
        product_id: The document `_id`

    Raises:
        ProductDecodeError: If the body is not a JSON object with the expected field types
    """
    try:
        if isinstance(source, (str, bytes)):
            document = ProductDocument.model_validate_json(source)
        elif isinstance(source, Mapping):
            document = ProductDocument.model_validate(dict(source))
        else:
            raise ProductDecodeError(
                f"Document '{product_id}' has no JSON object body: {type(source).__name__}"
            )
    except ValidationError as e:
        raise ProductDecodeError(f"Document '{product_id}' is malformed: {e}") from e

    return Product(
        id=product_id,
        name=document.name,
        description=document.description,
        price=document.price,
    )
