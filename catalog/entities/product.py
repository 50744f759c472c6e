"""Product domain entity."""

from pydantic import BaseModel, ConfigDict


class Product(BaseModel):
    """A catalog product.

    `id` is assigned by the caller and is the sole identity of the product:
    storing a product under an existing id replaces it.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    name: str = ""
    description: str = ""
    price: float = 0.0
