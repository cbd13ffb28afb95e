import dataclasses
import decimal
import uuid

from catalog import response


@dataclasses.dataclass
class Product:
    """
    The product entity.

    `id` is assigned once at creation; `name`, `description` and `price`
    are only ever replaced together.
    """

    id: uuid.UUID
    name: str
    description: str
    price: decimal.Decimal


class ProductView(response.Response, frozen=True):
    """Read-only projection of a product, rebuilt on every query."""

    id: uuid.UUID
    name: str
    description: str
    price: decimal.Decimal

    @classmethod
    def from_product(cls, product: Product) -> "ProductView":
        return cls(
            id=product.id,
            name=product.name,
            description=product.description,
            price=product.price,
        )
