import asyncio
import copy
import typing
import uuid

from catalog import errors
from catalog.products import models


class ProductStore(typing.Protocol):
    """
    Storage of products keyed by identifier.

    Every call is its own transaction: a write returning normally is committed.
    """

    async def get(self, product_id: uuid.UUID) -> models.Product | None:
        raise NotImplementedError

    async def list(self) -> typing.List[models.Product]:
        raise NotImplementedError

    async def add(self, product: models.Product) -> None:
        raise NotImplementedError

    async def update(self, product: models.Product) -> None:
        raise NotImplementedError

    async def delete(self, product_id: uuid.UUID) -> bool:
        raise NotImplementedError


class InMemoryProductStore(ProductStore):
    """
    Transient product storage, kept in insertion order.

    Reads are lock-free; writes are serialised with an asyncio lock, so a caller
    cancelled while waiting for the lock never commits. Callers always get
    copies, so changes to a fetched product are invisible until `update`.
    """

    def __init__(self) -> None:
        self._products: typing.Dict[uuid.UUID, models.Product] = {}
        self._lock = asyncio.Lock()

    async def get(self, product_id: uuid.UUID) -> models.Product | None:
        product = self._products.get(product_id)
        return copy.copy(product) if product is not None else None

    async def list(self) -> typing.List[models.Product]:
        return [copy.copy(product) for product in self._products.values()]

    async def add(self, product: models.Product) -> None:
        async with self._lock:
            if product.id in self._products:
                raise KeyError(f"Product {product.id} already exists")
            self._products[product.id] = copy.copy(product)

    async def update(self, product: models.Product) -> None:
        async with self._lock:
            if product.id not in self._products:
                raise errors.NotFound("Product", product.id)
            self._products[product.id] = copy.copy(product)

    async def delete(self, product_id: uuid.UUID) -> bool:
        async with self._lock:
            return self._products.pop(product_id, None) is not None

    def __len__(self) -> int:
        return len(self._products)
