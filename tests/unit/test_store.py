import asyncio
import decimal
import uuid

import pytest

from catalog import errors
from catalog.products import models, store


def _product(name: str = "Mouse") -> models.Product:
    return models.Product(
        id=uuid.uuid4(),
        name=name,
        description="",
        price=decimal.Decimal("1.00"),
    )


async def test_fetched_product_changes_are_invisible_until_update() -> None:
    product_store = store.InMemoryProductStore()
    product = _product()
    await product_store.add(product)

    fetched = await product_store.get(product.id)
    fetched.name = "Changed"

    assert (await product_store.get(product.id)).name == "Mouse"
    await product_store.update(fetched)
    assert (await product_store.get(product.id)).name == "Changed"


async def test_add_existing_identifier_fails() -> None:
    product_store = store.InMemoryProductStore()
    product = _product()
    await product_store.add(product)

    with pytest.raises(KeyError):
        await product_store.add(product)


async def test_update_missing_product_fails() -> None:
    product_store = store.InMemoryProductStore()

    with pytest.raises(errors.NotFound):
        await product_store.update(_product())


async def test_delete_reports_whether_product_existed() -> None:
    product_store = store.InMemoryProductStore()
    product = _product()
    await product_store.add(product)

    assert await product_store.delete(product.id) is True
    assert await product_store.delete(product.id) is False


async def test_cancelled_write_is_not_committed() -> None:
    product_store = store.InMemoryProductStore()

    async with product_store._lock:
        task = asyncio.create_task(product_store.add(_product()))
        await asyncio.sleep(0)
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task

    assert len(product_store) == 0
    assert await product_store.list() == []
