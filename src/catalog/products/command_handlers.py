import decimal
import logging
import typing
import uuid

from catalog import errors, requests
from catalog.notifications import notification
from catalog.products import commands, models, store
from catalog.products import notifications as product_notifications

logger = logging.getLogger("catalog")


def validate_product_fields(name: str, price: decimal.Decimal) -> None:
    if not name.strip():
        raise errors.ValidationFailed("name", "must not be empty")
    if not price.is_finite() or price < 0:
        raise errors.ValidationFailed("price", "must be a non-negative number")


class CreateProductCommandHandler(
    requests.RequestHandler[commands.CreateProduct, uuid.UUID],
):
    def __init__(self, product_store: store.ProductStore) -> None:
        self._store = product_store
        self._notifications: typing.List[notification.Notification] = []

    @property
    def notifications(self) -> typing.List[notification.Notification]:
        return self._notifications

    async def handle(self, request: commands.CreateProduct) -> uuid.UUID:
        validate_product_fields(request.name, request.price)
        product = models.Product(
            id=uuid.uuid4(),
            name=request.name,
            description=request.description,
            price=request.price,
        )
        await self._store.add(product)
        logger.info("Product %s created", product.id)
        self._notifications.append(product_notifications.ProductCreated(id=product.id))
        return product.id


class UpdateProductCommandHandler(
    requests.RequestHandler[commands.UpdateProduct, None],
):
    def __init__(self, product_store: store.ProductStore) -> None:
        self._store = product_store

    @property
    def notifications(self) -> typing.List[notification.Notification]:
        return []

    async def handle(self, request: commands.UpdateProduct) -> None:
        validate_product_fields(request.name, request.price)
        product = await self._store.get(request.id)
        if product is None:
            raise errors.NotFound("Product", request.id)
        product.name = request.name
        product.description = request.description
        product.price = request.price
        await self._store.update(product)
        logger.info("Product %s updated", product.id)


class DeleteProductCommandHandler(
    requests.RequestHandler[commands.DeleteProduct, None],
):
    def __init__(self, product_store: store.ProductStore) -> None:
        self._store = product_store

    @property
    def notifications(self) -> typing.List[notification.Notification]:
        return []

    async def handle(self, request: commands.DeleteProduct) -> None:
        if await self._store.delete(request.id):
            logger.info("Product %s deleted", request.id)
        else:
            logger.debug("Product %s already absent, nothing to delete", request.id)
