import typing

from catalog import requests
from catalog.notifications import notification
from catalog.products import models, queries, store


class GetProductQueryHandler(
    requests.RequestHandler[queries.GetProduct, models.ProductView | None],
):
    def __init__(self, product_store: store.ProductStore) -> None:
        self._store = product_store

    @property
    def notifications(self) -> typing.List[notification.Notification]:
        return []

    async def handle(self, request: queries.GetProduct) -> models.ProductView | None:
        product = await self._store.get(request.id)
        if product is None:
            return None
        return models.ProductView.from_product(product)


class ListProductsQueryHandler(
    requests.RequestHandler[queries.ListProducts, typing.List[models.ProductView]],
):
    def __init__(self, product_store: store.ProductStore) -> None:
        self._store = product_store

    @property
    def notifications(self) -> typing.List[notification.Notification]:
        return []

    async def handle(self, request: queries.ListProducts) -> typing.List[models.ProductView]:
        return [models.ProductView.from_product(p) for p in await self._store.list()]
