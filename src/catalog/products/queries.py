import uuid

from catalog import requests


class GetProduct(requests.Request, frozen=True):
    id: uuid.UUID


class ListProducts(requests.Request, frozen=True):
    pass
