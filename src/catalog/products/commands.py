import decimal
import uuid

from catalog import requests


class CreateProduct(requests.Request, frozen=True):
    name: str
    description: str = ""
    price: decimal.Decimal


class UpdateProduct(requests.Request, frozen=True):
    id: uuid.UUID
    name: str
    description: str = ""
    price: decimal.Decimal


class DeleteProduct(requests.Request, frozen=True):
    id: uuid.UUID
