from catalog.products.wiring import bootstrap
from catalog.products.commands import CreateProduct, DeleteProduct, UpdateProduct
from catalog.products.models import Product, ProductView
from catalog.products.notifications import ProductCreated
from catalog.products.queries import GetProduct, ListProducts
from catalog.products.store import InMemoryProductStore, ProductStore
from catalog.products.subscribers import AuditTrail

__all__ = (
    "bootstrap",
    "Product",
    "ProductView",
    "CreateProduct",
    "UpdateProduct",
    "DeleteProduct",
    "GetProduct",
    "ListProducts",
    "ProductCreated",
    "ProductStore",
    "InMemoryProductStore",
    "AuditTrail",
)
