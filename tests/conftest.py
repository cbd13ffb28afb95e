import pytest

import catalog
from catalog import products


@pytest.fixture
def product_store() -> products.InMemoryProductStore:
    return products.InMemoryProductStore()


@pytest.fixture
def audit_trail() -> products.AuditTrail:
    return products.AuditTrail()


@pytest.fixture
def mediator(
    product_store: products.InMemoryProductStore,
    audit_trail: products.AuditTrail,
) -> catalog.Mediator:
    return products.bootstrap(product_store=product_store, audit_trail=audit_trail)
