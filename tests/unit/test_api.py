import uuid

import pytest
from fastapi import testclient

from catalog import products
from catalog.api import create_app


@pytest.fixture
def client(
    product_store: products.InMemoryProductStore,
    audit_trail: products.AuditTrail,
) -> testclient.TestClient:
    mediator = products.bootstrap(product_store=product_store, audit_trail=audit_trail)
    return testclient.TestClient(create_app(mediator))


def _create(client: testclient.TestClient, **body) -> str:
    response = client.post(
        "/products",
        json={"name": "Mouse", "description": "Wireless", "price": "29.99", **body},
    )
    assert response.status_code == 201
    return response.json()["id"]


def test_create_and_get_product(client: testclient.TestClient) -> None:
    response = client.post(
        "/products",
        json={"name": "Mouse", "description": "Wireless", "price": "29.99"},
    )

    assert response.status_code == 201
    product_id = response.json()["id"]
    assert response.headers["location"] == f"/products/{product_id}"

    response = client.get(f"/products/{product_id}")
    assert response.status_code == 200
    assert response.json() == {
        "id": product_id,
        "name": "Mouse",
        "description": "Wireless",
        "price": "29.99",
    }


def test_get_unknown_product_is_404(client: testclient.TestClient) -> None:
    response = client.get(f"/products/{uuid.uuid4()}")

    assert response.status_code == 404


def test_list_products(client: testclient.TestClient) -> None:
    assert client.get("/products").json() == []

    first = _create(client)
    second = _create(client, name="Keyboard")

    response = client.get("/products")
    assert response.status_code == 200
    assert [p["id"] for p in response.json()] == [first, second]


def test_create_with_negative_price_is_400(
    client: testclient.TestClient,
    product_store: products.InMemoryProductStore,
) -> None:
    response = client.post(
        "/products",
        json={"name": "Mouse", "description": "", "price": -1},
    )

    assert response.status_code == 400
    assert response.json()["field"] == "price"
    assert len(product_store) == 0


def test_update_product(client: testclient.TestClient) -> None:
    product_id = _create(client)

    response = client.put(
        f"/products/{product_id}",
        json={"id": product_id, "name": "Trackball", "description": "Wired", "price": 45},
    )

    assert response.status_code == 204
    assert client.get(f"/products/{product_id}").json()["name"] == "Trackball"


def test_update_with_mismatched_ids_is_400(client: testclient.TestClient) -> None:
    product_id = _create(client)

    response = client.put(
        f"/products/{product_id}",
        json={"id": str(uuid.uuid4()), "name": "Trackball", "price": 45},
    )

    assert response.status_code == 400
    assert client.get(f"/products/{product_id}").json()["name"] == "Mouse"


def test_update_unknown_product_is_404(client: testclient.TestClient) -> None:
    product_id = str(uuid.uuid4())

    response = client.put(
        f"/products/{product_id}",
        json={"id": product_id, "name": "Trackball", "price": 45},
    )

    assert response.status_code == 404


def test_delete_product_is_idempotent(
    client: testclient.TestClient,
    audit_trail: products.AuditTrail,
) -> None:
    product_id = _create(client)
    assert audit_trail.created == [uuid.UUID(product_id)]

    assert client.delete(f"/products/{product_id}").status_code == 204
    assert client.get(f"/products/{product_id}").status_code == 404
    assert client.delete(f"/products/{product_id}").status_code == 204


def test_price_keeps_full_precision(client: testclient.TestClient) -> None:
    product_id = _create(client, price="12345678901234567.89")

    response = client.get(f"/products/{product_id}")

    assert response.json()["price"] == "12345678901234567.89"


@pytest.mark.parametrize(
    "body",
    [
        {"description": "Wireless", "price": "29.99"},
        {"name": "Mouse", "price": "not a number"},
    ],
)
def test_create_with_malformed_body_is_400(
    client: testclient.TestClient,
    product_store: products.InMemoryProductStore,
    body: dict,
) -> None:
    response = client.post("/products", json=body)

    assert response.status_code == 400
    assert len(product_store) == 0


def test_update_with_missing_field_is_400(client: testclient.TestClient) -> None:
    product_id = _create(client)

    response = client.put(f"/products/{product_id}", json={"id": product_id, "price": "1"})

    assert response.status_code == 400
    assert client.get(f"/products/{product_id}").json()["name"] == "Mouse"


def test_default_app_serves_its_own_catalog() -> None:
    client = testclient.TestClient(create_app())

    product_id = _create(client)

    assert client.get(f"/products/{product_id}").json()["name"] == "Mouse"
    assert [p["id"] for p in client.get("/products").json()] == [product_id]
