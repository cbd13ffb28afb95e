import decimal
import logging
import uuid

import pytest

from catalog.middlewares import LoggingMiddleware
from catalog.products import models, queries


async def test_logging_middleware_logs_request_and_response(
    caplog: pytest.LogCaptureFixture,
) -> None:
    view = models.ProductView(
        id=uuid.uuid4(),
        name="Mouse",
        description="Wireless",
        price=decimal.Decimal("29.99"),
    )

    async def handle(request: queries.ListProducts):
        return [view]

    with caplog.at_level(logging.DEBUG, logger="catalog"):
        result = await LoggingMiddleware()(queries.ListProducts(), handle)

    assert result == [view]
    assert [r.getMessage() for r in caplog.records] == [
        "Handle ListProducts request",
        "Request ListProducts handled",
    ]
    response_fields = caplog.records[1].request_json_fields["response"]
    assert response_fields[0]["id"] == str(view.id)
    assert response_fields[0]["name"] == "Mouse"
