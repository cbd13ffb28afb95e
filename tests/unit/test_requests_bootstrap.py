import di
import pytest

import catalog
from catalog.container import di as di_container_impl
from catalog.middlewares import logging as logging_middleware
from catalog.products import commands, queries, wiring
from catalog.requests import bootstrap


class MockCatalogContainer:
    """Minimal Container implementation for bootstrap tests."""

    async def resolve(self, type_):
        return type_()


def test_bootstrap_wraps_di_container() -> None:
    di_container = di.Container()

    mediator = bootstrap.bootstrap(di_container=di_container)

    assert isinstance(mediator, catalog.Mediator)
    container = mediator._dispatcher._container
    assert isinstance(container, di_container_impl.DIContainer)
    assert container._external_container is di_container


def test_bootstrap_uses_catalog_container_as_is() -> None:
    container = MockCatalogContainer()

    mediator = bootstrap.bootstrap(di_container=container)

    assert mediator._dispatcher._container is container


def test_bootstrap_appends_logging_middleware() -> None:
    mediator = bootstrap.bootstrap(di_container=di.Container())

    chain = mediator._dispatcher._middleware_chain._chain
    assert isinstance(chain[-1], logging_middleware.LoggingMiddleware)


def test_bootstrap_fails_fast_on_missing_handler() -> None:
    with pytest.raises(catalog.NoHandlerRegistered) as exc_info:
        bootstrap.bootstrap(
            di_container=di.Container(),
            commands_mapper=wiring.commands_mapper,
            verify=wiring.PRODUCT_REQUESTS,
        )

    assert set(exc_info.value.request_types) == {
        queries.GetProduct,
        queries.ListProducts,
    }


def test_products_bootstrap_binds_every_request() -> None:
    mediator = wiring.bootstrap()

    request_map = mediator._dispatcher._request_map
    assert set(request_map) == set(wiring.PRODUCT_REQUESTS)
    assert commands.CreateProduct in request_map
