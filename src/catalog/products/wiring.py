import typing

import di
from di import dependent

from catalog import mediator, notifications, requests
from catalog.middlewares import base as mediator_middlewares
from catalog.products import (
    command_handlers,
    commands,
    queries,
    query_handlers,
    store,
    subscribers,
)
from catalog.products import notifications as product_notifications
from catalog.requests import bootstrap as requests_bootstrap

PRODUCT_REQUESTS: typing.Tuple[typing.Type[requests.Request], ...] = (
    commands.CreateProduct,
    commands.UpdateProduct,
    commands.DeleteProduct,
    queries.GetProduct,
    queries.ListProducts,
)


def commands_mapper(mapper: requests.RequestMap) -> None:
    mapper.register(
        command_handlers.CreateProductCommandHandler,
        command_handlers.UpdateProductCommandHandler,
        command_handlers.DeleteProductCommandHandler,
    )


def queries_mapper(mapper: requests.RequestMap) -> None:
    mapper.register(
        query_handlers.GetProductQueryHandler,
        query_handlers.ListProductsQueryHandler,
    )


def notifications_mapper(mapper: notifications.NotificationMap) -> None:
    mapper.bind(product_notifications.ProductCreated, subscribers.LogProductCreated)
    mapper.bind(product_notifications.ProductCreated, subscribers.RecordProductCreated)


def setup_di(
    product_store: store.ProductStore,
    audit_trail: subscribers.AuditTrail,
) -> di.Container:
    """
    Initialize DI container

    Handlers get the shared store and audit trail injected through their constructors.
    """
    container = di.Container()
    container.bind(
        di.bind_by_type(
            dependent.Dependent(lambda: product_store, scope="request"),
            store.ProductStore,
        ),
    )
    container.bind(
        di.bind_by_type(
            dependent.Dependent(lambda: audit_trail, scope="request"),
            subscribers.AuditTrail,
        ),
    )
    return container


def bootstrap(
    product_store: store.ProductStore | None = None,
    audit_trail: subscribers.AuditTrail | None = None,
    middlewares: typing.Sequence[mediator_middlewares.Middleware] | None = None,
) -> mediator.Mediator:
    return requests_bootstrap.bootstrap(
        di_container=setup_di(
            product_store if product_store is not None else store.InMemoryProductStore(),
            audit_trail if audit_trail is not None else subscribers.AuditTrail(),
        ),
        middlewares=middlewares,
        commands_mapper=commands_mapper,
        queries_mapper=queries_mapper,
        notifications_mapper=notifications_mapper,
        verify=PRODUCT_REQUESTS,
    )
