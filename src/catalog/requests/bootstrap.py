import typing

import di

from catalog import mediator as catalog_mediator, notifications, requests
from catalog.container import di as di_container_impl, protocol
from catalog.middlewares import base as mediator_middlewares, logging as logging_middleware


def setup_mediator(
    container: protocol.Container,
    middlewares: typing.Iterable[mediator_middlewares.Middleware],
    commands_mapper: typing.Callable[[requests.RequestMap], None] | None = None,
    queries_mapper: typing.Callable[[requests.RequestMap], None] | None = None,
    notifications_mapper: typing.Callable[[notifications.NotificationMap], None] | None = None,
    verify: typing.Iterable[typing.Type[requests.Request]] = (),
) -> catalog_mediator.Mediator:
    requests_mapper = requests.RequestMap()
    if commands_mapper:
        commands_mapper(requests_mapper)
    if queries_mapper:
        queries_mapper(requests_mapper)
    requests_mapper.verify(*verify)

    notification_map = notifications.NotificationMap()
    if notifications_mapper:
        notifications_mapper(notification_map)

    middleware_chain = mediator_middlewares.MiddlewareChain()

    for middleware in middlewares:
        middleware_chain.add(middleware)

    return catalog_mediator.Mediator(
        request_map=requests_mapper,
        container=container,
        notification_map=notification_map,
        middleware_chain=middleware_chain,
    )


def bootstrap(
    di_container: di.Container | protocol.Container,
    middlewares: typing.Sequence[mediator_middlewares.Middleware] | None = None,
    commands_mapper: typing.Callable[[requests.RequestMap], None] | None = None,
    queries_mapper: typing.Callable[[requests.RequestMap], None] | None = None,
    notifications_mapper: typing.Callable[[notifications.NotificationMap], None] | None = None,
    verify: typing.Iterable[typing.Type[requests.Request]] = (),
) -> catalog_mediator.Mediator:
    """
    Builds a mediator with every binding in place.

    Raises NoHandlerRegistered when any request type listed in `verify` has no handler,
    so wiring defects surface before the first request is served.
    """
    # A bare di.Container gets wrapped into our own container
    if isinstance(di_container, di.Container):
        container: protocol.Container = di_container_impl.DIContainer(di_container)
    else:
        container = di_container

    middlewares_list: typing.List[mediator_middlewares.Middleware] = list(
        middlewares or [],
    )
    return setup_mediator(
        container,
        middlewares=middlewares_list + [logging_middleware.LoggingMiddleware()],
        commands_mapper=commands_mapper,
        queries_mapper=queries_mapper,
        notifications_mapper=notifications_mapper,
        verify=verify,
    )
