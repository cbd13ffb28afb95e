import typing

from catalog import (
    container as di_container,
    dispatcher,
    middlewares,
    notifications,
    requests,
)


class Mediator:
    """
    The mediator object.

    Routes every request to its single handler and fans the notifications
    recorded by that handler out to their subscribers.

    Usage::

      request_map = RequestMap()
      request_map.bind(CreateProduct, CreateProductCommandHandler)
      notification_map = NotificationMap()
      notification_map.bind(ProductCreated, LogProductCreated)

      mediator = Mediator(
        request_map=request_map,
        notification_map=notification_map,
        container=container,
      )

      # Handles the command, then publishes ProductCreated to its subscribers.
      product_id = await mediator.send(create_product)

    """

    def __init__(
        self,
        request_map: requests.RequestMap,
        container: di_container.Container,
        notification_map: notifications.NotificationMap | None = None,
        middleware_chain: middlewares.MiddlewareChain | None = None,
    ) -> None:
        self._dispatcher = dispatcher.RequestDispatcher(
            request_map=request_map,
            container=container,
            middleware_chain=middleware_chain,
        )
        self._notification_dispatcher = dispatcher.NotificationDispatcher(
            notification_map=notification_map or notifications.NotificationMap(),
            container=container,
        )

    async def send(self, request: requests.Request) -> typing.Any:
        dispatch_result = await self._dispatcher.dispatch(request)

        for notification in dispatch_result.notifications:
            await self.publish(notification)

        return dispatch_result.response

    async def publish(self, notification: notifications.Notification) -> None:
        await self._notification_dispatcher.dispatch(notification)
