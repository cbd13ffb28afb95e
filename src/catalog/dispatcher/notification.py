import logging
import typing

from catalog.container.protocol import Container
from catalog.notifications.map import NotificationMap
from catalog.notifications.notification import Notification
from catalog.notifications.notification_handler import NotificationHandler

logger = logging.getLogger("catalog")


class NotificationDispatcher:
    """
    Fans a notification out to its subscribers, one after another in registration order.

    A failing subscriber is logged and skipped: the command that raised the
    notification has already completed, so delivery carries on with the next one.
    """

    def __init__(
        self,
        notification_map: NotificationMap,
        container: Container,
    ) -> None:
        self._notification_map = notification_map
        self._container = container

    async def _handle(
        self,
        notification: Notification,
        handler_type: typing.Type[NotificationHandler],
    ) -> None:
        handler: NotificationHandler = await self._container.resolve(handler_type)
        logger.debug(
            "Handling Notification(%s) via subscriber(%s)",
            type(notification).__name__,
            handler_type.__name__,
        )
        await handler.handle(notification)

    async def dispatch(self, notification: Notification) -> None:
        handler_types = self._notification_map.get(type(notification), [])
        if not handler_types:
            logger.warning(
                "Subscribers for notification %s not found",
                type(notification).__name__,
            )
            return
        for handler_type in handler_types:
            try:
                await self._handle(notification, handler_type)
            except Exception:
                logger.exception(
                    "Subscriber %s failed to handle %s",
                    handler_type.__name__,
                    type(notification).__name__,
                )
