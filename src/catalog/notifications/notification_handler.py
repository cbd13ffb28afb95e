import abc
import typing

from catalog.notifications import notification as notification_models

N = typing.TypeVar("N", bound=notification_models.Notification, contravariant=True)


class NotificationHandler(abc.ABC, typing.Generic[N]):
    """
    The notification handler (subscriber) interface.

    Usage::

      class ProductCreatedMailer(NotificationHandler[ProductCreated]):
          def __init__(self, mailer: MailerProtocol) -> None:
              self._mailer = mailer

          async def handle(self, notification: ProductCreated) -> None:
              await self._mailer.send(f"Product {notification.id} created")

    """

    @abc.abstractmethod
    async def handle(self, notification: N) -> None:
        raise NotImplementedError
