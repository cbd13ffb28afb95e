import logging
import typing
import uuid

from catalog import notifications
from catalog.products import notifications as product_notifications

logger = logging.getLogger("catalog")


class AuditTrail:
    """In-memory record of the products announced as created."""

    def __init__(self) -> None:
        self._created: typing.List[uuid.UUID] = []

    def record_created(self, product_id: uuid.UUID) -> None:
        self._created.append(product_id)

    @property
    def created(self) -> typing.List[uuid.UUID]:
        return list(self._created)


class LogProductCreated(
    notifications.NotificationHandler[product_notifications.ProductCreated],
):
    async def handle(self, notification: product_notifications.ProductCreated) -> None:
        logger.info("New product %s is now available", notification.id)


class RecordProductCreated(
    notifications.NotificationHandler[product_notifications.ProductCreated],
):
    def __init__(self, audit_trail: AuditTrail) -> None:
        self._audit_trail = audit_trail

    async def handle(self, notification: product_notifications.ProductCreated) -> None:
        self._audit_trail.record_created(notification.id)
