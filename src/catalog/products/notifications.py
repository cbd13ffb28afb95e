import uuid

from catalog import notifications


class ProductCreated(notifications.Notification, frozen=True):
    id: uuid.UUID
