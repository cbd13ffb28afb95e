from catalog.notifications.map import NotificationMap
from catalog.notifications.notification import Notification
from catalog.notifications.notification_handler import NotificationHandler

__all__ = (
    "Notification",
    "NotificationHandler",
    "NotificationMap",
)
