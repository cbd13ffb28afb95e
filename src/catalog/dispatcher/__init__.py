from catalog.dispatcher.models import RequestDispatchResult
from catalog.dispatcher.notification import NotificationDispatcher
from catalog.dispatcher.request import RequestDispatcher

__all__ = (
    "RequestDispatchResult",
    "RequestDispatcher",
    "NotificationDispatcher",
)
