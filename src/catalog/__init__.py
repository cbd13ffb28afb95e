from catalog.container.di import DIContainer
from catalog.container.protocol import Container
from catalog.errors import CatalogError, NoHandlerRegistered, NotFound, ValidationFailed
from catalog.mediator import Mediator
from catalog.middlewares import LoggingMiddleware, Middleware, MiddlewareChain
from catalog.notifications import Notification, NotificationHandler, NotificationMap
from catalog.requests import Request, RequestHandler, RequestMap
from catalog.response import Response

__all__ = (
    "Mediator",
    "Request",
    "RequestHandler",
    "RequestMap",
    "Response",
    "Notification",
    "NotificationHandler",
    "NotificationMap",
    "Middleware",
    "MiddlewareChain",
    "LoggingMiddleware",
    "Container",
    "DIContainer",
    "CatalogError",
    "ValidationFailed",
    "NotFound",
    "NoHandlerRegistered",
)
