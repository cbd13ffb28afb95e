from catalog.middlewares.base import Middleware, MiddlewareChain
from catalog.middlewares.logging import LoggingMiddleware

__all__ = (
    "Middleware",
    "MiddlewareChain",
    "LoggingMiddleware",
)
