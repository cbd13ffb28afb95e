from catalog.requests.map import RequestMap
from catalog.requests.request import Request
from catalog.requests.request_handler import RequestHandler

__all__ = (
    "RequestMap",
    "Request",
    "RequestHandler",
)
