import logging
import typing

import pydantic_core

from catalog import requests
from catalog.middlewares import base

Req = typing.TypeVar("Req", bound=requests.Request, contravariant=True)
Res = typing.TypeVar("Res", covariant=True)
HandleType = typing.Callable[[Req], typing.Awaitable[Res]]

logger = logging.getLogger("catalog")


class LoggingMiddleware(base.Middleware):
    async def __call__(self, request: requests.Request, handle: HandleType) -> Res:
        logger.debug(
            "Handle %s request",
            type(request).__name__,
            extra={
                "request_json_fields": {"request": request.model_dump(mode="json")},
            },
        )
        resp = await handle(request)
        logger.debug(
            "Request %s handled",
            type(request).__name__,
            extra={
                "request_json_fields": {
                    "response": pydantic_core.to_jsonable_python(resp),
                },
            },
        )

        return resp
