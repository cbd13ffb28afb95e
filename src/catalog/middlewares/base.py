import functools
import typing

from catalog import requests

_Req = typing.TypeVar("_Req", bound=requests.Request, contravariant=True)
_Res = typing.TypeVar("_Res", covariant=True)
HandleType = typing.Callable[[_Req], typing.Awaitable[_Res]]


class Middleware(typing.Protocol[_Req, _Res]):
    async def __call__(self, request: _Req, handle: HandleType) -> _Res:
        raise NotImplementedError


class MiddlewareChain:
    def __init__(self) -> None:
        self._chain: typing.List[Middleware] = []

    def add(self, middleware: Middleware) -> None:
        self._chain.append(middleware)

    def wrap(self, handle: HandleType) -> HandleType:
        for middleware in reversed(self._chain):
            handle = functools.partial(middleware.__call__, handle=handle)

        return handle
