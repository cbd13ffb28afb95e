from catalog import errors
from catalog.container.protocol import Container
from catalog.dispatcher.models import RequestDispatchResult
from catalog.middlewares.base import MiddlewareChain
from catalog.requests.map import RequestMap
from catalog.requests.request import Request
from catalog.requests.request_handler import RequestHandler


class RequestDispatcher:
    def __init__(
        self,
        request_map: RequestMap,
        container: Container,
        middleware_chain: MiddlewareChain | None = None,
    ) -> None:
        self._request_map = request_map
        self._container = container
        self._middleware_chain = middleware_chain or MiddlewareChain()

    async def dispatch(self, request: Request) -> RequestDispatchResult:
        handler_type = self._request_map.get(type(request), None)
        if handler_type is None:
            raise errors.NoHandlerRegistered(type(request))
        handler: RequestHandler = await self._container.resolve(handler_type)
        wrapped_handle = self._middleware_chain.wrap(handler.handle)
        response = await wrapped_handle(request)

        return RequestDispatchResult(
            response=response,
            notifications=list(handler.notifications),
        )
