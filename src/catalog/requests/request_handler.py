import abc
import typing

from catalog.notifications import notification
from catalog.requests import request as r

_Req = typing.TypeVar("_Req", bound=r.Request, contravariant=True)
_Resp = typing.TypeVar("_Resp", covariant=True)


class RequestHandler(abc.ABC, typing.Generic[_Req, _Resp]):
    """
    The request handler interface.

    The request handler is an object, which gets a request as input and may return a response as a result.
    The generic parameters tie the handler to its request type and declare the result type.

    Command handler example::

      class DeleteProductCommandHandler(RequestHandler[DeleteProduct, None]):
          def __init__(self, store: ProductStore) -> None:
              self._store = store

          @property
          def notifications(self) -> list[Notification]:
              return []

          async def handle(self, request: DeleteProduct) -> None:
              await self._store.delete(request.id)

    Query handler example::

      class GetProductQueryHandler(RequestHandler[GetProduct, ProductView | None]):
          def __init__(self, store: ProductStore) -> None:
              self._store = store

          @property
          def notifications(self) -> list[Notification]:
              return []

          async def handle(self, request: GetProduct) -> ProductView | None:
              product = await self._store.get(request.id)
              return ProductView.from_product(product) if product else None

    """

    @property
    @abc.abstractmethod
    def notifications(self) -> typing.List[notification.Notification]:
        raise NotImplementedError

    @abc.abstractmethod
    async def handle(self, request: _Req) -> _Resp:
        raise NotImplementedError
