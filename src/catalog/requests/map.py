import typing

from catalog import errors, generic_utils
from catalog.requests import request, request_handler

_KT = typing.TypeVar("_KT", bound=typing.Type[request.Request])
_VT = typing.TypeVar("_VT", bound=typing.Type[request_handler.RequestHandler])


class RequestMap(typing.Dict[_KT, _VT]):
    """
    Maps every request type to exactly one handler type.

    Bindings are added once at startup and can be neither replaced nor removed.
    """

    def bind(self, request_type: _KT, handler_type: _VT) -> None:
        self[request_type] = handler_type

    def register(self, *handler_types: _VT) -> None:
        """
        Binds handlers to the request types declared in their generic parameters.
        """
        for handler_type in handler_types:
            args = generic_utils.get_generic_args_for_origin(
                handler_type,
                (request_handler.RequestHandler,),
                min_args=2,
            )
            if args is None:
                raise TypeError(
                    f"{handler_type.__name__} must be parameterized with a concrete request type, "
                    "e.g. RequestHandler[MyCommand, MyResult]",
                )
            self.bind(args[0], handler_type)

    def verify(self, *request_types: _KT) -> None:
        missing = [t for t in request_types if t not in self]
        if missing:
            raise errors.NoHandlerRegistered(*missing)

    def __setitem__(self, __key: _KT, __value: _VT) -> None:
        if __key in self:
            raise KeyError(f"{__key} already exists in registry")
        super().__setitem__(__key, __value)

    def __delitem__(self, __key):
        raise TypeError(f"{self.__class__.__name__} has no delete method")
