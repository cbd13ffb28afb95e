import typing

T = typing.TypeVar("T")


class Container(typing.Protocol):
    """
    Builds handler and subscriber instances for the dispatchers.
    """

    async def resolve(self, type_: typing.Type[T]) -> T:
        raise NotImplementedError
