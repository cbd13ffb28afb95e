import typing

import di
from di import dependent, executors

from catalog.container import protocol

T = typing.TypeVar("T")


class DIContainer(protocol.Container):
    """
    Resolves handlers with the `di` package, entering a fresh "request" scope per call.
    """

    def __init__(self, container: di.Container) -> None:
        self._external_container = container

    async def resolve(self, type_: typing.Type[T]) -> T:
        executor = executors.AsyncExecutor()
        solved = self._external_container.solve(
            dependent.Dependent(type_, scope="request"),
            scopes=["request"],
        )
        with self._external_container.enter_scope("request") as state:
            return await solved.execute_async(executor=executor, state=state)
