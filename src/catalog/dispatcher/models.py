import dataclasses
import typing

from catalog.notifications.notification import Notification

_ResponseT = typing.TypeVar("_ResponseT", covariant=True)


@dataclasses.dataclass
class RequestDispatchResult(typing.Generic[_ResponseT]):
    """Result of request dispatch execution."""

    response: _ResponseT
    notifications: typing.Sequence[Notification] = dataclasses.field(default_factory=list)
