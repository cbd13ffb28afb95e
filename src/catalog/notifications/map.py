import typing

from catalog import generic_utils
from catalog.notifications import notification, notification_handler

THandler = typing.TypeVar(
    "THandler",
    bound=typing.Type[notification_handler.NotificationHandler],
)

_KT = typing.TypeVar("_KT", bound=typing.Type[notification.Notification])
_VT: typing.TypeAlias = typing.List[THandler]


class NotificationMap(typing.Dict[_KT, _VT]):
    """
    Maps every notification type to its subscribers, kept in registration order.
    """

    def bind(
        self,
        notification_type: _KT,
        handler_type: THandler,
    ) -> None:
        if notification_type not in self:
            self[notification_type] = [handler_type]
        else:
            if handler_type in self[notification_type]:
                raise KeyError(f"{handler_type} already bind to {notification_type}")
            self[notification_type].append(handler_type)

    def register(self, *handler_types: THandler) -> None:
        for handler_type in handler_types:
            args = generic_utils.get_generic_args_for_origin(
                handler_type,
                (notification_handler.NotificationHandler,),
            )
            if args is None:
                raise TypeError(
                    f"{handler_type.__name__} must be parameterized with a concrete notification type, "
                    "e.g. NotificationHandler[MyNotification]",
                )
            self.bind(args[0], handler_type)

    def __setitem__(self, __key: _KT, __value: _VT) -> None:
        if __key in self:
            raise KeyError(f"{__key} already exists in registry")
        super().__setitem__(__key, __value)

    def __delitem__(self, __key: _KT):
        raise TypeError(f"{self.__class__.__name__} has no delete method")
