import pydantic


class Notification(pydantic.BaseModel, frozen=True):
    """
    The base class for notifications.

    A notification is broadcast after a command completes, for decoupled side effects.
    """
