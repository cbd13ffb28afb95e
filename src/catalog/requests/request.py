import pydantic


class Request(pydantic.BaseModel, frozen=True):
    """
    Base class for request-type objects.

    The request is an input of the request handler.
    Often Request is used for defining queries or commands.
    Requests are immutable once constructed.
    """
