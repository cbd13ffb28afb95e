import typing


class CatalogError(Exception):
    """
    Base class for errors raised by the product catalog handlers.
    """


class ValidationFailed(CatalogError):
    """
    Raised when a request field violates a constraint.

    The request never reaches the store.
    """

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        self.message = message
        super().__init__(f"{field}: {message}")


class NotFound(CatalogError):
    """
    Raised when a referenced identifier has no corresponding record.
    """

    def __init__(self, entity: str, id_: typing.Any) -> None:
        self.entity = entity
        self.id = id_
        super().__init__(f"{entity} {id_} not found")


class NoHandlerRegistered(Exception):
    """
    Raised when a request type has no handler bound in the request map.

    It is a configuration defect rather than a runtime condition.
    """

    def __init__(self, *request_types: type) -> None:
        self.request_types = request_types
        names = ", ".join(t.__name__ for t in request_types)
        super().__init__(f"RequestHandler not found matching Request type(s) {names}")
