from catalog.container.di import DIContainer
from catalog.container.protocol import Container

__all__ = (
    "Container",
    "DIContainer",
)
