"""IResolver — lookup of handler and validator instances by request type."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence

T = TypeVar("T")


@runtime_checkable
class IResolver(Protocol):
    """Maps a ``(service, request_type)`` key to registered instances.

    *service* is the capability being looked up
    (:class:`~mediatorx.cqrs.handler.RequestHandler` or
    :class:`~mediatorx.ports.validation.IValidator`); *request_type* is the
    runtime type of the request. The resolver owns the instances and their
    lifetimes.
    """

    def resolve_one(self, service: type[T], request_type: type[Any]) -> T | None:
        """Return the single instance bound to the key, or ``None``."""
        ...

    def resolve_all(self, service: type[T], request_type: type[Any]) -> Sequence[T]:
        """Return every instance bound to the key, in registration order."""
        ...
