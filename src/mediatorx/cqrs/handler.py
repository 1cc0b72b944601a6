"""Handler base class."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from ..primitives.cancellation import CancellationToken

TRequest = TypeVar("TRequest")
TResult = TypeVar("TResult")


class RequestHandler(ABC, Generic[TRequest, TResult]):
    """Base class for request handlers.

    Exactly one handler is bound to each request type. The request type is
    taken from the first generic parameter when the handler is registered
    without an explicit type.

    Usage::

        class GetOrderHandler(RequestHandler[GetOrderQuery, OrderDTO]):
            async def handle(
                self, request: GetOrderQuery, cancellation: CancellationToken
            ) -> OrderDTO:
                ...

        class DeleteOrderHandler(RequestHandler[DeleteOrderCommand, None]):
            async def handle(
                self, request: DeleteOrderCommand, cancellation: CancellationToken
            ) -> None:
                ...
    """

    @abstractmethod
    async def handle(
        self, request: TRequest, cancellation: CancellationToken
    ) -> TResult:
        """Execute the request and return its result."""
        ...
