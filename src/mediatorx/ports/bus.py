"""IMediator — the dispatch capability exposed to application code."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, TypeVar

if TYPE_CHECKING:
    from ..primitives.cancellation import CancellationToken
    from ..cqrs.request import Request
    from ..validation.result import ValidationResult

TResult = TypeVar("TResult")


class IMediator(Protocol):
    """
    Interface for validating requests and dispatching them to their handlers.
    """

    async def send(
        self,
        request: Request[TResult],
        cancellation: CancellationToken | None = None,
    ) -> TResult: ...

    async def validate(
        self,
        request: Any,
        cancellation: CancellationToken | None = None,
    ) -> ValidationResult: ...
