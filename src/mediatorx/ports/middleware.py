"""IMiddleware — wrappers around handler invocation."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..primitives.cancellation import CancellationToken

#: The rest of the chain: the next middleware, or the handler itself.
NextHandler = Callable[[Any, "CancellationToken"], Awaitable[Any]]


@runtime_checkable
class IMiddleware(Protocol):
    """Protocol for middleware wrapped around a resolved handler.

    The mediator only builds the chain for a request that passed
    validation and has a handler, so middleware never sees rejected or
    unroutable requests. The cancellation token given to
    :meth:`Mediator.send <mediatorx.cqrs.mediator.Mediator.send>` travels
    down the chain with the request; a middleware may inspect it, but
    must hand the same token on unless it short-circuits.

    Chains are built by :func:`~mediatorx.middleware.pipeline.build_pipeline`
    with the first middleware outermost.
    """

    async def __call__(
        self,
        request: Any,
        cancellation: CancellationToken,
        next_handler: NextHandler,
    ) -> Any:
        """Run around ``next_handler(request, cancellation)``.

        Returns the handler result, or a substitute when the middleware
        short-circuits.
        """
        ...
