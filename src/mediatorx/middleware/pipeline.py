"""build_pipeline — fold middleware around a handler invocation."""

from __future__ import annotations

from functools import reduce
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ..ports.middleware import IMiddleware, NextHandler
    from ..primitives.cancellation import CancellationToken


def _link(next_handler: NextHandler, middleware: IMiddleware) -> NextHandler:
    async def _step(request: Any, cancellation: CancellationToken) -> Any:
        return await middleware(request, cancellation, next_handler)

    return _step


def build_pipeline(
    middlewares: Sequence[IMiddleware],
    handler_fn: NextHandler,
) -> NextHandler:
    """Return a callable ``(request, cancellation)`` running *handler_fn*
    inside *middlewares*.

    The first middleware is the outermost. With no middleware the handler
    callable itself is returned.
    """
    return reduce(_link, reversed(middlewares), handler_fn)
