"""LoggingMiddleware — logs request execution details."""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any

from ..correlation import get_correlation_id
from ..ports.middleware import IMiddleware

if TYPE_CHECKING:
    from ..ports.middleware import NextHandler
    from ..primitives.cancellation import CancellationToken

_log = logging.getLogger("mediatorx.middleware")


class LoggingMiddleware(IMiddleware):
    """Logs handler execution: request name, correlation id and duration.

    A request that reaches the handler with cancellation already requested
    is logged as a warning; the handler still decides what to do with it.
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._log = logger or _log

    async def __call__(
        self,
        request: Any,
        cancellation: CancellationToken,
        next_handler: NextHandler,
    ) -> Any:
        req_name = type(request).__name__
        correlation_id = getattr(request, "correlation_id", None) or (
            get_correlation_id()
        )
        self._log.info(
            "Handling %s (correlation_id=%s)",
            req_name,
            correlation_id,
        )
        if cancellation.is_cancellation_requested:
            self._log.warning(
                "%s dispatched after cancellation was requested", req_name
            )

        start = time.perf_counter()
        try:
            result = await next_handler(request, cancellation)
        except Exception:
            elapsed = (time.perf_counter() - start) * 1000
            self._log.exception("%s failed after %.2fms", req_name, elapsed)
            raise
        elapsed = (time.perf_counter() - start) * 1000
        self._log.info("%s completed in %.2fms", req_name, elapsed)
        return result
