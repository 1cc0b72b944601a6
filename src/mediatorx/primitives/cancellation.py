"""CancellationToken — cooperative cancellation signal forwarded to handlers."""

from __future__ import annotations

import asyncio

from .exceptions import OperationCancelledError


class CancellationToken:
    """Signal that a caller no longer needs the result of a request.

    The mediator never polls the token; it only forwards it to every
    validator and handler, which decide how to honour it.

    Usage::

        token = CancellationToken()
        task = asyncio.create_task(mediator.send(request, token))
        token.cancel()
    """

    __slots__ = ("_event", "_cancellable")

    def __init__(self, *, cancellable: bool = True) -> None:
        self._event = asyncio.Event()
        self._cancellable = cancellable

    @classmethod
    def none(cls) -> CancellationToken:
        """Return a token that can never be cancelled."""
        return cls(cancellable=False)

    @property
    def can_be_cancelled(self) -> bool:
        return self._cancellable

    @property
    def is_cancellation_requested(self) -> bool:
        return self._event.is_set()

    def cancel(self) -> None:
        """Request cancellation. Idempotent."""
        if not self._cancellable:
            raise ValueError("This token cannot be cancelled")
        self._event.set()

    def raise_if_cancellation_requested(self) -> None:
        if self._event.is_set():
            raise OperationCancelledError("The operation was cancelled")

    async def wait(self) -> None:
        """Suspend until cancellation is requested."""
        await self._event.wait()

    def __repr__(self) -> str:
        return (
            f"CancellationToken(cancelled={self.is_cancellation_requested}, "
            f"cancellable={self._cancellable})"
        )
