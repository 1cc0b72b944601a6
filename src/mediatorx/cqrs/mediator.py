"""Mediator — validates requests, then routes them to their single handler."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, TypeVar, cast

from ..middleware.pipeline import build_pipeline
from ..ports.bus import IMediator
from ..ports.validation import IValidator
from ..primitives.cancellation import CancellationToken
from ..primitives.exceptions import HandlerNotFoundError, ValidationFailedError
from ..validation.composite import CompositeValidator
from ..validation.result import ValidationError, ValidationResult
from .config import MediatorConfig
from .handler import RequestHandler

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ..ports.middleware import IMiddleware
    from ..ports.resolver import IResolver
    from .request import Request

logger = logging.getLogger(__name__)

TResult = TypeVar("TResult")

NULL_REQUEST_PROPERTY = "Request"
NULL_REQUEST_MESSAGE = "Request cannot be null"


def null_request_result() -> ValidationResult:
    """The result reported for a missing request."""
    return ValidationResult.failure(
        ValidationError(NULL_REQUEST_PROPERTY, NULL_REQUEST_MESSAGE)
    )


class Mediator(IMediator):
    """Routes requests through validation to their handlers.

    Every dispatch has two phases. All validators registered for the
    request's runtime type run first and their errors are concatenated;
    only when the aggregate is valid is the handler resolved and invoked.
    A missing handler therefore never hides an invalid request.

    The mediator keeps no mutable state and may be shared between
    concurrent callers. Handler and validator instances belong to the
    resolver.

    Parameters
    ----------
    resolver:
        Any :class:`~mediatorx.ports.resolver.IResolver`, typically a
        :class:`~mediatorx.cqrs.registry.HandlerRegistry`.
    config:
        Optional :class:`~mediatorx.cqrs.config.MediatorConfig`.
    middlewares:
        Optional middleware wrapped around handler invocation, first =
        outermost.
    """

    def __init__(
        self,
        resolver: IResolver,
        *,
        config: MediatorConfig | None = None,
        middlewares: Sequence[IMiddleware] | None = None,
    ) -> None:
        if resolver is None:
            raise ValueError("resolver is required")
        self._resolver = resolver
        self._config = config or MediatorConfig()
        self._middlewares: tuple[IMiddleware, ...] = tuple(middlewares or ())

    @property
    def config(self) -> MediatorConfig:
        return self._config

    # ── Public API ───────────────────────────────────────────────

    async def send(
        self,
        request: Request[TResult],
        cancellation: CancellationToken | None = None,
    ) -> TResult:
        """Validate *request*, then dispatch it to its handler.

        Raises :class:`ValidationFailedError` with the full aggregated
        result when validation fails (including a ``None`` request), and
        :class:`HandlerNotFoundError` when the request is valid but no
        handler is registered. Exceptions raised by validators or the
        handler propagate unchanged.
        """
        token = cancellation or CancellationToken.none()

        result = await self.validate(request, token)
        if not result.is_valid:
            logger.info(
                "Rejected %s: %d validation error(s)",
                type(request).__name__,
                len(result.errors),
            )
            raise ValidationFailedError(result)

        request_type = type(request)
        handler = self._resolver.resolve_one(RequestHandler, request_type)
        if handler is None:
            raise HandlerNotFoundError(request_type)

        logger.debug(
            "Dispatching %s to %s", request_type.__name__, type(handler).__name__
        )

        async def _innermost(req: Any, cancel: CancellationToken) -> Any:
            return await handler.handle(req, cancel)

        pipeline = build_pipeline(self._middlewares, _innermost)
        return cast("TResult", await pipeline(request, token))

    async def validate(
        self,
        request: Any,
        cancellation: CancellationToken | None = None,
    ) -> ValidationResult:
        """Run every validator registered for the request's runtime type.

        Never raises for invalid requests and never touches the handler.
        No registered validators means the request is valid.
        """
        if request is None:
            return null_request_result()

        validators = self._resolver.resolve_all(IValidator, type(request))
        if not validators:
            return ValidationResult.success()

        logger.debug(
            "Validating %s with %d validator(s)",
            type(request).__name__,
            len(validators),
        )
        composite = CompositeValidator(
            validators, concurrent=self._config.concurrent_validation
        )
        return await composite.validate(
            request, cancellation or CancellationToken.none()
        )
