"""Exceptions raised by the mediator, the registry and cancellation tokens."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ..validation.result import ValidationError, ValidationResult


class MediatorXError(Exception):
    """Root exception for the mediatorx package."""


class ValidationFailedError(MediatorXError):
    """Raised by ``Mediator.send`` when the request did not pass validation.

    Carries the complete aggregated
    :class:`~mediatorx.validation.result.ValidationResult`, never only the
    first error.
    """

    def __init__(self, validation_result: ValidationResult) -> None:
        self.validation_result = validation_result
        super().__init__(
            f"Validation failed with {len(validation_result.errors)} error(s)"
        )

    @property
    def errors(self) -> tuple[ValidationError, ...]:
        return self.validation_result.errors


class HandlerError(MediatorXError):
    """Base class for handler related errors (registration, lookup)."""


class HandlerNotFoundError(HandlerError):
    """Raised when no handler is registered for a request type.

    This is a configuration error: the request was valid but nothing
    can execute it.
    """

    def __init__(self, request_type: type[Any]) -> None:
        self.request_type = request_type
        super().__init__(f"No handler registered for request {request_type.__name__}")


class HandlerRegistrationError(HandlerError):
    """Raised when a handler registration conflict is detected.

    Usage: HandlerRegistry raises this when trying to register a second,
    different handler for the same request type, or when the request type
    of a handler cannot be inferred.
    """


class OperationCancelledError(MediatorXError):
    """Raised when a handler or validator honours a cancellation request."""
