"""RequestValidator — typed base class for validators."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from ..primitives.cancellation import CancellationToken
    from .result import ValidationResult

TRequest = TypeVar("TRequest")


class RequestValidator(ABC, Generic[TRequest]):
    """Base class for validators bound to one request type.

    Subclassing is optional (any object satisfying
    :class:`~mediatorx.ports.validation.IValidator` works), but it lets
    :meth:`HandlerRegistry.register <mediatorx.cqrs.registry.HandlerRegistry.register>`
    infer the request type from the generic parameter.

    Usage::

        class CreateUserValidator(RequestValidator[CreateUserCommand]):
            async def validate(
                self, request: CreateUserCommand, cancellation: CancellationToken
            ) -> ValidationResult:
                if not request.name.strip():
                    return ValidationResult.failure(
                        ValidationError("name", "Name is required")
                    )
                return ValidationResult.success()
    """

    @abstractmethod
    async def validate(
        self, request: TRequest, cancellation: CancellationToken
    ) -> ValidationResult: ...
