"""IValidator — request-validation protocol."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..primitives.cancellation import CancellationToken
    from ..validation.result import ValidationResult


@runtime_checkable
class IValidator(Protocol):
    """Protocol for request validators.

    Any number of validators may be registered for one request type; the
    :class:`~mediatorx.cqrs.mediator.Mediator` runs all of them and merges
    their results.
    """

    async def validate(
        self, request: Any, cancellation: CancellationToken
    ) -> ValidationResult:
        """Validate *request* and return a
        :class:`~mediatorx.validation.result.ValidationResult`.

        Must not mutate the request. Returns
        :meth:`ValidationResult.success()` when there is nothing to report.
        """
        ...
