"""CompositeValidator — fans a request out to many validators, collects all errors."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, Any

from .result import ValidationResult

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ..primitives.cancellation import CancellationToken
    from ..ports.validation import IValidator


class CompositeValidator:
    """Runs a list of validators and concatenates their results.

    Unlike fail-fast validation, this collects **all** errors across
    all validators before returning. Errors keep the validators' order,
    then each validator's own order.

    In concurrent mode every validator is started at once and all of them
    are awaited before aggregation. If any validator raises, the first
    exception (in validator order) is re-raised once the others finished.

    Usage::

        validator = CompositeValidator([NameValidator(), PriceValidator()])
        result = await validator.validate(command, cancellation)
    """

    def __init__(
        self,
        validators: Iterable[IValidator] | None = None,
        *,
        concurrent: bool = True,
    ) -> None:
        self._validators: list[IValidator] = list(validators or [])
        self._concurrent = concurrent

    def add(self, validator: IValidator) -> None:
        """Append a validator to the chain."""
        self._validators.append(validator)

    def __len__(self) -> int:
        return len(self._validators)

    async def validate(
        self, request: Any, cancellation: CancellationToken
    ) -> ValidationResult:
        """Run all validators and merge errors."""
        if not self._validators:
            return ValidationResult.success()

        if not self._concurrent:
            results = [
                await validator.validate(request, cancellation)
                for validator in self._validators
            ]
            return ValidationResult.combine(results)

        outcomes = await asyncio.gather(
            *(
                validator.validate(request, cancellation)
                for validator in self._validators
            ),
            return_exceptions=True,
        )
        for outcome in outcomes:
            if isinstance(outcome, BaseException):
                raise outcome
        return ValidationResult.combine(outcomes)
