"""PydanticValidator — leverages Pydantic model validation."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import ValidationError as PydanticValidationError

from .result import ValidationError, ValidationResult

if TYPE_CHECKING:
    from ..primitives.cancellation import CancellationToken


class PydanticValidator:
    """Validates requests using Pydantic model validation.

    Re-validates the request data through its model class and converts
    every pydantic error into a
    :class:`~mediatorx.validation.result.ValidationError` whose property
    name is the dotted error location. Useful for requests built with
    ``model_construct()`` or received from untrusted code paths.
    """

    async def validate(
        self, request: Any, cancellation: CancellationToken
    ) -> ValidationResult:
        if not hasattr(request, "model_validate"):
            return ValidationResult.success()

        try:
            type(request).model_validate(request.model_dump(by_alias=True))
            return ValidationResult.success()
        except PydanticValidationError as exc:
            return ValidationResult(
                ValidationError(
                    ".".join(str(p) for p in error.get("loc", ())) or "__root__",
                    error.get("msg", "validation error"),
                )
                for error in exc.errors()
            )
