"""ValidationResult and ValidationError — structured validation outcome."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping


@dataclass(frozen=True, slots=True)
class ValidationError:
    """One field-level or request-level validation failure."""

    property_name: str
    error_message: str

    def __str__(self) -> str:
        return f"{self.property_name}: {self.error_message}"


@dataclass(frozen=True)
class ValidationResult:
    """Ordered, immutable collection of validation errors.

    A result with no errors is valid. Errors keep the order in which the
    validators produced them.

    Usage::

        result = ValidationResult.success()
        result = ValidationResult.failure(
            ValidationError("name", "Name is required"),
        )
    """

    errors: tuple[ValidationError, ...] = field(default=())

    def __init__(self, errors: Iterable[ValidationError] | None = None) -> None:
        object.__setattr__(self, "errors", tuple(errors or ()))

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    # ── Factory methods ──────────────────────────────────────────

    @classmethod
    def success(cls) -> ValidationResult:
        return _SUCCESS

    @classmethod
    def failure(cls, *errors: ValidationError | None) -> ValidationResult:
        """Build a result from *errors*; ``None`` entries are dropped."""
        return cls(error for error in errors if error is not None)

    @classmethod
    def from_dict(cls, errors: Mapping[str, Iterable[str]]) -> ValidationResult:
        """Build a result from the ``{field: [messages]}`` shape."""
        return cls(
            ValidationError(field_name, message)
            for field_name, messages in errors.items()
            for message in messages
        )

    @classmethod
    def combine(cls, results: Iterable[ValidationResult]) -> ValidationResult:
        """Concatenate the errors of *results*, preserving their order."""
        errors = [error for result in results for error in result.errors]
        return cls(errors) if errors else _SUCCESS

    # ── Merging ──────────────────────────────────────────────────

    def merge(self, other: ValidationResult) -> ValidationResult:
        """Return a new result holding this result's errors followed by *other*'s."""
        if other.is_valid:
            return self
        if self.is_valid:
            return other
        return ValidationResult(self.errors + other.errors)

    def errors_by_property(self) -> dict[str, list[str]]:
        """Group error messages by property name."""
        grouped: dict[str, list[str]] = {}
        for error in self.errors:
            grouped.setdefault(error.property_name, []).append(error.error_message)
        return grouped

    def __bool__(self) -> bool:
        return self.is_valid


_SUCCESS = ValidationResult()
