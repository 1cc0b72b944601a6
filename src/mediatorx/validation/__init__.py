"""Validation system: ValidationResult, validators and their composition."""

from __future__ import annotations

from .base import RequestValidator
from .composite import CompositeValidator
from .pydantic import PydanticValidator
from .result import ValidationError, ValidationResult

__all__ = [
    "CompositeValidator",
    "PydanticValidator",
    "RequestValidator",
    "ValidationError",
    "ValidationResult",
]
