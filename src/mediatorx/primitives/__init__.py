"""Primitives: exceptions and the cancellation token."""

from __future__ import annotations

from .cancellation import CancellationToken
from .exceptions import (
    HandlerError,
    HandlerNotFoundError,
    HandlerRegistrationError,
    MediatorXError,
    OperationCancelledError,
    ValidationFailedError,
)

__all__ = [
    "CancellationToken",
    "HandlerError",
    "HandlerNotFoundError",
    "HandlerRegistrationError",
    "MediatorXError",
    "OperationCancelledError",
    "ValidationFailedError",
]
