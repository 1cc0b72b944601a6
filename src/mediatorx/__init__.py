"""mediatorx — in-process request mediator with built-in validation.

Requests are validated by every registered validator before their single
handler runs. Depends only on pydantic.
"""

from __future__ import annotations

from .correlation import (
    correlation_scope,
    generate_correlation_id,
    get_correlation_id,
    set_correlation_id,
)

# ── CQRS ─────────────────────────────────────────────────────────
from .cqrs import (
    HandlerRegistry,
    Mediator,
    MediatorConfig,
    Request,
    RequestHandler,
)

# ── Middleware ───────────────────────────────────────────────────
from .middleware import LoggingMiddleware, build_pipeline

# ── Ports ────────────────────────────────────────────────────────
from .ports import IMediator, IMiddleware, IResolver, IValidator, NextHandler

# ── Primitives ──────────────────────────────────────────────────
from .primitives import (
    CancellationToken,
    HandlerError,
    HandlerNotFoundError,
    HandlerRegistrationError,
    MediatorXError,
    OperationCancelledError,
    ValidationFailedError,
)

# ── Validation ──────────────────────────────────────────────────
from .validation import (
    CompositeValidator,
    PydanticValidator,
    RequestValidator,
    ValidationError,
    ValidationResult,
)

__all__: list[str] = [
    # CQRS
    "HandlerRegistry",
    "Mediator",
    "MediatorConfig",
    "Request",
    "RequestHandler",
    # Correlation
    "correlation_scope",
    "generate_correlation_id",
    "get_correlation_id",
    "set_correlation_id",
    # Middleware
    "LoggingMiddleware",
    "build_pipeline",
    # Ports
    "IMediator",
    "IMiddleware",
    "IResolver",
    "IValidator",
    "NextHandler",
    # Primitives
    "CancellationToken",
    "HandlerError",
    "HandlerNotFoundError",
    "HandlerRegistrationError",
    "MediatorXError",
    "OperationCancelledError",
    "ValidationFailedError",
    # Validation
    "CompositeValidator",
    "PydanticValidator",
    "RequestValidator",
    "ValidationError",
    "ValidationResult",
]
