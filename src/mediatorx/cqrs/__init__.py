"""Request dispatch: requests, handlers, registry, mediator."""

from __future__ import annotations

from .config import MediatorConfig
from .handler import RequestHandler
from .mediator import Mediator
from .registry import HandlerRegistry, infer_request_type
from .request import Request

__all__ = [
    "HandlerRegistry",
    "Mediator",
    "MediatorConfig",
    "Request",
    "RequestHandler",
    "infer_request_type",
]
