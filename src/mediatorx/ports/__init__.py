from mediatorx.ports.bus import IMediator
from mediatorx.ports.middleware import IMiddleware, NextHandler
from mediatorx.ports.resolver import IResolver
from mediatorx.ports.validation import IValidator

__all__ = [
    "IMediator",
    "IMiddleware",
    "IResolver",
    "IValidator",
    "NextHandler",
]
