"""HandlerRegistry — explicit handler/validator store and default resolver."""

from __future__ import annotations

import inspect
import logging
from typing import TYPE_CHECKING, Any, TypeVar, cast, get_args, get_origin

from ..ports.validation import IValidator
from ..primitives.exceptions import HandlerRegistrationError
from ..validation.base import RequestValidator
from .handler import RequestHandler

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _name(obj: Any) -> str:
    return obj.__name__ if isinstance(obj, type) else type(obj).__name__


def infer_request_type(provider: Any, base: type[Any]) -> type[Any] | None:
    """Return the request type a handler/validator declares through *base*.

    Walks the generic bases of the provider's class looking for
    ``base[RequestType, ...]`` and returns ``RequestType``.
    """
    cls = provider if isinstance(provider, type) else type(provider)
    for klass in inspect.getmro(cls):
        for orig in klass.__dict__.get("__orig_bases__", ()):
            origin = get_origin(orig)
            if not (isinstance(origin, type) and issubclass(origin, base)):
                continue
            args = get_args(orig)
            if args and isinstance(args[0], type):
                return args[0]
    return None


class HandlerRegistry:
    """Primary declarative store for request handlers and validators.

    Register handler and validator *classes* or *instances* here during
    bootstrapping, then pass the registry to the
    :class:`~mediatorx.cqrs.mediator.Mediator` as its resolver. Classes are
    instantiated through ``factory`` every time they are resolved;
    instances are returned as they are.

    **Conflict detection:** registering a second, different handler for the
    same request type raises ``HandlerRegistrationError``, so a request type
    never resolves to more than one handler. Any number of validators may
    be registered for the same request type; they resolve in registration
    order.

    Usage::

        registry = HandlerRegistry()
        registry.register_handler(CreateUserCommand, CreateUserHandler)
        registry.register_validator(CreateUserCommand, CreateUserValidator())
        registry.register(GetUserHandler)  # request type inferred
    """

    def __init__(self, factory: Callable[[type[Any]], Any] | None = None) -> None:
        self._factory: Callable[[type[Any]], Any] = factory or (lambda cls: cls())
        self._handlers: dict[type[Any], Any] = {}
        self._validators: dict[type[Any], list[Any]] = {}

    # ── Registration ─────────────────────────────────────────────

    def register_handler(self, request_type: type[Any], handler: Any) -> None:
        existing = self._handlers.get(request_type)
        if existing is not None and existing is not handler:
            msg = (
                f"Duplicate handler for {request_type.__name__}: "
                f"{_name(existing)} already registered, "
                f"cannot register {_name(handler)}"
            )
            raise HandlerRegistrationError(msg)
        self._handlers[request_type] = handler
        logger.debug(
            "Registered handler %s -> %s",
            request_type.__name__,
            _name(handler),
        )

    def register_validator(self, request_type: type[Any], validator: Any) -> None:
        validators = self._validators.setdefault(request_type, [])
        if not any(existing is validator for existing in validators):
            validators.append(validator)
            logger.debug(
                "Registered validator %s -> %s",
                request_type.__name__,
                _name(validator),
            )

    def register(self, provider: Any) -> type[Any]:
        """Register a handler or validator, inferring its request type.

        The request type is read from the ``RequestHandler[...]`` or
        ``RequestValidator[...]`` generic base. Returns the request type.
        """
        request_type = infer_request_type(provider, RequestHandler)
        if request_type is not None:
            self.register_handler(request_type, provider)
            return request_type

        request_type = infer_request_type(provider, RequestValidator)
        if request_type is not None:
            self.register_validator(request_type, provider)
            return request_type

        raise HandlerRegistrationError(
            f"Cannot infer the request type of {_name(provider)}; "
            "subclass RequestHandler[...] / RequestValidator[...] "
            "or register it with an explicit request type"
        )

    # ── Resolution (IResolver) ───────────────────────────────────

    def resolve_one(self, service: type[T], request_type: type[Any]) -> T | None:
        if service is not RequestHandler:
            return None
        handler = self._handlers.get(request_type)
        if handler is None:
            return None
        return cast("T", self._instantiate(handler))

    def resolve_all(self, service: type[T], request_type: type[Any]) -> list[T]:
        if service is RequestHandler:
            handler = self.resolve_one(service, request_type)
            return [] if handler is None else [handler]
        if service is not IValidator:
            return []
        return [
            cast("T", self._instantiate(validator))
            for validator in self._validators.get(request_type, [])
        ]

    def _instantiate(self, provider: Any) -> Any:
        if isinstance(provider, type):
            return self._factory(provider)
        return provider

    # ── Lookup ───────────────────────────────────────────────────

    def get_handler(self, request_type: type[Any]) -> Any | None:
        """Return the registered handler (class or instance) without instantiating."""
        return self._handlers.get(request_type)

    def get_validators(self, request_type: type[Any]) -> list[Any]:
        """Return the registered validators (classes or instances)."""
        return list(self._validators.get(request_type, []))

    # ── Introspection ────────────────────────────────────────────

    def get_registered_handlers(self) -> dict[str, Any]:
        """Return a snapshot of all registrations (for debugging)."""
        return {
            "handlers": {k.__name__: _name(v) for k, v in self._handlers.items()},
            "validators": {
                k.__name__: [_name(v) for v in validators]
                for k, validators in self._validators.items()
            },
        }

    # ── Cleanup ──────────────────────────────────────────────────

    def clear(self) -> None:
        """Clear all registrations (testing utility)."""
        self._handlers.clear()
        self._validators.clear()


__all__ = ["HandlerRegistry", "infer_request_type"]
