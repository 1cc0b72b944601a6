import logging
from dataclasses import dataclass

import pytest

from mediatorx.cqrs.handler import RequestHandler
from mediatorx.cqrs.registry import HandlerRegistry, infer_request_type
from mediatorx.ports.resolver import IResolver
from mediatorx.ports.validation import IValidator
from mediatorx.primitives.exceptions import HandlerRegistrationError
from mediatorx.validation.base import RequestValidator
from mediatorx.validation.result import ValidationError, ValidationResult
from tests.fakes import (
    SampleCommand,
    SampleCommandHandler,
    SampleCommandValidator,
    SampleQuery,
    SampleQueryHandler,
)


class OtherCommandHandler(RequestHandler[SampleCommand, None]):
    async def handle(self, request, cancellation) -> None:
        pass


class DerivedQueryHandler(SampleQueryHandler):
    pass


class NotAHandler:
    pass


@dataclass
class MinimumValueValidator:
    minimum: int = 0

    async def validate(self, request, cancellation) -> ValidationResult:
        if request.value < self.minimum:
            return ValidationResult.failure(ValidationError("Value", "too small"))
        return ValidationResult.success()


def test_registry_satisfies_resolver_protocol() -> None:
    assert isinstance(HandlerRegistry(), IResolver)


def test_registry_handlers(caplog) -> None:
    caplog.set_level(logging.DEBUG)
    registry = HandlerRegistry()
    handler = SampleCommandHandler()

    registry.register_handler(SampleCommand, handler)
    assert registry.resolve_one(RequestHandler, SampleCommand) is handler

    # Same handler again - idempotent
    registry.register_handler(SampleCommand, handler)

    # Different handler - raises
    with pytest.raises(HandlerRegistrationError, match="Duplicate handler"):
        registry.register_handler(SampleCommand, OtherCommandHandler)

    assert "Registered handler SampleCommand -> SampleCommandHandler" in caplog.text

    snapshot = registry.get_registered_handlers()
    assert snapshot["handlers"] == {"SampleCommand": "SampleCommandHandler"}


def test_registry_instantiates_classes_through_factory() -> None:
    created: list[type] = []

    def factory(cls: type) -> object:
        created.append(cls)
        return cls()

    registry = HandlerRegistry(factory=factory)
    registry.register_handler(SampleQuery, SampleQueryHandler)

    first = registry.resolve_one(RequestHandler, SampleQuery)
    second = registry.resolve_one(RequestHandler, SampleQuery)

    assert isinstance(first, SampleQueryHandler)
    assert first is not second
    assert created == [SampleQueryHandler, SampleQueryHandler]
    assert registry.get_handler(SampleQuery) is SampleQueryHandler


def test_registry_unknown_keys_resolve_to_nothing() -> None:
    registry = HandlerRegistry()

    assert registry.resolve_one(RequestHandler, SampleCommand) is None
    assert registry.resolve_all(IValidator, SampleCommand) == []
    assert registry.resolve_one(IValidator, SampleCommand) is None
    assert registry.resolve_all(NotAHandler, SampleCommand) == []


def test_registry_resolve_all_handlers_yields_at_most_one() -> None:
    registry = HandlerRegistry()
    registry.register(SampleQueryHandler)

    handlers = registry.resolve_all(RequestHandler, SampleQuery)

    assert len(handlers) == 1
    assert isinstance(handlers[0], SampleQueryHandler)


def test_registry_validators_keep_registration_order() -> None:
    registry = HandlerRegistry()
    first = SampleCommandValidator()
    second = SampleCommandValidator()

    registry.register_validator(SampleCommand, first)
    registry.register_validator(SampleCommand, second)
    registry.register_validator(SampleCommand, first)

    assert registry.resolve_all(IValidator, SampleCommand) == [first, second]
    assert registry.get_validators(SampleCommand) == [first, second]


def test_registry_keeps_distinct_validators_that_compare_equal() -> None:
    registry = HandlerRegistry()
    first = MinimumValueValidator()
    second = MinimumValueValidator()
    assert first == second

    registry.register_validator(SampleCommand, first)
    registry.register_validator(SampleCommand, second)

    resolved = registry.resolve_all(IValidator, SampleCommand)
    assert len(resolved) == 2
    assert resolved[0] is first
    assert resolved[1] is second


def test_registry_validator_classes_are_instantiated() -> None:
    registry = HandlerRegistry()
    registry.register_validator(SampleCommand, SampleCommandValidator)

    (validator,) = registry.resolve_all(IValidator, SampleCommand)

    assert isinstance(validator, SampleCommandValidator)


def test_register_infers_request_type() -> None:
    registry = HandlerRegistry()

    assert registry.register(SampleQueryHandler) is SampleQuery
    assert registry.register(SampleCommandValidator()) is SampleCommand
    assert registry.get_handler(SampleQuery) is SampleQueryHandler
    assert len(registry.get_validators(SampleCommand)) == 1


def test_register_rejects_unknown_provider() -> None:
    registry = HandlerRegistry()

    with pytest.raises(HandlerRegistrationError, match="Cannot infer"):
        registry.register(NotAHandler)


def test_infer_request_type_walks_subclasses() -> None:
    assert infer_request_type(DerivedQueryHandler, RequestHandler) is SampleQuery
    assert infer_request_type(SampleCommandHandler(), RequestHandler) is SampleCommand
    assert infer_request_type(SampleCommandHandler, RequestValidator) is None


def test_registry_clear() -> None:
    registry = HandlerRegistry()
    registry.register(SampleQueryHandler)
    registry.register(SampleCommandValidator())

    registry.clear()

    assert registry.get_handler(SampleQuery) is None
    assert registry.get_validators(SampleCommand) == []
