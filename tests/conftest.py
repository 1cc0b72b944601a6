from __future__ import annotations

import pytest

from mediatorx.cqrs.mediator import Mediator
from mediatorx.cqrs.registry import HandlerRegistry
from tests.fakes import (
    SampleCommand,
    SampleCommandHandler,
    SampleCommandValidator,
    SampleQueryHandler,
    SampleQueryValidator,
)


@pytest.fixture()
def command_handler() -> SampleCommandHandler:
    return SampleCommandHandler()


@pytest.fixture()
def registry(command_handler: SampleCommandHandler) -> HandlerRegistry:
    registry = HandlerRegistry()
    registry.register_handler(SampleCommand, command_handler)
    registry.register(SampleQueryHandler)
    registry.register(SampleCommandValidator())
    registry.register(SampleQueryValidator())
    return registry


@pytest.fixture()
def mediator(registry: HandlerRegistry) -> Mediator:
    return Mediator(registry)
