"""Mediator configuration."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class MediatorConfig:
    """Configuration for :class:`~mediatorx.cqrs.mediator.Mediator`.

    Attributes:
        concurrent_validation: If True, all validators of a request are
            started together and joined. If False, they run one after the
            other in registration order. Aggregated errors are identical
            in both modes.
    """

    concurrent_validation: bool = True
