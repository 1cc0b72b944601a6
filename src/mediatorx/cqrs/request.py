"""Request base class — immutable unit of work, optionally typed to a result."""

from __future__ import annotations

import uuid
from typing import Generic

from pydantic import BaseModel, ConfigDict, Field
from typing_extensions import TypeVar

from ..correlation import get_correlation_id

TResult = TypeVar("TResult", default=None)


class Request(BaseModel, Generic[TResult]):
    """
    Base for all requests.

    The generic parameter declares the result type of the handler:

    - ``class DeleteUser(Request)`` produces no result (``None``)
    - ``class GetUser(Request[UserDTO])`` produces a ``UserDTO``

    Requests are frozen so validators and handlers cannot mutate them
    while they are being dispatched.

    The ``correlation_id`` is automatically inherited from the current context
    (see :func:`~mediatorx.correlation.get_correlation_id`).
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    request_id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    correlation_id: str | None = Field(default_factory=get_correlation_id)
