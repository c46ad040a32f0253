from http import HTTPStatus
from typing import Any

from pydantic import BaseModel, ConfigDict

from ..domain import ErrorMessage, OperationState


class Outcome(BaseModel):
    """Final disposition of a lifecycle request.

    The transport layer only has to write ``status`` and ``body`` to the
    wire. ``body`` is None for outcomes without a body.

    Attributes:
        status: HTTP status the outcome maps to.
        body: JSON-serializable response body.
        state: State of the polled operation, for last-operation outcomes.
    """

    model_config = ConfigDict(frozen=True)

    status: HTTPStatus
    body: dict[str, Any] | None = None
    state: OperationState | None = None

    @classmethod
    def ok(cls, body: dict[str, Any] | None = None) -> "Outcome":
        return cls(status=HTTPStatus.OK, body=body)

    @classmethod
    def created(cls, body: dict[str, Any] | None = None) -> "Outcome":
        return cls(status=HTTPStatus.CREATED, body=body)

    @classmethod
    def accepted(cls, body: dict[str, Any] | None = None) -> "Outcome":
        return cls(status=HTTPStatus.ACCEPTED, body=body)

    @classmethod
    def error(cls, status: HTTPStatus, message: ErrorMessage) -> "Outcome":
        return cls(status=status, body=message.to_body())

    @property
    def kind(self) -> str:
        """Status phrase, e.g. ``"Unprocessable Entity"``."""
        return self.status.phrase

    @property
    def is_success(self) -> bool:
        return self.status < HTTPStatus.BAD_REQUEST
