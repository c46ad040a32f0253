"""Base types shared by service instance and service binding messages.

Requests are immutable pydantic models. Wire names (``service_id``,
``accepts_incomplete``, ...) are declared as aliases so a request can be
validated straight from a decoded JSON body, while Python code refers to
the descriptive attribute names (``service_definition_id``,
``async_accepted``, ...).
"""

import base64
import binascii
import json
from collections.abc import Mapping
from enum import Enum
from typing import Any, ClassVar, Self

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .exceptions import (
    ServiceBrokerInvalidOriginatingIdentityException,
    ServiceBrokerRequestValidationException,
)


class Context(BaseModel):
    """Platform specific contextual information.

    Sent by the platform in the body of provision/update/bind requests and,
    base64 encoded, in the originating identity header. Everything except
    ``platform`` is kept as extra properties.

    Examples:
        >>> ctx = Context.from_originating_identity(
        ...     "cloudfoundry eyJ1c2VyX2lkIjogImFiYyJ9"
        ... )
        >>> ctx.platform, ctx.properties
        ('cloudfoundry', {'user_id': 'abc'})
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    platform: str | None = None

    @property
    def properties(self) -> dict[str, Any]:
        return dict(self.model_extra or {})

    @classmethod
    def from_originating_identity(cls, header: str) -> "Context":
        """Parse an ``X-Broker-API-Originating-Identity`` header value.

        The value is ``<platform> <base64 encoded JSON object>``.

        Raises:
            ServiceBrokerInvalidOriginatingIdentityException: If the value
                is not in the expected format.
        """
        parts = header.split(" ")
        if len(parts) != 2 or not parts[0]:
            raise ServiceBrokerInvalidOriginatingIdentityException(
                "Expected platform and properties in the originating identity header"
            )
        platform, encoded = parts
        try:
            properties = json.loads(base64.b64decode(encoded, validate=True))
        except (binascii.Error, UnicodeDecodeError, ValueError) as e:
            raise ServiceBrokerInvalidOriginatingIdentityException(
                "Error decoding JSON properties from the originating identity header"
            ) from e
        if not isinstance(properties, dict):
            raise ServiceBrokerInvalidOriginatingIdentityException(
                "Expected a JSON object in the originating identity header"
            )
        properties.pop("platform", None)
        return cls(platform=platform, **properties)


class OperationState(str, Enum):
    """State of an asynchronous operation as reported by a poll."""

    IN_PROGRESS = "IN_PROGRESS"
    SUCCEEDED = "SUCCEEDED"
    FAILED = "FAILED"

    @classmethod
    def _missing_(cls, value: object) -> "OperationState | None":
        # Accept the protocol spelling ("in progress") as well
        if isinstance(value, str):
            return cls.__members__.get(value.strip().upper().replace(" ", "_"))
        return None

    def __str__(self) -> str:
        return self.value


class ServiceBrokerRequest(BaseModel):
    """Fields common to every request sent to a service broker.

    Attributes:
        api_info_location: Location of the platform's API endpoint.
        originating_identity: Identity of the user that initiated the
            request on the platform, if sent.
        platform_instance_id: Id of the platform instance that sent the
            request, for brokers serving several platforms.
        request_identity: Platform supplied request id.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    required_fields: ClassVar[tuple[str, ...]] = ()

    api_info_location: str | None = None
    originating_identity: Context | None = None
    platform_instance_id: str | None = None
    request_identity: str | None = None

    @classmethod
    def parse(cls, data: Mapping[str, Any]) -> Self:
        """Validate wire data into a request.

        Fields listed in ``required_fields`` must be present and non-empty
        even though the model itself allows them to be missing (service
        implementations and tests may build partial requests directly).

        Raises:
            ServiceBrokerRequestValidationException: Naming every missing
                or malformed field by its wire name.
        """
        offending = [name for name in cls.required_fields if data.get(name) in (None, "")]
        try:
            request = cls.model_validate(data)
        except ValidationError as e:
            raise ServiceBrokerRequestValidationException.from_validation_error(
                e, offending
            ) from e
        if offending:
            raise ServiceBrokerRequestValidationException(offending)
        return request


class AsyncServiceBrokerRequest(ServiceBrokerRequest):
    """A request whose operation may be carried out asynchronously.

    Attributes:
        async_accepted: Whether the platform accepts an asynchronous
            (``202 Accepted``) response.
    """

    async_accepted: bool = Field(default=False, alias="accepts_incomplete")


class ServiceBrokerResponse(BaseModel):
    """Base class of the bodies returned by service implementations."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def to_body(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


class AsyncServiceBrokerResponse(ServiceBrokerResponse):
    """A response that may describe an asynchronous operation.

    ``async_`` is never part of the body; it is reported to the platform
    through the status code. ``operation`` is omitted when empty.
    """

    async_: bool = Field(default=False, alias="async", exclude=True)
    operation: str | None = None

    @property
    def is_async(self) -> bool:
        return self.async_

    def to_body(self) -> dict[str, Any]:
        body = super().to_body()
        if not body.get("operation"):
            body.pop("operation", None)
        return body


class LastOperationResponse(ServiceBrokerResponse):
    """Status of the last asynchronous operation on a resource.

    Attributes:
        state: Current state of the operation.
        description: Optional human readable status.
        delete_operation: True when the polled operation was a deletion;
            a succeeded deletion is reported as ``410 Gone``.
    """

    state: OperationState = OperationState.IN_PROGRESS
    description: str | None = None
    delete_operation: bool = Field(default=False, exclude=True)
