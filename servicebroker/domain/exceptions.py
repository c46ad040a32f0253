"""Exceptions raised by service brokers and service implementations.

Every failure a service implementation may report derives from
`ServiceBrokerException`. Each exception carries an `ErrorMessage` which is
returned to the platform as the response body; the controller layer maps the
exception type to a status code (see `servicebroker.controller.errors`).
"""

from pydantic import ValidationError

from .error import ErrorMessage

ASYNC_REQUIRED_ERROR = "AsyncRequired"
CONCURRENCY_ERROR = "ConcurrencyError"
APP_REQUIRED_ERROR = "RequiresApp"


class ServiceBrokerException(Exception):
    """Base class for all service broker failures.

    Args:
        message: Human readable description returned to the platform.
        error_code: Optional machine readable error code, e.g.
            ``"AsyncRequired"``.
    """

    def __init__(self, message: str, error_code: str | None = None):
        super().__init__(message)
        self.error_code = error_code

    @property
    def error_message(self) -> ErrorMessage:
        return ErrorMessage(error=self.error_code, description=str(self))


class ServiceBrokerApiVersionException(ServiceBrokerException):
    """Raised when the platform speaks an unsupported API version."""

    def __init__(self, expected_version: str, provided_version: str | None):
        super().__init__(
            "The version of the service broker API is not supported by the broker: "
            f"expected version={expected_version}, provided version={provided_version}"
        )
        self.expected_version = expected_version
        self.provided_version = provided_version


class ServiceBrokerUnavailableException(ServiceBrokerException):
    """Raised when the broker cannot currently serve requests."""


class ServiceBrokerOperationNotSupportedException(ServiceBrokerException):
    """Raised by default implementations of optional service operations."""


class ServiceDefinitionDoesNotExistException(ServiceBrokerException):
    def __init__(self, service_definition_id: str | None):
        super().__init__(
            f"Service definition does not exist: id={service_definition_id}"
        )
        self.service_definition_id = service_definition_id


class ServiceDefinitionPlanDoesNotExistException(ServiceBrokerException):
    def __init__(self, plan_id: str, service_definition_id: str):
        super().__init__(
            f"Service definition plan does not exist: id={plan_id}, "
            f"service_definition_id={service_definition_id}"
        )
        self.plan_id = plan_id
        self.service_definition_id = service_definition_id


class ServiceInstanceDoesNotExistException(ServiceBrokerException):
    def __init__(self, service_instance_id: str):
        super().__init__(f"Service instance does not exist: id={service_instance_id}")
        self.service_instance_id = service_instance_id


class ServiceInstanceExistsException(ServiceBrokerException):
    def __init__(self, service_instance_id: str, service_definition_id: str | None = None):
        message = f"Service instance with the given ID already exists: id={service_instance_id}"
        if service_definition_id is not None:
            message += f", service_definition_id={service_definition_id}"
        super().__init__(message)
        self.service_instance_id = service_instance_id
        self.service_definition_id = service_definition_id


class ServiceInstanceUpdateNotSupportedException(ServiceBrokerException):
    """Raised when a service instance cannot be updated as requested."""


class ServiceInstanceBindingDoesNotExistException(ServiceBrokerException):
    """Raised when a binding is not known to the service implementation.

    The service instance the binding was requested for is optional; when it
    is missing the binding event service fills it in from the request so
    that the description names both resources.
    """

    def __init__(self, binding_id: str, service_instance_id: str | None = None):
        self.binding_id = binding_id
        self.service_instance_id = service_instance_id
        super().__init__(self._describe())

    def for_service_instance(self, service_instance_id: str | None) -> None:
        """Scope this error to the service instance of the failed request."""
        if self.service_instance_id is None and service_instance_id is not None:
            self.service_instance_id = service_instance_id
            self.args = (self._describe(),)

    def _describe(self) -> str:
        message = f"Service instance binding does not exist: id={self.binding_id}"
        if self.service_instance_id is not None:
            message += f", service_instance_id={self.service_instance_id}"
        return message


class ServiceInstanceBindingExistsException(ServiceBrokerException):
    def __init__(self, service_instance_id: str, binding_id: str):
        super().__init__(
            "Service instance binding already exists: "
            f"service_instance_id={service_instance_id}, binding_id={binding_id}"
        )
        self.service_instance_id = service_instance_id
        self.binding_id = binding_id


class ServiceBrokerOperationInProgressException(ServiceBrokerException):
    """Raised while an earlier asynchronous operation is still running.

    Mapped to 404 Not Found: the platform is expected to retry once the
    operation has finished.
    """

    def __init__(self, operation: str | None = None):
        message = "Service broker operation is in progress"
        if operation:
            message += f" for operation {operation}"
        super().__init__(message)
        self.operation = operation


class ServiceBrokerAsyncRequiredException(ServiceBrokerException):
    def __init__(
        self,
        message: str = (
            "This service plan requires client support for asynchronous "
            "service operations."
        ),
    ):
        super().__init__(message, ASYNC_REQUIRED_ERROR)


class ServiceBrokerInvalidParametersException(ServiceBrokerException):
    """Raised when the parameters of a request are invalid."""


class ServiceBrokerBindingRequiresAppException(ServiceBrokerException):
    def __init__(
        self,
        message: str = (
            "This service supports generation of credentials through binding "
            "an application only."
        ),
    ):
        super().__init__(message, APP_REQUIRED_ERROR)


class ServiceBrokerConcurrencyException(ServiceBrokerException):
    def __init__(
        self, message: str = "Another operation for this service instance is in progress."
    ):
        super().__init__(message, CONCURRENCY_ERROR)


class ServiceBrokerInvalidOriginatingIdentityException(ServiceBrokerException):
    """Raised when the originating identity header cannot be parsed."""


class ServiceBrokerRequestValidationException(Exception):
    """Raised when required request fields are missing or malformed.

    Detected before orchestration begins; never passed to event flows.

    Attributes:
        fields: Wire names of every offending field, in reporting order.
    """

    def __init__(self, fields: list[str]):
        self.fields = fields
        super().__init__(" ".join(["Missing required fields:", *fields]))

    @classmethod
    def from_validation_error(
        cls, error: ValidationError, fields: list[str] | None = None
    ) -> "ServiceBrokerRequestValidationException":
        """Collect the offending fields of a pydantic validation error.

        Args:
            error: The validation error.
            fields: Fields already known to be offending; reported first.
        """
        offending = list(fields or [])
        for detail in error.errors():
            name = ".".join(str(part) for part in detail["loc"])
            if name and name not in offending:
                offending.append(name)
        return cls(offending)
