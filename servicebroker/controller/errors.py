"""Translation of failures into outcomes."""

import logging
from http import HTTPStatus

from pydantic import ValidationError

from ..domain import (
    ErrorMessage,
    ServiceBrokerApiVersionException,
    ServiceBrokerAsyncRequiredException,
    ServiceBrokerBindingRequiresAppException,
    ServiceBrokerConcurrencyException,
    ServiceBrokerException,
    ServiceBrokerInvalidOriginatingIdentityException,
    ServiceBrokerInvalidParametersException,
    ServiceBrokerOperationInProgressException,
    ServiceBrokerRequestValidationException,
    ServiceBrokerUnavailableException,
    ServiceDefinitionDoesNotExistException,
    ServiceDefinitionPlanDoesNotExistException,
    ServiceInstanceBindingDoesNotExistException,
    ServiceInstanceBindingExistsException,
    ServiceInstanceDoesNotExistException,
    ServiceInstanceExistsException,
    ServiceInstanceUpdateNotSupportedException,
)
from .outcome import Outcome

LOGGER = logging.getLogger(__name__)

UNKNOWN_ERROR_DESCRIPTION = "Internal server error"

ERROR_STATUSES: dict[type[Exception], HTTPStatus] = {
    ServiceBrokerApiVersionException: HTTPStatus.PRECONDITION_FAILED,
    ServiceInstanceDoesNotExistException: HTTPStatus.UNPROCESSABLE_ENTITY,
    ServiceInstanceBindingDoesNotExistException: HTTPStatus.UNPROCESSABLE_ENTITY,
    ServiceDefinitionDoesNotExistException: HTTPStatus.UNPROCESSABLE_ENTITY,
    ServiceDefinitionPlanDoesNotExistException: HTTPStatus.UNPROCESSABLE_ENTITY,
    ServiceInstanceExistsException: HTTPStatus.CONFLICT,
    ServiceInstanceBindingExistsException: HTTPStatus.CONFLICT,
    # The protocol asks platforms to retry later on 404 while busy
    ServiceBrokerOperationInProgressException: HTTPStatus.NOT_FOUND,
    ServiceBrokerAsyncRequiredException: HTTPStatus.UNPROCESSABLE_ENTITY,
    ServiceBrokerInvalidParametersException: HTTPStatus.UNPROCESSABLE_ENTITY,
    ServiceBrokerBindingRequiresAppException: HTTPStatus.UNPROCESSABLE_ENTITY,
    ServiceBrokerConcurrencyException: HTTPStatus.UNPROCESSABLE_ENTITY,
    ServiceBrokerInvalidOriginatingIdentityException: HTTPStatus.UNPROCESSABLE_ENTITY,
    ServiceInstanceUpdateNotSupportedException: HTTPStatus.UNPROCESSABLE_ENTITY,
    ServiceBrokerUnavailableException: HTTPStatus.SERVICE_UNAVAILABLE,
    ServiceBrokerException: HTTPStatus.INTERNAL_SERVER_ERROR,
    ServiceBrokerRequestValidationException: HTTPStatus.BAD_REQUEST,
}


class ServiceBrokerExceptionHandler:
    """Maps every failure surfaced by a controller to an outcome.

    The status is looked up along the exception's MRO, so subclasses of a
    mapped exception share its status. Failures that are not
    `ServiceBrokerException`s are unexpected: they are logged at ERROR and
    reported with a generic description so internals are not leaked.

    Examples:
        >>> handler = ServiceBrokerExceptionHandler()
        >>> outcome = handler.handle(ServiceInstanceExistsException("foo"))
        >>> outcome.status
        <HTTPStatus.CONFLICT: 409>
    """

    def __init__(self, statuses: dict[type[Exception], HTTPStatus] | None = None):
        self.statuses = dict(ERROR_STATUSES)
        if statuses:
            self.statuses.update(statuses)

    def handle(self, error: Exception) -> Outcome:
        if isinstance(error, ValidationError):
            error = ServiceBrokerRequestValidationException.from_validation_error(error)

        status = self.status_for(error)
        if status is None:
            LOGGER.error("Unknown exception handled", exc_info=error)
            return Outcome.error(
                HTTPStatus.INTERNAL_SERVER_ERROR,
                ErrorMessage(description=UNKNOWN_ERROR_DESCRIPTION),
            )

        if isinstance(error, ServiceBrokerException):
            if isinstance(error, ServiceBrokerInvalidOriginatingIdentityException):
                LOGGER.error("Unprocessable request received", exc_info=error)
            else:
                LOGGER.debug(str(error), exc_info=error)
            return Outcome.error(status, error.error_message)

        LOGGER.error("Unprocessable request received", exc_info=error)
        return Outcome.error(status, ErrorMessage(description=str(error)))

    def status_for(self, error: Exception) -> HTTPStatus | None:
        for error_type in type(error).__mro__:
            status = self.statuses.get(error_type)
            if status is not None:
                return status
        return None
