"""Domain model of the service broker protocol.

This package contains the messages exchanged between a platform and a
service broker and the failures a broker may report:

- Catalog: ServiceDefinition and Plan metadata
- Requests/responses for service instances and bindings
- OperationState: state of an asynchronous operation
- ServiceBrokerException and its subclasses
"""

from .base import (
    AsyncServiceBrokerRequest,
    AsyncServiceBrokerResponse,
    Context,
    LastOperationResponse,
    OperationState,
    ServiceBrokerRequest,
    ServiceBrokerResponse,
)
from .binding import (
    BindResource,
    CreateServiceInstanceAppBindingResponse,
    CreateServiceInstanceBindingRequest,
    CreateServiceInstanceBindingResponse,
    CreateServiceInstanceRouteBindingResponse,
    DeleteServiceInstanceBindingRequest,
    DeleteServiceInstanceBindingResponse,
    GetLastServiceBindingOperationRequest,
    GetLastServiceBindingOperationResponse,
    GetServiceInstanceAppBindingResponse,
    GetServiceInstanceBindingRequest,
    GetServiceInstanceBindingResponse,
    GetServiceInstanceRouteBindingResponse,
    VolumeMount,
)
from .catalog import Catalog, Plan, ServiceDefinition
from .error import ErrorMessage
from .exceptions import (
    ServiceBrokerApiVersionException,
    ServiceBrokerAsyncRequiredException,
    ServiceBrokerBindingRequiresAppException,
    ServiceBrokerConcurrencyException,
    ServiceBrokerException,
    ServiceBrokerInvalidOriginatingIdentityException,
    ServiceBrokerInvalidParametersException,
    ServiceBrokerOperationInProgressException,
    ServiceBrokerOperationNotSupportedException,
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
from .instance import (
    CreateServiceInstanceRequest,
    CreateServiceInstanceResponse,
    DeleteServiceInstanceRequest,
    DeleteServiceInstanceResponse,
    GetLastServiceOperationRequest,
    GetLastServiceOperationResponse,
    GetServiceInstanceRequest,
    GetServiceInstanceResponse,
    PreviousValues,
    UpdateServiceInstanceRequest,
    UpdateServiceInstanceResponse,
)

__all__ = [
    # Base types
    "AsyncServiceBrokerRequest",
    "AsyncServiceBrokerResponse",
    "Context",
    "ErrorMessage",
    "LastOperationResponse",
    "OperationState",
    "ServiceBrokerRequest",
    "ServiceBrokerResponse",
    # Catalog
    "Catalog",
    "Plan",
    "ServiceDefinition",
    # Service instances
    "CreateServiceInstanceRequest",
    "CreateServiceInstanceResponse",
    "DeleteServiceInstanceRequest",
    "DeleteServiceInstanceResponse",
    "GetLastServiceOperationRequest",
    "GetLastServiceOperationResponse",
    "GetServiceInstanceRequest",
    "GetServiceInstanceResponse",
    "PreviousValues",
    "UpdateServiceInstanceRequest",
    "UpdateServiceInstanceResponse",
    # Bindings
    "BindResource",
    "CreateServiceInstanceAppBindingResponse",
    "CreateServiceInstanceBindingRequest",
    "CreateServiceInstanceBindingResponse",
    "CreateServiceInstanceRouteBindingResponse",
    "DeleteServiceInstanceBindingRequest",
    "DeleteServiceInstanceBindingResponse",
    "GetLastServiceBindingOperationRequest",
    "GetLastServiceBindingOperationResponse",
    "GetServiceInstanceAppBindingResponse",
    "GetServiceInstanceBindingRequest",
    "GetServiceInstanceBindingResponse",
    "GetServiceInstanceRouteBindingResponse",
    "VolumeMount",
    # Exceptions
    "ServiceBrokerApiVersionException",
    "ServiceBrokerAsyncRequiredException",
    "ServiceBrokerBindingRequiresAppException",
    "ServiceBrokerConcurrencyException",
    "ServiceBrokerException",
    "ServiceBrokerInvalidOriginatingIdentityException",
    "ServiceBrokerInvalidParametersException",
    "ServiceBrokerOperationInProgressException",
    "ServiceBrokerOperationNotSupportedException",
    "ServiceBrokerRequestValidationException",
    "ServiceBrokerUnavailableException",
    "ServiceDefinitionDoesNotExistException",
    "ServiceDefinitionPlanDoesNotExistException",
    "ServiceInstanceBindingDoesNotExistException",
    "ServiceInstanceBindingExistsException",
    "ServiceInstanceDoesNotExistException",
    "ServiceInstanceExistsException",
    "ServiceInstanceUpdateNotSupportedException",
]
