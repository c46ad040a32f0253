"""Service instance binding operations and their event-flow enabled wrapper."""

from abc import ABC, abstractmethod
from collections.abc import Iterator
from contextlib import contextmanager

from ..domain import (
    AsyncServiceBrokerRequest,
    CreateServiceInstanceBindingRequest,
    CreateServiceInstanceBindingResponse,
    DeleteServiceInstanceBindingRequest,
    DeleteServiceInstanceBindingResponse,
    GetLastServiceBindingOperationRequest,
    GetLastServiceBindingOperationResponse,
    GetServiceInstanceBindingRequest,
    GetServiceInstanceBindingResponse,
    ServiceBrokerOperationNotSupportedException,
    ServiceInstanceBindingDoesNotExistException,
)
from ..events import EventFlowRegistries, run_with_flows
from .async_operations import ensure_async_accepted


class ServiceInstanceBindingService(ABC):
    """Contract implemented by brokers to manage service instance bindings.

    Creating and deleting bindings is mandatory; fetching and polling are
    optional and fail with `ServiceBrokerOperationNotSupportedException`
    unless overridden.
    """

    def requires_async(self, request: AsyncServiceBrokerRequest) -> bool:
        """Whether ``request`` can only be served asynchronously."""
        return False

    @abstractmethod
    async def create_service_instance_binding(
        self, request: CreateServiceInstanceBindingRequest
    ) -> CreateServiceInstanceBindingResponse: ...

    @abstractmethod
    async def delete_service_instance_binding(
        self, request: DeleteServiceInstanceBindingRequest
    ) -> DeleteServiceInstanceBindingResponse: ...

    async def get_service_instance_binding(
        self, request: GetServiceInstanceBindingRequest
    ) -> GetServiceInstanceBindingResponse:
        raise ServiceBrokerOperationNotSupportedException(
            "This service broker does not support retrieving service bindings. "
            "The service broker should set 'bindings_retrievable: false' in the "
            "service catalog, or provide an implementation of the fetch binding API."
        )

    async def get_last_operation(
        self, request: GetLastServiceBindingOperationRequest
    ) -> GetLastServiceBindingOperationResponse:
        raise ServiceBrokerOperationNotSupportedException(
            "This service broker does not support getting the status of an "
            "asynchronous binding operation."
        )


class NonBindableServiceInstanceBindingService(ServiceInstanceBindingService):
    """Default binding service for brokers whose services are not bindable."""

    async def create_service_instance_binding(
        self, request: CreateServiceInstanceBindingRequest
    ) -> CreateServiceInstanceBindingResponse:
        raise self._not_supported()

    async def delete_service_instance_binding(
        self, request: DeleteServiceInstanceBindingRequest
    ) -> DeleteServiceInstanceBindingResponse:
        raise self._not_supported()

    async def get_service_instance_binding(
        self, request: GetServiceInstanceBindingRequest
    ) -> GetServiceInstanceBindingResponse:
        raise self._not_supported()

    async def get_last_operation(
        self, request: GetLastServiceBindingOperationRequest
    ) -> GetLastServiceBindingOperationResponse:
        raise self._not_supported()

    @staticmethod
    def _not_supported() -> ServiceBrokerOperationNotSupportedException:
        return ServiceBrokerOperationNotSupportedException(
            "Service instance bindings are not supported by this service broker"
        )


class ServiceInstanceBindingEventService(ServiceInstanceBindingService):
    """Runs the event flows around a `ServiceInstanceBindingService`.

    Fetching a binding is read-only and runs no flows. A
    `ServiceInstanceBindingDoesNotExistException` raised without a service
    instance is scoped to the service instance of the request.

    Args:
        service: The broker's binding implementation.
        flows: The event flow registries to run.
    """

    def __init__(self, service: ServiceInstanceBindingService, flows: EventFlowRegistries):
        self.service = service
        self.flows = flows

    def requires_async(self, request: AsyncServiceBrokerRequest) -> bool:
        return self.service.requires_async(request)

    async def create_service_instance_binding(
        self, request: CreateServiceInstanceBindingRequest
    ) -> CreateServiceInstanceBindingResponse:
        ensure_async_accepted(self.service, request)
        return await run_with_flows(
            self.flows.create_binding, request, self.service.create_service_instance_binding
        )

    async def get_service_instance_binding(
        self, request: GetServiceInstanceBindingRequest
    ) -> GetServiceInstanceBindingResponse:
        with _scoped_to_instance(request.service_instance_id):
            return await self.service.get_service_instance_binding(request)

    async def get_last_operation(
        self, request: GetLastServiceBindingOperationRequest
    ) -> GetLastServiceBindingOperationResponse:
        with _scoped_to_instance(request.service_instance_id):
            return await run_with_flows(
                self.flows.async_operation_binding, request, self.service.get_last_operation
            )

    async def delete_service_instance_binding(
        self, request: DeleteServiceInstanceBindingRequest
    ) -> DeleteServiceInstanceBindingResponse:
        ensure_async_accepted(self.service, request)
        with _scoped_to_instance(request.service_instance_id):
            return await run_with_flows(
                self.flows.delete_binding, request, self.service.delete_service_instance_binding
            )


@contextmanager
def _scoped_to_instance(service_instance_id: str | None) -> Iterator[None]:
    try:
        yield
    except ServiceInstanceBindingDoesNotExistException as e:
        e.for_service_instance(service_instance_id)
        raise
