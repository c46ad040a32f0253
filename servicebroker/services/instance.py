"""Service instance operations and their event-flow enabled wrapper."""

from abc import ABC, abstractmethod

from ..domain import (
    AsyncServiceBrokerRequest,
    CreateServiceInstanceRequest,
    CreateServiceInstanceResponse,
    DeleteServiceInstanceRequest,
    DeleteServiceInstanceResponse,
    GetLastServiceOperationRequest,
    GetLastServiceOperationResponse,
    GetServiceInstanceRequest,
    GetServiceInstanceResponse,
    ServiceBrokerOperationNotSupportedException,
    UpdateServiceInstanceRequest,
    UpdateServiceInstanceResponse,
)
from ..events import EventFlowRegistries, run_with_flows
from .async_operations import ensure_async_accepted


class ServiceInstanceService(ABC):
    """Contract implemented by brokers to manage service instances.

    Provisioning and deprovisioning are mandatory; fetching, polling and
    updating are optional and fail with
    `ServiceBrokerOperationNotSupportedException` unless overridden.

    Any method may raise a `ServiceBrokerException` subclass to report a
    protocol level failure, e.g. `ServiceInstanceExistsException`.

    Examples:
        >>> class DatabaseService(ServiceInstanceService):
        ...     async def create_service_instance(self, request):
        ...         await self.databases.create(request.service_instance_id)
        ...         return CreateServiceInstanceResponse()
        ...
        ...     async def delete_service_instance(self, request):
        ...         await self.databases.drop(request.service_instance_id)
        ...         return DeleteServiceInstanceResponse()
    """

    def requires_async(self, request: AsyncServiceBrokerRequest) -> bool:
        """Whether ``request`` can only be served asynchronously.

        When True and the platform did not accept an asynchronous response,
        the request fails with `ServiceBrokerAsyncRequiredException` before
        any event flow or service method runs.
        """
        return False

    @abstractmethod
    async def create_service_instance(
        self, request: CreateServiceInstanceRequest
    ) -> CreateServiceInstanceResponse: ...

    @abstractmethod
    async def delete_service_instance(
        self, request: DeleteServiceInstanceRequest
    ) -> DeleteServiceInstanceResponse: ...

    async def get_service_instance(
        self, request: GetServiceInstanceRequest
    ) -> GetServiceInstanceResponse:
        raise ServiceBrokerOperationNotSupportedException(
            "This service broker does not support retrieving service instances. "
            "The service broker should set 'instances_retrievable: false' in the "
            "service catalog, or provide an implementation of the fetch instance API."
        )

    async def get_last_operation(
        self, request: GetLastServiceOperationRequest
    ) -> GetLastServiceOperationResponse:
        raise ServiceBrokerOperationNotSupportedException(
            "This service broker does not support getting the status of an "
            "asynchronous operation."
        )

    async def update_service_instance(
        self, request: UpdateServiceInstanceRequest
    ) -> UpdateServiceInstanceResponse:
        raise ServiceBrokerOperationNotSupportedException(
            "This service broker does not support updating service instances."
        )


class ServiceInstanceEventService(ServiceInstanceService):
    """Runs the event flows around a `ServiceInstanceService`.

    Args:
        service: The broker's service implementation.
        flows: The event flow registries to run.
    """

    def __init__(self, service: ServiceInstanceService, flows: EventFlowRegistries):
        self.service = service
        self.flows = flows

    def requires_async(self, request: AsyncServiceBrokerRequest) -> bool:
        return self.service.requires_async(request)

    async def create_service_instance(
        self, request: CreateServiceInstanceRequest
    ) -> CreateServiceInstanceResponse:
        ensure_async_accepted(self.service, request)
        return await run_with_flows(
            self.flows.create_instance, request, self.service.create_service_instance
        )

    async def get_service_instance(
        self, request: GetServiceInstanceRequest
    ) -> GetServiceInstanceResponse:
        return await self.service.get_service_instance(request)

    async def get_last_operation(
        self, request: GetLastServiceOperationRequest
    ) -> GetLastServiceOperationResponse:
        return await run_with_flows(
            self.flows.async_operation_instance, request, self.service.get_last_operation
        )

    async def delete_service_instance(
        self, request: DeleteServiceInstanceRequest
    ) -> DeleteServiceInstanceResponse:
        ensure_async_accepted(self.service, request)
        return await run_with_flows(
            self.flows.delete_instance, request, self.service.delete_service_instance
        )

    async def update_service_instance(
        self, request: UpdateServiceInstanceRequest
    ) -> UpdateServiceInstanceResponse:
        ensure_async_accepted(self.service, request)
        return await run_with_flows(
            self.flows.update_instance, request, self.service.update_service_instance
        )
