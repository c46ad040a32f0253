"""Tests for ServiceInstanceEventService."""

from unittest.mock import AsyncMock

import pytest

from servicebroker.domain import (
    CreateServiceInstanceRequest,
    CreateServiceInstanceResponse,
    DeleteServiceInstanceRequest,
    GetLastServiceOperationRequest,
    GetServiceInstanceRequest,
    OperationState,
    ServiceBrokerAsyncRequiredException,
    ServiceBrokerOperationNotSupportedException,
    ServiceInstanceDoesNotExistException,
    UpdateServiceInstanceRequest,
)
from servicebroker.services import ServiceInstanceEventService, ServiceInstanceService
from tests.fixtures.test_broker import FlowRecorder, InMemoryServiceInstanceService


class MinimalInstanceService(ServiceInstanceService):
    async def create_service_instance(self, request):
        return CreateServiceInstanceResponse()

    async def delete_service_instance(self, request):
        return None


@pytest.fixture
def event_service(instance_service, registries, flow_recorder):
    registries.add_flows(flow_recorder)
    return ServiceInstanceEventService(instance_service, registries)


@pytest.mark.asyncio
async def test_create_runs_create_instance_flows(event_service, flow_recorder):
    response = await event_service.create_service_instance(
        CreateServiceInstanceRequest(service_instance_id="instance-1", plan_id="p")
    )

    assert response.dashboard_url == "https://dashboard.example.com/instance-1"
    assert flow_recorder.events == [
        ("initialize", "CreateServiceInstanceRequest"),
        ("complete", "CreateServiceInstanceResponse"),
    ]


@pytest.mark.asyncio
async def test_failed_delete_runs_error_flows(event_service, flow_recorder):
    with pytest.raises(ServiceInstanceDoesNotExistException):
        await event_service.delete_service_instance(
            DeleteServiceInstanceRequest(service_instance_id="unknown")
        )

    assert flow_recorder.events == [
        ("initialize", "DeleteServiceInstanceRequest"),
        ("error", "ServiceInstanceDoesNotExistException"),
    ]


@pytest.mark.asyncio
async def test_update_runs_update_instance_flows(
    event_service, instance_service, registries, flow_recorder
):
    await event_service.create_service_instance(
        CreateServiceInstanceRequest(service_instance_id="instance-1", plan_id="p")
    )
    flow_recorder.events.clear()
    update_flow = AsyncMock()
    registries.update_instance.add_initialization_flow(update_flow)

    await event_service.update_service_instance(
        UpdateServiceInstanceRequest(service_instance_id="instance-1", plan_id="q")
    )

    update_flow.assert_awaited_once()
    assert instance_service.instances["instance-1"].plan_id == "q"


@pytest.mark.asyncio
async def test_last_operation_runs_async_operation_flows(registries):
    instance_service = InMemoryServiceInstanceService(asynchronous=True)
    event_service = ServiceInstanceEventService(instance_service, registries)
    poll_flow = AsyncMock()
    registries.async_operation_instance.add_completion_flow(poll_flow)
    await event_service.create_service_instance(
        CreateServiceInstanceRequest(service_instance_id="instance-1", async_accepted=True)
    )

    response = await event_service.get_last_operation(
        GetLastServiceOperationRequest(service_instance_id="instance-1")
    )

    assert response.state is OperationState.IN_PROGRESS
    poll_flow.assert_awaited_once()


@pytest.mark.asyncio
async def test_get_instance_runs_no_flows(event_service, flow_recorder):
    with pytest.raises(ServiceInstanceDoesNotExistException):
        await event_service.get_service_instance(
            GetServiceInstanceRequest(service_instance_id="unknown")
        )

    assert flow_recorder.events == []


@pytest.mark.asyncio
async def test_async_required_fails_before_flows(registries, flow_recorder):
    registries.add_flows(flow_recorder)
    instance_service = InMemoryServiceInstanceService(async_required=True)
    event_service = ServiceInstanceEventService(instance_service, registries)

    with pytest.raises(ServiceBrokerAsyncRequiredException):
        await event_service.create_service_instance(
            CreateServiceInstanceRequest(service_instance_id="instance-1")
        )

    assert flow_recorder.events == []
    assert instance_service.calls == []


@pytest.mark.asyncio
async def test_async_required_satisfied_when_accepted(registries):
    instance_service = InMemoryServiceInstanceService(asynchronous=True, async_required=True)
    event_service = ServiceInstanceEventService(instance_service, registries)

    response = await event_service.create_service_instance(
        CreateServiceInstanceRequest(service_instance_id="instance-1", async_accepted=True)
    )

    assert response.is_async
    assert response.operation == "provision"


@pytest.mark.asyncio
async def test_optional_operations_not_supported_by_default():
    service = MinimalInstanceService()

    with pytest.raises(ServiceBrokerOperationNotSupportedException):
        await service.get_service_instance(GetServiceInstanceRequest())
    with pytest.raises(ServiceBrokerOperationNotSupportedException):
        await service.get_last_operation(GetLastServiceOperationRequest())
    with pytest.raises(ServiceBrokerOperationNotSupportedException):
        await service.update_service_instance(UpdateServiceInstanceRequest())
    assert service.requires_async(CreateServiceInstanceRequest()) is False
