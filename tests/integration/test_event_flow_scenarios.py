"""Event flows observed through a fully built broker."""

import asyncio
from http import HTTPStatus

import pytest

from servicebroker.domain import ServiceBrokerOperationInProgressException
from tests.fixtures.test_broker import PLAN_ID, SERVICE_DEFINITION_ID

CREATE_BODY = {"service_id": SERVICE_DEFINITION_ID, "plan_id": PLAN_ID}


@pytest.mark.asyncio
async def test_error_flows_all_run_and_original_error_reported(broker_builder):
    invoked = []

    async def first(request, error):
        invoked.append("first")

    async def second(request, error):
        invoked.append("second")
        raise RuntimeError("notification service down")

    async def third(request, error):
        invoked.append("third")

    broker = broker_builder.configure_flows(
        lambda flows: flows.delete_instance.add_error_flow(first)
        .add_error_flow(second)
        .add_error_flow(third)
    ).build()

    outcome = await broker.instances.delete_service_instance(
        "unknown", {"service_id": SERVICE_DEFINITION_ID, "plan_id": PLAN_ID}
    )

    assert invoked == ["first", "second", "third"]
    assert outcome.status == HTTPStatus.UNPROCESSABLE_ENTITY
    assert "unknown" in outcome.body["description"]
    assert "notification" not in outcome.body["description"]


@pytest.mark.asyncio
async def test_initialization_flow_can_veto_an_operation(broker_builder, instance_service):
    async def one_at_a_time(request):
        raise ServiceBrokerOperationInProgressException("provision")

    broker = broker_builder.configure_flows(
        lambda flows: flows.create_instance.add_initialization_flow(one_at_a_time)
    ).build()

    outcome = await broker.instances.create_service_instance("instance-1", CREATE_BODY)

    assert outcome.status == HTTPStatus.NOT_FOUND
    assert instance_service.calls == []


@pytest.mark.asyncio
async def test_completion_flow_failure_fails_the_request(broker_builder, instance_service):
    async def notify(request, response):
        raise RuntimeError("billing unavailable")

    broker = broker_builder.configure_flows(
        lambda flows: flows.create_instance.add_completion_flow(notify)
    ).build()

    outcome = await broker.instances.create_service_instance("instance-1", CREATE_BODY)

    assert outcome.status == HTTPStatus.INTERNAL_SERVER_ERROR
    assert outcome.body == {"description": "Internal server error"}
    assert instance_service.calls == ["create_service_instance"]


@pytest.mark.asyncio
async def test_flows_only_run_for_their_operation(broker, flow_recorder):
    await broker.instances.create_service_instance("instance-1", CREATE_BODY)
    await broker.instances.get_service_instance("instance-1")

    assert flow_recorder.events == [
        ("initialize", "CreateServiceInstanceRequest"),
        ("complete", "CreateServiceInstanceResponse"),
    ]


@pytest.mark.asyncio
async def test_concurrent_requests_see_their_own_flows(broker_builder):
    seen = []

    async def record(request):
        await asyncio.sleep(0)
        seen.append(request.service_instance_id)

    broker = broker_builder.configure_flows(
        lambda flows: flows.create_instance.add_initialization_flow(record)
    ).build()

    outcomes = await asyncio.gather(
        *(
            broker.instances.create_service_instance(f"instance-{i}", CREATE_BODY)
            for i in range(5)
        )
    )

    assert all(outcome.status == HTTPStatus.CREATED for outcome in outcomes)
    assert sorted(seen) == [f"instance-{i}" for i in range(5)]
