"""Tests for deriving outcomes from operation responses."""

from http import HTTPStatus

import pytest

from servicebroker.controller import Outcome
from servicebroker.controller.responses import (
    create_outcome,
    delete_outcome,
    get_outcome,
    last_operation_outcome,
    update_outcome,
)
from servicebroker.domain import (
    CreateServiceInstanceAppBindingResponse,
    CreateServiceInstanceResponse,
    DeleteServiceInstanceBindingResponse,
    DeleteServiceInstanceResponse,
    ErrorMessage,
    GetLastServiceBindingOperationResponse,
    GetLastServiceOperationResponse,
    GetServiceInstanceResponse,
    OperationState,
    UpdateServiceInstanceResponse,
)


@pytest.mark.parametrize(
    "response",
    [
        CreateServiceInstanceResponse(),
        CreateServiceInstanceAppBindingResponse(credentials={"password": "secret"}),
    ],
)
def test_create_is_created(response):
    assert create_outcome(response).status == HTTPStatus.CREATED


@pytest.mark.parametrize(
    "response",
    [
        CreateServiceInstanceResponse(instance_existed=True),
        CreateServiceInstanceAppBindingResponse(binding_existed=True),
    ],
)
def test_create_of_existing_resource_is_ok(response):
    assert create_outcome(response).status == HTTPStatus.OK


@pytest.mark.parametrize(
    "response",
    [
        CreateServiceInstanceResponse(async_=True, operation="task_10", instance_existed=True),
        CreateServiceInstanceAppBindingResponse(async_=True, operation="task_10"),
    ],
)
def test_async_create_is_accepted_with_operation(response):
    outcome = create_outcome(response)

    assert outcome.status == HTTPStatus.ACCEPTED
    assert outcome.body["operation"] == "task_10"


def test_update_outcomes():
    assert update_outcome(UpdateServiceInstanceResponse()).status == HTTPStatus.OK

    outcome = update_outcome(UpdateServiceInstanceResponse(async_=True, operation="task_11"))
    assert outcome.status == HTTPStatus.ACCEPTED
    assert outcome.body == {"operation": "task_11"}


@pytest.mark.parametrize(
    "response",
    [None, DeleteServiceInstanceResponse(), DeleteServiceInstanceBindingResponse()],
)
def test_sync_delete_is_ok_with_empty_body(response):
    outcome = delete_outcome(response)

    assert outcome.status == HTTPStatus.OK
    assert outcome.body == {}


@pytest.mark.parametrize(
    "response",
    [
        DeleteServiceInstanceResponse(async_=True, operation="task_12"),
        DeleteServiceInstanceBindingResponse(async_=True, operation="task_12"),
    ],
)
def test_async_delete_is_accepted_with_operation(response):
    outcome = delete_outcome(response)

    assert outcome.status == HTTPStatus.ACCEPTED
    assert outcome.body == {"operation": "task_12"}


def test_get_is_ok_with_resource():
    outcome = get_outcome(GetServiceInstanceResponse(plan_id="plan-one-id"))

    assert outcome.status == HTTPStatus.OK
    assert outcome.body == {"plan_id": "plan-one-id"}


@pytest.mark.parametrize("description", [None, "done", "deleted"])
@pytest.mark.parametrize(
    "response_type", [GetLastServiceOperationResponse, GetLastServiceBindingOperationResponse]
)
def test_succeeded_delete_operation_is_gone(response_type, description):
    response = response_type(
        state=OperationState.SUCCEEDED, description=description, delete_operation=True
    )

    outcome = last_operation_outcome(response)

    assert outcome.status == HTTPStatus.GONE
    assert outcome.state is OperationState.SUCCEEDED


@pytest.mark.parametrize("description", [None, "done"])
def test_succeeded_operation_is_ok(description):
    response = GetLastServiceOperationResponse(
        state=OperationState.SUCCEEDED, description=description
    )

    assert last_operation_outcome(response).status == HTTPStatus.OK


@pytest.mark.parametrize("state", [OperationState.IN_PROGRESS, OperationState.FAILED])
def test_unfinished_or_failed_delete_operation_is_ok(state):
    response = GetLastServiceOperationResponse(state=state, delete_operation=True)

    outcome = last_operation_outcome(response)

    assert outcome.status == HTTPStatus.OK
    assert outcome.body == {"state": state.value}


def test_outcome_kind_and_success():
    assert Outcome.created({}).kind == "Created"
    assert Outcome.accepted().is_success
    assert not Outcome.error(HTTPStatus.GONE, ErrorMessage()).is_success
    assert Outcome.error(HTTPStatus.CONFLICT, ErrorMessage(description="x")).body == {
        "description": "x"
    }
