"""Derives the outcome of a request from the response of its operation.

The protocol reports lifecycle transitions through status codes, not only
through bodies:

- create: 202 when asynchronous, 200 when the resource already existed,
  201 otherwise
- update: 202 when asynchronous, 200 otherwise
- delete: 202 when asynchronous, 200 with an empty object otherwise
- fetch: 200 with the resource
- poll: 410 for a succeeded deletion, 200 otherwise
"""

from http import HTTPStatus

from ..domain import (
    AsyncServiceBrokerResponse,
    CreateServiceInstanceBindingResponse,
    CreateServiceInstanceResponse,
    LastOperationResponse,
    OperationState,
    ServiceBrokerResponse,
)
from .outcome import Outcome


def create_outcome(
    response: CreateServiceInstanceResponse | CreateServiceInstanceBindingResponse,
) -> Outcome:
    body = response.to_body()
    if response.is_async:
        return Outcome.accepted(body)
    if response.existed:
        return Outcome.ok(body)
    return Outcome.created(body)


def update_outcome(response: AsyncServiceBrokerResponse) -> Outcome:
    body = response.to_body()
    if response.is_async:
        return Outcome.accepted(body)
    return Outcome.ok(body)


def delete_outcome(response: AsyncServiceBrokerResponse | None) -> Outcome:
    # A service implementation returning nothing deleted synchronously
    if response is not None and response.is_async:
        return Outcome.accepted(response.to_body())
    return Outcome.ok({})


def get_outcome(response: ServiceBrokerResponse) -> Outcome:
    return Outcome.ok(response.to_body())


def last_operation_outcome(response: LastOperationResponse) -> Outcome:
    status = HTTPStatus.OK
    if response.state is OperationState.SUCCEEDED and response.delete_operation:
        status = HTTPStatus.GONE
    return Outcome(status=status, body=response.to_body(), state=response.state)
