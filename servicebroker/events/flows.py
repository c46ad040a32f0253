"""Signatures of the hooks that can be run around a lifecycle operation.

A flow is any callable with the matching signature. Flows are normally
coroutine functions; a plain function is accepted as well and its return
value is ignored.

Examples:
    >>> async def audit(request: CreateServiceInstanceRequest) -> None:
    ...     await audit_log.write("provisioning", request.service_instance_id)
    >>>
    >>> registries.create_instance.add_initialization_flow(audit)
"""

from collections.abc import Awaitable, Callable
from typing import TypeVar

TRequest = TypeVar("TRequest")
TResponse = TypeVar("TResponse")

# Run before the operation. A failure aborts the operation.
InitializationFlow = Callable[[TRequest], Awaitable[None] | None]

# Run after the operation succeeded, with its response.
CompletionFlow = Callable[[TRequest, TResponse], Awaitable[None] | None]

# Run after the operation (or an initialization flow) failed.
ErrorFlow = Callable[[TRequest, Exception], Awaitable[None] | None]

# The service implementation method an operation is delegated to.
Delegate = Callable[[TRequest], Awaitable[TResponse]]
