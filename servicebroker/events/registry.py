"""Registries of the event flows run around each lifecycle operation."""

from collections.abc import Iterable, Iterator
from typing import Any, Generic, Protocol

from ..domain import (
    CreateServiceInstanceBindingRequest,
    CreateServiceInstanceBindingResponse,
    CreateServiceInstanceRequest,
    CreateServiceInstanceResponse,
    DeleteServiceInstanceBindingRequest,
    DeleteServiceInstanceBindingResponse,
    DeleteServiceInstanceRequest,
    DeleteServiceInstanceResponse,
    GetLastServiceBindingOperationRequest,
    GetLastServiceBindingOperationResponse,
    GetLastServiceOperationRequest,
    GetLastServiceOperationResponse,
    UpdateServiceInstanceRequest,
    UpdateServiceInstanceResponse,
)
from .flows import CompletionFlow, ErrorFlow, InitializationFlow, TRequest, TResponse


class EventFlowRegistry(Generic[TRequest, TResponse]):
    """Ordered initialization, completion and error flows of one operation.

    Flows are run in registration order, except that ``insert_flows`` puts
    its flows ahead of the others. Registration is expected to happen while the broker is being assembled; once
    requests are being served the registry is only read.

    Every ``add_*`` method returns the registry so registrations can be
    chained.

    Examples:
        >>> registry = EventFlowRegistry[CreateServiceInstanceRequest,
        ...                              CreateServiceInstanceResponse]("create")
        >>> (registry
        ...     .add_initialization_flow(reserve_quota)
        ...     .add_completion_flow(notify_billing)
        ...     .add_error_flow(release_quota))
    """

    def __init__(
        self,
        name: str,
        initialization_flows: Iterable[InitializationFlow[TRequest]] = (),
        completion_flows: Iterable[CompletionFlow[TRequest, TResponse]] = (),
        error_flows: Iterable[ErrorFlow[TRequest]] = (),
    ):
        self.name = name
        self._initialization_flows: list[InitializationFlow[TRequest]] = list(
            initialization_flows
        )
        self._completion_flows: list[CompletionFlow[TRequest, TResponse]] = list(
            completion_flows
        )
        self._error_flows: list[ErrorFlow[TRequest]] = list(error_flows)

    def add_initialization_flow(
        self, flow: InitializationFlow[TRequest]
    ) -> "EventFlowRegistry[TRequest, TResponse]":
        """Register a flow to run before the operation."""
        self._initialization_flows.append(flow)
        return self

    def add_completion_flow(
        self, flow: CompletionFlow[TRequest, TResponse]
    ) -> "EventFlowRegistry[TRequest, TResponse]":
        """Register a flow to run after the operation succeeded."""
        self._completion_flows.append(flow)
        return self

    def add_error_flow(self, flow: ErrorFlow[TRequest]) -> "EventFlowRegistry[TRequest, TResponse]":
        """Register a flow to run after the operation failed."""
        self._error_flows.append(flow)
        return self

    def add_flows(self, flows: "HasEventFlows") -> "EventFlowRegistry[TRequest, TResponse]":
        """Register an object providing all three kinds of flow."""
        return (
            self.add_initialization_flow(flows.initialize)
            .add_completion_flow(flows.complete)
            .add_error_flow(flows.error)
        )

    def insert_flows(self, flows: "HasEventFlows") -> "EventFlowRegistry[TRequest, TResponse]":
        """Register an object providing all three kinds of flow ahead of
        every flow registered so far."""
        self._initialization_flows.insert(0, flows.initialize)
        self._completion_flows.insert(0, flows.complete)
        self._error_flows.insert(0, flows.error)
        return self

    @property
    def initialization_flows(self) -> tuple[InitializationFlow[TRequest], ...]:
        return tuple(self._initialization_flows)

    @property
    def completion_flows(self) -> tuple[CompletionFlow[TRequest, TResponse], ...]:
        return tuple(self._completion_flows)

    @property
    def error_flows(self) -> tuple[ErrorFlow[TRequest], ...]:
        return tuple(self._error_flows)

    def __repr__(self) -> str:
        return (
            f"EventFlowRegistry({self.name!r}, "
            f"initialization={len(self._initialization_flows)}, "
            f"completion={len(self._completion_flows)}, "
            f"error={len(self._error_flows)})"
        )


class HasEventFlows(Protocol):
    """An object that contributes one flow of each kind to a registry."""

    async def initialize(self, request: Any) -> None: ...

    async def complete(self, request: Any, response: Any) -> None: ...

    async def error(self, request: Any, error: Exception) -> None: ...


CreateServiceInstanceEventFlowRegistry = EventFlowRegistry[
    CreateServiceInstanceRequest, CreateServiceInstanceResponse
]
UpdateServiceInstanceEventFlowRegistry = EventFlowRegistry[
    UpdateServiceInstanceRequest, UpdateServiceInstanceResponse
]
DeleteServiceInstanceEventFlowRegistry = EventFlowRegistry[
    DeleteServiceInstanceRequest, DeleteServiceInstanceResponse
]
AsyncOperationServiceInstanceEventFlowRegistry = EventFlowRegistry[
    GetLastServiceOperationRequest, GetLastServiceOperationResponse
]
CreateServiceInstanceBindingEventFlowRegistry = EventFlowRegistry[
    CreateServiceInstanceBindingRequest, CreateServiceInstanceBindingResponse
]
DeleteServiceInstanceBindingEventFlowRegistry = EventFlowRegistry[
    DeleteServiceInstanceBindingRequest, DeleteServiceInstanceBindingResponse
]
AsyncOperationServiceInstanceBindingEventFlowRegistry = EventFlowRegistry[
    GetLastServiceBindingOperationRequest, GetLastServiceBindingOperationResponse
]


class EventFlowRegistries:
    """The event flow registries of every flow-enabled operation.

    Read-only operations (fetching an instance or a binding) have no
    registry; they are delegated to the service implementation directly.

    Attributes:
        create_instance: Flows around provisioning an instance.
        update_instance: Flows around updating an instance.
        delete_instance: Flows around deprovisioning an instance.
        async_operation_instance: Flows around polling an instance
            operation.
        create_binding: Flows around creating a binding.
        delete_binding: Flows around deleting a binding.
        async_operation_binding: Flows around polling a binding operation.
    """

    def __init__(
        self,
        create_instance: CreateServiceInstanceEventFlowRegistry | None = None,
        update_instance: UpdateServiceInstanceEventFlowRegistry | None = None,
        delete_instance: DeleteServiceInstanceEventFlowRegistry | None = None,
        async_operation_instance: AsyncOperationServiceInstanceEventFlowRegistry | None = None,
        create_binding: CreateServiceInstanceBindingEventFlowRegistry | None = None,
        delete_binding: DeleteServiceInstanceBindingEventFlowRegistry | None = None,
        async_operation_binding: AsyncOperationServiceInstanceBindingEventFlowRegistry
        | None = None,
    ):
        self.create_instance = create_instance or CreateServiceInstanceEventFlowRegistry(
            "create_service_instance"
        )
        self.update_instance = update_instance or UpdateServiceInstanceEventFlowRegistry(
            "update_service_instance"
        )
        self.delete_instance = delete_instance or DeleteServiceInstanceEventFlowRegistry(
            "delete_service_instance"
        )
        self.async_operation_instance = (
            async_operation_instance
            or AsyncOperationServiceInstanceEventFlowRegistry("get_last_instance_operation")
        )
        self.create_binding = create_binding or CreateServiceInstanceBindingEventFlowRegistry(
            "create_service_instance_binding"
        )
        self.delete_binding = delete_binding or DeleteServiceInstanceBindingEventFlowRegistry(
            "delete_service_instance_binding"
        )
        self.async_operation_binding = (
            async_operation_binding
            or AsyncOperationServiceInstanceBindingEventFlowRegistry(
                "get_last_binding_operation"
            )
        )

    def __iter__(self) -> Iterator[EventFlowRegistry[Any, Any]]:
        yield self.create_instance
        yield self.update_instance
        yield self.delete_instance
        yield self.async_operation_instance
        yield self.create_binding
        yield self.delete_binding
        yield self.async_operation_binding

    def add_flows(self, flows: HasEventFlows) -> "EventFlowRegistries":
        """Register ``flows`` on every registry."""
        for registry in self:
            registry.add_flows(flows)
        return self
