"""Event flows: pluggable hooks run around lifecycle operations.

Extensions register initialization, completion and error flows on the
registry of an operation while the broker is assembled; the orchestrator
runs them around the service implementation for every request.
"""

from .flows import CompletionFlow, Delegate, ErrorFlow, InitializationFlow
from .logging import LoggingFlows
from .orchestrator import run_with_flows
from .registry import (
    AsyncOperationServiceInstanceBindingEventFlowRegistry,
    AsyncOperationServiceInstanceEventFlowRegistry,
    CreateServiceInstanceBindingEventFlowRegistry,
    CreateServiceInstanceEventFlowRegistry,
    DeleteServiceInstanceBindingEventFlowRegistry,
    DeleteServiceInstanceEventFlowRegistry,
    EventFlowRegistries,
    EventFlowRegistry,
    HasEventFlows,
    UpdateServiceInstanceEventFlowRegistry,
)

__all__ = [
    # Flow signatures
    "CompletionFlow",
    "Delegate",
    "ErrorFlow",
    "InitializationFlow",
    # Registries
    "AsyncOperationServiceInstanceBindingEventFlowRegistry",
    "AsyncOperationServiceInstanceEventFlowRegistry",
    "CreateServiceInstanceBindingEventFlowRegistry",
    "CreateServiceInstanceEventFlowRegistry",
    "DeleteServiceInstanceBindingEventFlowRegistry",
    "DeleteServiceInstanceEventFlowRegistry",
    "EventFlowRegistries",
    "EventFlowRegistry",
    "HasEventFlows",
    "UpdateServiceInstanceEventFlowRegistry",
    # Orchestration
    "LoggingFlows",
    "run_with_flows",
]
