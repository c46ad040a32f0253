"""Test broker package."""

from .catalog import OTHER_PLAN_ID, PLAN_ID, SERVICE_DEFINITION_ID, build_catalog
from .flows import FlowRecorder
from .services import InMemoryServiceInstanceBindingService, InMemoryServiceInstanceService

__all__ = [
    "OTHER_PLAN_ID",
    "PLAN_ID",
    "SERVICE_DEFINITION_ID",
    "build_catalog",
    "FlowRecorder",
    "InMemoryServiceInstanceBindingService",
    "InMemoryServiceInstanceService",
]
