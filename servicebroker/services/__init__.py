"""Service implementation contracts and their event-flow enabled wrappers."""

from .async_operations import ensure_async_accepted
from .binding import (
    NonBindableServiceInstanceBindingService,
    ServiceInstanceBindingEventService,
    ServiceInstanceBindingService,
)
from .catalog import CatalogService, InMemoryCatalogService
from .instance import ServiceInstanceEventService, ServiceInstanceService

__all__ = [
    "CatalogService",
    "InMemoryCatalogService",
    "NonBindableServiceInstanceBindingService",
    "ServiceInstanceBindingEventService",
    "ServiceInstanceBindingService",
    "ServiceInstanceEventService",
    "ServiceInstanceService",
    "ensure_async_accepted",
]
