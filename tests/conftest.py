"""Central test fixtures - imports from the test broker."""

import pytest

from servicebroker import BrokerSettings, ServiceBroker, ServiceBrokerBuilder
from servicebroker.domain import Catalog
from servicebroker.events import EventFlowRegistries
from servicebroker.services import CatalogService
from tests.fixtures.test_broker import (
    FlowRecorder,
    InMemoryServiceInstanceBindingService,
    InMemoryServiceInstanceService,
    build_catalog,
)


@pytest.fixture
def catalog() -> Catalog:
    """Create the catalog of the test broker."""
    return build_catalog()


@pytest.fixture
def catalog_service(catalog: Catalog) -> CatalogService:
    return CatalogService.in_memory(catalog)


@pytest.fixture
def registries() -> EventFlowRegistries:
    """Create empty event flow registries."""
    return EventFlowRegistries()


@pytest.fixture
def flow_recorder() -> FlowRecorder:
    return FlowRecorder()


@pytest.fixture
def instance_service() -> InMemoryServiceInstanceService:
    """Create a synchronous in-memory instance service."""
    return InMemoryServiceInstanceService()


@pytest.fixture
def binding_service() -> InMemoryServiceInstanceBindingService:
    """Create a synchronous in-memory binding service."""
    return InMemoryServiceInstanceBindingService()


@pytest.fixture
def settings() -> BrokerSettings:
    return BrokerSettings(logging_flows=False)


@pytest.fixture
def broker_builder(
    catalog: Catalog,
    settings: BrokerSettings,
    instance_service: InMemoryServiceInstanceService,
    binding_service: InMemoryServiceInstanceBindingService,
) -> ServiceBrokerBuilder:
    """Create a builder wired with the test broker's services."""
    return (
        ServiceBrokerBuilder()
        .with_settings(settings)
        .with_catalog(catalog)
        .with_instance_service(instance_service)
        .with_binding_service(binding_service)
    )


@pytest.fixture
def broker(broker_builder: ServiceBrokerBuilder, flow_recorder: FlowRecorder) -> ServiceBroker:
    """Create a broker recording every flow that runs."""
    return broker_builder.configure_flows(lambda flows: flows.add_flows(flow_recorder)).build()


@pytest.fixture(autouse=True)
def clear_request_context():
    """Automatically clear request context after each test."""
    yield
    from servicebroker.context import clear_context

    clear_context()
