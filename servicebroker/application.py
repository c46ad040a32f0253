"""Assembly of a service broker from its services and event flows."""

import logging
from collections.abc import Callable
from typing import Any

from .config import BrokerSettings
from .controller import (
    Outcome,
    ServiceBrokerExceptionHandler,
    ServiceInstanceBindingController,
    ServiceInstanceController,
)
from .domain import Catalog
from .events import EventFlowRegistries, LoggingFlows
from .services import (
    CatalogService,
    NonBindableServiceInstanceBindingService,
    ServiceInstanceBindingEventService,
    ServiceInstanceBindingService,
    ServiceInstanceEventService,
    ServiceInstanceService,
)

LOGGER = logging.getLogger(__name__)


class ServiceBroker:
    """A fully assembled service broker.

    Attributes:
        instances: Controller for service instance requests.
        bindings: Controller for service instance binding requests.
        event_flows: The event flow registries used by both controllers.
            Flows may still be registered after the broker was built.
    """

    def __init__(
        self,
        catalog_service: CatalogService,
        instances: ServiceInstanceController,
        bindings: ServiceInstanceBindingController,
        event_flows: EventFlowRegistries,
        exception_handler: ServiceBrokerExceptionHandler,
    ):
        self.catalog_service = catalog_service
        self.instances = instances
        self.bindings = bindings
        self.event_flows = event_flows
        self.exception_handler = exception_handler

    async def catalog(self) -> Outcome:
        """Get the catalog advertised to the platform.

        Returns:
            An OK outcome with the catalog body, or the outcome of the
            failure raised by the catalog service.
        """
        try:
            catalog = await self.catalog_service.get_catalog()
        except Exception as e:
            return self.exception_handler.handle(e)
        return Outcome.ok(catalog.to_body())


class ServiceBrokerBuilder:
    """Builder for creating ServiceBroker instances.

    Examples:
        >>> broker = (
        ...     ServiceBrokerBuilder()
        ...     .with_catalog(catalog)
        ...     .with_instance_service(DatabaseService())
        ...     .configure_flows(
        ...         lambda flows: flows.create_instance.add_completion_flow(audit)
        ...     )
        ...     .build()
        ... )
        >>> outcome = await broker.instances.get_last_operation("instance-1")
    """

    def __init__(self) -> None:
        self.settings = BrokerSettings()
        self.catalog_service: CatalogService | None = None
        self.instance_service: ServiceInstanceService | None = None
        self.binding_service: ServiceInstanceBindingService = (
            NonBindableServiceInstanceBindingService()
        )
        self.exception_handler = ServiceBrokerExceptionHandler()
        self._event_flows = EventFlowRegistries()
        self._logging_flows: LoggingFlows | None = None

    @property
    def event_flows(self) -> EventFlowRegistries:
        """The registries flows are registered on.

        The built broker shares these registries, so flows registered after
        `build` run as well.
        """
        return self._event_flows

    def with_settings(self, settings: BrokerSettings) -> "ServiceBrokerBuilder":
        self.settings = settings
        return self

    def with_catalog(self, catalog: Catalog | CatalogService) -> "ServiceBrokerBuilder":
        """Set the catalog, either static or served by a `CatalogService`.

        Args:
            catalog: The catalog to serve.

        Returns:
            The service broker builder.
        """
        if isinstance(catalog, Catalog):
            catalog = CatalogService.in_memory(catalog)
        self.catalog_service = catalog
        return self

    def with_instance_service(self, service: ServiceInstanceService) -> "ServiceBrokerBuilder":
        self.instance_service = service
        return self

    def with_binding_service(
        self, service: ServiceInstanceBindingService
    ) -> "ServiceBrokerBuilder":
        """Set the binding service.

        Without one, every binding request fails as not supported.
        """
        self.binding_service = service
        return self

    def with_exception_handler(
        self, handler: ServiceBrokerExceptionHandler
    ) -> "ServiceBrokerBuilder":
        self.exception_handler = handler
        return self

    def configure_flows(
        self, configure: Callable[[EventFlowRegistries], Any]
    ) -> "ServiceBrokerBuilder":
        """Register event flows through a callback.

        Args:
            configure: Called with the event flow registries.

        Returns:
            The service broker builder.
        """
        configure(self._event_flows)
        return self

    def build(self) -> ServiceBroker:
        """Build the service broker.

        The built-in logging flows are registered on every registry first
        when ``logging_flows`` is enabled in the settings, so they run
        before any other flow. They are registered once however often the
        builder builds.

        Returns:
            The configured ServiceBroker instance.

        Raises:
            ValueError: If no catalog or no service instance service was
                configured.
        """
        if self.catalog_service is None:
            raise ValueError("A catalog is required to build a service broker")
        if self.instance_service is None:
            raise ValueError("A service instance service is required to build a service broker")

        event_flows = self._event_flows
        if self.settings.logging_flows and self._logging_flows is None:
            self._logging_flows = LoggingFlows(self.settings.log_level)
            for registry in event_flows:
                registry.insert_flows(self._logging_flows)

        instances = ServiceInstanceController(
            self.catalog_service,
            ServiceInstanceEventService(self.instance_service, event_flows),
            self.settings,
            self.exception_handler,
        )
        bindings = ServiceInstanceBindingController(
            self.catalog_service,
            ServiceInstanceBindingEventService(self.binding_service, event_flows),
            self.settings,
            self.exception_handler,
        )
        LOGGER.debug(
            "Built service broker",
            extra={"event_flows": [repr(registry) for registry in event_flows]},
        )
        return ServiceBroker(
            self.catalog_service, instances, bindings, event_flows, self.exception_handler
        )

