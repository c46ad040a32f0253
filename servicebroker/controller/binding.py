"""Controller for service instance binding requests."""

import logging
from collections.abc import Mapping
from typing import Any

from ..config import BrokerSettings
from ..domain import (
    CreateServiceInstanceBindingRequest,
    DeleteServiceInstanceBindingRequest,
    GetLastServiceBindingOperationRequest,
    GetServiceInstanceBindingRequest,
)
from ..services import CatalogService, ServiceInstanceBindingService
from .base import BaseController
from .errors import ServiceBrokerExceptionHandler
from .outcome import Outcome
from .responses import create_outcome, delete_outcome, get_outcome, last_operation_outcome

LOGGER = logging.getLogger(__name__)


class ServiceInstanceBindingController(BaseController):
    """Create, fetch, poll and delete service instance bindings.

    Args:
        catalog_service: Resolves service definitions and plans.
        service: The binding service to delegate to, normally a
            `ServiceInstanceBindingEventService` so event flows run.
        settings: Broker settings.
        exception_handler: Translates failures into outcomes.
    """

    def __init__(
        self,
        catalog_service: CatalogService,
        service: ServiceInstanceBindingService,
        settings: BrokerSettings | None = None,
        exception_handler: ServiceBrokerExceptionHandler | None = None,
    ):
        super().__init__(catalog_service, settings, exception_handler)
        self.service = service

    async def create_service_instance_binding(
        self,
        service_instance_id: str,
        binding_id: str,
        body: Mapping[str, Any] | None,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
        platform_instance_id: str | None = None,
    ) -> Outcome:
        return await self.respond(
            "create_service_instance_binding",
            self._create(
                service_instance_id, binding_id, body, params, headers, platform_instance_id
            ),
        )

    async def get_service_instance_binding(
        self,
        service_instance_id: str,
        binding_id: str,
        headers: Mapping[str, str] | None = None,
        platform_instance_id: str | None = None,
    ) -> Outcome:
        return await self.respond(
            "get_service_instance_binding",
            self._get(service_instance_id, binding_id, headers, platform_instance_id),
        )

    async def get_last_operation(
        self,
        service_instance_id: str,
        binding_id: str,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
        platform_instance_id: str | None = None,
    ) -> Outcome:
        return await self.respond(
            "get_last_binding_operation",
            self._get_last_operation(
                service_instance_id, binding_id, params, headers, platform_instance_id
            ),
        )

    async def delete_service_instance_binding(
        self,
        service_instance_id: str,
        binding_id: str,
        params: Mapping[str, Any] | None,
        headers: Mapping[str, str] | None = None,
        platform_instance_id: str | None = None,
    ) -> Outcome:
        return await self.respond(
            "delete_service_instance_binding",
            self._delete(service_instance_id, binding_id, params, headers, platform_instance_id),
        )

    async def _create(
        self,
        service_instance_id: str,
        binding_id: str,
        body: Mapping[str, Any] | None,
        params: Mapping[str, Any] | None,
        headers: Mapping[str, str] | None,
        platform_instance_id: str | None,
    ) -> Outcome:
        request = self.parse_request(
            CreateServiceInstanceBindingRequest,
            {
                **(body or {}),
                **(params or {}),
                "service_instance_id": service_instance_id,
                "binding_id": binding_id,
            },
            headers,
            platform_instance_id,
        )
        request = await self.resolve_catalog(request, required=True)
        LOGGER.debug(
            "Creating a service instance binding",
            extra={"service_instance_id": service_instance_id, "binding_id": binding_id},
        )
        return create_outcome(await self.service.create_service_instance_binding(request))

    async def _get(
        self,
        service_instance_id: str,
        binding_id: str,
        headers: Mapping[str, str] | None,
        platform_instance_id: str | None,
    ) -> Outcome:
        request = self.parse_request(
            GetServiceInstanceBindingRequest,
            {"service_instance_id": service_instance_id, "binding_id": binding_id},
            headers,
            platform_instance_id,
        )
        return get_outcome(await self.service.get_service_instance_binding(request))

    async def _get_last_operation(
        self,
        service_instance_id: str,
        binding_id: str,
        params: Mapping[str, Any] | None,
        headers: Mapping[str, str] | None,
        platform_instance_id: str | None,
    ) -> Outcome:
        request = self.parse_request(
            GetLastServiceBindingOperationRequest,
            {
                **(params or {}),
                "service_instance_id": service_instance_id,
                "binding_id": binding_id,
            },
            headers,
            platform_instance_id,
        )
        return last_operation_outcome(await self.service.get_last_operation(request))

    async def _delete(
        self,
        service_instance_id: str,
        binding_id: str,
        params: Mapping[str, Any] | None,
        headers: Mapping[str, str] | None,
        platform_instance_id: str | None,
    ) -> Outcome:
        request = self.parse_request(
            DeleteServiceInstanceBindingRequest,
            {
                **(params or {}),
                "service_instance_id": service_instance_id,
                "binding_id": binding_id,
            },
            headers,
            platform_instance_id,
        )
        request = await self.resolve_catalog(request, required=False)
        LOGGER.debug(
            "Deleting a service instance binding",
            extra={"service_instance_id": service_instance_id, "binding_id": binding_id},
        )
        return delete_outcome(await self.service.delete_service_instance_binding(request))
