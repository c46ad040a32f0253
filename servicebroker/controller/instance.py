"""Controller for service instance lifecycle requests."""

import logging
from collections.abc import Mapping
from typing import Any

from ..config import BrokerSettings
from ..domain import (
    CreateServiceInstanceRequest,
    DeleteServiceInstanceRequest,
    GetLastServiceOperationRequest,
    GetServiceInstanceRequest,
    UpdateServiceInstanceRequest,
)
from ..services import CatalogService, ServiceInstanceService
from .base import BaseController
from .errors import ServiceBrokerExceptionHandler
from .outcome import Outcome
from .responses import (
    create_outcome,
    delete_outcome,
    get_outcome,
    last_operation_outcome,
    update_outcome,
)

LOGGER = logging.getLogger(__name__)


class ServiceInstanceController(BaseController):
    """Provision, fetch, update, poll and deprovision service instances.

    Args:
        catalog_service: Resolves service definitions and plans.
        service: The service instance service to delegate to, normally a
            `ServiceInstanceEventService` so event flows run.
        settings: Broker settings.
        exception_handler: Translates failures into outcomes.

    Examples:
        >>> outcome = await controller.create_service_instance(
        ...     "instance-1",
        ...     {"service_id": "db", "plan_id": "small"},
        ...     params={"accepts_incomplete": "true"},
        ... )
        >>> outcome.status
        <HTTPStatus.ACCEPTED: 202>
    """

    def __init__(
        self,
        catalog_service: CatalogService,
        service: ServiceInstanceService,
        settings: BrokerSettings | None = None,
        exception_handler: ServiceBrokerExceptionHandler | None = None,
    ):
        super().__init__(catalog_service, settings, exception_handler)
        self.service = service

    async def create_service_instance(
        self,
        service_instance_id: str,
        body: Mapping[str, Any] | None,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
        platform_instance_id: str | None = None,
    ) -> Outcome:
        return await self.respond(
            "create_service_instance",
            self._create(service_instance_id, body, params, headers, platform_instance_id),
        )

    async def get_service_instance(
        self,
        service_instance_id: str,
        headers: Mapping[str, str] | None = None,
        platform_instance_id: str | None = None,
    ) -> Outcome:
        return await self.respond(
            "get_service_instance",
            self._get(service_instance_id, headers, platform_instance_id),
        )

    async def get_last_operation(
        self,
        service_instance_id: str,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
        platform_instance_id: str | None = None,
    ) -> Outcome:
        return await self.respond(
            "get_last_instance_operation",
            self._get_last_operation(service_instance_id, params, headers, platform_instance_id),
        )

    async def update_service_instance(
        self,
        service_instance_id: str,
        body: Mapping[str, Any] | None,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
        platform_instance_id: str | None = None,
    ) -> Outcome:
        return await self.respond(
            "update_service_instance",
            self._update(service_instance_id, body, params, headers, platform_instance_id),
        )

    async def delete_service_instance(
        self,
        service_instance_id: str,
        params: Mapping[str, Any] | None,
        headers: Mapping[str, str] | None = None,
        platform_instance_id: str | None = None,
    ) -> Outcome:
        return await self.respond(
            "delete_service_instance",
            self._delete(service_instance_id, params, headers, platform_instance_id),
        )

    async def _create(
        self,
        service_instance_id: str,
        body: Mapping[str, Any] | None,
        params: Mapping[str, Any] | None,
        headers: Mapping[str, str] | None,
        platform_instance_id: str | None,
    ) -> Outcome:
        request = self.parse_request(
            CreateServiceInstanceRequest,
            {**(body or {}), **(params or {}), "service_instance_id": service_instance_id},
            headers,
            platform_instance_id,
        )
        request = await self.resolve_catalog(request, required=True)
        LOGGER.debug("Creating a service instance", extra={"service_instance_id": service_instance_id})
        return create_outcome(await self.service.create_service_instance(request))

    async def _get(
        self,
        service_instance_id: str,
        headers: Mapping[str, str] | None,
        platform_instance_id: str | None,
    ) -> Outcome:
        request = self.parse_request(
            GetServiceInstanceRequest,
            {"service_instance_id": service_instance_id},
            headers,
            platform_instance_id,
        )
        return get_outcome(await self.service.get_service_instance(request))

    async def _get_last_operation(
        self,
        service_instance_id: str,
        params: Mapping[str, Any] | None,
        headers: Mapping[str, str] | None,
        platform_instance_id: str | None,
    ) -> Outcome:
        request = self.parse_request(
            GetLastServiceOperationRequest,
            {**(params or {}), "service_instance_id": service_instance_id},
            headers,
            platform_instance_id,
        )
        return last_operation_outcome(await self.service.get_last_operation(request))

    async def _update(
        self,
        service_instance_id: str,
        body: Mapping[str, Any] | None,
        params: Mapping[str, Any] | None,
        headers: Mapping[str, str] | None,
        platform_instance_id: str | None,
    ) -> Outcome:
        request = self.parse_request(
            UpdateServiceInstanceRequest,
            {**(body or {}), **(params or {}), "service_instance_id": service_instance_id},
            headers,
            platform_instance_id,
        )
        request = await self.resolve_catalog(request, required=True)
        LOGGER.debug("Updating a service instance", extra={"service_instance_id": service_instance_id})
        return update_outcome(await self.service.update_service_instance(request))

    async def _delete(
        self,
        service_instance_id: str,
        params: Mapping[str, Any] | None,
        headers: Mapping[str, str] | None,
        platform_instance_id: str | None,
    ) -> Outcome:
        request = self.parse_request(
            DeleteServiceInstanceRequest,
            {**(params or {}), "service_instance_id": service_instance_id},
            headers,
            platform_instance_id,
        )
        request = await self.resolve_catalog(request, required=False)
        LOGGER.debug("Deleting a service instance", extra={"service_instance_id": service_instance_id})
        return delete_outcome(await self.service.delete_service_instance(request))
