"""Requests and responses for service instance binding operations.

Bindings come in two flavours: application bindings, which hand out
credentials to an application, and route bindings, which put a route
service in front of an application route.
"""

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field

from .base import (
    AsyncServiceBrokerRequest,
    AsyncServiceBrokerResponse,
    Context,
    LastOperationResponse,
    ServiceBrokerRequest,
    ServiceBrokerResponse,
)
from .catalog import Plan, ServiceDefinition


class BindResource(BaseModel):
    """The platform resource a binding is created for."""

    model_config = ConfigDict(frozen=True, extra="allow")

    app_guid: str | None = None
    route: str | None = None


class VolumeMount(BaseModel):
    model_config = ConfigDict(frozen=True)

    driver: str
    container_dir: str
    mode: str = "rw"
    device_type: str = "shared"
    device: dict[str, Any] = Field(default_factory=dict)


class CreateServiceInstanceBindingRequest(AsyncServiceBrokerRequest):
    required_fields: ClassVar[tuple[str, ...]] = ("service_id", "plan_id")

    service_instance_id: str | None = None
    binding_id: str | None = None
    service_definition_id: str | None = Field(default=None, alias="service_id")
    plan_id: str | None = None
    bind_resource: BindResource | None = None
    parameters: dict[str, Any] | None = None
    context: Context | None = None
    service_definition: ServiceDefinition | None = Field(default=None, exclude=True)
    plan: Plan | None = Field(default=None, exclude=True)

    @property
    def app_guid(self) -> str | None:
        return self.bind_resource.app_guid if self.bind_resource else None


class GetServiceInstanceBindingRequest(ServiceBrokerRequest):
    service_instance_id: str | None = None
    binding_id: str | None = None


class DeleteServiceInstanceBindingRequest(AsyncServiceBrokerRequest):
    required_fields: ClassVar[tuple[str, ...]] = ("service_id", "plan_id")

    service_instance_id: str | None = None
    binding_id: str | None = None
    service_definition_id: str | None = Field(default=None, alias="service_id")
    plan_id: str | None = None
    service_definition: ServiceDefinition | None = Field(default=None, exclude=True)
    plan: Plan | None = Field(default=None, exclude=True)


class GetLastServiceBindingOperationRequest(ServiceBrokerRequest):
    service_instance_id: str | None = None
    binding_id: str | None = None
    service_definition_id: str | None = Field(default=None, alias="service_id")
    plan_id: str | None = None
    operation: str | None = None


class CreateServiceInstanceBindingResponse(AsyncServiceBrokerResponse):
    """Result of creating a binding.

    Attributes:
        binding_existed: True when an identical binding already existed;
            reported as ``200 OK`` instead of ``201 Created``.
    """

    binding_existed: bool = Field(default=False, exclude=True)

    @property
    def existed(self) -> bool:
        return self.binding_existed


class CreateServiceInstanceAppBindingResponse(CreateServiceInstanceBindingResponse):
    credentials: dict[str, Any] | None = None
    syslog_drain_url: str | None = None
    volume_mounts: list[VolumeMount] | None = None


class CreateServiceInstanceRouteBindingResponse(CreateServiceInstanceBindingResponse):
    route_service_url: str | None = None


class GetServiceInstanceBindingResponse(ServiceBrokerResponse):
    parameters: dict[str, Any] | None = None


class GetServiceInstanceAppBindingResponse(GetServiceInstanceBindingResponse):
    credentials: dict[str, Any] | None = None
    syslog_drain_url: str | None = None
    volume_mounts: list[VolumeMount] | None = None


class GetServiceInstanceRouteBindingResponse(GetServiceInstanceBindingResponse):
    route_service_url: str | None = None


class DeleteServiceInstanceBindingResponse(AsyncServiceBrokerResponse):
    pass


class GetLastServiceBindingOperationResponse(LastOperationResponse):
    """Status of the last asynchronous operation on a binding."""
