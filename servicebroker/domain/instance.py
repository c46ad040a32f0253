"""Requests and responses for service instance lifecycle operations."""

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


class CreateServiceInstanceRequest(AsyncServiceBrokerRequest):
    """Provision a new service instance.

    ``service_definition`` and ``plan`` are resolved from the catalog by
    the controller before the request reaches the event service.
    """

    required_fields: ClassVar[tuple[str, ...]] = ("service_id", "plan_id")

    service_instance_id: str | None = None
    service_definition_id: str | None = Field(default=None, alias="service_id")
    plan_id: str | None = None
    organization_guid: str | None = None
    space_guid: str | None = None
    parameters: dict[str, Any] | None = None
    context: Context | None = None
    service_definition: ServiceDefinition | None = Field(default=None, exclude=True)
    plan: Plan | None = Field(default=None, exclude=True)


class PreviousValues(BaseModel):
    """Values of the service instance before an update."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    service_definition_id: str | None = Field(default=None, alias="service_id")
    plan_id: str | None = None
    organization_id: str | None = None
    space_id: str | None = None


class UpdateServiceInstanceRequest(AsyncServiceBrokerRequest):
    required_fields: ClassVar[tuple[str, ...]] = ("service_id",)

    service_instance_id: str | None = None
    service_definition_id: str | None = Field(default=None, alias="service_id")
    plan_id: str | None = None
    previous_values: PreviousValues | None = None
    parameters: dict[str, Any] | None = None
    context: Context | None = None
    service_definition: ServiceDefinition | None = Field(default=None, exclude=True)
    plan: Plan | None = Field(default=None, exclude=True)


class DeleteServiceInstanceRequest(AsyncServiceBrokerRequest):
    required_fields: ClassVar[tuple[str, ...]] = ("service_id", "plan_id")

    service_instance_id: str | None = None
    service_definition_id: str | None = Field(default=None, alias="service_id")
    plan_id: str | None = None
    service_definition: ServiceDefinition | None = Field(default=None, exclude=True)
    plan: Plan | None = Field(default=None, exclude=True)


class GetServiceInstanceRequest(ServiceBrokerRequest):
    service_instance_id: str | None = None


class GetLastServiceOperationRequest(ServiceBrokerRequest):
    service_instance_id: str | None = None
    service_definition_id: str | None = Field(default=None, alias="service_id")
    plan_id: str | None = None
    operation: str | None = None


class CreateServiceInstanceResponse(AsyncServiceBrokerResponse):
    """Result of provisioning a service instance.

    Attributes:
        instance_existed: True when an identical instance already existed;
            reported as ``200 OK`` instead of ``201 Created``.
        dashboard_url: URL of a web based management UI for the instance.
    """

    instance_existed: bool = Field(default=False, exclude=True)
    dashboard_url: str | None = None

    @property
    def existed(self) -> bool:
        return self.instance_existed


class UpdateServiceInstanceResponse(AsyncServiceBrokerResponse):
    dashboard_url: str | None = None


class DeleteServiceInstanceResponse(AsyncServiceBrokerResponse):
    pass


class GetServiceInstanceResponse(ServiceBrokerResponse):
    service_definition_id: str | None = Field(default=None, alias="service_id")
    plan_id: str | None = None
    dashboard_url: str | None = None
    parameters: dict[str, Any] | None = None


class GetLastServiceOperationResponse(LastOperationResponse):
    """Status of the last asynchronous operation on a service instance."""

    instance_usable: bool | None = None
    update_repeatable: bool | None = None
