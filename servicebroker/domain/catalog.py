"""Catalog metadata: the services and plans a broker offers.

Only the fields the lifecycle engine needs are modelled; anything else a
broker wants to advertise goes into ``metadata``.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Plan(BaseModel):
    """A plan offered for a service definition.

    Examples:
        >>> plan = Plan(id="plan-id-one", name="plan-one", description="Plan One")
        >>> plan.free
        True
        >>> plan.to_body()
        {'id': 'plan-id-one', 'name': 'plan-one', 'description': 'Plan One', 'free': True}
    """

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: str
    free: bool = True
    bindable: bool | None = None
    metadata: dict[str, Any] | None = None
    schemas: dict[str, Any] | None = None

    def to_body(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True, mode="json")


class ServiceDefinition(BaseModel):
    """A service offered by the broker together with its plans."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: str
    bindable: bool = True
    plans: tuple[Plan, ...] = ()
    plan_updateable: bool | None = None
    instances_retrievable: bool | None = None
    bindings_retrievable: bool | None = None
    tags: tuple[str, ...] = ()
    metadata: dict[str, Any] | None = None

    def get_plan(self, plan_id: str | None) -> Plan | None:
        """Find a plan of this service definition by id."""
        if plan_id is None:
            return None
        return next((plan for plan in self.plans if plan.id == plan_id), None)

    def to_body(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True, mode="json")


class Catalog(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    service_definitions: tuple[ServiceDefinition, ...] = Field(default=(), alias="services")

    def get_service_definition(self, service_definition_id: str | None) -> ServiceDefinition | None:
        if service_definition_id is None:
            return None
        return next(
            (
                definition
                for definition in self.service_definitions
                if definition.id == service_definition_id
            ),
            None,
        )

    def to_body(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")
