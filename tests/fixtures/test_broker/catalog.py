"""Catalog served by the test broker."""

from servicebroker.domain import Catalog, Plan, ServiceDefinition

SERVICE_DEFINITION_ID = "service-one-id"
PLAN_ID = "plan-one-id"
OTHER_PLAN_ID = "plan-two-id"


def build_catalog() -> Catalog:
    return Catalog(
        service_definitions=(
            ServiceDefinition(
                id=SERVICE_DEFINITION_ID,
                name="Service One",
                description="Description for Service One",
                plan_updateable=True,
                instances_retrievable=True,
                bindings_retrievable=True,
                plans=(
                    Plan(id=PLAN_ID, name="Plan One", description="Description for Plan One"),
                    Plan(
                        id=OTHER_PLAN_ID,
                        name="Plan Two",
                        description="Description for Plan Two",
                        free=False,
                    ),
                ),
            ),
        )
    )
