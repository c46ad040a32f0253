"""Tests for catalog lookups and serialization."""

from servicebroker.domain import Catalog, Plan, ServiceDefinition
from tests.fixtures.test_broker import PLAN_ID, SERVICE_DEFINITION_ID


def test_get_service_definition(catalog: Catalog):
    definition = catalog.get_service_definition(SERVICE_DEFINITION_ID)

    assert definition is not None
    assert definition.name == "Service One"
    assert catalog.get_service_definition("unknown") is None
    assert catalog.get_service_definition(None) is None


def test_get_plan(catalog: Catalog):
    definition = catalog.get_service_definition(SERVICE_DEFINITION_ID)

    assert definition.get_plan(PLAN_ID).name == "Plan One"
    assert definition.get_plan("unknown") is None
    assert definition.get_plan(None) is None


def test_catalog_body_uses_services_key():
    catalog = Catalog(
        service_definitions=(
            ServiceDefinition(
                id="sd",
                name="sd-name",
                description="sd description",
                plans=(Plan(id="p", name="p-name", description="p description"),),
            ),
        )
    )

    body = catalog.to_body()

    assert list(body) == ["services"]
    assert body["services"][0]["plans"] == [
        {"id": "p", "name": "p-name", "description": "p description", "free": True}
    ]
    assert "metadata" not in body["services"][0]


def test_catalog_validated_from_wire_body():
    catalog = Catalog.model_validate(
        {"services": [{"id": "sd", "name": "n", "description": "d", "plans": []}]}
    )

    assert catalog.get_service_definition("sd").bindable is True
