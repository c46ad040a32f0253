"""Access to the catalog of services and plans offered by the broker."""

from abc import ABC, abstractmethod

from ..domain import Catalog, ServiceDefinition


class CatalogService(ABC):
    """Abstract base class for catalog lookups.

    The controllers resolve a request's service definition and plan through
    this service before the request enters orchestration.
    """

    @staticmethod
    def in_memory(catalog: Catalog) -> "CatalogService":
        return InMemoryCatalogService(catalog)

    @abstractmethod
    async def get_catalog(self) -> Catalog:
        """Return the full catalog."""
        ...

    @abstractmethod
    async def get_service_definition(
        self, service_definition_id: str | None
    ) -> ServiceDefinition | None:
        """Return the service definition with the given id, if known."""
        ...


class InMemoryCatalogService(CatalogService):
    """Catalog service backed by a fixed `Catalog`."""

    def __init__(self, catalog: Catalog):
        self.catalog = catalog

    async def get_catalog(self) -> Catalog:
        return self.catalog

    async def get_service_definition(
        self, service_definition_id: str | None
    ) -> ServiceDefinition | None:
        return self.catalog.get_service_definition(service_definition_id)
