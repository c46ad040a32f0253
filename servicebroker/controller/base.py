"""Plumbing shared by the lifecycle controllers.

Controllers are transport neutral: they receive already decoded path
values, query parameters, headers and bodies and always return an
`Outcome`, never raise.
"""

import logging
from collections.abc import Awaitable, Mapping
from typing import Any, TypeVar

from ..config import BrokerSettings
from ..context import RequestContext, get_context, reset_context, set_context
from ..domain import (
    Context,
    ServiceBrokerApiVersionException,
    ServiceBrokerRequest,
    ServiceDefinitionDoesNotExistException,
    ServiceDefinitionPlanDoesNotExistException,
)
from ..services import CatalogService
from .errors import ServiceBrokerExceptionHandler
from .outcome import Outcome

LOGGER = logging.getLogger(__name__)

API_VERSION_HEADER = "X-Broker-API-Version"
API_INFO_LOCATION_HEADER = "X-Api-Info-Location"
ORIGINATING_IDENTITY_HEADER = "X-Broker-API-Originating-Identity"
REQUEST_IDENTITY_HEADER = "X-Broker-API-Request-Identity"

TRequest = TypeVar("TRequest", bound=ServiceBrokerRequest)


class BaseController:
    """Common request handling of the service instance and binding controllers.

    Args:
        catalog_service: Resolves service definitions and plans.
        settings: Broker settings; defaults are used when omitted.
        exception_handler: Translates failures into outcomes.
    """

    def __init__(
        self,
        catalog_service: CatalogService,
        settings: BrokerSettings | None = None,
        exception_handler: ServiceBrokerExceptionHandler | None = None,
    ):
        self.catalog_service = catalog_service
        self.settings = settings or BrokerSettings()
        self.exception_handler = exception_handler or ServiceBrokerExceptionHandler()

    async def respond(self, operation: str, outcome: Awaitable[Outcome]) -> Outcome:
        """Await ``outcome`` within a fresh request context.

        Any failure, whether raised while validating the request, by an
        event flow or by the service implementation, is translated by the
        exception handler.
        """
        token = set_context(RequestContext.create().for_operation(operation))
        try:
            return await outcome
        except Exception as e:
            return self.exception_handler.handle(e)
        finally:
            reset_context(token)

    def parse_request(
        self,
        request_type: type[TRequest],
        data: Mapping[str, Any],
        headers: Mapping[str, str] | None = None,
        platform_instance_id: str | None = None,
    ) -> TRequest:
        """Build a request from wire data and the platform headers.

        Raises:
            ServiceBrokerApiVersionException: If the API version header does
                not match the configured version.
            ServiceBrokerRequestValidationException: If required fields are
                missing or malformed.
            ServiceBrokerInvalidOriginatingIdentityException: If the
                originating identity header is malformed.
        """
        normalized = {name.lower(): value for name, value in (headers or {}).items()}

        api_version = normalized.get(API_VERSION_HEADER.lower())
        if not self.settings.accepts_api_version(api_version):
            raise ServiceBrokerApiVersionException(self.settings.api_version or "", api_version)

        request = request_type.parse(
            {
                **data,
                "platform_instance_id": platform_instance_id,
                "api_info_location": normalized.get(API_INFO_LOCATION_HEADER.lower()),
                "request_identity": normalized.get(REQUEST_IDENTITY_HEADER.lower()),
                # Only ever set from the headers and the catalog, never from the body
                "originating_identity": None,
                "service_definition": None,
                "plan": None,
            }
        )

        originating_identity = normalized.get(ORIGINATING_IDENTITY_HEADER.lower())
        if originating_identity:
            identity = Context.from_originating_identity(originating_identity)
            set_context(get_context().with_platform(identity.platform))
            request = request.model_copy(update={"originating_identity": identity})
        return request

    async def resolve_catalog(self, request: TRequest, required: bool) -> TRequest:
        """Attach the service definition and plan named by ``request``.

        Args:
            request: A request carrying ``service_definition_id`` and
                ``plan_id``.
            required: Whether an unknown service definition is an error.
                When False the request proceeds without a definition.

        Raises:
            ServiceDefinitionDoesNotExistException: If ``required`` and the
                service definition is unknown.
            ServiceDefinitionPlanDoesNotExistException: If the plan does not
                belong to the (known) service definition.
        """
        service_definition_id = getattr(request, "service_definition_id", None)
        definition = await self.catalog_service.get_service_definition(service_definition_id)
        if definition is None:
            if required:
                raise ServiceDefinitionDoesNotExistException(service_definition_id)
            LOGGER.debug(
                "Unknown service definition, proceeding without it",
                extra={"service_definition_id": service_definition_id},
            )
            return request

        plan_id = getattr(request, "plan_id", None)
        plan = definition.get_plan(plan_id)
        if plan_id is not None and plan is None:
            raise ServiceDefinitionPlanDoesNotExistException(plan_id, definition.id)
        return request.model_copy(update={"service_definition": definition, "plan": plan})
