"""Event flows that log every lifecycle operation."""

import logging
from typing import Any

from ..context import get_context

LOGGER = logging.getLogger(__name__)


class LoggingFlows:
    """Flows that log lifecycle operations with request correlation.

    Logs when an operation starts, completes and fails, at the given level
    (failures at WARNING at least). Only identifiers are logged; request
    parameters and binding credentials are NOT logged since they routinely
    carry secrets.

    Attributes:
        level: The numeric logging level (e.g., logging.INFO,
            logging.DEBUG).

    Examples:
        Log every operation:

        >>> registries = EventFlowRegistries()
        >>> registries.add_flows(LoggingFlows("INFO"))

        Log provisioning only:

        >>> registries.create_instance.add_flows(LoggingFlows("DEBUG"))
    """

    def __init__(self, level: str):
        """Initialize the logging flows.

        Args:
            level: String representation of the log level (e.g.,
                "INFO", "DEBUG"). Case-insensitive.
        """
        self.level = getattr(logging, level.upper())

    async def initialize(self, request: Any) -> None:
        LOGGER.log(self.level, "Received lifecycle request", extra=self._extra(request))

    async def complete(self, request: Any, response: Any) -> None:
        extra = self._extra(request)
        extra["async"] = bool(getattr(response, "async_", False))
        LOGGER.log(self.level, "Completed lifecycle request", extra=extra)

    async def error(self, request: Any, error: Exception) -> None:
        extra = self._extra(request)
        extra["error_type"] = type(error).__name__
        LOGGER.log(max(self.level, logging.WARNING), "Lifecycle request failed", extra=extra)

    @staticmethod
    def _extra(request: Any) -> dict[str, Any]:
        # Build log extra with request type and resource ids only
        extra: dict[str, Any] = {"request_type": type(request).__name__}
        for field in ("service_instance_id", "binding_id", "service_definition_id", "plan_id"):
            value = getattr(request, field, None)
            if value is not None:
                extra[field] = value

        # Add correlation context if available
        extra.update(get_context().as_log_extra())
        return extra
