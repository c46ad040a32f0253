"""Broker configuration using pydantic-settings."""

from pydantic_settings import BaseSettings


class BrokerSettings(BaseSettings):
    """Settings for a service broker.

    All settings can be configured via environment variables with the
    SERVICEBROKER_ prefix. For example:
    - SERVICEBROKER_API_VERSION=2.14
    - SERVICEBROKER_LOG_LEVEL=DEBUG
    - SERVICEBROKER_LOGGING_FLOWS=false

    Attributes:
        api_version: Broker API version the platform must speak. When set,
            requests without an ``X-Broker-API-Version`` header or with a
            different major version are rejected with 412 Precondition
            Failed. When unset every version is accepted.
        log_level: Level the built-in logging flows log at.
        logging_flows: Whether the builder registers the built-in logging
            flows on every event flow registry.

    Example:
        >>> settings = BrokerSettings(api_version="2.14")
        >>> broker = (
        ...     ServiceBrokerBuilder()
        ...     .with_settings(settings)
        ...     .with_catalog(catalog)
        ...     .with_instance_service(MyInstanceService())
        ...     .build()
        ... )
    """

    api_version: str | None = None
    log_level: str = "INFO"
    logging_flows: bool = True

    model_config = {"env_prefix": "SERVICEBROKER_"}

    def accepts_api_version(self, provided_version: str | None) -> bool:
        """Check a platform supplied API version against ``api_version``.

        Versions are compatible when their major versions match.
        """
        if self.api_version is None:
            return True
        if not provided_version:
            return False
        return provided_version.split(".")[0] == self.api_version.split(".")[0]
