from typing import Protocol

from ..domain import AsyncServiceBrokerRequest, ServiceBrokerAsyncRequiredException


class RequiresAsync(Protocol):
    def requires_async(self, request: AsyncServiceBrokerRequest) -> bool: ...


def ensure_async_accepted(service: RequiresAsync, request: AsyncServiceBrokerRequest) -> None:
    """Fail fast when an operation can only complete asynchronously.

    Raises:
        ServiceBrokerAsyncRequiredException: If ``service`` needs to run
            the operation asynchronously but the platform did not accept
            an asynchronous response.
    """
    if not request.async_accepted and service.requires_async(request):
        raise ServiceBrokerAsyncRequiredException()
