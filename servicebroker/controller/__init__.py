"""Transport neutral controllers turning lifecycle requests into outcomes.

A web framework adapter only has to decode the path, query, headers and
body of a request, call the matching controller method and write the
returned `Outcome` back to the wire.
"""

from .binding import ServiceInstanceBindingController
from .errors import ERROR_STATUSES, ServiceBrokerExceptionHandler
from .instance import ServiceInstanceController
from .outcome import Outcome

__all__ = [
    "ERROR_STATUSES",
    "Outcome",
    "ServiceBrokerExceptionHandler",
    "ServiceInstanceBindingController",
    "ServiceInstanceController",
]
