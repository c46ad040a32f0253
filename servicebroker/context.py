import contextvars
from dataclasses import dataclass, replace

from ulid import ULID


@dataclass(frozen=True)
class RequestContext:
    """Immutable context for tracking one lifecycle request.

    RequestContext ties together everything logged while a single platform
    request is handled: the controller, the event flows and the service
    implementation all see the same context because it is kept in a
    context variable, which asyncio copies into each task.

    Attributes:
        request_id: Unique ID of the request, generated by the controller
            for every request. The platform supplied request identity is
            kept on the request itself.
        operation: Name of the lifecycle operation being performed, e.g.
            ``create_service_instance_binding``.
        platform: Platform the request originated from, when the
            originating identity header was sent.

    Examples:
        Create a new context at the entry point:

        >>> ctx = RequestContext.create()
        >>> print(ctx.request_id)  # Auto-generated ULID

        Narrow it to an operation:

        >>> ctx = ctx.for_operation("delete_service_instance")
    """

    request_id: ULID | None = None
    operation: str | None = None
    platform: str | None = None

    @classmethod
    def create(cls, request_id: ULID | None = None) -> "RequestContext":
        """Create a new context, typically when a request arrives.

        Args:
            request_id: Optional request ID. If not provided, a new ULID is
                generated.

        Returns:
            A new RequestContext instance.
        """
        if request_id is None:
            request_id = ULID()
        return cls(request_id=request_id)

    def for_operation(self, operation: str) -> "RequestContext":
        """Create a child context for the given lifecycle operation."""
        return replace(self, operation=operation)

    def with_platform(self, platform: str | None) -> "RequestContext":
        return replace(self, platform=platform)

    def as_log_extra(self) -> dict[str, str]:
        """Render the populated fields for a log record's ``extra``."""
        extra = {}
        if self.request_id is not None:
            extra["request_id"] = str(self.request_id)
        if self.operation is not None:
            extra["operation"] = self.operation
        if self.platform is not None:
            extra["platform"] = self.platform
        return extra


# Context variable for storing the current request context
_context: contextvars.ContextVar[RequestContext | None] = contextvars.ContextVar(
    "request_context", default=None
)


def get_context() -> RequestContext:
    """Get the current request context.

    If no context has been set, returns an empty RequestContext with all
    fields None.
    """
    ctx = _context.get()
    if ctx is None:
        return RequestContext()
    return ctx


def set_context(context: RequestContext) -> contextvars.Token[RequestContext | None]:
    """Set the current request context.

    Returns:
        A token that can be passed to `reset_context` to restore the
        previous context.
    """
    return _context.set(context)


def reset_context(token: contextvars.Token[RequestContext | None]) -> None:
    _context.reset(token)


def clear_context() -> None:
    """Clear the current request context.

    This is useful for cleanup or testing.
    """
    _context.set(None)


def get_or_create_context() -> RequestContext:
    """Get the current context, or create a new one if not set.

    Returns:
        The current or newly created RequestContext.
    """
    ctx = _context.get()
    if ctx is None:
        ctx = RequestContext.create()
        set_context(ctx)
    return ctx
