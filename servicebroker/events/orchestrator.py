"""Runs a lifecycle operation surrounded by its event flows.

The contract, for every flow-enabled operation:

1. Initialization flows run one after another in registration order. The
   first failure aborts: the delegate and the completion flows are skipped.
2. The delegate (the service implementation) is called.
3. On success every completion flow runs with the response. A failing
   completion flow makes the whole call fail; error flows are not run.
4. On failure of step 1 or 2 every error flow runs, each isolated from the
   failures of the others, and the original failure is re-raised.

Nothing here is shared between requests except the read-only registry, so
any number of requests may be orchestrated concurrently.
"""

import inspect
import logging
from collections.abc import Callable
from typing import Any

from .flows import Delegate, TRequest, TResponse
from .registry import EventFlowRegistry

LOGGER = logging.getLogger(__name__)


async def run_with_flows(
    registry: EventFlowRegistry[TRequest, TResponse],
    request: TRequest,
    delegate: Delegate[TRequest, TResponse],
) -> TResponse:
    """Run ``delegate`` for ``request`` surrounded by the flows of ``registry``.

    Args:
        registry: Flows of the operation being performed.
        request: The lifecycle request.
        delegate: The service implementation method to call.

    Returns:
        The delegate's response.

    Raises:
        Exception: The failure of an initialization flow or of the
            delegate, unchanged, with the failures of error flows attached
            as notes. Or the first failure of a completion flow.
    """
    try:
        for flow in registry.initialization_flows:
            await _invoke(flow, request)
        response = await _invoke(delegate, request)
    except Exception as e:
        await _run_error_flows(registry, request, e)
        raise

    await _run_completion_flows(registry, request, response)
    return response


async def _run_error_flows(
    registry: EventFlowRegistry[TRequest, Any], request: TRequest, error: Exception
) -> None:
    for flow in registry.error_flows:
        try:
            await _invoke(flow, request, error)
        except Exception as flow_error:
            LOGGER.error(
                "Error flow failed",
                exc_info=flow_error,
                extra={"registry": registry.name, "flow": _name(flow)},
            )
            error.add_note(f"Error flow {_name(flow)} failed: {flow_error!r}")


async def _run_completion_flows(
    registry: EventFlowRegistry[TRequest, TResponse], request: TRequest, response: TResponse
) -> None:
    failures: list[Exception] = []
    for flow in registry.completion_flows:
        try:
            await _invoke(flow, request, response)
        except Exception as e:
            failures.append(e)

    if failures:
        first, *others = failures
        for other in others:
            first.add_note(f"Completion flow also failed: {other!r}")
        raise first


async def _invoke(func: Callable[..., Any], *args: Any) -> Any:
    result = func(*args)
    if inspect.isawaitable(result):
        return await result
    return result


def _name(flow: Callable[..., Any]) -> str:
    return getattr(flow, "__qualname__", None) or type(flow).__name__
