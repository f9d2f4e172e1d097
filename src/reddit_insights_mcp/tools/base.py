"""
Shared execution wrapper for tool handlers.

Every handler follows the same shape: validate arguments, make one API
call, wrap the JSON. ``run_tool`` owns the timing, logging and the
conversion of any failure into an ``isError`` result, so no exception
escapes a handler.
"""
import time
from typing import Any, Awaitable, Callable, Union

from mcp import types

from reddit_insights_mcp.models.responses import error_message, error_result, json_result
from reddit_insights_mcp.utils.logger import get_logger, log_tool_execution, tool_context

logger = get_logger(__name__)

# Advertised as JSON "number"; ints stay ints so query strings read "20", not "20.0"
Number = Union[int, float]


async def run_tool(
    tool_name: str,
    action: str,
    fetch: Callable[[], Awaitable[Any]],
) -> types.CallToolResult:
    """
    Execute ``fetch`` and wrap its outcome as a tool result.

    Args:
        tool_name: Tool being executed (for logging)
        action: Gerund phrase used in error text, e.g. ``"searching Reddit"``
        fetch: Coroutine factory that validates arguments and calls the API

    Returns:
        JSON result on success, otherwise an error result reading
        ``Error <action>: <message>``
    """
    start_time = time.perf_counter()

    with tool_context(tool_name):
        try:
            data = await fetch()
        except Exception as e:
            message = error_message(e)
            log_tool_execution(
                tool_name=tool_name,
                duration_ms=(time.perf_counter() - start_time) * 1000,
                error=message,
                error_type=type(e).__name__,
            )
            return error_result(f"Error {action}: {message}")

        log_tool_execution(
            tool_name=tool_name,
            duration_ms=(time.perf_counter() - start_time) * 1000,
        )
    return json_result(data)
