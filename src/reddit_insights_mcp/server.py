"""
MCP server initialization and tool dispatch.

Builds a low-level MCP ``Server`` exposing two request handlers:
list-tools (static catalog) and call-tool (dispatch by exact name).
"""
from typing import Any, Awaitable, Callable, Dict, Optional

from mcp import types
from mcp.server.lowlevel import Server

from reddit_insights_mcp import __version__
from reddit_insights_mcp.api import InsightsAPIClient
from reddit_insights_mcp.models.responses import error_result
from reddit_insights_mcp.tools import (
    list_tools,
    reddit_get_subreddit,
    reddit_get_trends,
    reddit_list_subreddits,
    reddit_search,
)
from reddit_insights_mcp.utils.logger import get_logger

logger = get_logger(__name__)

# Server metadata
SERVER_NAME = "reddit-insights-mcp"
SERVER_VERSION = __version__

ToolHandler = Callable[[InsightsAPIClient, Dict[str, Any]], Awaitable[types.CallToolResult]]

TOOL_HANDLERS: Dict[str, ToolHandler] = {
    "reddit_search": reddit_search,
    "reddit_list_subreddits": reddit_list_subreddits,
    "reddit_get_subreddit": reddit_get_subreddit,
    "reddit_get_trends": reddit_get_trends,
}


async def dispatch_tool_call(
    client: InsightsAPIClient,
    name: str,
    arguments: Optional[Dict[str, Any]],
) -> types.CallToolResult:
    """
    Route a tool call to its handler.

    Args:
        client: API client shared by all handlers
        name: Tool name from the call-tool request
        arguments: Raw argument mapping (may be ``None``)

    Returns:
        The handler's result, or ``Unknown tool: <name>`` as an error
        result when no handler matches. Upstream is not contacted for
        unknown tools.
    """
    handler = TOOL_HANDLERS.get(name)

    if handler is None:
        logger.warning("unknown_tool", tool=name)
        return error_result(f"Unknown tool: {name}")

    return await handler(client, arguments or {})


def create_mcp_server(client: InsightsAPIClient) -> Server:
    """
    Create and configure the MCP server instance.

    Args:
        client: API client used by every tool call

    Returns:
        Server with list-tools and call-tool handlers bound. The tools
        capability is derived by ``create_initialization_options()``.

    Example:
        >>> server = create_mcp_server(client)
        >>> await server.run(read, write, server.create_initialization_options())
    """
    server: Server = Server(SERVER_NAME, version=SERVER_VERSION)

    @server.list_tools()
    async def handle_list_tools() -> list[types.Tool]:
        return list_tools()

    # Argument validation lives in the per-tool pydantic models
    @server.call_tool(validate_input=False)
    async def handle_call_tool(
        name: str, arguments: Dict[str, Any]
    ) -> types.CallToolResult:
        return await dispatch_tool_call(client, name, arguments)

    logger.info(
        "mcp_server_initialized",
        name=SERVER_NAME,
        version=SERVER_VERSION,
        tools=list(TOOL_HANDLERS),
    )

    return server
