"""
reddit_search tool.

Semantic search over Reddit conversations via
``POST /api/v1/search/semantic``.
"""
from typing import Any, Dict, Optional

from mcp import types
from pydantic import BaseModel, ConfigDict, Field

from reddit_insights_mcp.api import InsightsAPIClient
from reddit_insights_mcp.tools.base import Number, run_tool
from reddit_insights_mcp.utils.logger import get_logger

logger = get_logger(__name__)

TOOL_NAME = "reddit_search"
ENDPOINT = "/api/v1/search/semantic"


class SearchInput(BaseModel):
    """
    Arguments for reddit_search.

    Only type coercion is applied; range limits are left to the API.
    """

    model_config = ConfigDict(coerce_numbers_to_str=True)

    query: str = Field(
        ...,
        description="Natural language search query",
    )
    limit: Optional[Number] = Field(
        20,
        description="Maximum number of results (API accepts 1-100)",
    )


async def reddit_search(
    client: InsightsAPIClient, arguments: Dict[str, Any]
) -> types.CallToolResult:
    """
    Search Reddit conversations using semantic search.

    Args:
        client: API client
        arguments: Raw tool arguments (``query`` required, ``limit`` optional)

    Returns:
        CallToolResult with the API response, or an error result

    Example:
        >>> result = await reddit_search(client, {"query": "rust vs go"})
    """

    async def fetch() -> Any:
        params = SearchInput.model_validate(arguments)

        logger.info(
            "reddit_search_started",
            query=params.query[:50],
            limit=params.limit,
        )

        return await client.request(
            ENDPOINT,
            method="POST",
            body=params.model_dump(),
        )

    return await run_tool(TOOL_NAME, "searching Reddit", fetch)
