"""
Subreddit tools.

- reddit_list_subreddits: paginated listing via ``GET /api/v1/subreddits``
- reddit_get_subreddit: details and recent posts via
  ``GET /api/v1/subreddits/{subreddit}``
"""
from typing import Any, Dict, Optional

from mcp import types
from pydantic import BaseModel, ConfigDict, Field

from reddit_insights_mcp.api import InsightsAPIClient
from reddit_insights_mcp.tools.base import Number, run_tool
from reddit_insights_mcp.utils.logger import get_logger

logger = get_logger(__name__)

LIST_TOOL_NAME = "reddit_list_subreddits"
GET_TOOL_NAME = "reddit_get_subreddit"
SUBREDDITS_ENDPOINT = "/api/v1/subreddits"


class ListSubredditsInput(BaseModel):
    """Arguments for reddit_list_subreddits."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    page: Optional[Number] = Field(1, description="Page number")
    limit: Optional[Number] = Field(20, description="Results per page (API accepts 1-100)")
    search: Optional[str] = Field(
        None,
        description="Filter subreddits by name, title, or description",
    )


class GetSubredditInput(BaseModel):
    """Arguments for reddit_get_subreddit."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    subreddit: str = Field(
        ...,
        description="Subreddit name without the r/ prefix",
    )


async def reddit_list_subreddits(
    client: InsightsAPIClient, arguments: Dict[str, Any]
) -> types.CallToolResult:
    """
    List available subreddits, one page at a time.

    ``search`` is left out of the query string when not given.
    """

    async def fetch() -> Any:
        params = ListSubredditsInput.model_validate(arguments)

        logger.info(
            "reddit_list_subreddits_started",
            page=params.page,
            limit=params.limit,
            search=params.search,
        )

        return await client.request(
            SUBREDDITS_ENDPOINT,
            method="GET",
            params=params.model_dump(),
        )

    return await run_tool(LIST_TOOL_NAME, "listing subreddits", fetch)


async def reddit_get_subreddit(
    client: InsightsAPIClient, arguments: Dict[str, Any]
) -> types.CallToolResult:
    """
    Get detailed information about one subreddit.

    The name is interpolated into the path as given, without
    percent-encoding.
    """

    async def fetch() -> Any:
        params = GetSubredditInput.model_validate(arguments)

        logger.info("reddit_get_subreddit_started", subreddit=params.subreddit)

        return await client.request(
            f"{SUBREDDITS_ENDPOINT}/{params.subreddit}",
            method="GET",
        )

    return await run_tool(GET_TOOL_NAME, "getting subreddit", fetch)
