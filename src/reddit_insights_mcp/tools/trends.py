"""
reddit_get_trends tool.

Trend articles and insights via ``POST /api/v1/trends``. The tool accepts
``perPage`` and sends it to the API as ``per_page``.
"""
from typing import Any, Dict, Optional

from mcp import types
from pydantic import BaseModel, ConfigDict, Field

from reddit_insights_mcp.api import InsightsAPIClient
from reddit_insights_mcp.tools.base import Number, run_tool
from reddit_insights_mcp.utils.logger import get_logger

logger = get_logger(__name__)

TOOL_NAME = "reddit_get_trends"
ENDPOINT = "/api/v1/trends"


class GetTrendsInput(BaseModel):
    """
    Arguments for reddit_get_trends.

    ``per_page`` is populated from ``perPage`` (the tool-facing name) and
    dumped under its field name, which is what the API expects.
    """

    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    page: Optional[Number] = Field(1, description="Page number")
    per_page: Optional[Number] = Field(12, alias="perPage", description="Results per page")
    filter: Optional[str] = Field(
        None,
        description="Time period filter: 'latest', 'today', 'week', 'month'",
    )
    category: Optional[str] = Field(None, description="Filter by category")


async def reddit_get_trends(
    client: InsightsAPIClient, arguments: Dict[str, Any]
) -> types.CallToolResult:
    """
    Get Reddit trend articles.

    Unset ``filter`` and ``category`` are omitted from the request body.
    """

    async def fetch() -> Any:
        params = GetTrendsInput.model_validate(arguments)

        logger.info(
            "reddit_get_trends_started",
            page=params.page,
            per_page=params.per_page,
            filter=params.filter,
            category=params.category,
        )

        return await client.request(
            ENDPOINT,
            method="POST",
            body=params.model_dump(exclude_none=True),
        )

    return await run_tool(TOOL_NAME, "getting trends", fetch)
