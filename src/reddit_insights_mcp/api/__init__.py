"""
Reddit Insights REST API integration.

Example:
    >>> from reddit_insights_mcp.api import InsightsAPIClient
    >>> async with InsightsAPIClient(settings) as client:
    ...     trends = await client.request("/api/v1/trends", method="POST", body={"page": 1})
"""

from reddit_insights_mcp.api.client import InsightsAPIClient
from reddit_insights_mcp.api.exceptions import (
    APIConnectionError,
    APIResponseError,
    InsightsAPIError,
)

__all__ = [
    # Client
    "InsightsAPIClient",
    # Exceptions
    "InsightsAPIError",
    "APIResponseError",
    "APIConnectionError",
]
