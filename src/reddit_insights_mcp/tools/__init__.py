"""MCP tool implementations for the Reddit Insights API."""

from reddit_insights_mcp.tools.catalog import TOOLS, list_tools
from reddit_insights_mcp.tools.search import SearchInput, reddit_search
from reddit_insights_mcp.tools.subreddits import (
    GetSubredditInput,
    ListSubredditsInput,
    reddit_get_subreddit,
    reddit_list_subreddits,
)
from reddit_insights_mcp.tools.trends import GetTrendsInput, reddit_get_trends

__all__ = [
    # Catalog
    "TOOLS",
    "list_tools",
    # Search tool
    "reddit_search",
    "SearchInput",
    # Subreddit tools
    "reddit_list_subreddits",
    "ListSubredditsInput",
    "reddit_get_subreddit",
    "GetSubredditInput",
    # Trends tool
    "reddit_get_trends",
    "GetTrendsInput",
]
