"""
Static tool catalog advertised on every list-tools request.

Schemas are written out by hand so the advertised types stay exactly
``string``/``number`` and defaults are documented in prose.
"""
from mcp import types

REDDIT_SEARCH = types.Tool(
    name="reddit_search",
    description=(
        "Search Reddit conversations using semantic AI search. Find relevant "
        "discussions, opinions, and insights from millions of Reddit posts."
    ),
    inputSchema={
        "type": "object",
        "properties": {
            "query": {
                "type": "string",
                "description": (
                    "Natural language search query "
                    "(e.g., 'best programming languages for beginners')"
                ),
            },
            "limit": {
                "type": "number",
                "description": "Maximum number of results (1-100, default: 20)",
            },
        },
        "required": ["query"],
    },
)

REDDIT_LIST_SUBREDDITS = types.Tool(
    name="reddit_list_subreddits",
    description="Get a paginated list of available subreddits with their information.",
    inputSchema={
        "type": "object",
        "properties": {
            "page": {
                "type": "number",
                "description": "Page number (default: 1)",
            },
            "limit": {
                "type": "number",
                "description": "Results per page (1-100, default: 20)",
            },
            "search": {
                "type": "string",
                "description": "Filter subreddits by name, title, or description",
            },
        },
    },
)

REDDIT_GET_SUBREDDIT = types.Tool(
    name="reddit_get_subreddit",
    description="Get detailed information about a specific subreddit including recent posts.",
    inputSchema={
        "type": "object",
        "properties": {
            "subreddit": {
                "type": "string",
                "description": "Subreddit name without r/ prefix (e.g., 'programming', 'webdev')",
            },
        },
        "required": ["subreddit"],
    },
)

REDDIT_GET_TRENDS = types.Tool(
    name="reddit_get_trends",
    description="Get Reddit trend articles and insights about what's trending.",
    inputSchema={
        "type": "object",
        "properties": {
            "page": {
                "type": "number",
                "description": "Page number (default: 1)",
            },
            "perPage": {
                "type": "number",
                "description": "Results per page (default: 12)",
            },
            "filter": {
                "type": "string",
                "description": "Time period filter: 'latest', 'today', 'week', 'month'",
            },
            "category": {
                "type": "string",
                "description": "Filter by category",
            },
        },
    },
)

TOOLS: tuple[types.Tool, ...] = (
    REDDIT_SEARCH,
    REDDIT_LIST_SUBREDDITS,
    REDDIT_GET_SUBREDDIT,
    REDDIT_GET_TRENDS,
)


def list_tools() -> list[types.Tool]:
    """Return the catalog in advertised order."""
    return list(TOOLS)
