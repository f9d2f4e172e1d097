"""Reddit Insights MCP server: Reddit search, subreddit and trend tools over stdio."""

__version__ = "0.1.2"
