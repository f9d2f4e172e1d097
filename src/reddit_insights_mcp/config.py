"""
Runtime configuration for the Reddit Insights MCP server.

Settings are read once from the environment at startup and passed by
reference to the API client. The model is frozen; there is no reload path.
"""
import os
from typing import Mapping, Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, ConfigDict, Field

from reddit_insights_mcp import __version__

DEFAULT_BASE_URL = "https://reddit-insights.com"
DEFAULT_USER_AGENT = f"reddit-insights-mcp/{__version__}"

API_KEY_ENV = "REDDIT_INSIGHTS_API_KEY"
BASE_URL_ENV = "REDDIT_INSIGHTS_BASE_URL"


class Settings(BaseModel):
    """Immutable server settings."""

    model_config = ConfigDict(frozen=True)

    api_key: Optional[str] = Field(
        None,
        description="Bearer token sent to the Reddit Insights API (optional)",
    )
    base_url: str = Field(
        DEFAULT_BASE_URL,
        description="Origin of the Reddit Insights API",
    )
    user_agent: str = Field(
        DEFAULT_USER_AGENT,
        description="User-Agent header sent on every upstream request",
    )
    log_level: str = Field("INFO", description="structlog filtering level")
    environment: str = Field(
        "production",
        description="'development' switches logs to the console renderer",
    )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """
        Build settings from environment variables.

        Args:
            environ: Mapping to read from (defaults to ``os.environ``)

        Returns:
            Settings instance. An empty API key is treated as unset.
        """
        env = os.environ if environ is None else environ

        return cls(
            api_key=env.get(API_KEY_ENV) or None,
            base_url=(env.get(BASE_URL_ENV) or DEFAULT_BASE_URL).rstrip("/"),
            log_level=env.get("LOG_LEVEL", "INFO"),
            environment=env.get("ENVIRONMENT", "production"),
        )

    @property
    def is_authenticated(self) -> bool:
        return bool(self.api_key)


def load_environment() -> bool:
    """
    Load ``.env`` from the working directory (or its nearest parent).

    Variables already present in the process environment win over the
    file. Returns whether a file was found.
    """
    return load_dotenv(find_dotenv(usecwd=True))
