"""
Async HTTP client for the Reddit Insights REST API.

Wraps a single ``httpx.AsyncClient`` shared by all tool calls. Each
``request`` issues exactly one HTTP call: no retry, no caching and no
timeout, so a hung upstream call hangs only the task awaiting it.
"""
from typing import Any, Literal, Mapping, Optional

import httpx

from reddit_insights_mcp.api.exceptions import APIConnectionError, APIResponseError
from reddit_insights_mcp.config import Settings
from reddit_insights_mcp.utils.logger import get_logger

logger = get_logger(__name__)

HTTPMethod = Literal["GET", "POST"]


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class InsightsAPIClient:
    """
    Client for the Reddit Insights API.

    Attributes:
        settings: Read-only configuration (base URL, API key, User-Agent)

    Example:
        >>> async with InsightsAPIClient(Settings.from_env()) as client:
        ...     data = await client.request("/api/v1/subreddits", params={"page": 1})
    """

    def __init__(
        self,
        settings: Settings,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        """
        Args:
            settings: Server settings
            http_client: Pre-built httpx client. When omitted the client
                creates and owns one.
        """
        self.settings = settings
        self._owns_client = http_client is None
        self._http = http_client or httpx.AsyncClient(timeout=httpx.Timeout(None))

    async def __aenter__(self) -> "InsightsAPIClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying httpx client if this instance created it."""
        if self._owns_client:
            await self._http.aclose()

    def build_headers(self) -> dict[str, str]:
        """
        Build the headers sent on every request.

        ``Authorization`` is only present when an API key is configured.
        """
        headers = {
            "Content-Type": "application/json",
            "User-Agent": self.settings.user_agent,
        }

        if self.settings.api_key:
            headers["Authorization"] = f"Bearer {self.settings.api_key}"

        return headers

    def build_url(self, endpoint: str) -> str:
        return f"{self.settings.base_url}{endpoint}"

    async def request(
        self,
        endpoint: str,
        method: HTTPMethod = "GET",
        params: Optional[Mapping[str, Any]] = None,
        body: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        """
        Perform one request against the API and return the decoded JSON.

        Args:
            endpoint: Path starting with ``/`` (e.g. ``/api/v1/trends``)
            method: ``GET`` or ``POST``
            params: Query parameters, used for GET only. ``None`` values
                are dropped, everything else is sent as a string.
            body: JSON body, used for POST only. Serialized verbatim.

        Returns:
            Parsed JSON response body

        Raises:
            APIResponseError: Non-2xx status or undecodable JSON body
            APIConnectionError: Transport failure before a response arrived
        """
        url = self.build_url(endpoint)
        query = None
        payload = None

        if method == "GET" and params:
            query = {
                key: _query_value(value)
                for key, value in params.items()
                if value is not None
            }

        if method == "POST" and body is not None:
            payload = body

        logger.debug(
            "api_request",
            method=method,
            endpoint=endpoint,
            authenticated=self.settings.is_authenticated,
        )

        try:
            response = await self._http.request(
                method,
                url,
                params=query,
                json=payload,
                headers=self.build_headers(),
            )
        except httpx.HTTPError as e:
            logger.error(
                "api_transport_error",
                method=method,
                endpoint=endpoint,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise APIConnectionError(str(e)) from e

        if not response.is_success:
            logger.warning(
                "api_error_status",
                method=method,
                endpoint=endpoint,
                status_code=response.status_code,
            )
            raise APIResponseError(
                f"API request failed: {response.status_code} {response.reason_phrase}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            raise APIResponseError(
                f"Invalid JSON response: {e}",
                status_code=response.status_code,
            ) from e
