"""
Exceptions raised by the Reddit Insights API client.

Handlers catch these at the tool boundary and turn them into error
results; they never reach the MCP host as protocol faults.
"""

from typing import Optional


class InsightsAPIError(Exception):
    """
    Base exception for all Reddit Insights API errors.

    Use this for catching any upstream-related failure.
    """

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        """
        Initialize InsightsAPIError.

        Args:
            message: Error description
            status_code: Optional HTTP status code returned by the API
        """
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class APIResponseError(InsightsAPIError):
    """
    Raised when the API answers with a non-2xx status or a body that is
    not valid JSON.

    Example:
        >>> raise APIResponseError("API request failed: 500 Internal Server Error", status_code=500)
    """


class APIConnectionError(InsightsAPIError):
    """
    Raised when the request never produced a response: DNS failure,
    refused connection, dropped socket and similar transport errors.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message, status_code=None)
