"""
Tests for the reddit_search tool.

Tests cover:
- Input defaults and coercion
- Request shape sent upstream
- Error results (HTTP status, transport, validation)
"""
import json

import httpx
import pytest
from pydantic import ValidationError

from reddit_insights_mcp.tools.search import SearchInput, reddit_search


class TestSearchInput:
    """Test suite for SearchInput validation."""

    def test_default_limit(self):
        params = SearchInput(query="python")

        assert params.query == "python"
        assert params.limit == 20

    def test_limit_out_of_range_passes_through(self):
        """Range checks are the API's job."""
        assert SearchInput(query="python", limit=500).limit == 500

    def test_numeric_string_limit_coerced(self):
        assert SearchInput.model_validate({"query": "x", "limit": "5"}).limit == 5

    def test_missing_query(self):
        with pytest.raises(ValidationError) as exc_info:
            SearchInput.model_validate({})

        errors = exc_info.value.errors()
        assert any("query" in str(error["loc"]) for error in errors)

    def test_integer_limit_stays_integer(self):
        limit = SearchInput(query="x", limit=20).limit

        assert limit == 20
        assert isinstance(limit, int)

    def test_fractional_limit_accepted(self):
        """Fields are advertised as JSON numbers, so floats are valid."""
        assert SearchInput(query="x", limit=20.5).limit == 20.5

    def test_unknown_keys_ignored(self):
        params = SearchInput.model_validate({"query": "x", "sort": "top"})

        assert params.model_dump() == {"query": "x", "limit": 20}


@pytest.mark.asyncio
class TestRedditSearchTool:
    """Test suite for reddit_search handler."""

    async def test_posts_query_with_default_limit(self, api_client, upstream):
        await reddit_search(api_client, {"query": "rust vs go"})

        assert len(upstream.requests) == 1
        request = upstream.last_request
        assert request.method == "POST"
        assert request.url.path == "/api/v1/search/semantic"
        assert upstream.last_json() == {"query": "rust vs go", "limit": 20}

    async def test_explicit_limit(self, api_client, upstream):
        await reddit_search(api_client, {"query": "rust", "limit": 5})

        assert upstream.last_json() == {"query": "rust", "limit": 5}

    async def test_success_result_is_pretty_json(self, api_client, upstream):
        upstream.json_body = {"results": [{"title": "Rust or Go?"}]}

        result = await reddit_search(api_client, {"query": "rust vs go"})

        assert result.isError is False
        assert len(result.content) == 1
        assert result.content[0].type == "text"
        assert result.content[0].text == json.dumps(upstream.json_body, indent=2)

    async def test_http_500(self, api_client, upstream):
        upstream.status_code = 500

        result = await reddit_search(api_client, {"query": "rust vs go"})

        assert result.isError is True
        text = result.content[0].text
        assert text.startswith("Error searching Reddit: ")
        assert "500" in text

    async def test_transport_error(self, api_client, upstream):
        upstream.error = httpx.ConnectError("connection refused")

        result = await reddit_search(api_client, {"query": "rust"})

        assert result.isError is True
        assert result.content[0].text == "Error searching Reddit: connection refused"

    async def test_transport_error_without_message(self, api_client, upstream):
        upstream.error = httpx.ReadError("")

        result = await reddit_search(api_client, {"query": "rust"})

        assert result.content[0].text == "Error searching Reddit: Unknown error"

    async def test_missing_query_is_error_result(self, api_client, upstream):
        """Invalid arguments never reach the API."""
        result = await reddit_search(api_client, {})

        assert result.isError is True
        assert result.content[0].text.startswith("Error searching Reddit: ")
        assert upstream.requests == []

    async def test_fractional_limit_passed_through(self, api_client, upstream):
        result = await reddit_search(api_client, {"query": "x", "limit": 20.5})

        assert result.isError is False
        assert upstream.last_json() == {"query": "x", "limit": 20.5}

    async def test_null_limit_passed_through(self, api_client, upstream):
        """An explicit null is forwarded, not replaced by the default."""
        await reddit_search(api_client, {"query": "x", "limit": None})

        assert upstream.last_json() == {"query": "x", "limit": None}

    async def test_validation_error_is_one_line(self, api_client, upstream):
        result = await reddit_search(api_client, {"limit": 5})

        text = result.content[0].text
        assert text == "Error searching Reddit: invalid arguments: query: Field required"
        assert "\n" not in text
        assert "errors.pydantic.dev" not in text
