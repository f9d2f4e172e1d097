"""
Tool result envelopes.

Every tool call resolves to a ``CallToolResult`` carrying a single text
content block. Successful results hold the upstream JSON pretty-printed
with a 2-space indent; failures set ``isError``.
"""
import json
from typing import Any

from mcp import types
from pydantic import ValidationError

UNKNOWN_ERROR = "Unknown error"


def text_block(text: str) -> types.TextContent:
    return types.TextContent(type="text", text=text)


def json_result(data: Any) -> types.CallToolResult:
    """
    Wrap upstream JSON as a successful tool result.

    Args:
        data: Decoded JSON returned by the API

    Returns:
        CallToolResult with one pretty-printed text block
    """
    return types.CallToolResult(
        content=[text_block(json.dumps(data, indent=2, ensure_ascii=False))],
        isError=False,
    )


def error_result(text: str) -> types.CallToolResult:
    """Build an ``isError`` result with a single text block."""
    return types.CallToolResult(content=[text_block(text)], isError=True)


def describe_validation_error(error: ValidationError) -> str:
    """
    One-line summary of a pydantic error, e.g.
    ``invalid arguments: query: Field required``.
    """
    problems = [
        f"{'.'.join(str(part) for part in detail['loc']) or 'arguments'}: {detail['msg']}"
        for detail in error.errors(include_url=False)
    ]
    return "invalid arguments: " + "; ".join(problems)


def error_message(error: BaseException) -> str:
    """Message of ``error``, or ``"Unknown error"`` when it carries none."""
    if isinstance(error, ValidationError):
        return describe_validation_error(error)
    return str(error) or UNKNOWN_ERROR
