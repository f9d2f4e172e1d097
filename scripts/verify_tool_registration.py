#!/usr/bin/env python3
"""
Verify that every Reddit Insights tool is registered and dispatchable.

Checks that:
1. The catalog advertises each expected tool with a description and schema
2. Each advertised tool has a handler in the dispatcher
"""

import sys

from reddit_insights_mcp.server import SERVER_NAME, SERVER_VERSION, TOOL_HANDLERS
from reddit_insights_mcp.tools import list_tools

EXPECTED_TOOLS = (
    "reddit_search",
    "reddit_list_subreddits",
    "reddit_get_subreddit",
    "reddit_get_trends",
)


def verify_tool_registration() -> bool:
    """Print the catalog and report whether it is complete."""
    print("=" * 60)
    print("MCP Tool Registration Verification")
    print("=" * 60)

    print(f"\n✓ MCP Server: {SERVER_NAME} v{SERVER_VERSION}")

    tools = {tool.name: tool for tool in list_tools()}
    print(f"\n✓ Total Tools Registered: {len(tools)}")

    missing = []
    for name in EXPECTED_TOOLS:
        tool = tools.get(name)
        if tool is None or name not in TOOL_HANDLERS:
            missing.append(name)
            print(f"  ✗ {name}")
            continue

        params = ", ".join(tool.inputSchema.get("properties", {})) or "-"
        required = ", ".join(tool.inputSchema.get("required", [])) or "-"
        print(f"  ✓ {name}")
        print(f"      params: {params}")
        print(f"      required: {required}")

    print("\n" + "=" * 60)
    if missing:
        print(f"✗ VERIFICATION FAILED (missing: {', '.join(missing)})")
    else:
        print("✓ VERIFICATION SUCCESSFUL")
    print("=" * 60)

    return not missing


if __name__ == "__main__":
    sys.exit(0 if verify_tool_registration() else 1)
