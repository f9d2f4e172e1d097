"""
Reddit Insights MCP Server - Main Entry Point

Loads configuration, opens the API client and serves MCP over stdio
until the host closes the channel.
"""
import asyncio
import sys
from typing import Optional

from mcp.server.stdio import stdio_server

from reddit_insights_mcp.api import InsightsAPIClient
from reddit_insights_mcp.config import Settings, load_environment
from reddit_insights_mcp.server import SERVER_NAME, SERVER_VERSION, create_mcp_server
from reddit_insights_mcp.utils.logger import get_logger, setup_logging

logger = get_logger(__name__)

STARTUP_MESSAGE = "Reddit Insights MCP Server running on stdio"


async def serve(settings: Settings) -> None:
    """
    Run the MCP server on stdio.

    Blocks until the host closes stdin or the process is terminated.
    """
    logger.info(
        "server_starting",
        version=SERVER_VERSION,
        environment=settings.environment,
        base_url=settings.base_url,
        authenticated=settings.is_authenticated,
    )

    async with InsightsAPIClient(settings) as client:
        server = create_mcp_server(client)

        async with stdio_server() as (read_stream, write_stream):
            logger.info("mcp_server_running", name=SERVER_NAME, transport="stdio")
            print(STARTUP_MESSAGE, file=sys.stderr, flush=True)
            await server.run(
                read_stream,
                write_stream,
                server.create_initialization_options(),
            )

    logger.info("server_shutdown_complete")


def run(settings: Optional[Settings] = None) -> int:
    """
    Start the server and return the process exit code.

    Returns:
        0 on graceful shutdown, 1 if startup or the transport failed
    """
    load_environment()
    settings = settings or Settings.from_env()
    setup_logging(level=settings.log_level, environment=settings.environment)

    try:
        asyncio.run(serve(settings))
    except KeyboardInterrupt:
        logger.info("shutdown_signal_received")
    except Exception as e:
        logger.error("fatal_error", error=str(e), error_type=type(e).__name__, exc_info=True)
        print(f"Fatal error: {e}", file=sys.stderr)
        return 1

    return 0


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
