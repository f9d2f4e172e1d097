"""
structlog setup for the gateway.

stdout is the MCP channel, so every log line (structlog and the standard
library loggers used by httpx and mcp) is written to stderr. Tool calls
bind their name into contextvars so nested log events carry it.
"""
import logging
import sys
from contextlib import contextmanager
from typing import Any, Iterator, List

import structlog

DEVELOPMENT = "development"


def _stderr_logger_factory(*args: Any) -> structlog.PrintLogger:
    # Resolved per logger so a replaced sys.stderr is honoured
    return structlog.PrintLogger(file=sys.stderr)


def _processors(environment: str) -> List[Any]:
    processors: List[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
    ]

    if environment == DEVELOPMENT:
        processors.append(structlog.dev.ConsoleRenderer())
    else:
        processors += [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]

    return processors


def setup_logging(level: str = "INFO", environment: str = "production") -> None:
    """
    Configure structlog and stdlib logging to write to stderr.

    Args:
        level: Minimum level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Unknown names fall back to INFO.
        environment: ``development`` renders coloured console lines,
            anything else renders one JSON object per line
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s", stream=sys.stderr, level=log_level)

    structlog.configure(
        processors=_processors(environment),
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=_stderr_logger_factory,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str = __name__) -> structlog.BoundLogger:
    """Return a structlog logger named after the calling module."""
    return structlog.get_logger(name)


@contextmanager
def tool_context(tool_name: str) -> Iterator[None]:
    """Bind ``tool`` into every log event emitted inside the block."""
    with structlog.contextvars.bound_contextvars(tool=tool_name):
        yield


def log_tool_execution(
    tool_name: str,
    duration_ms: float,
    error: str | None = None,
    **extra: Any,
) -> None:
    """
    Emit one summary event per tool call.

    Args:
        tool_name: Tool that ran
        duration_ms: Wall time of the call, validation included
        error: Message returned to the host when the call failed
        **extra: Additional fields (e.g. ``error_type``)
    """
    logger = get_logger("tool_execution")
    fields = {"tool": tool_name, "duration_ms": round(duration_ms, 2), **extra}

    if error is None:
        logger.info("tool_call_succeeded", **fields)
    else:
        logger.error("tool_call_failed", error=error, **fields)
