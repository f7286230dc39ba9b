"""structlog setup for the vitest-mcp server.

Every module logs through ``structlog.get_logger(__name__)``. This module
routes those events into stdlib handlers, one per configured output, and
stamps each event with the id of the tool call that produced it.

stdout carries the MCP stdio protocol while the server runs, so
``configure_logging(..., stdio=True)`` moves any stdout output to stderr.
"""

from __future__ import annotations

import logging
import sys
from contextvars import ContextVar
from pathlib import Path
from typing import TYPE_CHECKING, Any
from uuid import uuid4

import structlog

if TYPE_CHECKING:
    from vitest_mcp.config.models import LoggingConfig, LogOutputConfig

_request_id: ContextVar[str | None] = ContextVar("request_id", default=None)

# Third-party loggers that emit one line per MCP message
_CHATTY_LOGGERS = ("mcp.server.lowlevel.server", "fastmcp.server.context.to_client")


def get_request_id() -> str | None:
    return _request_id.get()


def set_request_id(request_id: str | None = None) -> str:
    """Start a tool call: bind *request_id* (or a fresh one) to later log events."""
    rid = request_id or uuid4().hex[:12]
    _request_id.set(rid)
    return rid


def clear_request_id() -> None:
    _request_id.set(None)


def _add_request_id(
    _logger: structlog.types.WrappedLogger,
    _method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    if rid := get_request_id():
        event_dict["request_id"] = rid
    return event_dict


def _shared_processors() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S", key="timestamp"),
        _add_request_id,  # type: ignore[list-item]
    ]


def _stream_for(destination: str, *, stdio: bool) -> Any:
    if destination == "stdout" and not stdio:
        return sys.stdout
    return sys.stderr


def _build_handler(
    output: LogOutputConfig,
    config: LoggingConfig,
    pre_chain: list[structlog.types.Processor],
    *,
    stdio: bool,
) -> logging.Handler:
    handler: logging.Handler
    if output.destination in ("stderr", "stdout"):
        stream = _stream_for(output.destination, stdio=stdio)
        handler = logging.StreamHandler(stream)
        colors = stream.isatty()
    else:
        path = Path(output.destination)
        path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(path, mode="a")
        colors = False

    renderer: structlog.types.Processor
    if output.format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=colors, pad_event_to=0, pad_level=False)

    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(processor=renderer, foreign_pre_chain=pre_chain)
    )
    handler.setLevel(logging.getLevelName(output.level or config.level))
    return handler


def configure_logging(config: LoggingConfig | None = None, *, stdio: bool = False) -> None:
    """Install one handler per configured output on the root logger.

    Args:
        config: The ``logging`` section of the loaded configuration.
            Defaults to INFO console output on stderr.
        stdio: The process serves MCP over stdio; stdout outputs are
            written to stderr instead.
    """
    from vitest_mcp.config.models import LoggingConfig

    config = config or LoggingConfig()
    level = logging.getLevelName(config.level)
    pre_chain = _shared_processors()

    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        # Reconfiguration must reach loggers created at import time
        cache_logger_on_first_use=False,
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level)
    for name in _CHATTY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    for output in config.outputs:
        root.addHandler(_build_handler(output, config, pre_chain, stdio=stdio))
