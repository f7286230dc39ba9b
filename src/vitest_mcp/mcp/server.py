"""FastMCP server creation and wiring."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from fastmcp import FastMCP

    from vitest_mcp.mcp.context import AppContext

log = structlog.get_logger(__name__)

SERVER_NAME = "vitest-runner"


def create_mcp_server(context: AppContext) -> FastMCP:
    """Create FastMCP server with all tools and resources wired to context.

    Args:
        context: AppContext with the ops instance and result store

    Returns:
        Configured FastMCP server ready to run
    """
    from fastmcp import FastMCP

    from vitest_mcp.mcp.tools import register_resources, register_tools

    log.info("mcp_server_creating")

    mcp = FastMCP(
        SERVER_NAME,
        instructions=(
            "Runs the Vitest test suite of a JavaScript/TypeScript project and "
            "reports results and line coverage."
        ),
    )
    register_tools(mcp, context)
    register_resources(mcp, context)

    log.info("mcp_server_created")
    return mcp


def configure_server_logging(project_dir: Path | None = None) -> None:
    """Apply the ``logging`` section of the configuration for *project_dir*.

    The project defaults to the nearest vitest/vite project above the cwd.
    A broken configuration file falls back to default logging; tool calls
    still report it when they load the same file.
    """
    from vitest_mcp.config.loader import load_config
    from vitest_mcp.core.errors import ConfigError
    from vitest_mcp.core.logging import configure_logging
    from vitest_mcp.testing.project import find_project_directory

    project_dir = project_dir or find_project_directory() or Path.cwd()
    try:
        config = load_config(project_dir)
    except ConfigError as e:
        configure_logging(stdio=True)
        log.warning("logging_config_invalid", project_dir=str(project_dir), error=e.message)
        return

    configure_logging(config.logging, stdio=True)
    log.debug("logging_configured", project_dir=str(project_dir), level=config.logging.level)


def run_server() -> None:
    """Create and run the MCP server over stdio."""
    from vitest_mcp.mcp.context import AppContext

    configure_server_logging()

    context = AppContext.create()
    mcp = create_mcp_server(context)

    log.info("mcp_server_running", transport="stdio")
    mcp.run()
