"""MCP server layer.

Exposes the Vitest operations as FastMCP tools and the latest results as
resources.
"""

from vitest_mcp.mcp.context import AppContext
from vitest_mcp.mcp.server import create_mcp_server, run_server
from vitest_mcp.mcp.store import ResultStore, render_summary

__all__ = [
    "AppContext",
    "ResultStore",
    "create_mcp_server",
    "render_summary",
    "run_server",
]
