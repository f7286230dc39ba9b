"""MCP tool and resource registration."""

from vitest_mcp.mcp.tools.resources import register_resources
from vitest_mcp.mcp.tools.testing import register_tools

__all__ = ["register_resources", "register_tools"]
