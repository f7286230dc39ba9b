"""Application context for MCP handlers.

Single object passed to all tool and resource handlers.
"""

from __future__ import annotations

from dataclasses import dataclass

from vitest_mcp.config.models import VitestMCPConfig
from vitest_mcp.mcp.store import ResultStore
from vitest_mcp.testing.ops import VitestOps


@dataclass
class AppContext:
    """Context object passed to all MCP handlers."""

    vitest_ops: VitestOps
    store: ResultStore

    @classmethod
    def create(cls, config: VitestMCPConfig | None = None) -> AppContext:
        """Factory to create a context with a fresh result store."""
        return cls(vitest_ops=VitestOps(config), store=ResultStore())
