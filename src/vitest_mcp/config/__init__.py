"""Config module exports."""

from vitest_mcp.config.loader import load_config
from vitest_mcp.config.models import (
    CoverageConfig,
    LoggingConfig,
    LogOutputConfig,
    RunnerConfig,
    VitestMCPConfig,
)

__all__ = [
    "load_config",
    "CoverageConfig",
    "LoggingConfig",
    "LogOutputConfig",
    "RunnerConfig",
    "VitestMCPConfig",
]
