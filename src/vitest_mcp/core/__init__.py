"""Core module exports."""

from vitest_mcp.core.errors import (
    ConfigError,
    CoverageArtifactError,
    ErrorCode,
    ReportParseError,
    RunnerError,
    VitestMCPError,
)
from vitest_mcp.core.logging import (
    clear_request_id,
    configure_logging,
    get_request_id,
    set_request_id,
)

__all__ = [
    # Errors
    "ConfigError",
    "CoverageArtifactError",
    "ErrorCode",
    "ReportParseError",
    "RunnerError",
    "VitestMCPError",
    # Logging
    "clear_request_id",
    "configure_logging",
    "get_request_id",
    "set_request_id",
]
