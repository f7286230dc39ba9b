"""vitest-mcp error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 7xxx: Test runner and coverage artifacts
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any

# Upper bounds for text carried inside error payloads.
SAMPLE_MAX_CHARS = 200
STDERR_MAX_CHARS = 2000


def truncate(text: str, limit: int) -> str:
    """Clip *text* to *limit* characters, marking the cut."""
    if len(text) <= limit:
        return text
    return text[:limit] + f"... [{len(text) - limit} more chars]"


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002
    CONFIG_PROJECT_NOT_FOUND = 2005

    # Runner (7xxx)
    RUNNER_LAUNCH_FAILED = 7001
    RUNNER_TIMEOUT = 7002
    RUNNER_EXIT_FAILURE = 7003
    REPORT_PARSE_ERROR = 7004
    COVERAGE_ARTIFACT_ERROR = 7005


# Mutable: contextlib assigns __traceback__ on exceptions it re-raises.
@dataclass(eq=False)
class VitestMCPError(Exception):
    """Base error with structured context for MCP responses."""

    code: ErrorCode
    message: str
    retryable: bool = False
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'RUNNER_TIMEOUT')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON/MCP responses."""
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "retryable": self.retryable,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


class ConfigError(VitestMCPError):
    """Configuration-related errors."""

    @classmethod
    def parse_error(cls, path: str, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message=f"Failed to parse config at {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def invalid_value(cls, field: str, value: Any, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_INVALID_VALUE,
            message=f"Invalid value for '{field}': {reason}",
            details={"field": field, "value": str(value), "reason": reason},
        )

    @classmethod
    def project_not_found(cls, path: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_PROJECT_NOT_FOUND,
            message=f"Project directory does not exist: {path}",
            details={"path": path},
        )


class RunnerError(VitestMCPError):
    """Failures launching or waiting on the test runner subprocess."""

    @classmethod
    def launch_failed(cls, command: list[str], reason: str) -> "RunnerError":
        return cls(
            code=ErrorCode.RUNNER_LAUNCH_FAILED,
            message=f"Could not start {command[0] if command else 'runner'}: {reason}",
            details={"command": command, "reason": reason},
        )

    @classmethod
    def timeout(
        cls,
        *,
        timeout_sec: float,
        project_dir: str,
        cwd: str,
        stdout_bytes: int,
        stderr_bytes: int,
    ) -> "RunnerError":
        return cls(
            code=ErrorCode.RUNNER_TIMEOUT,
            message=(
                f"Test runner timed out after {timeout_sec:g}s in {project_dir} "
                f"(cwd: {cwd}, stdout: {stdout_bytes} bytes, stderr: {stderr_bytes} bytes)"
            ),
            retryable=True,
            details={
                "timeout_sec": timeout_sec,
                "project_dir": project_dir,
                "cwd": cwd,
                "stdout_bytes": stdout_bytes,
                "stderr_bytes": stderr_bytes,
            },
        )

    @classmethod
    def exit_failure(cls, exit_code: int, stderr: str) -> "RunnerError":
        clipped = truncate(stderr.strip(), STDERR_MAX_CHARS)
        return cls(
            code=ErrorCode.RUNNER_EXIT_FAILURE,
            message=f"Test runner exited with code {exit_code}: {clipped or '(no stderr)'}",
            details={"exit_code": exit_code, "stderr": clipped},
        )


class ReportParseError(VitestMCPError):
    """Runner output could not be parsed as a JSON report."""

    @classmethod
    def from_text(cls, text: str, reason: str) -> "ReportParseError":
        sample = truncate(text.strip(), SAMPLE_MAX_CHARS)
        return cls(
            code=ErrorCode.REPORT_PARSE_ERROR,
            message=f"Could not parse test runner output: {reason}",
            details={"reason": reason, "sample": sample, "length": len(text)},
        )


class CoverageArtifactError(VitestMCPError):
    """Coverage artifacts missing or malformed. Never fatal to a run."""

    @classmethod
    def missing(cls, path: str) -> "CoverageArtifactError":
        return cls(
            code=ErrorCode.COVERAGE_ARTIFACT_ERROR,
            message=f"Coverage artifact not found: {path}",
            details={"path": path},
        )

    @classmethod
    def malformed(cls, path: str, reason: str) -> "CoverageArtifactError":
        return cls(
            code=ErrorCode.COVERAGE_ARTIFACT_ERROR,
            message=f"Coverage artifact is not valid JSON: {path}",
            details={"path": path, "reason": reason},
        )

