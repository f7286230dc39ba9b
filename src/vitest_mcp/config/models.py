"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (VITEST_MCP__SECTION__KEY)
3. Project YAML (<project>/.vitest-mcp.yaml)
4. Global YAML (~/.config/vitest-mcp/config.yaml)
5. Built-in defaults (this file)

Environment Variable Format:
    VITEST_MCP__<SECTION>__<KEY>=<VALUE>

Examples:
    VITEST_MCP__LOGGING__LEVEL=DEBUG
    VITEST_MCP__RUNNER__TIMEOUT_SEC=300
    VITEST_MCP__COVERAGE__DIRECTORY=reports/coverage
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LogOutputConfig(BaseModel):
    """Single logging output configuration.

    Env vars: Not directly configurable via env (use YAML for multi-output).
    """

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        VITEST_MCP__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="INFO",
        description="Root log level. DEBUG logs every output chunk size and may be noisy.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class RunnerConfig(BaseModel):
    """Test runner subprocess configuration.

    Env vars:
        VITEST_MCP__RUNNER__TIMEOUT_SEC: Hard timeout for one run
        VITEST_MCP__RUNNER__GRACE_SEC: Delay after terminating a finished runner
    """

    command: list[str] = Field(
        default_factory=lambda: ["npx", "vitest", "run"],
        description="Base command that starts a single (non-watch) Vitest run.",
    )
    timeout_sec: float = Field(
        default=120.0,
        description="Hard timeout for one run. The runner is killed when it expires. "
        "RISK: Too low kills slow suites; there is no partial result on timeout.",
    )
    grace_sec: float = Field(
        default=0.25,
        description="Delay between terminating a runner whose payload is complete "
        "and returning its output.",
    )
    env: dict[str, str] = Field(
        default_factory=dict,
        description="Extra environment variables for the runner process.",
    )

    @field_validator("command")
    @classmethod
    def validate_command(cls, v: list[str]) -> list[str]:
        if not v:
            raise ValueError("Runner command must not be empty")
        return v

    @field_validator("timeout_sec", "grace_sec")
    @classmethod
    def validate_non_negative(cls, v: float) -> float:
        if v < 0:
            raise ValueError(f"Must be >= 0, got {v}")
        return v


class CoverageConfig(BaseModel):
    """Coverage artifact configuration.

    Env vars:
        VITEST_MCP__COVERAGE__DIRECTORY: Coverage directory relative to the project
    """

    directory: str = Field(
        default="coverage",
        description="Directory (relative to the project root) the runner writes reports to.",
    )
    summary_file: str = Field(default="coverage-summary.json")
    detail_file: str = Field(default="coverage-final.json")
    poll_delays_sec: list[float] = Field(
        default_factory=lambda: [0.1, 0.5, 1.0],
        description="Bounded retry schedule for artifacts written after the runner exits.",
    )
    include: list[str] = Field(
        default_factory=list,
        description="fnmatch patterns over project-relative paths. Empty keeps every file.",
    )

    @field_validator("poll_delays_sec")
    @classmethod
    def validate_delays(cls, v: list[float]) -> list[float]:
        if any(d < 0 for d in v):
            raise ValueError("Poll delays must be >= 0")
        return v


class VitestMCPConfig(BaseModel):
    """Root configuration for vitest-mcp.

    All settings can be configured via:
    1. Environment variables: VITEST_MCP__SECTION__KEY
    2. YAML config files (project or global)
    3. Direct kwargs to load_config()
    """

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    runner: RunnerConfig = Field(default_factory=RunnerConfig)
    coverage: CoverageConfig = Field(default_factory=CoverageConfig)
