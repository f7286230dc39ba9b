"""Testing MCP tools - Vitest runs.

- ping: Health check
- run_vitest: Run the test suite
- run_vitest_coverage: Run the test suite with coverage
"""

import json
import time
from typing import TYPE_CHECKING, Any

import structlog
from pydantic import Field

from vitest_mcp.core.errors import ConfigError, ReportParseError, RunnerError
from vitest_mcp.core.logging import clear_request_id, set_request_id

if TYPE_CHECKING:
    from fastmcp import FastMCP

    from vitest_mcp.mcp.context import AppContext

log = structlog.get_logger(__name__)

ERROR_PREFIX = "Error running vitest"


def _summarize_run(result: dict[str, Any]) -> str:
    passed = result.get("passed_tests", 0)
    failed = result.get("failed_tests", 0)
    if failed:
        return f"{passed} passed, {failed} failed"
    return f"{passed} passed"


def parse_error_placeholder(error: ReportParseError) -> dict[str, Any]:
    """Structured stand-in for a run whose output could not be parsed."""
    return {
        "error": error.message,
        "sample": error.details.get("sample", ""),
    }


async def execute_run(app_ctx: "AppContext", project_dir: str | None, *, coverage: bool) -> str:
    """Run Vitest, record the results, and render the tool response text.

    Configuration, launch, and timeout problems come back as a single error
    line. Unparseable runner output comes back as a JSON placeholder. Neither
    touches the stored results.
    """
    tool_name = "run_vitest_coverage" if coverage else "run_vitest"
    set_request_id()
    try:
        return await _execute_run(app_ctx, tool_name, project_dir, coverage=coverage)
    finally:
        clear_request_id()


async def _execute_run(
    app_ctx: "AppContext", tool_name: str, project_dir: str | None, *, coverage: bool
) -> str:
    start_time = time.perf_counter()
    log.info("tool_start", tool=tool_name, project_dir=project_dir)

    ops = app_ctx.vitest_ops
    try:
        if coverage:
            report = await ops.run_with_coverage(project_dir)
        else:
            report = await ops.run(project_dir)
    except (ConfigError, RunnerError) as e:
        log.warning(
            "tool_error",
            tool=tool_name,
            error_code=e.code.value,
            error=e.message,
            elapsed_ms=int((time.perf_counter() - start_time) * 1000),
        )
        return f"{ERROR_PREFIX}: {e.message}"
    except ReportParseError as e:
        log.warning(
            "tool_parse_error",
            tool=tool_name,
            error=e.message,
            output_length=e.details.get("length"),
        )
        return json.dumps(parse_error_placeholder(e), indent=2)

    app_ctx.store.record(report)
    result = report.to_dict()
    log.info(
        "tool_complete",
        tool=tool_name,
        elapsed_ms=int((time.perf_counter() - start_time) * 1000),
        summary=_summarize_run(result),
    )
    return json.dumps(result, indent=2)


def register_tools(mcp: "FastMCP", app_ctx: "AppContext") -> None:
    """Register testing tools with FastMCP server."""

    @mcp.tool
    async def ping() -> str:
        """Health check. Returns "pong"."""
        return "pong"

    @mcp.tool
    async def run_vitest(
        project_dir: str | None = Field(
            None,
            description="Project root to run in. Defaults to the nearest directory "
            "with a vitest/vite config file, then the current directory.",
        ),
    ) -> str:
        """Run the Vitest suite and return pass/fail counts with per-test results."""
        return await execute_run(app_ctx, project_dir, coverage=False)

    @mcp.tool
    async def run_vitest_coverage(
        project_dir: str | None = Field(
            None,
            description="Project root to run in. Defaults to the nearest directory "
            "with a vitest/vite config file, then the current directory.",
        ),
    ) -> str:
        """Run the Vitest suite with coverage.

        Returns test results plus per-file coverage with uncovered line ranges
        (e.g. "1-3, 7"). Needs a coverage provider such as @vitest/coverage-v8.
        """
        return await execute_run(app_ctx, project_dir, coverage=True)
