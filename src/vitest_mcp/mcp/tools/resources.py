"""Read-only MCP resources over the latest run."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from fastmcp.exceptions import ResourceError

from vitest_mcp.mcp.store import render_summary

if TYPE_CHECKING:
    from fastmcp import FastMCP

    from vitest_mcp.mcp.context import AppContext

TEST_RESULTS_URI = "vitest://test-results"
COVERAGE_REPORT_URI = "vitest://coverage-report"
TEST_SUMMARY_URI = "vitest://test-summary"


def read_test_results(app_ctx: AppContext) -> str:
    report = app_ctx.store.report
    if report is None:
        raise ResourceError("No test results available. Run 'run_vitest' tool first.")
    return json.dumps(report.to_dict(), indent=2)


def read_coverage_report(app_ctx: AppContext) -> str:
    coverage = app_ctx.store.coverage
    if coverage is None:
        raise ResourceError(
            "No coverage data available. Run 'run_vitest_coverage' tool first."
        )
    return json.dumps(coverage, indent=2)


def read_test_summary(app_ctx: AppContext) -> str:
    report = app_ctx.store.report
    if report is None:
        raise ResourceError("No test results available. Run 'run_vitest' tool first.")
    return render_summary(report.summary)


def register_resources(mcp: FastMCP, app_ctx: AppContext) -> None:
    """Register result resources with FastMCP server."""

    @mcp.resource(TEST_RESULTS_URI, name="test-results", mime_type="application/json")
    def test_results() -> str:
        """Results of the most recent Vitest run."""
        return read_test_results(app_ctx)

    @mcp.resource(COVERAGE_REPORT_URI, name="coverage-report", mime_type="application/json")
    def coverage_report() -> str:
        """Per-file coverage from the most recent coverage run."""
        return read_coverage_report(app_ctx)

    @mcp.resource(TEST_SUMMARY_URI, name="test-summary", mime_type="text/plain")
    def test_summary() -> str:
        """Plain-text summary of the most recent run."""
        return read_test_summary(app_ctx)
