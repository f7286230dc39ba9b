"""Latest-result cache backing the MCP resources."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from vitest_mcp.testing.models import RunReport, RunSummary


@dataclass
class ResultStore:
    """Most recent test results and coverage report.

    Owned by the server and handed to the tool and resource handlers; the
    run orchestrator never reads or writes it. Handlers run on one event
    loop and never await between reading and writing it.
    """

    _report: RunReport | None = None
    _coverage: dict[str, Any] | None = None

    def record(self, report: RunReport) -> None:
        """Replace the latest results. Coverage is kept unless the run has some."""
        self._report = report
        if report.coverage is not None:
            self._coverage = report.coverage

    @property
    def report(self) -> RunReport | None:
        return self._report

    @property
    def coverage(self) -> dict[str, Any] | None:
        return self._coverage

    def clear(self) -> None:
        self._report = None
        self._coverage = None


def render_summary(summary: RunSummary) -> str:
    """Plain-text test summary with the success rate."""
    rate = summary.success_rate
    lines = [
        "Test Summary",
        "=============",
        f"Total Suites: {summary.total_suites}",
        f"Passed Suites: {summary.passed_suites}",
        f"Failed Suites: {summary.failed_suites}",
        "",
        f"Total Tests: {summary.total_tests}",
        f"Passed Tests: {summary.passed_tests}",
        f"Failed Tests: {summary.failed_tests}",
        "",
        f"Success Rate: {rate:.1f}%" if rate is not None else "Success Rate: n/a",
    ]
    return "\n".join(lines)
