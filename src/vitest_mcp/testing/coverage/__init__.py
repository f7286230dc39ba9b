"""Istanbul coverage reduction for Vitest runs.

This package provides:
- Uncovered line extraction from statement-level coverage (coverage-final.json)
- Line range rendering ("1-3, 7")
- Per-file report reduction against the json-summary report
- Artifact loading and bounded polling

Usage:
    from vitest_mcp.testing.coverage import load_artifacts, build_coverage_report

    artifacts = load_artifacts(Path("coverage"))
    report = build_coverage_report(artifacts, project_root)
"""

from vitest_mcp.testing.coverage.artifacts import load_artifacts, poll_artifacts
from vitest_mcp.testing.coverage.extract import (
    extract_uncovered_lines,
    uncovered_lines_for_file,
)
from vitest_mcp.testing.coverage.models import (
    CoverageArtifacts,
    CoverageStatus,
    FileCoverageEntry,
    FileSummary,
    MetricSummary,
)
from vitest_mcp.testing.coverage.ranges import expand_ranges, group_lines_into_ranges
from vitest_mcp.testing.coverage.report import (
    build_coverage_report,
    classify_file,
    coverage_placeholder,
    reduce_coverage,
    relative_path,
)

__all__ = [
    # Models
    "CoverageArtifacts",
    "CoverageStatus",
    "FileCoverageEntry",
    "FileSummary",
    "MetricSummary",
    # Extraction
    "extract_uncovered_lines",
    "uncovered_lines_for_file",
    # Ranges
    "expand_ranges",
    "group_lines_into_ranges",
    # Report
    "build_coverage_report",
    "classify_file",
    "coverage_placeholder",
    "reduce_coverage",
    "relative_path",
    # Artifacts
    "load_artifacts",
    "poll_artifacts",
]
