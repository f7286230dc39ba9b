"""Test operations module - Vitest runs, result normalization, coverage."""

from vitest_mcp.testing.models import (
    FileNode,
    FileResult,
    RunReport,
    RunSummary,
    SuiteGroup,
    TestLeaf,
    TestOutcome,
)
from vitest_mcp.testing.ops import VitestOps, build_command
from vitest_mcp.testing.process import PayloadDetector, RunnerOutput, collect_output
from vitest_mcp.testing.project import find_project_directory, resolve_project_dir
from vitest_mcp.testing.results import normalize_run

__all__ = [
    "VitestOps",
    "build_command",
    "RunReport",
    "RunSummary",
    "FileResult",
    "FileNode",
    "SuiteGroup",
    "TestLeaf",
    "TestOutcome",
    "PayloadDetector",
    "RunnerOutput",
    "collect_output",
    "normalize_run",
    "find_project_directory",
    "resolve_project_dir",
]
