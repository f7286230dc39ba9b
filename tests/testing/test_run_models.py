"""Tests for testing/models.py serialization."""

from vitest_mcp.testing.models import (
    FileResult,
    RunReport,
    RunSummary,
    TestLeaf,
    TestOutcome,
)


def _summary() -> RunSummary:
    outcome = TestOutcome(title="works", ancestors=("suite",), state="pass", duration_ms=2.0)
    return RunSummary(
        total_suites=1,
        passed_suites=1,
        failed_suites=0,
        total_tests=1,
        passed_tests=1,
        failed_tests=0,
        files=(FileResult(path="a.test.ts", outcomes=(outcome,)),),
    )


class TestTestOutcome:
    """Tests for TestOutcome."""

    def test_only_pass_is_passed(self) -> None:
        assert TestOutcome("t", (), "pass").passed
        for state in ("fail", "skip", "todo", "run", "queued", "unknown"):
            assert not TestOutcome("t", (), state).passed  # type: ignore[arg-type]

    def test_to_dict_keeps_raw_state(self) -> None:
        d = TestOutcome("t", ("a",), "skip").to_dict()
        assert d["status"] == "failed"
        assert d["state"] == "skip"
        assert d["ancestors"] == ["a"]

    def test_model_classes_opt_out_of_pytest_collection(self) -> None:
        """Importing the Test-prefixed models into a test module collects nothing."""
        assert TestOutcome.__test__ is False
        assert TestLeaf.__test__ is False


class TestRunReport:
    """Tests for RunReport.to_dict."""

    def test_merges_summary_and_run_fields(self) -> None:
        report = RunReport(project_dir="/work/app", summary=_summary(), duration_seconds=1.23456)
        d = report.to_dict()
        assert d["total_tests"] == 1
        assert d["project_dir"] == "/work/app"
        assert d["duration_seconds"] == 1.235
        assert "coverage" not in d
        assert d["files"][0]["tests"][0]["title"] == "works"

    def test_includes_coverage_when_present(self) -> None:
        report = RunReport(project_dir="/p", summary=_summary(), coverage={"files": {}, "totals": None})
        assert report.to_dict()["coverage"] == {"files": {}, "totals": None}
