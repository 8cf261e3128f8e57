"""Tests for reqube/reader.py"""

from pathlib import Path

import pytest

from reqube.reader import ReportError, load_report


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _write(tmp_path, content: str):
    p = tmp_path / "report.xml"
    p.write_text(content, encoding="utf-8")
    return str(p)


# ---------------------------------------------------------------------------
# load_report() — happy path
# ---------------------------------------------------------------------------

def test_load_solution_and_issue_types(report_file):
    report = load_report(str(report_file))
    assert report.solution == "App.sln"
    assert set(report.issue_types) == {"UnusedVariable", "InconsistentNaming"}
    assert report.issue_types["UnusedVariable"].severity == "WARNING"
    assert report.issue_types["UnusedVariable"].category == "Redundancies"


def test_load_projects_in_order(report_file):
    report = load_report(str(report_file))
    assert [p.name for p in report.projects] == ["App", "Core"]

    first = report.projects[0].issues[0]
    assert first.type_id == "UnusedVariable"
    assert first.file == "App\\Program.cs"
    assert first.line == 12
    assert first.message == "Local variable 'x' is never used"


def test_missing_line_reads_as_zero(report_file):
    report = load_report(str(report_file))
    assert report.projects[0].issues[1].line == 0


def test_report_without_issues(tmp_path):
    path = _write(tmp_path, "<Report><Information><Solution>A.sln</Solution></Information>"
                            "<IssueTypes /><Issues /></Report>")
    report = load_report(path)
    assert report.projects == []
    assert report.issue_types == {}


# ---------------------------------------------------------------------------
# load_report() — fatal errors
# ---------------------------------------------------------------------------

def test_missing_file(tmp_path):
    with pytest.raises(ReportError, match="not found"):
        load_report(str(tmp_path / "nope.xml"))


def test_malformed_xml(tmp_path):
    with pytest.raises(ReportError, match="Failed to parse"):
        load_report(_write(tmp_path, "<Report><Information>"))


def test_wrong_root_element(tmp_path):
    with pytest.raises(ReportError, match="root element <Results>"):
        load_report(_write(tmp_path, "<Results />"))


def test_missing_solution(tmp_path):
    with pytest.raises(ReportError, match="Solution"):
        load_report(_write(tmp_path, "<Report><IssueTypes /></Report>"))


def test_unreadable_file(tmp_path, monkeypatch):
    path = _write(tmp_path, "<Report />")

    def _denied(self, *args, **kwargs):
        raise PermissionError(13, "Permission denied")

    monkeypatch.setattr(Path, "open", _denied)
    with pytest.raises(ReportError, match="Unable to read"):
        load_report(path)


def test_issue_without_type_id(tmp_path):
    path = _write(tmp_path, "<Report><Information><Solution>A.sln</Solution></Information>"
                            "<Issues><Project Name='A'><Issue File='A\\x.cs' /></Project></Issues></Report>")
    with pytest.raises(ReportError, match="TypeId"):
        load_report(path)


def test_invalid_line(tmp_path):
    path = _write(tmp_path, "<Report><Information><Solution>A.sln</Solution></Information>"
                            "<Issues><Project Name='A'><Issue TypeId='T' File='x.cs' Line='abc' /></Project>"
                            "</Issues></Report>")
    with pytest.raises(ReportError, match="Line"):
        load_report(path)
