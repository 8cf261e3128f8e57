"""Data models for ReSharper input and SonarQube output.

Input side (read from the InspectCode XML):
    - IssueType
    - InspectedIssue
    - ProjectIssues
    - InspectionReport

Solution side (read from the .sln file):
    - SolutionProject
    - Solution

Output side (serialized to the SonarQube generic issue JSON):
    - TextRange
    - PrimaryLocation
    - Issue
    - SonarQubeReport
"""

from dataclasses import dataclass, field
from typing import Any

from reqube.constants import SOLUTION_FOLDER_GUID


def _compact(data: dict[str, Any]) -> dict[str, Any]:
    """Drop keys whose value is None. SonarQube expects them absent, not null."""
    return {k: v for k, v in data.items() if v is not None}


# ---------------------------------------------------------------------------
# ReSharper InspectCode report
# ---------------------------------------------------------------------------

@dataclass
class IssueType:
    id: str
    severity: str
    category: str | None = None
    description: str | None = None


@dataclass
class InspectedIssue:
    type_id: str
    file: str
    message: str | None = None
    line: int = 0


@dataclass
class ProjectIssues:
    name: str
    issues: list[InspectedIssue] = field(default_factory=list)


@dataclass
class InspectionReport:
    solution: str
    issue_types: dict[str, IssueType] = field(default_factory=dict)
    projects: list[ProjectIssues] = field(default_factory=list)


# ---------------------------------------------------------------------------
# Visual Studio solution
# ---------------------------------------------------------------------------

@dataclass
class SolutionProject:
    name: str
    path: str
    type_guid: str

    @property
    def is_solution_folder(self) -> bool:
        return self.type_guid.upper() == SOLUTION_FOLDER_GUID


@dataclass
class Solution:
    projects: list[SolutionProject] = field(default_factory=list)

    def build_projects(self) -> list[SolutionProject]:
        """Projects that are real build targets (solution folders excluded)."""
        return [p for p in self.projects if not p.is_solution_folder]


# ---------------------------------------------------------------------------
# SonarQube generic issue report
# ---------------------------------------------------------------------------

@dataclass
class TextRange:
    start_line: int

    def to_dict(self) -> dict[str, Any]:
        return {"startLine": self.start_line}


@dataclass
class PrimaryLocation:
    file_path: str
    message: str | None
    text_range: TextRange | None = None

    def to_dict(self) -> dict[str, Any]:
        return _compact({
            "filePath":  self.file_path,
            "message":   self.message,
            "textRange": self.text_range.to_dict() if self.text_range else None,
        })


@dataclass
class Issue:
    engine_id: str
    rule_id: str
    type: str
    severity: str
    primary_location: PrimaryLocation

    def to_dict(self) -> dict[str, Any]:
        return _compact({
            "engineId":        self.engine_id,
            "ruleId":          self.rule_id,
            "type":            self.type,
            "severity":        self.severity,
            "primaryLocation": self.primary_location.to_dict(),
        })


@dataclass
class SonarQubeReport:
    """Issues of one project. ``project_name`` is bookkeeping, never serialized."""

    project_name: str | None = None
    issues: list[Issue] = field(default_factory=list)

    @classmethod
    def empty(cls) -> "SonarQubeReport":
        return cls()

    def to_dict(self) -> dict[str, Any]:
        return {"issues": [issue.to_dict() for issue in self.issues]}
