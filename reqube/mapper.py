"""ReSharper -> SonarQube issue mapping.

Functions:
    map_project(project, issue_types, depth)   -> SonarQubeReport
    map_report(report, depth)                  -> list[SonarQubeReport]

Issues that cannot be mapped (unknown type id, unknown severity) are skipped
with a ``ConversionWarning``; the rest of the project is still converted.
"""

import re
import warnings
from collections.abc import Mapping

from reqube.constants import CODE_SMELL_TYPE, ENGINE_ID, RESHARPER_TO_SONARQUBE_SEVERITY
from reqube.models import (
    InspectionReport,
    Issue,
    IssueType,
    PrimaryLocation,
    ProjectIssues,
    SonarQubeReport,
    TextRange,
)
from reqube.paths import strip_leading_segments


class ConversionWarning(UserWarning):
    """Issued for every inspected issue dropped during conversion."""


def map_report(
    report: InspectionReport,
    depth: int,
    severity_map: Mapping[str, str] = RESHARPER_TO_SONARQUBE_SEVERITY,
) -> list[SonarQubeReport]:
    """Convert every project of *report*, keeping input order."""
    return [
        map_project(project, report.issue_types, depth, severity_map)
        for project in report.projects
    ]


def map_project(
    project: ProjectIssues,
    issue_types: Mapping[str, IssueType],
    depth: int,
    severity_map: Mapping[str, str] = RESHARPER_TO_SONARQUBE_SEVERITY,
) -> SonarQubeReport:
    """Convert the issues of one project.

    File paths lose their leading ``<project name>\\`` prefix; when the
    solution is nested (*depth* > 0) a further ``depth + 1`` segments are
    removed so paths end up relative to the project directory.
    """
    sonar_report = SonarQubeReport(project_name=project.name)
    prefix_re = re.compile(rf"^{re.escape(project.name)}\\")

    for issue in project.issues:
        issue_type = issue_types.get(issue.type_id)
        if issue_type is None:
            warnings.warn(f"Unable to find issue type {issue.type_id}.", ConversionWarning, stacklevel=2)
            continue

        severity = severity_map.get(issue_type.severity)
        if severity is None:
            warnings.warn(
                f"Unable to map ReSharper severity {issue_type.severity} to SonarQube",
                ConversionWarning,
                stacklevel=2,
            )
            continue

        file_path = prefix_re.sub("", issue.file, count=1)
        if depth > 0:
            file_path = strip_leading_segments(file_path, depth + 1)

        sonar_report.issues.append(Issue(
            engine_id=ENGINE_ID,
            rule_id=issue.type_id,
            type=CODE_SMELL_TYPE,
            severity=severity,
            primary_location=PrimaryLocation(
                file_path=file_path,
                message=issue.message,
                # InspectCode omits the line for issues sitting on the first one
                text_range=TextRange(start_line=issue.line if issue.line > 0 else 1),
            ),
        ))

    return sonar_report
