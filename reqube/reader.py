"""InspectCode XML reader.

Usage:
    report = load_report("inspectcode.xml")    # raises ReportError

Expected layout::

    <Report>
      <Information><Solution>App.sln</Solution></Information>
      <IssueTypes>
        <IssueType Id="UnusedVariable" Severity="WARNING" Category="..." />
      </IssueTypes>
      <Issues>
        <Project Name="App">
          <Issue TypeId="UnusedVariable" File="App\\Foo.cs" Line="12" Message="..." />
        </Project>
      </Issues>
    </Report>
"""

import xml.etree.ElementTree as ET
from pathlib import Path

from reqube.models import InspectedIssue, InspectionReport, IssueType, ProjectIssues


class ReportError(Exception):
    """Raised when the input report is missing or does not match the schema."""


def load_report(path: str) -> InspectionReport:
    """Read and parse the InspectCode report at *path*.

    Raises:
        ReportError: if the file is missing, is not well-formed XML, or is not
                     a ``<Report>`` document.
    """
    report_path = Path(path)
    if not report_path.is_file():
        raise ReportError(f"Input file not found: '{path}'")

    try:
        with report_path.open("rb") as f:
            root = ET.parse(f).getroot()
    except OSError as exc:
        raise ReportError(f"Unable to read '{path}': {exc}") from exc
    except ET.ParseError as exc:
        raise ReportError(f"Failed to parse '{path}': {exc}") from exc

    return parse_report(root, source=path)


def parse_report(root: ET.Element, source: str = "<report>") -> InspectionReport:
    """Build an ``InspectionReport`` from an already parsed ``<Report>`` element."""
    if root.tag != "Report":
        raise ReportError(f"'{source}' is not an InspectCode report (root element <{root.tag}>)")

    solution = root.findtext("Information/Solution")
    if solution is None:
        raise ReportError(f"'{source}' has no <Information><Solution> element")

    issue_types: dict[str, IssueType] = {}
    for element in root.iterfind("IssueTypes/IssueType"):
        type_id = _required(element, "Id", source)
        issue_types[type_id] = IssueType(
            id=type_id,
            severity=_required(element, "Severity", source),
            category=element.get("Category"),
            description=element.get("Description"),
        )

    projects = [
        ProjectIssues(
            name=_required(project, "Name", source),
            issues=[_parse_issue(issue, source) for issue in project.iterfind("Issue")],
        )
        for project in root.iterfind("Issues/Project")
    ]

    return InspectionReport(solution=solution.strip(), issue_types=issue_types, projects=projects)


def _parse_issue(element: ET.Element, source: str) -> InspectedIssue:
    raw_line = element.get("Line", "0")
    try:
        line = int(raw_line)
    except ValueError as exc:
        raise ReportError(f"'{source}': invalid Line attribute {raw_line!r}") from exc

    return InspectedIssue(
        type_id=_required(element, "TypeId", source),
        file=_required(element, "File", source),
        message=element.get("Message"),
        line=line,
    )


def _required(element: ET.Element, attribute: str, source: str) -> str:
    value = element.get(attribute)
    if value is None:
        raise ReportError(f"'{source}': <{element.tag}> is missing the {attribute} attribute")
    return value
