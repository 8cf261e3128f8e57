import textwrap
from pathlib import Path

import pytest

SOLUTION_HEADER = """\
Microsoft Visual Studio Solution File, Format Version 12.00
# Visual Studio Version 17
"""

CSHARP = "{FAE04EC0-301F-11D3-BF4B-00C04F79EFBC}"
FOLDER = "{2150E333-8FDC-42A3-9474-1A3956D46DE8}"


def sln_project(name: str, path: str, type_guid: str = CSHARP) -> str:
    return (
        f'Project("{type_guid}") = "{name}", "{path}", "{{11111111-2222-3333-4444-555555555555}}"\n'
        "EndProject\n"
    )


def write_solution(directory: Path, *projects: str, name: str = "App.sln") -> Path:
    path = directory / name
    path.write_text(SOLUTION_HEADER + "".join(projects) + "Global\nEndGlobal\n", encoding="utf-8")
    return path


REPORT_XML = """\
<?xml version="1.0" encoding="utf-8"?>
<Report ToolsVersion="2023.3">
  <Information>
    <Solution>App.sln</Solution>
    <InspectionScope><Element>Solution</Element></InspectionScope>
  </Information>
  <IssueTypes>
    <IssueType Id="UnusedVariable" Category="Redundancies" Description="Unused local variable" Severity="WARNING" />
    <IssueType Id="InconsistentNaming" Category="Naming" Description="Inconsistent naming" Severity="SUGGESTION" />
  </IssueTypes>
  <Issues>
    <Project Name="App">
      <Issue TypeId="UnusedVariable" File="App\\Program.cs" Offset="10-20" Line="12" Message="Local variable 'x' is never used" />
      <Issue TypeId="InconsistentNaming" File="App\\Models\\order.cs" Offset="0-5" Message="Name 'order' does not match rule" />
    </Project>
    <Project Name="Core">
      <Issue TypeId="UnusedVariable" File="Core\\Service.cs" Offset="1-2" Line="3" Message="Local variable 'y' is never used" />
    </Project>
  </Issues>
</Report>
"""


@pytest.fixture
def report_file(tmp_path) -> Path:
    path = tmp_path / "inspectcode.xml"
    path.write_text(textwrap.dedent(REPORT_XML), encoding="utf-8")
    return path
