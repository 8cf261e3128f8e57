"""Output directory resolution for converted reports.

Functions:
    resolve_project_directory(solution, report, depth)   -> str
    placeholder_directory(project, depth)                -> str

Directories are returned as backslash data paths relative to the solution
root; the writer turns them into host paths.
"""

from reqube.models import Solution, SolutionProject, SonarQubeReport
from reqube.paths import directory_name, first_segment, strip_leading_segments


def resolve_project_directory(solution: Solution, report: SonarQubeReport, depth: int) -> str:
    """Return the directory that holds *report*'s project.

    When several build projects share the report's name, the first issue's
    root directory picks the candidate. A report with no issues cannot be
    disambiguated and falls back to the bare project name, as does a project
    missing from the solution.
    """
    candidates = [
        p.path for p in solution.build_projects()
        if p.name == report.project_name
    ]

    path: str | None = None
    if len(candidates) > 1:
        if report.issues:
            root = first_segment(report.issues[0].primary_location.file_path)
            path = next(
                (c for c in candidates if first_segment(c) == root),
                None,
            )
    elif candidates:
        path = candidates[0]

    if path is None:
        return report.project_name

    if depth > 0:
        path = strip_leading_segments(path, depth)
    return directory_name(path)


def placeholder_directory(project: SolutionProject, depth: int) -> str:
    """Directory of a project that has no converted report."""
    directory = directory_name(project.path)
    if depth > 0:
        directory = strip_leading_segments(directory, depth)
    return directory
