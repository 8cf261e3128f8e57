"""Conversion pipeline: read, map, place and write the reports.

Usage:
    written = convert(Options(input="inspectcode.xml", output="sonar.json"))

``ReportError`` from the reader is the only exception that escapes; solution
and placeholder failures are echoed and the reports already written are kept.
"""

from dataclasses import dataclass
from pathlib import Path

import click

from reqube.mapper import map_report
from reqube.models import Solution, SonarQubeReport
from reqube.paths import solution_depth
from reqube.reader import load_report
from reqube.resolver import placeholder_directory, resolve_project_directory
from reqube.solution import SolutionError, load_solution
from reqube.writer import combine_output_path, write_report


@dataclass
class Options:
    input: str
    output: str
    project: str | None = None
    directory: str | None = None
    pretty: bool = False
    verbose: bool = False


def convert(options: Options) -> list[Path]:
    """Run one conversion and return the paths written, in order."""
    click.echo(f"Reading input file {options.input}")
    depth = solution_depth(options.input)
    report = load_report(options.input)

    if options.verbose:
        click.echo(f"[verbose] Solution directory depth: {depth}", err=True)
        click.echo(f"[verbose] {len(report.projects)} project(s) in report", err=True)

    sonar_reports = map_report(report, depth)

    if options.project:
        return _write_single_project(options, sonar_reports)
    return _write_solution(options, report.solution, sonar_reports, depth)


def _write_single_project(options: Options, sonar_reports: list[SonarQubeReport]) -> list[Path]:
    wanted = options.project.casefold()
    report = next((r for r in sonar_reports if r.project_name.casefold() == wanted), None)
    if report is None:
        click.echo(f"Project {options.project} not found or it contains no issues.")
        report = SonarQubeReport.empty()
    try:
        return [_write(options, "", report)]
    except OSError as exc:
        click.echo(f"Error: {exc}", err=True)
        return []


def _write_solution(
    options: Options,
    solution_path: str,
    sonar_reports: list[SonarQubeReport],
    depth: int,
) -> list[Path]:
    written: list[Path] = []
    try:
        solution = load_solution(solution_path)

        # The SonarScanner for MSBuild falls back to a report at the root when a
        # project has none, so an explicit empty one keeps stale issues out.
        written.append(_write(options, "", SonarQubeReport.empty()))

        for sonar_report in sonar_reports:
            directory = resolve_project_directory(solution, sonar_report, depth)
            written.append(_write(options, directory, sonar_report))
    except (SolutionError, OSError) as exc:
        click.echo(f"Error: {exc}", err=True)
        return written

    written.extend(_write_missing_reports(options, solution, sonar_reports, depth))
    return written


def _write_missing_reports(
    options: Options,
    solution: Solution,
    sonar_reports: list[SonarQubeReport],
    depth: int,
) -> list[Path]:
    """Write empty reports for build projects that had no issues at all."""
    reported = {r.project_name.casefold() for r in sonar_reports}
    written: list[Path] = []
    try:
        for project in solution.build_projects():
            if project.name.casefold() in reported:
                continue
            written.append(_write(options, placeholder_directory(project, depth), SonarQubeReport.empty()))
    except OSError as exc:
        click.echo(f"Error while writing placeholder reports: {exc}", err=True)
    return written


def _write(options: Options, directory: str, report: SonarQubeReport) -> Path:
    path = combine_output_path(options.directory, directory, options.output)
    return write_report(path, report, pretty=options.pretty)
