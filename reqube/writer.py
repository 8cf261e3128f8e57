"""Report file output."""

import json
from pathlib import Path

import click

from reqube.models import SonarQubeReport
from reqube.paths import to_native


def combine_output_path(directory: str | None, relative_dir: str, output: str) -> Path:
    """Join the optional output root, a backslash project directory and the file name."""
    path = to_native(relative_dir) / output
    return Path(directory) / path if directory else path


def write_report(path: Path, report: SonarQubeReport, pretty: bool = False) -> Path:
    """Serialize *report* to *path*, creating parent directories as needed."""
    click.echo(f"Writing output file {path}")
    path.parent.mkdir(parents=True, exist_ok=True)
    text = json.dumps(report.to_dict(), indent=2 if pretty else None, ensure_ascii=False)
    path.write_text(text, encoding="utf-8")
    return path
