"""CLI entry point: command definitions using Click.

Commands:
    init          Generate a template config file
    convert       Convert an InspectCode report into per-project SonarQube reports
"""

import sys
import warnings

import click

from reqube import __version__


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _load_config(ctx: click.Context):
    """Load config from the group options. Exits on error."""
    from reqube.config import ConfigError, load

    try:
        return load(ctx.obj["config_path"])
    except ConfigError as exc:
        click.echo(f"Configuration error: {exc}", err=True)
        sys.exit(1)


def _show_warning(message, category, filename, lineno, file=None, line=None) -> None:
    click.echo(f"Warning: {message}", err=True)


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------

@click.group()
@click.option("--config", "config_path", default=None,
              help="Path to a reqube.yaml configuration file.")
@click.option("--verbose", is_flag=True, default=False,
              help="Enable verbose logging.")
@click.version_option(__version__, prog_name="reqube")
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, verbose: bool) -> None:
    """ReSharper InspectCode to SonarQube generic issue converter."""
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path
    ctx.obj["verbose"] = verbose


# ---------------------------------------------------------------------------
# init
# ---------------------------------------------------------------------------

@cli.command("init")
@click.option("--output", "output_path", default="reqube.yaml", show_default=True,
              help="Path where the template config file will be written.")
def init_command(output_path: str) -> None:
    """Generate a template reqube.yaml file."""
    from reqube.config import ConfigError, generate_template
    try:
        generate_template(output_path)
        click.echo(f"Template written to '{output_path}'.")
    except ConfigError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)


# ---------------------------------------------------------------------------
# convert
# ---------------------------------------------------------------------------

@cli.command("convert")
@click.argument("input_path", metavar="INPUT")
@click.option("-o", "--output", default=None,
              help="Report file name written in each project directory.")
@click.option("-p", "--project", default=None,
              help="Only write the report of this project, at the output root.")
@click.option("-d", "--directory", default=None,
              help="Root directory prepended to every written report.")
@click.option("--pretty", is_flag=True, default=False,
              help="Pretty-print the JSON output.")
@click.pass_context
def convert_command(ctx: click.Context, input_path: str, output: str | None,
                    project: str | None, directory: str | None, pretty: bool) -> None:
    """Convert the InspectCode report INPUT to SonarQube external issue reports."""
    from reqube.convert import Options, convert
    from reqube.mapper import ConversionWarning
    from reqube.reader import ReportError

    config = _load_config(ctx)
    options = Options(
        input=input_path,
        output=output or config.output,
        project=project or config.project,
        directory=directory or config.directory,
        pretty=pretty,
        verbose=ctx.obj["verbose"],
    )

    with warnings.catch_warnings():
        warnings.simplefilter("always", ConversionWarning)
        warnings.showwarning = _show_warning
        try:
            written = convert(options)
        except ReportError as exc:
            click.echo(f"Input error: {exc}", err=True)
            sys.exit(1)

    if ctx.obj["verbose"]:
        click.echo(f"[verbose] {len(written)} report file(s) written", err=True)
