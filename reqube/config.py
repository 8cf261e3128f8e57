"""Configuration loading and validation.

Usage:
    config = load("reqube.yaml")            # raises ConfigError on bad config
    config = load()                         # defaults + environment only
    generate_template("reqube.yaml")        # writes example file to disk

Precedence (highest first): command-line options, environment variables
(REQUBE_OUTPUT, REQUBE_DIRECTORY), config file, built-in defaults.
"""

import os
from dataclasses import dataclass
from pathlib import Path

import yaml

DEFAULT_OUTPUT = "resharper-sonarqube.json"


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------

class ConfigError(Exception):
    """Raised when the configuration is missing or invalid."""


# ---------------------------------------------------------------------------
# Config dataclass
# ---------------------------------------------------------------------------

@dataclass
class Config:
    output: str = DEFAULT_OUTPUT
    directory: str | None = None
    project: str | None = None


# ---------------------------------------------------------------------------
# Loader
# ---------------------------------------------------------------------------

def load(config_path: str | None = None) -> Config:
    """Load and validate configuration.

    Without *config_path* only the defaults and the environment are used.

    Raises:
        ConfigError: if the given file is missing or malformed, or the
                     resulting output file name is invalid.
    """
    raw: dict = {}
    if config_path is not None:
        raw = _read_file(config_path)

    output    = os.environ.get("REQUBE_OUTPUT")    or raw.get("output")    or DEFAULT_OUTPUT
    directory = os.environ.get("REQUBE_DIRECTORY") or raw.get("directory") or None
    project   = raw.get("project") or None

    config = Config(
        output=str(output).strip(),
        directory=str(directory).strip() if directory else None,
        project=str(project).strip() if project else None,
    )
    _validate(config)
    return config


def _read_file(config_path: str) -> dict:
    path = Path(config_path)

    if not path.exists():
        raise ConfigError(
            f"Config file not found: '{config_path}'\n"
            "Run `reqube init` to generate a template."
        )

    try:
        with path.open(encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse '{config_path}': {exc}") from exc

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigError(f"'{config_path}' must be a YAML mapping at the top level.")
    return raw


def _validate(config: Config) -> None:
    """Raise ConfigError if the output file name is unusable."""
    errors: list[str] = []

    if not config.output:
        errors.append(
            "  - 'output' is empty (or set the REQUBE_OUTPUT environment variable)"
        )
    elif "/" in config.output or "\\" in config.output:
        errors.append(
            f"  - 'output' must be a file name, not a path: '{config.output}' "
            "(use 'directory' for the output root)"
        )

    if errors:
        raise ConfigError("Invalid configuration:\n" + "\n".join(errors))


# ---------------------------------------------------------------------------
# Template generator (used by `init` command)
# ---------------------------------------------------------------------------

TEMPLATE = """\
# File name written in every project directory (and at the output root)
output: "resharper-sonarqube.json"

# Optional root directory prepended to every written report
# directory: "build/sonar"

# Optional: only write the report of this project, at the output root
# project: "MyCompany.MyProject"
"""


def generate_template(output_path: str = "reqube.yaml") -> None:
    """Write a template reqube.yaml to *output_path*.

    Raises:
        ConfigError: if the file already exists.
    """
    path = Path(output_path)
    if path.exists():
        raise ConfigError(
            f"'{output_path}' already exists. Remove it first or choose a different path."
        )
    path.write_text(TEMPLATE, encoding="utf-8")
