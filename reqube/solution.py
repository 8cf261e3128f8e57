"""Visual Studio solution (.sln) parser.

Only the project headers are read::

    Project("{FAE04EC0-301F-11D3-BF4B-00C04F79EFBC}") = "App", "src\\App\\App.csproj", "{...}"

Usage:
    solution = load_solution("App.sln")      # raises SolutionError
"""

import re
from pathlib import Path

from reqube.models import Solution, SolutionProject
from reqube.paths import to_native

_HEADER = "Microsoft Visual Studio Solution File"

_PROJECT_RE = re.compile(
    r'^\s*Project\("(?P<type>\{[^}]+\})"\)\s*=\s*'
    r'"(?P<name>[^"]*)"\s*,\s*"(?P<path>[^"]*)"\s*,\s*"(?P<guid>\{[^}]+\})"',
)


class SolutionError(Exception):
    """Raised when the solution file cannot be read or parsed."""


def load_solution(path: str) -> Solution:
    """Parse the solution at *path* (backslashes are accepted on any OS)."""
    solution_path = to_native(path) if "\\" in path else Path(path)
    try:
        with solution_path.open(encoding="utf-8-sig") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise SolutionError(f"Unable to read solution '{path}': {exc}") from exc

    return parse_solution(text, source=path)


def parse_solution(text: str, source: str = "<solution>") -> Solution:
    if _HEADER not in text:
        raise SolutionError(f"'{source}' is not a Visual Studio solution file")

    projects = [
        SolutionProject(name=m["name"], path=m["path"], type_guid=m["type"])
        for m in map(_PROJECT_RE.match, text.splitlines())
        if m
    ]
    return Solution(projects=projects)
