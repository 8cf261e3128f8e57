"""Backslash path helpers.

Paths found in InspectCode reports and .sln files are Windows-style
(``Dir\\Project\\File.cs``) regardless of the host OS, so they are handled as
plain strings here. ``to_native`` is the only function that produces a host
path and is used at the I/O boundary.

Functions:
    solution_depth(input_path)         -> int
    strip_leading_segments(path, n)    -> str
    directory_name(path)               -> str
    first_segment(path)                -> str
    to_native(path)                    -> Path
"""

from pathlib import Path, PureWindowsPath

SEPARATOR = "\\"


def _segments(path: str) -> list[str]:
    return path.split(SEPARATOR)


def solution_depth(input_path: str) -> int:
    """Number of directories between the root and the report's own directory.

    ``C:\\Build\\Sln\\report.xml`` has depth 2; ``C:\\report.xml`` has depth 0.
    Paths without a backslash have depth 0.
    """
    return max(len(_segments(input_path)) - 2, 0)


def strip_leading_segments(path: str, n: int) -> str:
    """Drop the first *n* segments of *path*; ``""`` when nothing remains."""
    if n <= 0:
        return path
    return SEPARATOR.join(_segments(path)[n:])


def directory_name(path: str) -> str:
    head, sep, _ = path.rpartition(SEPARATOR)
    return head if sep else ""


def first_segment(path: str) -> str:
    return _segments(path)[0]


def to_native(path: str) -> Path:
    """Convert a backslash data path into a host ``Path``.

    Drive and root are kept (``C:\\Build`` stays absolute, ``\\Build`` stays
    rooted); an empty path becomes ``.``.
    """
    return Path(PureWindowsPath(path).as_posix())
