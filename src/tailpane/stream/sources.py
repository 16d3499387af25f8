"""Stream sources - what gets spawned for a file or a command.

PUBLIC API:
  - is_remote_path: Check if a path names a file on another machine
  - file_source: Source following a local file
  - command_source: Source running a command
"""

import os
import re
import shlex
from pathlib import Path

from ..errors import StreamError
from ..types import SourceSpec

# scheme://..., /method:host:..., user@host:..., host:/...
_REMOTE_PATH = re.compile(
    r"""^(
        [a-zA-Z][a-zA-Z0-9+.-]*://
      | /[\w-]+:[^/:]*:
      | [\w.-]+@[\w.-]+:
      | [\w.-]+:/
    )""",
    re.VERBOSE,
)


def is_remote_path(path: str) -> bool:
    """Check if a path names a file on another machine.

    Args:
        path: Path as typed by the user

    Returns:
        True for URLs, scp-style and TRAMP-style remote paths
    """
    return bool(_REMOTE_PATH.match(path))


def file_source(path: str) -> SourceSpec:
    """Build a source that follows a local file as it grows.

    Args:
        path: File path (~ is expanded)

    Returns:
        SourceSpec keyed by the absolute path

    Raises:
        StreamError: If the path is remote, missing or unreadable
    """
    if is_remote_path(path):
        raise StreamError(f"Remote files cannot be tailed: {path}")

    resolved = Path(path).expanduser().resolve()
    if not resolved.is_file():
        raise StreamError(f"No such file: {resolved}")
    if not os.access(resolved, os.R_OK):
        raise StreamError(f"File is not readable: {resolved}")

    return SourceSpec(key=str(resolved), kind="file", argv=("tail", "-f", str(resolved)))


def command_source(argv: list[str] | tuple[str, ...]) -> SourceSpec:
    """Build a source that runs a command and streams its output.

    Args:
        argv: Program and arguments

    Returns:
        SourceSpec keyed by the shell-quoted command line

    Raises:
        StreamError: If no command is given
    """
    if not argv or not argv[0]:
        raise StreamError("No command given")

    argv = tuple(argv)
    return SourceSpec(key=shlex.join(argv), kind="command", argv=argv)
