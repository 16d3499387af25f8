"""tailpane commands."""

from .tail_file import tail_file
from .tail_command import tail_command
from .ls import ls
from .dismiss import dismiss
from .stop import stop
from .logs import logs

__all__ = ["tail_file", "tail_command", "ls", "dismiss", "stop", "logs"]
