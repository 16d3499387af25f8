"""Stream sources and the adapter feeding their output to tail panes.

PUBLIC API:
  - StreamAdapter: Spawns sources and delivers chunks
  - file_source: Source following a local file
  - command_source: Source running a command
  - is_remote_path: Check if a path names a remote file
"""

from .adapter import StreamAdapter
from .sources import file_source, command_source, is_remote_path

__all__ = ["StreamAdapter", "file_source", "command_source", "is_remote_path"]
