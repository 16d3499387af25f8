"""tmux backend for tail panes.

PUBLIC API:
  - run_tmux: Run tmux command and return result
  - check_tmux_available: Check if tmux server is reachable
  - get_current_pane: Pane this process runs in
  - list_regions: List panes of a window with geometry
  - TmuxHost: SurfaceHost backed by a tmux window
"""

from .core import run_tmux, check_tmux_available, get_current_pane
from .pane import list_regions
from .host import TmuxHost

__all__ = [
    "run_tmux",
    "check_tmux_available",
    "get_current_pane",
    "list_regions",
    "TmuxHost",
]
