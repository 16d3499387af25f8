"""Transient, auto-sizing tmux panes showing the tail of growing output.

Follows a file or runs a command and shows its latest output in a pane
carved from the bottom of the tmux window. Panes shrink to fit, never exceed
their maximum height, and disappear after a period without new output.
Built on ReplKit2 for dual REPL/MCP functionality.

PUBLIC API:
  - app: ReplKit2 application instance with tailpane commands
"""

from .app import app

__version__ = "0.1.0"
__all__ = ["app"]
