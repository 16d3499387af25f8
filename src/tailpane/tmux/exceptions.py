"""Tmux-specific exceptions.

PUBLIC API:
  - TmuxError: Base exception for all tmux operations
  - NotInTmuxError: No tmux window to host panes
  - PaneNotFoundError: Pane not found exception
"""

from ..errors import TailError


class TmuxError(TailError):
    """Base exception for all tmux operations."""

    pass


class NotInTmuxError(TmuxError):
    """Raised when no tmux window is available to host tail panes."""

    pass


class PaneNotFoundError(TmuxError):
    """Raised when a tmux pane cannot be found."""

    pass
