"""Core tmux operations - shared utilities for all tmux modules.

PUBLIC API:
  - run_tmux: Execute tmux command and return result
  - check_tmux_available: Check if tmux is available and server running
  - get_current_pane: Get the pane this process runs in
  - display: Expand a tmux format string for a target
"""

import os
import subprocess
from typing import Optional, Tuple, List


def run_tmux(args: List[str]) -> Tuple[int, str, str]:
    """Run tmux command, return (returncode, stdout, stderr)."""
    cmd = ["tmux"] + args
    try:
        result = subprocess.run(cmd, capture_output=True, text=True)
    except FileNotFoundError:
        return 127, "", "tmux: command not found"
    return result.returncode, result.stdout, result.stderr


def check_tmux_available() -> bool:
    """Check if tmux is available and server is running."""
    code, _, _ = run_tmux(["info"])
    return code == 0


def get_current_pane() -> Optional[str]:
    """Get current tmux pane ID if inside tmux.

    Prefers $TMUX_PANE, which names the pane this process was started in even
    after focus has moved elsewhere.
    """
    if not os.environ.get("TMUX"):
        return None

    pane_id = os.environ.get("TMUX_PANE")
    if pane_id:
        return pane_id

    code, stdout, _ = run_tmux(["display", "-p", "#{pane_id}"])
    if code == 0:
        return stdout.strip()
    return None


def display(target: str, format_str: str) -> Optional[str]:
    """Expand a format string against a target.

    Args:
        target: Pane or window target (e.g., "%42", "@3")
        format_str: tmux format (e.g., "#{pane_tty}")

    Returns:
        Expanded value, or None if the target does not exist
    """
    code, stdout, _ = run_tmux(["display", "-p", "-t", target, format_str])
    if code != 0:
        return None
    return stdout.strip()
