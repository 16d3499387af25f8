"""Shared helper functions for commands.

PUBLIC API:
  - ensure_runtime: Get the running TailRuntime, starting it on first use
"""

from ..config import get_tail_config
from ..tail.runtime import TailRuntime

__all__ = ["ensure_runtime"]


def ensure_runtime(state) -> TailRuntime:
    """Get the application's runtime, starting it on first use.

    Args:
        state: Application state

    Returns:
        Started TailRuntime

    Raises:
        ConfigError: If tailpane.toml is invalid
        NotInTmuxError: If no tmux window can host panes
    """
    if state.runtime is None:
        runtime = TailRuntime(get_tail_config())
        try:
            runtime.start()
        except Exception:
            runtime.close()
            raise
        state.runtime = runtime
    return state.runtime
