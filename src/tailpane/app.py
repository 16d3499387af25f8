"""tailpane ReplKit2 application.

Main application entry point providing dual REPL/MCP functionality for
tailing files and command output into auto-sizing tmux panes.
"""

from dataclasses import dataclass

from replkit2 import App

from .tail.runtime import TailRuntime


@dataclass
class TailPaneState:
    """Application state for tailpane.

    Holds the runtime, started on the first command that needs it. Panes and
    timers live inside the runtime's controller, not here.
    """

    runtime: TailRuntime | None = None


# Must be created before command imports for decorator registration
app = App(
    "tailpane",
    TailPaneState,
    uri_scheme="tailpane",
    fastmcp={
        "description": "Tail files and commands into auto-sizing tmux panes",
        "tags": {"terminal", "tail", "tmux"},
    },
)


# Formatter and command imports register with the app
from . import formatters  # noqa: E402, F401
from .commands import tail_file  # noqa: E402, F401
from .commands import tail_command  # noqa: E402, F401
from .commands import ls  # noqa: E402, F401
from .commands import dismiss  # noqa: E402, F401
from .commands import stop  # noqa: E402, F401
from .commands import logs  # noqa: E402, F401
