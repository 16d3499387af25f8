"""Tail a command's output into a transient pane.

PUBLIC API:
  - tail_command: Run a command and show its output as it arrives
"""

import shlex
from typing import Any

from ..app import app
from ..errors import TailError, markdown_error_response
from ._helpers import ensure_runtime


@app.command(
    display="markdown",
    fastmcp={
        "type": "tool",
        "mime_type": "text/markdown",
        "tags": {"tail", "execution"},
        "description": "Run a command and show its output in an auto-sizing tmux pane",
    },
)
def tail_command(state, command: str) -> dict[str, Any]:
    """Run a command, showing its output in a pane at the bottom of the window.

    The command line is split shell-style but not run through a shell.

    Args:
        state: Application state.
        command: Command line to run (e.g., "make -C build").

    Returns:
        Markdown formatted result with the stream key.
    """
    try:
        argv = shlex.split(command)
    except ValueError as e:
        return markdown_error_response(f"Invalid command line: {e}")

    try:
        runtime = ensure_runtime(state)
        source = runtime.call(runtime.controller.tail_command(argv))
    except TailError as e:
        return markdown_error_response(str(e))

    return {
        "elements": [
            {"type": "text", "content": f"**Running:** `{source.key}`"},
            {"type": "blockquote", "content": "Use `ls()` to see active panes, `stop(stream=...)` to end"},
        ],
        "frontmatter": {"stream": source.key, "kind": source.kind, "status": "tailing"},
    }
