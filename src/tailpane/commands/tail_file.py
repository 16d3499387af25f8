"""Tail a file into a transient pane.

PUBLIC API:
  - tail_file: Follow a local file as it grows
"""

from typing import Any

from ..app import app
from ..errors import TailError, markdown_error_response
from ._helpers import ensure_runtime


@app.command(
    display="markdown",
    fastmcp={
        "type": "tool",
        "mime_type": "text/markdown",
        "tags": {"tail", "file"},
        "description": "Follow a local file in an auto-sizing tmux pane",
    },
)
def tail_file(state, path: str) -> dict[str, Any]:
    """Follow a local file, showing new lines in a pane at the bottom of the window.

    The pane appears with the first output and is dismissed after the
    configured idle delay. Remote paths are rejected.

    Args:
        state: Application state.
        path: Local file path.

    Returns:
        Markdown formatted result with the stream key.
    """
    try:
        runtime = ensure_runtime(state)
        source = runtime.call(runtime.controller.tail_file(path))
    except TailError as e:
        return markdown_error_response(str(e))

    return {
        "elements": [
            {"type": "text", "content": f"**Tailing:** `{source.key}`"},
            {"type": "blockquote", "content": "Use `ls()` to see active panes, `stop(stream=...)` to end"},
        ],
        "frontmatter": {"stream": source.key, "kind": source.kind, "status": "tailing"},
    }
