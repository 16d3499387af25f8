"""Dismiss command - remove a pane before its idle timer fires.

PUBLIC API:
  - dismiss: Remove a stream's pane now
"""

from ..app import app
from ..errors import TailError, string_error_response
from ._helpers import ensure_runtime


@app.command(
    display="text",
    fastmcp={"type": "tool", "description": "Remove a tail pane now"},
)
def dismiss(state, stream: str) -> str:
    """Remove a stream's pane now. The stream keeps running.

    New output from the stream brings the pane back.

    Args:
        state: Application state
        stream: Stream key as shown by ls()

    Returns:
        Status message
    """
    try:
        runtime = ensure_runtime(state)
        removed = runtime.run(runtime.controller.dismiss, stream)
    except TailError as e:
        return string_error_response(str(e))

    if removed:
        return f"✓ Dismissed '{stream}'"
    return f"No pane for '{stream}'"
