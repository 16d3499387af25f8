"""Stop command - end a tailed stream.

PUBLIC API:
  - stop: Terminate a stream's file follower or command
"""

from ..app import app
from ..errors import TailError, string_error_response
from ._helpers import ensure_runtime


@app.command(
    display="text",
    fastmcp={"type": "tool", "description": "Stop tailing a file or command"},
)
def stop(state, stream: str) -> str:
    """Terminate a stream's source.

    Its pane stays until the idle timer dismisses it, unless drop_on_exit
    is configured.

    Args:
        state: Application state
        stream: Stream key as shown by ls()

    Returns:
        Status message
    """
    try:
        runtime = ensure_runtime(state)
        stopped = runtime.call(runtime.controller.stop(stream))
    except TailError as e:
        return string_error_response(str(e))

    if stopped:
        return f"✓ Stopped '{stream}'"
    return f"Stream '{stream}' not running"
