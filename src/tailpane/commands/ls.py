"""List command - show tailed streams and their panes."""

import logging
from typing import Optional

from ..app import app
from ..errors import TailError
from ..types import TailRow
from ._helpers import ensure_runtime

logger = logging.getLogger(__name__)


@app.command(
    display="table",
    headers=["Stream", "Pane", "Height", "Lines", "Timer", "Source"],
    fastmcp={"type": "tool", "description": "List tailed streams and their panes"},
)
def ls(state, filter: Optional[str] = None) -> list[TailRow]:
    """List tailed streams with their pane, size and dismissal timer."""
    try:
        runtime = ensure_runtime(state)
        rows = runtime.run(runtime.controller.snapshot)
    except TailError as e:
        logger.warning(f"Command failed: {e}")
        return []

    if filter:
        rows = [row for row in rows if filter.lower() in row["Stream"].lower()]

    return rows
