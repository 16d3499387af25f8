"""Logs command - recent runtime log records."""

from ..app import app


@app.command(
    display="codeblock",
    fastmcp={"enabled": False},  # Debugging aid, not exposed to MCP
)
def logs(state, lines: int = 50) -> dict:
    """Show recent log records from the tail runtime."""
    if state.runtime is None:
        return {"content": "(runtime not started)", "process": "text", "count": 0}

    records = state.runtime.log_buffer[-lines:] if lines > 0 else []
    return {
        "content": "\n".join(records) or "(no log records)",
        "process": "text",
        "count": len(records),
    }
