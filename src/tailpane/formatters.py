"""Custom formatters for tailpane displays."""

from typing import Any

from replkit2.textkit.formatter import TextFormatter
from replkit2.types.core import CommandMeta

from .app import app


@app.formatter.register("codeblock")  # pyright: ignore[reportAttributeAccessIssue]
def format_codeblock(data: Any, meta: CommandMeta, formatter: TextFormatter) -> str:
    """Wrap a command's text in a fenced block.

    Expects a dict with "content" and an optional "process" language hint;
    anything else is fenced as-is.
    """
    if not isinstance(data, dict) or "content" not in data:
        return f"```\n{data}\n```"

    lang = data.get("process", "text")
    content = str(data["content"]).rstrip()
    return f"```{lang}\n{content or '(empty)'}\n```"
