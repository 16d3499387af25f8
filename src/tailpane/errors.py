"""Exceptions and shared error responses for tailpane.

Core components raise the exceptions below; commands turn them into display
responses with the helpers at the bottom of this module.

PUBLIC API:
  - TailError: Base exception for tailpane
  - ConfigError: Invalid configuration, raised at load time
  - StreamError: A stream source could not be started
  - PlacementError: No region could be found or created for a pane
  - markdown_error_response: Create error response for markdown display
  - string_error_response: Create error response for string display
"""

from typing import Any


class TailError(Exception):
    """Base exception for tailpane."""

    pass


class ConfigError(TailError, ValueError):
    """Raised when tailpane.toml holds an invalid setting."""

    pass


class StreamError(TailError):
    """Raised when a command cannot be spawned or a file cannot be followed."""

    pass


class PlacementError(TailError):
    """Raised when neither a split nor the host fallback produced a region."""

    pass


def markdown_error_response(message: str) -> dict[str, Any]:
    """Create error response for markdown display commands.

    Args:
        message: The error message to display

    Returns:
        Markdown display dict with error element
    """
    return {
        "elements": [{"type": "text", "content": f"Error: {message}"}],
        "frontmatter": {"error": message, "status": "error"},
    }


def string_error_response(message: str) -> str:
    """Create error response for string display commands."""
    return f"Error: {message}"
