"""Type definitions for tailpane.

A stream is anything that produces text over time; each live stream gets at
most one pane in the hosting tmux window.
"""

from dataclasses import dataclass, field
from typing import Literal, TypedDict


# Identifiers
type StreamKey = str  # absolute file path, or shlex-joined command line
type RegionID = str  # e.g., "%42" - tmux native pane ID

type SourceKind = Literal["file", "command"]

# Timer state for ls() output
type TimerState = Literal["pending", "none"]


@dataclass(frozen=True)
class TailConfig:
    """Resolved tail pane policy.

    Attributes:
        erase_on_update: Replace pane content on every chunk instead of appending.
        audible: Ring the terminal bell after each update.
        raise_on_update: Select the hosting window after each update.
        dismiss_delay: Idle seconds before a pane is dismissed, None to keep panes.
        max_height: Maximum pane height in rows.
        scrollback: Lines of content retained per pane, 0 for unbounded.
        drop_on_exit: Dismiss the pane as soon as its stream ends.
        unsplittable: Never split, always use the host fallback placement.
        special_display: Stream keys always shown through the host fallback.
        target_window: tmux window hosting panes when not run inside tmux.
    """

    erase_on_update: bool = True
    audible: bool = False
    raise_on_update: bool = False
    dismiss_delay: float | None = 5.0
    max_height: int = 5
    scrollback: int = 5000
    drop_on_exit: bool = False
    unsplittable: bool = False
    special_display: frozenset[str] = field(default_factory=frozenset)
    target_window: str | None = None


@dataclass(frozen=True)
class SourceSpec:
    """A stream source ready to be spawned."""

    key: StreamKey
    kind: SourceKind
    argv: tuple[str, ...]


# Display types for ls() command
class TailRow(TypedDict):
    """Row data for tail pane listing."""

    Stream: str
    Pane: str
    Height: int
    Lines: int
    Timer: TimerState
    Source: str
