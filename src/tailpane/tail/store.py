"""Pane store - the single owner of the stream to pane mapping.

PUBLIC API:
  - TailPane: One stream's pane and its retained content
  - PaneStore: Creates, caches and drops TailPanes by stream key
"""

import asyncio
import logging
import math
import time
from dataclasses import dataclass, field

from ..types import StreamKey, RegionID, TailConfig

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class TailPane:
    """A stream's pane.

    Compared by identity: a pane recreated after a dismissal is a different
    pane even when it serves the same stream key.
    """

    key: StreamKey
    max_height: int
    erase: bool
    scrollback: int = 0
    region_id: RegionID | None = None
    height: int = 0
    content: str = ""
    modified: bool = False
    redraw: bool = False
    pending_newline: bool = False
    timer: asyncio.TimerHandle | None = None
    chunks: int = 0
    created: float = field(default_factory=time.time)
    updated: float = field(default_factory=time.time)

    def insert(self, chunk: str) -> None:
        """Apply a chunk to the retained content per the erase policy."""
        if self.erase:
            self.content = ""
        self.content += chunk
        if self.scrollback > 0:
            self.content = _last_lines(self.content, self.scrollback)
        self.modified = True
        self.chunks += 1
        self.updated = time.time()

    @property
    def line_count(self) -> int:
        return len(self.content.splitlines())

    def content_height(self, width: int | None = None) -> int:
        """Rows needed to show the retained content.

        Args:
            width: Region width in columns; long lines wrap when given
        """
        lines = self.content.splitlines()
        if not width or width <= 0:
            return len(lines)
        return sum(max(1, math.ceil(len(line) / width)) for line in lines)


def _last_lines(text: str, count: int) -> str:
    lines = text.splitlines(keepends=True)
    if len(lines) <= count:
        return text
    return "".join(lines[-count:])


class PaneStore:
    """Maps stream keys to their panes.

    Everything else routes pane lookups through here, so there is never more
    than one pane per stream key. Starts empty; clear() on teardown.
    """

    def __init__(self, config: TailConfig):
        """Initialize PaneStore.

        Args:
            config: Policy applied to every new pane
        """
        self.config = config
        self.panes: dict[StreamKey, TailPane] = {}

    def get(self, key: StreamKey) -> TailPane | None:
        return self.panes.get(key)

    def get_or_create(self, key: StreamKey) -> TailPane:
        """Get existing pane or create new one.

        Args:
            key: Stream key (file path or command line)

        Returns:
            TailPane for this stream
        """
        if key not in self.panes:
            self.panes[key] = TailPane(
                key=key,
                max_height=self.config.max_height,
                erase=self.config.erase_on_update,
                scrollback=self.config.scrollback,
            )
            logger.debug(f"Created pane for {key}")
        return self.panes[key]

    def remove(self, key: StreamKey, pane: TailPane | None = None) -> TailPane | None:
        """Drop a stream's pane.

        Args:
            key: Stream key
            pane: Only drop if the stored pane is this exact object

        Returns:
            The dropped pane, or None when nothing matched
        """
        current = self.panes.get(key)
        if current is None:
            return None
        if pane is not None and current is not pane:
            return None
        del self.panes[key]
        return current

    def keys(self) -> list[StreamKey]:
        return list(self.panes.keys())

    def values(self) -> list[TailPane]:
        return list(self.panes.values())

    def clear(self) -> None:
        self.panes.clear()

    def __contains__(self, key: object) -> bool:
        return key in self.panes

    def __len__(self) -> int:
        return len(self.panes)
