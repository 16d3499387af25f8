"""Content renderer - applies a chunk to a pane and fits its height.

PUBLIC API:
  - ContentRenderer: Erase-or-append update with shrink-to-fit sizing
"""

import logging

from .host import SurfaceHost
from .store import TailPane

logger = logging.getLogger(__name__)


class ContentRenderer:
    """Applies incoming chunks to placed panes."""

    def __init__(self, host: SurfaceHost, audible: bool = False, raise_on_update: bool = False):
        self.host = host
        self.audible = audible
        self.raise_on_update = raise_on_update

    def apply_update(self, pane: TailPane, chunk: str) -> None:
        """Apply a chunk to a placed pane.

        The region is writable only while content changes. A trailing newline
        is held back until more output follows, since on the bottom row it
        would scroll the first line out of a pane sized to its content. After
        the write the pane is resized to min(content height, max height), never
        below one row, and marked unmodified. Bell and raise come last.

        Args:
            pane: Pane with a region_id
            chunk: Text to insert
        """
        region_id = pane.region_id
        if region_id is None:
            raise ValueError(f"Pane for {pane.key} has no region")

        self.host.set_writable(region_id, True)
        try:
            pane.insert(chunk)
            if pane.erase or pane.redraw:
                text, pane.pending_newline = _hold_newline(pane.content)
                self.host.write(region_id, text, erase=True)
            elif chunk:
                text, held = _hold_newline(chunk)
                if pane.pending_newline:
                    text = "\n" + text
                pane.pending_newline = held
                if text:
                    self.host.write(region_id, text, erase=False)
            pane.redraw = False
        finally:
            self.host.set_writable(region_id, False)

        self.fit(pane)
        pane.modified = False

        if self.audible:
            self.host.bell(region_id)
        if self.raise_on_update:
            self.host.raise_surface()

    def fit(self, pane: TailPane) -> None:
        """Resize the pane's region to its content, capped at max height."""
        region = self.host.region(pane.region_id) if pane.region_id else None
        if region is None:
            return

        target = max(1, min(pane.content_height(region.width), pane.max_height))
        delta = target - region.height
        if delta:
            logger.debug(f"Resizing {region.region_id} for {pane.key}: {region.height} -> {target}")
            self.host.resize(region.region_id, delta)
        pane.height = target


def _hold_newline(text: str) -> tuple[str, bool]:
    if text.endswith("\n"):
        return text[:-1], True
    return text, False
