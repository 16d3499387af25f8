"""tmux display host - one tmux window is the surface, its panes the regions.

PUBLIC API:
  - TmuxHost: SurfaceHost backed by a tmux window
"""

import logging
from typing import Optional

from .core import check_tmux_available, get_current_pane, display
from .exceptions import NotInTmuxError, PaneNotFoundError, TmuxError
from .pane import (
    list_regions,
    get_region,
    split_pane,
    new_window_pane,
    resize_pane,
    kill_pane,
    get_pane_tty,
    write_to_tty,
    select_window,
)
from ..tail.host import Region, SurfaceHost
from ..types import RegionID

logger = logging.getLogger(__name__)

# Cursor home + erase display
CLEAR_SCREEN = "\x1b[H\x1b[2J"


class TmuxHost(SurfaceHost):
    """SurfaceHost backed by a tmux window.

    The pane tailpane itself runs in is the input region: tail panes are never
    split from it. Content is written straight to each pane's tty, and a pane
    only accepts writes between set_writable(True) and set_writable(False).
    """

    def __init__(self, window: str, input_pane: Optional[str] = None, unsplittable: bool = False):
        """Initialize TmuxHost.

        Args:
            window: Window ID hosting the panes (e.g., "@3")
            input_pane: Pane where the user types commands, if in this window
            unsplittable: Always place panes through display_elsewhere
        """
        self.window = window
        self._input_pane = input_pane
        self._unsplittable = unsplittable
        self._ttys: dict[RegionID, str] = {}
        self._writable: set[RegionID] = set()

    @classmethod
    def attach(cls, target_window: Optional[str] = None, unsplittable: bool = False) -> "TmuxHost":
        """Create a host for the configured window or the one we run in.

        Raises:
            NotInTmuxError: If neither target_window nor $TMUX names a window
        """
        current = get_current_pane()

        if target_window:
            if not check_tmux_available():
                raise NotInTmuxError("tmux server is not running")
            window = display(target_window, "#{window_id}")
            if not window:
                raise NotInTmuxError(f"tmux window not found: {target_window}")
        elif current:
            window = display(current, "#{window_id}")
            if not window:
                raise NotInTmuxError(f"Cannot resolve window of pane {current}")
        else:
            raise NotInTmuxError("Not running inside tmux and no target_window configured")

        input_pane = None
        if current and display(current, "#{window_id}") == window:
            input_pane = current

        logger.info(f"Attached to tmux window {window} (input pane: {input_pane or '-'})")
        return cls(window, input_pane=input_pane, unsplittable=unsplittable)

    def regions(self) -> list[Region]:
        return list_regions(self.window)

    def region(self, region_id: RegionID) -> Optional[Region]:
        return get_region(region_id)

    def focused(self) -> Optional[RegionID]:
        for region in self.regions():
            if region.active:
                return region.region_id
        return None

    def input_region(self) -> Optional[RegionID]:
        return self._input_pane

    def is_unsplittable(self) -> bool:
        if self._unsplittable:
            return True
        # Splitting a zoomed window would unzoom it
        return display(self.window, "#{window_zoomed_flag}") == "1"

    def split(self, region_id: RegionID, key: str) -> RegionID:
        return split_pane(region_id, key)

    def display_elsewhere(self, key: str) -> RegionID:
        session = display(self.window, "#{session_id}")
        if not session:
            raise TmuxError(f"Cannot resolve session of window {self.window}")
        return new_window_pane(session, key)

    def resize(self, region_id: RegionID, delta: int) -> None:
        if delta == 0:
            return
        region = get_region(region_id)
        if region is None:
            raise PaneNotFoundError(f"Pane {region_id} no longer exists")
        resize_pane(region_id, max(1, region.height + delta))

    def remove(self, region_id: RegionID) -> None:
        self._ttys.pop(region_id, None)
        self._writable.discard(region_id)
        kill_pane(region_id)

    def set_writable(self, region_id: RegionID, writable: bool) -> None:
        if writable:
            self._writable.add(region_id)
        else:
            self._writable.discard(region_id)

    def write(self, region_id: RegionID, text: str, erase: bool) -> None:
        if region_id not in self._writable:
            raise TmuxError(f"Pane {region_id} is read-only")
        payload = CLEAR_SCREEN + text if erase else text
        write_to_tty(self._tty(region_id), payload)

    def bell(self, region_id: RegionID) -> None:
        write_to_tty(self._tty(region_id), "\a")

    def raise_surface(self) -> None:
        select_window(self.window)

    def _tty(self, region_id: RegionID) -> str:
        if region_id not in self._ttys:
            self._ttys[region_id] = get_pane_tty(region_id)
        return self._ttys[region_id]
