"""Display host interface - the narrow surface the tail engine mutates.

The engine never talks to tmux directly. It asks a SurfaceHost for the
current layout and requests splits, resizes and removals through it, so any
terminal multiplexer or windowed UI can host tail panes.

PUBLIC API:
  - Region: Geometry of one region of the display surface
  - SurfaceHost: Abstract host every display backend implements
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from ..types import RegionID


@dataclass(frozen=True)
class Region:
    """Geometry of a region of the display surface.

    Attributes:
        region_id: Host identifier (tmux pane ID such as "%42").
        top: Row of the top edge.
        bottom: Row of the bottom edge; larger values are lower on screen.
        height: Height in rows.
        width: Width in columns.
        active: Whether the region has focus.
        title: Title the host shows for the region; anything may set it.
        owner: Stream key of the tail pane living in the region, empty for
            regions tailpane did not create.
    """

    region_id: RegionID
    top: int
    bottom: int
    height: int
    width: int = 80
    active: bool = False
    title: str = ""
    owner: str = ""


class SurfaceHost(ABC):
    """Display surface that hosts tail panes."""

    @abstractmethod
    def regions(self) -> list[Region]:
        """Current layout in the host's circular next-region order."""
        ...

    @abstractmethod
    def region(self, region_id: RegionID) -> Optional[Region]:
        """Geometry of one region, None if it no longer exists."""
        ...

    @abstractmethod
    def focused(self) -> Optional[RegionID]:
        """Region holding focus."""
        ...

    @abstractmethod
    def input_region(self) -> Optional[RegionID]:
        """Region where the user types commands; never used for panes."""
        ...

    @abstractmethod
    def is_unsplittable(self) -> bool:
        """Whether splitting is off the table for the current layout."""
        ...

    @abstractmethod
    def split(self, region_id: RegionID, key: str) -> RegionID:
        """Split a region in two and return the new lower half, owned by key."""
        ...

    @abstractmethod
    def display_elsewhere(self, key: str) -> RegionID:
        """Generic placement: show a region owned by key wherever the host sees fit."""
        ...

    @abstractmethod
    def resize(self, region_id: RegionID, delta: int) -> None:
        """Grow (positive) or shrink (negative) a region by rows."""
        ...

    @abstractmethod
    def remove(self, region_id: RegionID) -> None:
        """Remove a region and give its space back to the layout."""
        ...

    @abstractmethod
    def set_writable(self, region_id: RegionID, writable: bool) -> None:
        """Toggle whether a region's content may change."""
        ...

    @abstractmethod
    def write(self, region_id: RegionID, text: str, erase: bool) -> None:
        """Write text to a region, clearing it first when erase is set."""
        ...

    @abstractmethod
    def bell(self, region_id: RegionID) -> None:
        """Audible alert."""
        ...

    @abstractmethod
    def raise_surface(self) -> None:
        """Bring the whole display surface to the front."""
        ...
