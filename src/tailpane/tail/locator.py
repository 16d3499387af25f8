"""Region locator - finds or carves out the region a tail pane lives in.

Panes always grow from the bottom of the surface: the lowest region is split
and the new lower half hosts the pane, leaving the main work area at the top
alone. Placement problems degrade to the host's generic display operation.

PUBLIC API:
  - RegionLocator: Resolves a TailPane to a region ID
  - find_lowest: Lowest region by circular traversal from the focus
"""

import logging
from typing import Optional

from .host import Region, SurfaceHost
from .store import TailPane
from ..errors import PlacementError, TailError
from ..types import RegionID, StreamKey

logger = logging.getLogger(__name__)


def find_lowest(regions: list[Region], focused: Optional[RegionID], input_region: Optional[RegionID]) -> Optional[Region]:
    """Find the region whose bottom edge is lowest on the surface.

    Traversal starts at the focused region and follows the circular
    next-region order, visiting every region once. Ties keep the region seen
    first. The input region is never returned; when it holds focus the scan
    starts at the region after it.

    Args:
        regions: Layout in next-region order
        focused: Region holding focus
        input_region: Region reserved for command input

    Returns:
        Lowest region, or None when no region qualifies
    """
    if not regions:
        return None

    ids = [r.region_id for r in regions]
    start = ids.index(focused) if focused in ids else 0
    if ids[start] == input_region:
        start = (start + 1) % len(regions)

    lowest = None
    for offset in range(len(regions)):
        region = regions[(start + offset) % len(regions)]
        if region.region_id == input_region:
            continue
        if lowest is None or region.bottom > lowest.bottom:
            lowest = region

    return lowest


class RegionLocator:
    """Resolves the region hosting a pane, creating one when needed."""

    def __init__(self, host: SurfaceHost, special_display: frozenset[StreamKey] = frozenset()):
        """Initialize RegionLocator.

        Args:
            host: Display surface
            special_display: Stream keys always placed through the host fallback
        """
        self.host = host
        self.special_display = special_display

    def locate_or_create(self, pane: TailPane) -> RegionID:
        """Return the pane's region, placing it on the surface if needed.

        Sets pane.region_id. A newly placed region sets pane.redraw so the
        renderer repaints the whole retained content into it.

        Raises:
            PlacementError: If neither a split nor the fallback produced a region
        """
        if pane.region_id and self.host.region(pane.region_id) is not None:
            return pane.region_id

        if pane.region_id:
            logger.info(f"Region {pane.region_id} of {pane.key} is gone, placing again")
            pane.region_id = None

        regions = self.host.regions()
        dedicated = self._dedicated(regions, pane.key)
        if dedicated:
            region_id = dedicated
        elif self.host.is_unsplittable() or pane.key in self.special_display:
            region_id = self._display_elsewhere(pane.key)
        else:
            region_id = self._split_lowest(regions, pane.key)

        pane.region_id = region_id
        pane.redraw = True
        return region_id

    def _dedicated(self, regions: list[Region], key: StreamKey) -> Optional[RegionID]:
        input_region = self.host.input_region()
        # Titles are free for any program to set; only ownership counts
        for region in regions:
            if region.owner == key and region.region_id != input_region:
                logger.debug(f"Adopting region {region.region_id} owned by {key}")
                return region.region_id
        return None

    def _split_lowest(self, regions: list[Region], key: StreamKey) -> RegionID:
        lowest = find_lowest(regions, self.host.focused(), self.host.input_region())
        if lowest is None:
            logger.warning(f"No region to split for {key}, using host placement")
            return self._display_elsewhere(key)

        try:
            region_id = self.host.split(lowest.region_id, key)
        except TailError as e:
            logger.warning(f"Split of {lowest.region_id} failed for {key}: {e}")
            return self._display_elsewhere(key)

        logger.info(f"Split {lowest.region_id} for {key} -> {region_id}")
        return region_id

    def _display_elsewhere(self, key: StreamKey) -> RegionID:
        try:
            region_id = self.host.display_elsewhere(key)
        except TailError as e:
            raise PlacementError(f"No region available for {key}: {e}") from e
        logger.info(f"Placed {key} in {region_id} via host")
        return region_id
