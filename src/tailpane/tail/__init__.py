"""Tail pane engine - placement, rendering and dismissal.

PUBLIC API:
  - Region: Geometry of one display region
  - SurfaceHost: Abstract display host
  - TailPane: A stream's pane
  - PaneStore: Stream key to pane mapping
  - RegionLocator: Finds or creates a pane's region
  - ContentRenderer: Applies chunks and fits pane height
  - InactivityScheduler: Per-pane dismissal timers
  - TailController: Wires everything on one event loop
"""

from .host import Region, SurfaceHost
from .store import TailPane, PaneStore
from .locator import RegionLocator, find_lowest
from .render import ContentRenderer
from .scheduler import InactivityScheduler
from .controller import TailController

__all__ = [
    "Region",
    "SurfaceHost",
    "TailPane",
    "PaneStore",
    "RegionLocator",
    "find_lowest",
    "ContentRenderer",
    "InactivityScheduler",
    "TailController",
]
