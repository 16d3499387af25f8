"""Inactivity scheduler - one cancellable dismissal timer per pane.

Per pane: no timer --arm--> pending --cancel--> no timer, and
pending --fire--> dismissed. Fire is terminal; cancelling after it is a
no-op. Timers run on the event loop that serializes chunk delivery, so a
chunk handled before the fire cancels it, and a chunk handled after it finds
the pane gone and creates a new one.

PUBLIC API:
  - InactivityScheduler: Arms, cancels and fires dismissal timers
"""

import asyncio
import logging
from collections.abc import Callable

from .store import TailPane

logger = logging.getLogger(__name__)


class InactivityScheduler:
    """Owns the pending dismissal timer of every pane."""

    def __init__(self, loop: asyncio.AbstractEventLoop, on_fire: Callable[[TailPane], None]):
        """Initialize InactivityScheduler.

        Args:
            loop: Event loop that delivers chunks
            on_fire: Called with the pane when its timer fires
        """
        self.loop = loop
        self.on_fire = on_fire

    def arm(self, pane: TailPane, delay: float | None) -> None:
        """Cancel the pane's pending timer and start a new one.

        Args:
            pane: Pane to dismiss when idle
            delay: Idle seconds; None or 0 keeps the pane until dismissed otherwise
        """
        self.cancel(pane)
        if not delay:
            return
        pane.timer = self.loop.call_later(delay, self._fire, pane)

    def cancel(self, pane: TailPane) -> None:
        if pane.timer is not None:
            pane.timer.cancel()
            pane.timer = None

    def pending(self, pane: TailPane) -> bool:
        return pane.timer is not None

    def _fire(self, pane: TailPane) -> None:
        pane.timer = None
        logger.debug(f"Dismissal timer fired for {pane.key}")
        self.on_fire(pane)
