"""Tail controller - routes stream output to panes on a single event loop.

PUBLIC API:
  - TailController: Owns the pane store, placement, rendering and timers
"""

import asyncio
import logging

from .host import SurfaceHost
from .locator import RegionLocator
from .render import ContentRenderer
from .scheduler import InactivityScheduler
from .store import PaneStore, TailPane
from ..errors import TailError
from ..stream import StreamAdapter, file_source, command_source
from ..types import StreamKey, SourceSpec, TailConfig, TailRow

logger = logging.getLogger(__name__)


class TailController:
    """Manages every tail pane of one display surface.

    Responsibilities:
    - Route each chunk to its stream's pane, creating the pane on demand
    - Keep one dismissal timer per pane alive while output keeps coming
    - Dismiss idle panes and give their regions back to the layout
    - Tear everything down on shutdown

    All methods must run on the controller's event loop.
    """

    def __init__(self, host: SurfaceHost, config: TailConfig, loop: asyncio.AbstractEventLoop | None = None):
        """Initialize TailController.

        Args:
            host: Display surface hosting the panes
            config: Tail pane policy
            loop: Event loop serializing chunks and timers (default: running loop)
        """
        self.host = host
        self.config = config
        self.loop = loop or asyncio.get_running_loop()
        self.store = PaneStore(config)
        self.locator = RegionLocator(host, special_display=config.special_display)
        self.renderer = ContentRenderer(host, audible=config.audible, raise_on_update=config.raise_on_update)
        self.scheduler = InactivityScheduler(self.loop, on_fire=self._dismiss_pane)
        self.adapter = StreamAdapter(on_chunk=self.on_chunk, on_exit=self.on_exit)

    def on_chunk(self, key: StreamKey, chunk: str) -> None:
        """Show a chunk of a stream's output.

        Never raises: placement and host failures are logged and the content
        stays buffered in the pane for the next chunk to retry.
        """
        pane = self.store.get_or_create(key)
        logger.debug(f"Chunk for {key}: {len(chunk)} chars")

        try:
            self.locator.locate_or_create(pane)
        except TailError as e:
            logger.warning(f"Cannot place pane for {key}, buffering output: {e}")
            pane.insert(chunk)
            pane.redraw = True
            self.scheduler.arm(pane, self.config.dismiss_delay)
            return

        try:
            self.renderer.apply_update(pane, chunk)
        except TailError as e:
            logger.error(f"Failed to update pane {pane.region_id} for {key}: {e}")
            pane.redraw = True

        self.scheduler.arm(pane, self.config.dismiss_delay)

    def on_exit(self, key: StreamKey, returncode: int | None) -> None:
        """Handle the end of a stream."""
        pane = self.store.get(key)
        if pane is None:
            return
        if self.config.drop_on_exit:
            logger.info(f"Stream {key} ended, dropping its pane")
            self._dismiss_pane(pane)

    def dismiss(self, key: StreamKey) -> bool:
        """Remove a stream's pane now; the stream keeps running.

        Returns:
            True if the stream had a pane
        """
        pane = self.store.get(key)
        if pane is None:
            return False
        self._dismiss_pane(pane)
        return True

    def _dismiss_pane(self, pane: TailPane) -> None:
        # A recreated pane for the same key is not ours to drop
        if self.store.remove(pane.key, pane) is None:
            logger.debug(f"Pane for {pane.key} already dismissed")
            return

        self.scheduler.cancel(pane)
        if pane.region_id:
            try:
                self.host.remove(pane.region_id)
            except TailError as e:
                logger.debug(f"Region {pane.region_id} already gone: {e}")
        logger.info(f"Dismissed pane for {pane.key}")
        pane.region_id = None

    async def tail_file(self, path: str) -> SourceSpec:
        """Follow a local file.

        Raises:
            StreamError: If the path is remote or unreadable, or already tailed
        """
        source = file_source(path)
        await self.adapter.start(source)
        return source

    async def tail_command(self, argv: list[str] | tuple[str, ...]) -> SourceSpec:
        """Run a command and tail its output.

        Raises:
            StreamError: If the command cannot be spawned, or is already tailed
        """
        source = command_source(argv)
        await self.adapter.start(source)
        return source

    async def stop(self, key: StreamKey) -> bool:
        """Terminate a stream's source."""
        return await self.adapter.stop(key)

    def snapshot(self) -> list[TailRow]:
        """Rows describing every stream and pane."""
        rows: list[TailRow] = []
        keys = list(dict.fromkeys(self.store.keys() + self.adapter.keys()))
        for key in keys:
            pane = self.store.get(key)
            source = self.adapter.sources.get(key)
            rows.append(
                {
                    "Stream": key,
                    "Pane": (pane.region_id or "-") if pane else "-",
                    "Height": pane.height if pane else 0,
                    "Lines": pane.line_count if pane else 0,
                    "Timer": "pending" if pane and self.scheduler.pending(pane) else "none",
                    "Source": source.kind if source else "ended",
                }
            )
        return rows

    async def shutdown(self) -> None:
        """Stop every source, cancel every timer, then remove every pane."""
        await self.adapter.stop_all()

        panes = self.store.values()
        for pane in panes:
            self.scheduler.cancel(pane)
        for pane in panes:
            self._dismiss_pane(pane)

        self.store.clear()
        logger.info(f"Shut down, removed {len(panes)} panes")
