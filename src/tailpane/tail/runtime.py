"""Tail runtime - runs the controller's event loop beside the REPL.

PUBLIC API:
  - TailRuntime: Event loop thread with a thread-safe entry for commands
"""

import asyncio
import atexit
import logging
import threading
from collections.abc import Callable, Coroutine
from typing import Any, TypeVar

from .controller import TailController
from .host import SurfaceHost
from ..types import TailConfig

__all__ = ["TailRuntime"]

logger = logging.getLogger(__name__)

T = TypeVar("T")

LOG_BUFFER_SIZE = 500


class TailRuntime:
    """Owns the event loop thread and the controller living on it.

    Commands run in the REPL (or MCP) thread; everything touching panes is
    handed over to the loop so chunks, timers and commands stay serialized.
    """

    def __init__(self, config: TailConfig, host: SurfaceHost | None = None):
        """Initialize TailRuntime.

        Args:
            config: Tail pane policy
            host: Display host (default: tmux window from config or $TMUX)
        """
        self.config = config
        self.host = host
        self.loop = asyncio.new_event_loop()
        self.controller: TailController | None = None
        self.log_buffer: list[str] = []
        self._thread = threading.Thread(target=self._run_loop, name="tailpane-loop", daemon=True)
        self._closed = False

        self._setup_log_handler()

    def _setup_log_handler(self):
        """Add handler to capture logs in memory."""

        class BufferHandler(logging.Handler):
            def __init__(self, buffer: list[str]):
                super().__init__()
                self.buffer = buffer

            def emit(self, record):
                msg = f"[{record.levelname}] {record.name}: {record.getMessage()}"
                self.buffer.append(msg)
                if len(self.buffer) > LOG_BUFFER_SIZE:
                    self.buffer.pop(0)

        self._log_handler = BufferHandler(self.log_buffer)
        self._log_handler.setLevel(logging.DEBUG)

        tail_logger = logging.getLogger("tailpane")
        tail_logger.setLevel(logging.DEBUG)
        tail_logger.addHandler(self._log_handler)

    def _run_loop(self):
        asyncio.set_event_loop(self.loop)
        self.loop.run_forever()

    def start(self) -> "TailRuntime":
        """Attach to the display host and start the loop thread.

        Raises:
            NotInTmuxError: If no tmux window can host the panes
        """
        if self.host is None:
            from ..tmux import TmuxHost

            self.host = TmuxHost.attach(
                target_window=self.config.target_window,
                unsplittable=self.config.unsplittable,
            )

        host = self.host
        self._thread.start()

        async def create() -> TailController:
            return TailController(host, self.config)

        self.controller = self.call(create())
        atexit.register(self.close)
        logger.info("Tail runtime started")
        return self

    def call(self, coro: Coroutine[Any, Any, T], timeout: float | None = 30.0) -> T:
        """Run a coroutine on the loop and wait for its result."""
        return asyncio.run_coroutine_threadsafe(coro, self.loop).result(timeout)

    def run(self, fn: Callable[..., T], *args: Any) -> T:
        """Run a plain function on the loop and wait for its result."""

        async def invoke() -> T:
            return fn(*args)

        return self.call(invoke())

    def close(self) -> None:
        """Tear down every pane and stop the loop thread."""
        if self._closed:
            return
        self._closed = True

        if self.controller and self._thread.is_alive():
            try:
                self.call(self.controller.shutdown())
            except Exception as e:
                logger.error(f"Shutdown failed: {e}")

        if self._thread.is_alive():
            self.loop.call_soon_threadsafe(self.loop.stop)
            self._thread.join(timeout=5)
        if not self.loop.is_running():
            self.loop.close()

        logging.getLogger("tailpane").removeHandler(self._log_handler)
