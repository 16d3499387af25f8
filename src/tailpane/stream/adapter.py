"""Stream adapter - turns spawned sources into on_chunk calls.

PUBLIC API:
  - StreamAdapter: Spawns sources and delivers their output chunk by chunk
"""

import asyncio
import codecs
import logging
from collections.abc import Callable

from ..errors import StreamError
from ..types import SourceSpec, StreamKey

logger = logging.getLogger(__name__)


class StreamAdapter:
    """Spawns stream sources and pumps their output.

    File and command sources look the same from here on: each chunk is
    delivered as on_chunk(key, text), and on_exit(key, returncode) follows
    once the source ends. Chunks of one stream arrive in production order.
    """

    def __init__(
        self,
        on_chunk: Callable[[StreamKey, str], None],
        on_exit: Callable[[StreamKey, int | None], None] | None = None,
        chunk_size: int = 4096,
        stop_timeout: float = 2.0,
    ):
        """Initialize StreamAdapter.

        Args:
            on_chunk: Called with each decoded chunk
            on_exit: Called when a source ends (optional)
            chunk_size: Maximum bytes read per chunk
            stop_timeout: Seconds to wait after SIGTERM before killing
        """
        self.on_chunk = on_chunk
        self.on_exit = on_exit
        self.chunk_size = chunk_size
        self.stop_timeout = stop_timeout
        self.sources: dict[StreamKey, SourceSpec] = {}
        self._procs: dict[StreamKey, asyncio.subprocess.Process] = {}
        self._pumps: dict[StreamKey, asyncio.Task] = {}

    async def start(self, source: SourceSpec) -> None:
        """Spawn a source and start delivering its output.

        Args:
            source: Source to spawn

        Raises:
            StreamError: If the key is already streaming or the spawn fails
        """
        if source.key in self._procs:
            raise StreamError(f"Already tailing {source.key}")

        try:
            proc = await asyncio.create_subprocess_exec(
                *source.argv,
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.STDOUT,
            )
        except OSError as e:
            raise StreamError(f"Failed to start {source.key}: {e}") from e

        self.sources[source.key] = source
        self._procs[source.key] = proc
        self._pumps[source.key] = asyncio.create_task(self._pump(source.key, proc))
        logger.info(f"Started {source.kind} stream {source.key} (pid {proc.pid})")

    async def _pump(self, key: StreamKey, proc: asyncio.subprocess.Process) -> None:
        decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        assert proc.stdout is not None

        try:
            while True:
                data = await proc.stdout.read(self.chunk_size)
                if not data:
                    break
                text = decoder.decode(data)
                if text:
                    self.on_chunk(key, text)

            rest = decoder.decode(b"", final=True)
            if rest:
                self.on_chunk(key, rest)

            returncode = await proc.wait()
        except Exception as e:
            logger.error(f"Stream {key} failed, terminating it: {e}", exc_info=True)
            returncode = await self._terminate(proc)
        finally:
            self.sources.pop(key, None)
            self._procs.pop(key, None)
            self._pumps.pop(key, None)

        logger.info(f"Stream {key} ended with code {returncode}")
        if self.on_exit:
            self.on_exit(key, returncode)

    async def _terminate(self, proc: asyncio.subprocess.Process) -> int:
        """SIGTERM, then SIGKILL after stop_timeout; returns the exit code."""
        if proc.returncode is None:
            try:
                proc.terminate()
            except ProcessLookupError:
                pass
        try:
            return await asyncio.wait_for(proc.wait(), timeout=self.stop_timeout)
        except asyncio.TimeoutError:
            proc.kill()
            return await proc.wait()

    def running(self, key: StreamKey) -> bool:
        return key in self._procs

    def keys(self) -> list[StreamKey]:
        return list(self._procs.keys())

    async def stop(self, key: StreamKey) -> bool:
        """Terminate a source and wait for its last output.

        Returns:
            True if the key was streaming
        """
        proc = self._procs.get(key)
        pump = self._pumps.get(key)
        if proc is None:
            return False

        if proc.returncode is None:
            try:
                proc.terminate()
            except ProcessLookupError:
                pass

        if pump is None:
            return True

        try:
            await asyncio.wait_for(asyncio.shield(pump), timeout=self.stop_timeout)
        except asyncio.TimeoutError:
            # Children may still hold stdout open after the parent exits
            logger.warning(f"Stream {key} did not stop, killing it")
            if proc.returncode is None:
                try:
                    proc.kill()
                except ProcessLookupError:
                    pass
            pump.cancel()
            try:
                await pump
            except asyncio.CancelledError:
                pass

        return True

    async def stop_all(self) -> None:
        for key in self.keys():
            await self.stop(key)
