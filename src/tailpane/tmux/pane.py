"""Pane operations - geometry listing and the mutations tail panes need."""

from typing import List, Optional
import logging

from .core import run_tmux, display
from .exceptions import TmuxError, PaneNotFoundError
from ..tail.host import Region

logger = logging.getLogger(__name__)

# Pane user option marking the panes tailpane created, set to the stream key
OWNER_OPTION = "@tailpane"

# Keeps a tail pane alive without reading from or writing to its tty
IDLE_COMMAND = "exec sleep 2147483647"

# Title goes last since any program may put anything in it
_GEOMETRY_FORMAT = "\t".join(
    [
        "#{pane_id}",
        "#{pane_top}",
        "#{pane_bottom}",
        "#{pane_height}",
        "#{pane_width}",
        "#{pane_active}",
        "#{@tailpane}",
        "#{pane_title}",
    ]
)


def _parse_region(line: str) -> Region:
    parts = line.split("\t", 7)
    if len(parts) < 8:
        raise ValueError(f"invalid geometry line '{line}'")
    return Region(
        region_id=parts[0],
        top=int(parts[1]),
        bottom=int(parts[2]),
        height=int(parts[3]),
        width=int(parts[4]),
        active=parts[5] == "1",
        owner=parts[6],
        title=parts[7],
    )


def list_regions(window: str) -> List[Region]:
    """List panes of a window with their geometry.

    Args:
        window: Window target (e.g., "@3" or "session:1")

    Returns:
        Regions in pane index order, which is tmux's circular next-pane order

    Raises:
        TmuxError: If the window does not exist
    """
    code, stdout, stderr = run_tmux(["list-panes", "-t", window, "-F", _GEOMETRY_FORMAT])
    if code != 0:
        raise TmuxError(f"Failed to list panes of {window}: {stderr.strip()}")

    regions = []
    for line in stdout.splitlines():
        if not line:
            continue
        try:
            regions.append(_parse_region(line))
        except ValueError:
            logger.debug(f"Skipping malformed pane line: {line!r}")
            continue

    return regions


def get_region(pane_id: str) -> Optional[Region]:
    """Get geometry for a single pane, None if it no longer exists."""
    value = display(pane_id, _GEOMETRY_FORMAT)
    if not value:
        return None
    try:
        return _parse_region(value)
    except ValueError:
        return None


def split_pane(pane_id: str, key: str) -> str:
    """Split a pane vertically and return the new lower pane's ID.

    The split is detached, so focus stays where it was. The new pane is
    marked as owned by key and titled with it.

    Raises:
        TmuxError: If tmux refuses the split (e.g., pane too small)
    """
    code, stdout, stderr = run_tmux(["split-window", "-v", "-d", "-t", pane_id, "-P", "-F", "#{pane_id}", IDLE_COMMAND])
    if code != 0:
        raise TmuxError(f"Failed to split {pane_id}: {stderr.strip()}")

    new_pane = stdout.strip()
    _prepare_pane(new_pane, key)
    return new_pane


def new_window_pane(session: str, key: str) -> str:
    """Open a detached window in a session and return its pane ID."""
    code, stdout, stderr = run_tmux(
        ["new-window", "-d", "-t", f"{session}:", "-n", key[:30], "-P", "-F", "#{pane_id}", IDLE_COMMAND]
    )
    if code != 0:
        raise TmuxError(f"Failed to open window in {session}: {stderr.strip()}")

    new_pane = stdout.strip()
    _prepare_pane(new_pane, key)
    return new_pane


def _prepare_pane(pane_id: str, key: str) -> None:
    """Mark, title and lock a freshly created pane; kill it if any step fails."""
    try:
        set_pane_owner(pane_id, key)
        set_pane_title(pane_id, key)
        set_pane_input(pane_id, False)
    except TmuxError:
        try:
            kill_pane(pane_id)
        except TmuxError as e:
            logger.warning(f"Could not clean up pane {pane_id}: {e}")
        raise


def set_pane_owner(pane_id: str, key: str) -> None:
    """Record the stream key owning a pane in its pane user option."""
    code, _, stderr = run_tmux(["set-option", "-p", "-t", pane_id, OWNER_OPTION, key])
    if code != 0:
        raise PaneNotFoundError(f"Failed to mark {pane_id}: {stderr.strip()}")


def set_pane_title(pane_id: str, title: str) -> None:
    """Set pane title (select-pane -T does not change focus)."""
    code, _, stderr = run_tmux(["select-pane", "-t", pane_id, "-T", title])
    if code != 0:
        raise PaneNotFoundError(f"Failed to set title of {pane_id}: {stderr.strip()}")


def set_pane_input(pane_id: str, enabled: bool) -> None:
    """Enable or disable keyboard input to a pane."""
    flag = "-e" if enabled else "-d"
    code, _, stderr = run_tmux(["select-pane", "-t", pane_id, flag])
    if code != 0:
        raise PaneNotFoundError(f"Failed to toggle input of {pane_id}: {stderr.strip()}")


def resize_pane(pane_id: str, height: int) -> None:
    """Resize a pane to an absolute height in rows."""
    code, _, stderr = run_tmux(["resize-pane", "-t", pane_id, "-y", str(height)])
    if code != 0:
        raise PaneNotFoundError(f"Failed to resize {pane_id}: {stderr.strip()}")


def kill_pane(pane_id: str) -> None:
    """Kill a pane; tmux closes its window when it was the last pane."""
    code, _, stderr = run_tmux(["kill-pane", "-t", pane_id])
    if code != 0:
        raise PaneNotFoundError(f"Failed to kill {pane_id}: {stderr.strip()}")


def get_pane_tty(pane_id: str) -> str:
    """Get the tty device path of a pane (e.g., "/dev/pts/7")."""
    tty = display(pane_id, "#{pane_tty}")
    if not tty:
        raise PaneNotFoundError(f"Pane {pane_id} has no tty")
    return tty


def write_to_tty(tty: str, text: str) -> None:
    """Write text straight to a pane's terminal.

    The terminal's own output processing turns newlines into CRLF.
    """
    try:
        with open(tty, "w", encoding="utf-8", errors="replace") as f:
            f.write(text)
    except OSError as e:
        raise TmuxError(f"Failed to write to {tty}: {e}") from e


def select_window(window: str) -> None:
    """Make a window the current one in its session."""
    code, _, stderr = run_tmux(["select-window", "-t", window])
    if code != 0:
        raise TmuxError(f"Failed to select {window}: {stderr.strip()}")
