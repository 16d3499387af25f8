"""Shared fixtures: an in-memory display surface."""

from dataclasses import dataclass

import pytest

from tailpane.errors import TailError
from tailpane.tail.host import Region, SurfaceHost


@dataclass
class _Slot:
    region_id: str
    height: int
    owner: str = ""
    title: str = ""


class FakeHost(SurfaceHost):
    """Single column of regions stacked top to bottom.

    Stacking order doubles as the circular next-region order, which is what
    tmux gives for a window split only vertically.
    """

    def __init__(self, heights=(40,), width=80, focus=0, input_index=None):
        self.slots = [_Slot(f"%{i}", h) for i, h in enumerate(heights)]
        self.width = width
        self._next_id = len(self.slots)
        self._focus = self.slots[focus].region_id if self.slots else None
        self._input = self.slots[input_index].region_id if input_index is not None else None
        self.unsplittable = False
        self.fail_split = False
        self.fail_elsewhere = False
        self.elsewhere: list[str] = []
        self.windows: dict[str, _Slot] = {}
        self.content: dict[str, str] = {}
        self.writable: set[str] = set()
        self.removed: list[str] = []
        self.calls: list[tuple] = []

    def _new_id(self) -> str:
        region_id = f"%{self._next_id}"
        self._next_id += 1
        return region_id

    def _slot(self, region_id):
        for slot in self.slots:
            if slot.region_id == region_id:
                return slot
        return self.windows.get(region_id)

    def regions(self) -> list[Region]:
        regions = []
        top = 0
        for slot in self.slots:
            regions.append(
                Region(
                    region_id=slot.region_id,
                    top=top,
                    bottom=top + slot.height - 1,
                    height=slot.height,
                    width=self.width,
                    active=slot.region_id == self._focus,
                    title=slot.title,
                    owner=slot.owner,
                )
            )
            top += slot.height + 1
        return regions

    def region(self, region_id):
        for region in self.regions():
            if region.region_id == region_id:
                return region
        slot = self.windows.get(region_id)
        if slot:
            return Region(region_id, 0, slot.height - 1, slot.height, self.width, False, slot.title, slot.owner)
        return None

    def focused(self):
        return self._focus

    def input_region(self):
        return self._input

    def is_unsplittable(self) -> bool:
        return self.unsplittable

    def split(self, region_id, key):
        self.calls.append(("split", region_id))
        if self.fail_split:
            raise TailError("pane too small")
        slot = self._slot(region_id)
        index = self.slots.index(slot)
        lower = max(1, slot.height // 2)
        slot.height = max(1, slot.height - lower - 1)
        new = _Slot(self._new_id(), lower, owner=key, title=key)
        self.slots.insert(index + 1, new)
        return new.region_id

    def display_elsewhere(self, key):
        self.calls.append(("elsewhere", key))
        if self.fail_elsewhere:
            raise TailError("no room anywhere")
        slot = _Slot(self._new_id(), 24, owner=key, title=key)
        self.windows[slot.region_id] = slot
        self.elsewhere.append(slot.region_id)
        return slot.region_id

    def resize(self, region_id, delta):
        self.calls.append(("resize", region_id, delta))
        slot = self._slot(region_id)
        old = slot.height
        slot.height = max(1, slot.height + delta)
        # Rows are traded with the region above
        if slot in self.slots:
            index = self.slots.index(slot)
            if index > 0:
                above = self.slots[index - 1]
                above.height = max(1, above.height - (slot.height - old))

    def remove(self, region_id):
        self.calls.append(("remove", region_id))
        slot = self._slot(region_id)
        if slot is None:
            raise TailError(f"no such region {region_id}")
        if region_id in self.windows:
            del self.windows[region_id]
        else:
            index = self.slots.index(slot)
            self.slots.remove(slot)
            # Space goes back to the region above
            if index > 0:
                self.slots[index - 1].height += slot.height + 1
        self.content.pop(region_id, None)
        self.removed.append(region_id)

    def set_writable(self, region_id, writable):
        self.calls.append(("writable", region_id, writable))
        if writable:
            self.writable.add(region_id)
        else:
            self.writable.discard(region_id)

    def write(self, region_id, text, erase):
        self.calls.append(("write", region_id, erase))
        if region_id not in self.writable:
            raise TailError(f"{region_id} is read-only")
        if erase:
            self.content[region_id] = ""
        self.content[region_id] = self.content.get(region_id, "") + text

    def bell(self, region_id):
        self.calls.append(("bell", region_id))

    def raise_surface(self):
        self.calls.append(("raise",))

    def visible(self, region_id) -> list[str]:
        """Rows a terminal of the region's height shows, cursor row last.

        Text written to a pane scrolls like a terminal: a newline on the
        bottom row pushes the top row out. Blank rows below the text are left
        out.
        """
        slot = self._slot(region_id)
        rows = self.content.get(region_id, "").split("\n")
        return rows[-slot.height :]

    def call_names(self) -> list[str]:
        return [call[0] for call in self.calls]


@pytest.fixture
def host() -> FakeHost:
    """Window with a work area on top and the command input below it."""
    return FakeHost(heights=(30, 1), focus=0, input_index=1)


@pytest.fixture
def make_host():
    """Factory for hosts with a custom layout."""
    return FakeHost
