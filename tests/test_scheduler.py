"""Tests for tailpane.tail.scheduler."""

import asyncio

import pytest

from tailpane.tail.scheduler import InactivityScheduler
from tailpane.tail.store import TailPane


def _pane(key: str = "x") -> TailPane:
    return TailPane(key=key, max_height=5, erase=True)


class TestInactivityScheduler:
    @pytest.mark.asyncio
    async def test_fires_once_when_idle(self) -> None:
        fired: list[TailPane] = []
        scheduler = InactivityScheduler(asyncio.get_running_loop(), fired.append)
        pane = _pane()

        scheduler.arm(pane, 0.05)
        assert scheduler.pending(pane)
        await asyncio.sleep(0.15)

        assert fired == [pane]
        assert pane.timer is None
        assert not scheduler.pending(pane)

    @pytest.mark.asyncio
    async def test_rearm_cancels_previous_timer(self) -> None:
        fired: list[TailPane] = []
        scheduler = InactivityScheduler(asyncio.get_running_loop(), fired.append)
        pane = _pane()

        scheduler.arm(pane, 0.05)
        first = pane.timer
        scheduler.arm(pane, 0.3)

        assert first.cancelled()
        assert pane.timer is not first
        await asyncio.sleep(0.1)
        assert fired == []

    @pytest.mark.asyncio
    async def test_repeated_arming_keeps_pane_alive(self) -> None:
        fired: list[TailPane] = []
        scheduler = InactivityScheduler(asyncio.get_running_loop(), fired.append)
        pane = _pane()

        for _ in range(5):
            scheduler.arm(pane, 0.08)
            await asyncio.sleep(0.03)
        assert fired == []

        await asyncio.sleep(0.15)
        assert fired == [pane]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("delay", [None, 0, 0.0])
    async def test_disabled_delay_never_fires(self, delay) -> None:
        fired: list[TailPane] = []
        scheduler = InactivityScheduler(asyncio.get_running_loop(), fired.append)
        pane = _pane()

        scheduler.arm(pane, delay)
        assert pane.timer is None
        await asyncio.sleep(0.05)
        assert fired == []

    @pytest.mark.asyncio
    async def test_disabling_cancels_pending_timer(self) -> None:
        fired: list[TailPane] = []
        scheduler = InactivityScheduler(asyncio.get_running_loop(), fired.append)
        pane = _pane()

        scheduler.arm(pane, 0.05)
        scheduler.arm(pane, None)
        await asyncio.sleep(0.1)
        assert fired == []

    @pytest.mark.asyncio
    async def test_cancel_after_fire_is_noop(self) -> None:
        fired: list[TailPane] = []
        scheduler = InactivityScheduler(asyncio.get_running_loop(), fired.append)
        pane = _pane()

        scheduler.arm(pane, 0.01)
        await asyncio.sleep(0.05)
        scheduler.cancel(pane)
        scheduler.cancel(pane)
        assert fired == [pane]

    @pytest.mark.asyncio
    async def test_panes_have_independent_timers(self) -> None:
        fired: list[TailPane] = []
        scheduler = InactivityScheduler(asyncio.get_running_loop(), fired.append)
        a, b = _pane("a"), _pane("b")

        scheduler.arm(a, 0.05)
        scheduler.arm(b, 0.3)
        await asyncio.sleep(0.1)
        assert fired == [a]
        assert scheduler.pending(b)
        scheduler.cancel(b)
