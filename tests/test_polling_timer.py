"""Tests for PollingTimer behavior."""

import asyncio
from unittest.mock import AsyncMock

import pytest

from ciphertrack.adapters.pollers import PollingTimer


@pytest.mark.asyncio
async def test_when_started_then_ticks_repeatedly() -> None:
    """Given a started timer, when several intervals pass, then the callback runs repeatedly."""
    on_tick = AsyncMock()
    timer = PollingTimer(interval_seconds=0.01)

    await timer.start(on_tick)
    await asyncio.sleep(0.06)
    await timer.stop()

    assert on_tick.await_count >= 2


@pytest.mark.asyncio
async def test_first_tick_waits_one_interval() -> None:
    """Given a long interval, when just started, then the callback has not run yet."""
    on_tick = AsyncMock()
    timer = PollingTimer(interval_seconds=10)

    await timer.start(on_tick)
    await asyncio.sleep(0)

    assert timer.is_running
    on_tick.assert_not_awaited()
    await timer.stop()


@pytest.mark.asyncio
async def test_when_stopped_then_no_more_ticks() -> None:
    """Given a stopped timer, when time passes, then the callback is not called again."""
    on_tick = AsyncMock()
    timer = PollingTimer(interval_seconds=0.01)
    await timer.start(on_tick)
    await asyncio.sleep(0.03)

    await timer.stop()
    calls_at_stop = on_tick.await_count
    await asyncio.sleep(0.03)

    assert not timer.is_running
    assert on_tick.await_count == calls_at_stop


@pytest.mark.asyncio
async def test_when_stopped_while_tick_in_progress_then_tick_cancelled() -> None:
    """Given a slow tick in progress, when stopping, then the tick is cancelled."""
    finished = False

    async def slow_tick() -> None:
        nonlocal finished
        await asyncio.sleep(10)
        finished = True

    timer = PollingTimer(interval_seconds=0.01)
    await timer.start(slow_tick)
    await asyncio.sleep(0.03)

    await timer.stop()

    assert not timer.is_running
    assert finished is False


@pytest.mark.asyncio
async def test_when_tick_raises_then_timer_keeps_running() -> None:
    """Given a failing callback, when ticking, then later ticks still happen."""
    on_tick = AsyncMock(side_effect=RuntimeError("boom"))
    timer = PollingTimer(interval_seconds=0.01)

    await timer.start(on_tick)
    await asyncio.sleep(0.06)

    assert timer.is_running
    assert on_tick.await_count >= 2
    await timer.stop()


@pytest.mark.asyncio
async def test_when_started_twice_then_single_loop() -> None:
    """Given a running timer, when starting again, then the existing loop is kept."""
    timer = PollingTimer(interval_seconds=10)
    await timer.start(AsyncMock())
    task = timer._task

    await timer.start(AsyncMock())

    assert timer._task is task
    await timer.stop()


@pytest.mark.asyncio
async def test_when_stopped_without_start_then_no_error() -> None:
    """Given an idle timer, when stopping, then nothing happens."""
    timer = PollingTimer(interval_seconds=1)

    await timer.stop()

    assert not timer.is_running
