"""Unit tests for the coalescing refresh scheduler."""

from __future__ import annotations

import asyncio
from contextlib import suppress

import pytest

from ktwins.screens.dashboard.refresh import RefreshScheduler


class Recorder:
    """Collect/commit pair counting what the scheduler did."""

    def __init__(self) -> None:
        self.collected = 0
        self.committed: list[int] = []
        self.during_collect = None
        self.fail_next = False
        self.committed_event = asyncio.Event()

    async def collect(self) -> int:
        self.collected += 1
        if self.fail_next:
            self.fail_next = False
            raise RuntimeError("collect failed")
        if self.during_collect is not None:
            hook, self.during_collect = self.during_collect, None
            hook()
        await asyncio.sleep(0)
        return self.collected

    def commit(self, snapshot: int) -> None:
        self.committed.append(snapshot)
        self.committed_event.set()


class TestRefreshScheduler:
    """Tests for RefreshScheduler."""

    @pytest.mark.asyncio
    async def test_requests_coalesce(self) -> None:
        """N requests before a cycle starts produce exactly one cycle."""
        recorder = Recorder()
        scheduler = RefreshScheduler(recorder.collect, recorder.commit)
        for _ in range(5):
            scheduler.request_refresh()

        assert await scheduler.drain() == 1
        assert await scheduler.drain() == 0
        assert recorder.committed == [1]
        assert scheduler.cycles == 1

    @pytest.mark.asyncio
    async def test_request_during_cycle_runs_one_more(self) -> None:
        """Requests made mid-cycle fold into a single follow-up cycle."""
        recorder = Recorder()
        scheduler = RefreshScheduler(recorder.collect, recorder.commit)

        def request_twice() -> None:
            assert scheduler.running is True
            scheduler.request_refresh()
            scheduler.request_refresh()

        recorder.during_collect = request_twice
        scheduler.request_refresh()

        assert await scheduler.drain() == 1
        assert scheduler.pending is True
        assert await scheduler.drain() == 1
        assert await scheduler.drain() == 0
        assert recorder.committed == [1, 2]

    @pytest.mark.asyncio
    async def test_idle_drain(self) -> None:
        """Nothing pending means nothing runs."""
        recorder = Recorder()
        scheduler = RefreshScheduler(recorder.collect, recorder.commit)
        assert await scheduler.drain() == 0
        assert recorder.collected == 0

    @pytest.mark.asyncio
    async def test_run_loop_survives_failed_cycle(self) -> None:
        """A failing cycle is logged and the loop keeps serving requests."""
        recorder = Recorder()
        recorder.fail_next = True
        scheduler = RefreshScheduler(recorder.collect, recorder.commit)
        task = asyncio.create_task(scheduler.run())
        try:
            scheduler.request_refresh()
            await asyncio.sleep(0.01)
            assert recorder.committed == []

            scheduler.request_refresh()
            await asyncio.wait_for(recorder.committed_event.wait(), timeout=1)
            assert recorder.committed == [2]
        finally:
            task.cancel()
            with suppress(asyncio.CancelledError):
                await task
