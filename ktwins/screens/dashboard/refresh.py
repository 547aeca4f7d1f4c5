"""Refresh scheduler - coalesced, serialized collect-and-commit cycles."""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Awaitable, Callable
from contextlib import suppress
from typing import Generic, TypeVar

logger = logging.getLogger(__name__)

SnapshotT = TypeVar("SnapshotT")


class RefreshScheduler(Generic[SnapshotT]):
    """Runs at most one refresh at a time and folds pending requests into one.

    ``collect`` gathers a complete snapshot off the UI; ``commit`` applies it
    on the UI loop in one step. Requests made while a cycle is running fill
    the single pending slot, so exactly one more cycle follows.
    """

    def __init__(
        self,
        collect: Callable[[], Awaitable[SnapshotT]],
        commit: Callable[[SnapshotT], None],
    ) -> None:
        self._collect = collect
        self._commit = commit
        self._pending: asyncio.Queue[None] = asyncio.Queue(maxsize=1)
        self._lock = asyncio.Lock()
        self.cycles = 0

    @property
    def pending(self) -> bool:
        """True when a refresh request is waiting."""
        return not self._pending.empty()

    @property
    def running(self) -> bool:
        return self._lock.locked()

    def request_refresh(self) -> None:
        """Ask for a refresh; never blocks, extra requests coalesce."""
        with suppress(asyncio.QueueFull):
            self._pending.put_nowait(None)

    async def run_cycle(self) -> None:
        """Collect one snapshot and commit it."""
        async with self._lock:
            started = time.monotonic()
            snapshot = await self._collect()
            self._commit(snapshot)
            self.cycles += 1
            logger.debug(
                "Refresh cycle %d committed in %.0fms",
                self.cycles,
                (time.monotonic() - started) * 1000,
            )

    async def run(self) -> None:
        """Worker loop: wait for a request, run a cycle, repeat."""
        while True:
            await self._pending.get()
            try:
                await self.run_cycle()
            except Exception:
                logger.exception("Refresh cycle failed")

    async def drain(self) -> int:
        """Run one cycle if a request is pending.

        Returns:
            The number of cycles run (0 or 1).
        """
        try:
            self._pending.get_nowait()
        except asyncio.QueueEmpty:
            return 0
        await self.run_cycle()
        return 1
