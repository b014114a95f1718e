"""
Tests for the periodic session sweep.
"""

from __future__ import annotations

import asyncio

import pytest

from app.infrastructure.store.memory_store import MemorySessionStore
from app.infrastructure.store.sweeper import sweep_expired_sessions

pytestmark = pytest.mark.asyncio

INTERVAL = 0.01
WAIT = INTERVAL * 10


class FlakyStore(MemorySessionStore):
    """Fails the first purge, then behaves normally."""

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self.purge_calls = 0

    def purge_expired(self, now: float | None = None) -> list[str]:
        self.purge_calls += 1
        if self.purge_calls == 1:
            raise RuntimeError("store unavailable")
        return super().purge_expired(now)


async def _stop(task: asyncio.Task) -> None:
    task.cancel()
    with pytest.raises(asyncio.CancelledError):
        await task


async def test_sweep_removes_idle_session(store, clock):
    store.get_or_create("idle")
    clock.advance(30 * 60)

    task = asyncio.create_task(sweep_expired_sessions(store, INTERVAL))
    await asyncio.sleep(WAIT)

    assert "idle" not in store
    await _stop(task)


async def test_sweep_keeps_active_session(store, clock):
    store.get_or_create("active")
    clock.advance(10 * 60)

    task = asyncio.create_task(sweep_expired_sessions(store, INTERVAL))
    await asyncio.sleep(WAIT)

    assert "active" in store
    await _stop(task)


async def test_sweep_survives_store_error(clock):
    store = FlakyStore(timeout_seconds=30 * 60, clock=clock)
    store.get_or_create("idle")
    clock.advance(30 * 60)

    task = asyncio.create_task(sweep_expired_sessions(store, INTERVAL))
    await asyncio.sleep(WAIT)

    assert store.purge_calls >= 2
    assert "idle" not in store
    assert not task.done()
    await _stop(task)


async def test_sweep_stops_on_cancel(store):
    task = asyncio.create_task(sweep_expired_sessions(store, INTERVAL))
    await asyncio.sleep(WAIT)

    await _stop(task)

    assert task.cancelled()
