from __future__ import annotations

import asyncio
import logging

from app.application.ports.session_store import SessionStorePort

logger = logging.getLogger(__name__)


async def sweep_expired_sessions(store: SessionStorePort, interval_seconds: float) -> None:
    """Purge idle sessions every `interval_seconds` until cancelled."""
    while True:
        await asyncio.sleep(interval_seconds)
        try:
            removed = store.purge_expired()
        except Exception:
            logger.exception("Session sweep failed")
            continue
        if removed:
            logger.info("Session sweep finished", extra={"action": "sweep", "reason": f"removed={len(removed)}"})
