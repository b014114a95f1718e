from __future__ import annotations

import logging
import time
from datetime import datetime, timezone
from typing import Any, Callable

from app.application.ports.session_store import SessionStorePort
from app.application.utils.state_helpers import clear_booking_slots
from app.domain.entities.booking_slots import BookingSlots
from app.domain.entities.session import ConversationEntry, SessionContext

ROLE_LABELS = {"user": "Usuário", "assistant": "Você"}


class MemorySessionStore(SessionStorePort):
    def __init__(
        self,
        history_limit: int = 10,
        timeout_seconds: float = 30 * 60,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._sessions: dict[str, SessionContext] = {}
        self._history_limit = history_limit
        self._timeout_seconds = timeout_seconds
        self._clock = clock
        self._logger = logging.getLogger(__name__)

    def get_or_create(self, session_id: str) -> SessionContext:
        now = self._clock()
        session = self._sessions.get(session_id)
        if session is None:
            session = SessionContext(session_id=session_id, created_at=now, last_access=now)
            self._sessions[session_id] = session
            self._logger.debug("Session created", extra={"session_id": session_id})
        else:
            session.last_access = now
        return session

    def append_message(self, session_id: str, role: str, content: str) -> None:
        session = self.get_or_create(session_id)
        session.history.append(ConversationEntry(role=role, content=content, timestamp=session.last_access))
        if len(session.history) > self._history_limit:
            session.history = session.history[-self._history_limit :]

    def get_history(self, session_id: str) -> list[ConversationEntry]:
        session = self._touch(session_id)
        return list(session.history) if session else []

    def get_formatted_context(self, session_id: str) -> str:
        session = self._touch(session_id)
        if not session or not session.history:
            return ""
        lines = [f"{ROLE_LABELS.get(e.role, e.role)}: {e.content}" for e in session.history]
        return "HISTÓRICO DA CONVERSA:\n" + "\n".join(lines)

    def get_booking(self, session_id: str) -> BookingSlots | None:
        session = self._touch(session_id)
        return session.booking if session else None

    def set_booking(self, session_id: str, slots: BookingSlots) -> None:
        self.get_or_create(session_id).booking = slots

    def clear_booking(self, session_id: str) -> None:
        session = self._touch(session_id)
        if session:
            session.booking = clear_booking_slots()

    def has_active_booking(self, session_id: str) -> bool:
        return self.get_booking(session_id) is not None

    def purge_expired(self, now: float | None = None) -> list[str]:
        if now is None:
            now = self._clock()
        removed: list[str] = []
        # Snapshot: requests may add sessions while we delete
        for session_id, session in list(self._sessions.items()):
            if now - session.last_access >= self._timeout_seconds:
                self._sessions.pop(session_id, None)
                removed.append(session_id)
                self._logger.info("Session expired and removed", extra={"session_id": session_id})
        return removed

    def stats(self) -> dict[str, Any]:
        sessions = list(self._sessions.values())
        return {
            "total_sessions": len(sessions),
            "sessions": [
                {
                    "session_id": s.session_id,
                    "message_count": len(s.history),
                    "has_booking": s.booking is not None,
                    "created_at": _iso(s.created_at),
                    "last_access": _iso(s.last_access),
                }
                for s in sessions
            ],
        }

    def __contains__(self, session_id: str) -> bool:
        return session_id in self._sessions

    def _touch(self, session_id: str) -> SessionContext | None:
        session = self._sessions.get(session_id)
        if session is not None:
            session.last_access = self._clock()
        return session


def _iso(ts: float) -> str:
    return datetime.fromtimestamp(ts, timezone.utc).isoformat()
