from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from app.domain.entities.booking_slots import BookingSlots
from app.domain.entities.session import SessionContext


class SessionStorePort(ABC):
    @abstractmethod
    def get_or_create(self, session_id: str) -> SessionContext:
        """Return the session, creating it on first reference. Refreshes last access."""
        raise NotImplementedError

    @abstractmethod
    def append_message(self, session_id: str, role: str, content: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def get_formatted_context(self, session_id: str) -> str:
        """Role-prefixed transcript of the session history, or "" when there is none."""
        raise NotImplementedError

    @abstractmethod
    def get_booking(self, session_id: str) -> BookingSlots | None:
        raise NotImplementedError

    @abstractmethod
    def set_booking(self, session_id: str, slots: BookingSlots) -> None:
        raise NotImplementedError

    @abstractmethod
    def clear_booking(self, session_id: str) -> None:
        """Reset the booking to an empty state. The booking itself lives until the session expires."""
        raise NotImplementedError

    @abstractmethod
    def has_active_booking(self, session_id: str) -> bool:
        """True when a booking state exists for the session, complete or not."""
        raise NotImplementedError

    @abstractmethod
    def purge_expired(self, now: float | None = None) -> list[str]:
        """Drop sessions idle longer than the timeout. Returns removed ids."""
        raise NotImplementedError

    @abstractmethod
    def stats(self) -> dict[str, Any]:
        raise NotImplementedError
