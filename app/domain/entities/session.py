from __future__ import annotations

from dataclasses import dataclass, field

from app.domain.entities.booking_slots import BookingSlots


@dataclass(frozen=True)
class ConversationEntry:
    role: str  # "user" | "assistant"
    content: str
    timestamp: float


@dataclass
class SessionContext:
    session_id: str
    created_at: float
    last_access: float
    history: list[ConversationEntry] = field(default_factory=list)
    booking: BookingSlots | None = None  # absent until a booking flow starts
