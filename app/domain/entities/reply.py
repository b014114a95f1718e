from dataclasses import dataclass

from app.domain.entities.booking_slots import BookingSlots
from app.domain.entities.intent import IntentType


@dataclass(frozen=True)
class ChatReply:
    text: str
    session_id: str
    intent: IntentType
    confidence: float
    booking: BookingSlots | None = None
