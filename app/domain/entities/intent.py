from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class IntentType(str, Enum):
    QUERY = "QUERY"  # informational, booking state untouched
    BOOK_SLOT = "BOOK_SLOT"  # advances booking state
    CHANGE_MIND = "CHANGE_MIND"  # resets booking state


@dataclass(frozen=True)
class ExtractedSlots:
    service: str | None = None  # raw keyword, e.g. "massagem"
    professional: str | None = None  # raw first name, e.g. "carlos"
    date: str | None = None
    time: str | None = None

    def is_empty(self) -> bool:
        return not any((self.service, self.professional, self.date, self.time))


@dataclass(frozen=True)
class IntentClassification:
    type: IntentType
    confidence: float
    extracted_slots: ExtractedSlots | None = None
