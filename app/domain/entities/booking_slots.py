from __future__ import annotations

from dataclasses import dataclass

SERVICE = "service"
PROFESSIONAL = "professional"
DATE = "date"
TIME = "time"

REQUIRED_SLOTS: tuple[str, ...] = (SERVICE, PROFESSIONAL, DATE, TIME)

# Labels used in user-facing (Portuguese) text
SLOT_LABELS: dict[str, str] = {
    SERVICE: "serviço",
    PROFESSIONAL: "profissional",
    DATE: "data",
    TIME: "horário",
}


@dataclass(frozen=True)
class BookingSlots:
    service: str | None = None  # catalog service id, e.g. "serv-003"
    professional: str | None = None  # catalog professional id, e.g. "prof-001"
    date: str | None = None  # YYYY-MM-DD
    time: str | None = None  # HH:MM
    # Fields explicitly set, in the order they were first set
    collected: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, object]:
        return {
            "service": self.service,
            "professional": self.professional,
            "date": self.date,
            "time": self.time,
            "collected": list(self.collected),
        }
