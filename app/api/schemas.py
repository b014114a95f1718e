from typing import Any

from pydantic import BaseModel, Field, field_validator

from app.domain.entities.booking_slots import REQUIRED_SLOTS, BookingSlots


class ChatRequestSchema(BaseModel):
    message: str = Field(min_length=1)

    @field_validator("message")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("message must not be blank")
        return v


class BookingSchema(BaseModel):
    service: str | None = None
    professional: str | None = None
    date: str | None = Field(default=None, pattern=r"^\d{4}-\d{2}-\d{2}$")
    time: str | None = Field(default=None, pattern=r"^\d{2}:\d{2}$")
    collected: list[str] = Field(default_factory=list)

    @field_validator("collected")
    @classmethod
    def known_slots(cls, v: list[str]) -> list[str]:
        unknown = [name for name in v if name not in REQUIRED_SLOTS]
        if unknown:
            raise ValueError(f"unknown slot names: {unknown}")
        # keep first occurrence, drop duplicates
        return list(dict.fromkeys(v))

    def to_slots(self) -> BookingSlots:
        return BookingSlots(
            service=self.service,
            professional=self.professional,
            date=self.date,
            time=self.time,
            collected=tuple(self.collected),
        )

    @staticmethod
    def from_slots(slots: BookingSlots | None) -> "BookingSchema | None":
        if slots is None:
            return None
        return BookingSchema(
            service=slots.service,
            professional=slots.professional,
            date=slots.date,
            time=slots.time,
            collected=list(slots.collected),
        )


class ChatResponseSchema(BaseModel):
    message: str
    session_id: str
    intent: str
    confidence: float
    booking: BookingSchema | None = None


class ValidationResponseSchema(BaseModel):
    valid: bool
    errors: list[str]
    warnings: list[str]
    suggestions: list[str]
    available_options: dict[str, Any]
    complete: bool
    smart_suggestions: list[str] = Field(default_factory=list)
