from __future__ import annotations

from dataclasses import replace

from app.domain.entities.booking_slots import REQUIRED_SLOTS, BookingSlots


def update_booking_slots(slots: BookingSlots, slot_name: str, value: str) -> BookingSlots:
    """Set one slot and mark it collected. Setting a slot twice keeps a single entry."""
    if slot_name not in REQUIRED_SLOTS:
        raise ValueError(f"Unknown booking slot: {slot_name!r}")
    collected = slots.collected if slot_name in slots.collected else slots.collected + (slot_name,)
    return replace(slots, **{slot_name: value}, collected=collected)


def clear_booking_slots() -> BookingSlots:
    """Fresh, empty booking state."""
    return BookingSlots()


def missing_slots(slots: BookingSlots) -> list[str]:
    return [name for name in REQUIRED_SLOTS if name not in slots.collected]


def is_booking_complete(slots: BookingSlots) -> bool:
    return not missing_slots(slots)
