from __future__ import annotations

import random
from datetime import date, timedelta
from typing import Iterable

from app.domain.entities.catalog import Professional
from app.infrastructure.catalog.catalog_data import PROFESSIONALS, TIME_SLOTS, WEEKDAY_NAMES

Availability = dict[str, dict[str, list[str]]]

MAX_REMOVED_SLOTS_PER_DAY = 2


def weekday_name(day: date) -> str:
    return WEEKDAY_NAMES[day.weekday()]


def generate_availability(
    today: date,
    days_ahead: int = 7,
    professionals: Iterable[Professional] = PROFESSIONALS,
    time_slots: dict[str, tuple[str, ...]] = TIME_SLOTS,
    rng: random.Random | None = None,
) -> Availability:
    """
    Build availability for the rolling window [today, today + days_ahead).

    Only the professional's working days get entries. Between 0 and 2 slots are
    dropped per day to simulate a partially booked agenda; days that end up
    empty are left out.
    """
    rng = rng or random.Random()
    availability: Availability = {}

    for professional in professionals:
        per_date: dict[str, list[str]] = {}
        grid = time_slots.get(professional.id, ())
        for offset in range(days_ahead):
            day = today + timedelta(days=offset)
            if weekday_name(day) not in professional.available_days:
                continue

            slots = list(grid)
            for _ in range(rng.randint(0, MAX_REMOVED_SLOTS_PER_DAY)):
                if not slots:
                    break
                slots.pop(rng.randrange(len(slots)))

            if slots:
                per_date[day.isoformat()] = sorted(slots)
        availability[professional.id] = per_date

    return availability
