from __future__ import annotations

from datetime import date, timedelta

import pytest

from app.application.use_cases.booking import BookingValidator
from app.application.use_cases.classify_intent import IntentClassifier
from app.application.use_cases.orchestrate_chat import OrchestrateChatUseCase
from app.infrastructure.catalog.availability import Availability, weekday_name
from app.infrastructure.catalog.catalog_data import PROFESSIONALS, TIME_SLOTS
from app.infrastructure.catalog.in_memory_catalog import InMemoryCatalog
from app.infrastructure.llm.mock_responder import MockResponder
from app.infrastructure.store.memory_store import MemorySessionStore

# Monday
TODAY = date(2025, 1, 6)


class FakeClock:
    def __init__(self, start: float = 1_700_000_000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def full_availability(today: date = TODAY, days_ahead: int = 7) -> Availability:
    """Every working day in the window with the professional's whole time grid free."""
    availability: Availability = {}
    for professional in PROFESSIONALS:
        per_date = {}
        for offset in range(days_ahead):
            day = today + timedelta(days=offset)
            if weekday_name(day) in professional.available_days:
                per_date[day.isoformat()] = list(TIME_SLOTS[professional.id])
        availability[professional.id] = per_date
    return availability


@pytest.fixture
def catalog() -> InMemoryCatalog:
    return InMemoryCatalog(availability=full_availability())


@pytest.fixture
def validator(catalog) -> BookingValidator:
    return BookingValidator(catalog)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def store(clock) -> MemorySessionStore:
    return MemorySessionStore(history_limit=10, timeout_seconds=30 * 60, clock=clock)


@pytest.fixture
def responder() -> MockResponder:
    return MockResponder()


@pytest.fixture
def orchestrator(store, catalog, validator, responder) -> OrchestrateChatUseCase:
    return OrchestrateChatUseCase(
        store=store,
        catalog=catalog,
        classifier=IntentClassifier(),
        validator=validator,
        responder=responder,
    )


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def make_catalog():
    """Catalog over the full test availability with a custom roster."""

    def _make(professionals=PROFESSIONALS) -> InMemoryCatalog:
        return InMemoryCatalog(availability=full_availability(), professionals=professionals)

    return _make
