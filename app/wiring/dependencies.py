from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from datetime import datetime
from zoneinfo import ZoneInfo

from fastapi import Request

from app.application.ports.catalog import CatalogPort
from app.application.ports.responder import ResponderPort
from app.application.ports.session_store import SessionStorePort
from app.application.use_cases.booking import BookingValidator
from app.application.use_cases.catalog_queries import CatalogQueries
from app.application.use_cases.classify_intent import IntentClassifier
from app.application.use_cases.orchestrate_chat import OrchestrateChatUseCase
from app.core.config import Settings, settings as default_settings
from app.infrastructure.catalog.availability import generate_availability
from app.infrastructure.catalog.in_memory_catalog import InMemoryCatalog
from app.infrastructure.llm.mock_responder import MockResponder
from app.infrastructure.llm.openai_responder import OpenAIResponder
from app.infrastructure.llm.tools import CatalogToolbox
from app.infrastructure.store.memory_store import MemorySessionStore

logger = logging.getLogger(__name__)


@dataclass
class Container:
    settings: Settings
    catalog: CatalogPort
    store: SessionStorePort
    validator: BookingValidator
    responder: ResponderPort
    orchestrator: OrchestrateChatUseCase


def build_catalog(settings: Settings) -> CatalogPort:
    tz = ZoneInfo(settings.BUSINESS_TIMEZONE)
    rng = random.Random(settings.AVAILABILITY_SEED) if settings.AVAILABILITY_SEED is not None else None
    availability = generate_availability(
        today=datetime.now(tz).date(),
        days_ahead=settings.AVAILABILITY_DAYS_AHEAD,
        rng=rng,
    )
    return InMemoryCatalog(availability=availability)


def build_responder(settings: Settings, store: SessionStorePort, catalog: CatalogPort) -> ResponderPort:
    choice = settings.CHAT_RESPONDER.lower().strip()
    has_key = bool(settings.OPENAI_API_KEY and settings.OPENAI_API_KEY.strip())

    if choice == "auto":
        choice = "openai" if has_key else "mock"

    if choice == "mock":
        logger.info("Using MockResponder")
        return MockResponder()

    if choice == "openai":
        if not has_key:
            raise ValueError("OPENAI_API_KEY is required when CHAT_RESPONDER=openai.")
        logger.info("Using OpenAIResponder model=%s", settings.OPENAI_MODEL_REPLY)
        return OpenAIResponder(
            store=store,
            catalog=catalog,
            toolbox=CatalogToolbox(CatalogQueries(catalog)),
            model=settings.OPENAI_MODEL_REPLY,
            temperature=settings.OPENAI_TEMPERATURE_REPLY,
            business_name=settings.BUSINESS_NAME,
            timezone=ZoneInfo(settings.BUSINESS_TIMEZONE),
            api_key=settings.OPENAI_API_KEY,
            max_iterations=settings.TOOL_MAX_ITERATIONS,
            max_tokens=settings.OPENAI_MAX_TOKENS_REPLY,
        )

    raise ValueError(f"Unknown CHAT_RESPONDER: {settings.CHAT_RESPONDER!r} (expected auto, mock or openai)")


def build_container(
    settings: Settings | None = None,
    catalog: CatalogPort | None = None,
    responder: ResponderPort | None = None,
) -> Container:
    settings = settings or default_settings
    catalog = catalog or build_catalog(settings)
    store = MemorySessionStore(
        history_limit=settings.SESSION_HISTORY_LIMIT,
        timeout_seconds=settings.SESSION_TIMEOUT_SECONDS,
    )
    validator = BookingValidator(catalog, timezone=ZoneInfo(settings.BUSINESS_TIMEZONE))
    responder = responder or build_responder(settings, store, catalog)
    orchestrator = OrchestrateChatUseCase(
        store=store,
        catalog=catalog,
        classifier=IntentClassifier(),
        validator=validator,
        responder=responder,
    )
    return Container(
        settings=settings,
        catalog=catalog,
        store=store,
        validator=validator,
        responder=responder,
        orchestrator=orchestrator,
    )


def get_container(request: Request) -> Container:
    return request.app.state.container


def get_orchestrator(request: Request) -> OrchestrateChatUseCase:
    return get_container(request).orchestrator


def get_validator(request: Request) -> BookingValidator:
    return get_container(request).validator


def get_session_store(request: Request) -> SessionStorePort:
    return get_container(request).store
