from __future__ import annotations

import logging

from app.application.exceptions import MissingSessionError
from app.application.ports.catalog import CatalogPort
from app.application.ports.responder import ResponderPort
from app.application.ports.session_store import SessionStorePort
from app.application.use_cases.booking import BookingValidator
from app.application.use_cases.classify_intent import (
    IntentClassifier,
    should_advance_booking,
    should_clear_booking,
)
from app.application.utils.booking_context import build_validation_context, enrich_message
from app.application.utils.state_helpers import update_booking_slots
from app.domain.entities.booking_slots import DATE, PROFESSIONAL, SERVICE, TIME, BookingSlots
from app.domain.entities.intent import ExtractedSlots, IntentClassification, IntentType
from app.domain.entities.reply import ChatReply

RESET_ACKNOWLEDGEMENT = "Tudo bem! Limpei as informações do agendamento. Em que posso ajudar agora?"


class OrchestrateChatUseCase:
    """
    Per-message state machine.

    QUERY goes straight to the responder, BOOK_SLOT merges extracted slots into
    the session's booking and validates it before the responder is called,
    CHANGE_MIND resets the booking to empty and answers without the responder.
    """

    def __init__(
        self,
        store: SessionStorePort,
        catalog: CatalogPort,
        classifier: IntentClassifier,
        validator: BookingValidator,
        responder: ResponderPort,
    ) -> None:
        self._store = store
        self._catalog = catalog
        self._classifier = classifier
        self._validator = validator
        self._responder = responder
        self._logger = logging.getLogger(__name__)

    async def handle(self, message: str, session_id: str | None) -> ChatReply:
        if not session_id or not session_id.strip():
            raise MissingSessionError("session_id is required to orchestrate a chat message")

        self._store.get_or_create(session_id)
        classification = self._classifier.classify(message, self._store.has_active_booking(session_id))
        self._logger.info(
            "Intent classified",
            extra={
                "session_id": session_id,
                "intent": classification.type.value,
                "confidence": f"{classification.confidence:.2f}",
            },
        )

        if classification.type == IntentType.CHANGE_MIND and should_clear_booking(classification):
            return self._handle_change_mind(message, session_id, classification)
        if classification.type == IntentType.BOOK_SLOT:
            return await self._handle_booking(message, session_id, classification)
        return await self._handle_query(message, session_id, classification)

    async def _handle_query(
        self,
        message: str,
        session_id: str,
        classification: IntentClassification,
    ) -> ChatReply:
        text = await self._respond(message, message, session_id)
        return self._reply(text, session_id, classification)

    async def _handle_booking(
        self,
        message: str,
        session_id: str,
        classification: IntentClassification,
    ) -> ChatReply:
        slots = self._store.get_booking(session_id) or BookingSlots()
        slots = self._merge_extracted(slots, classification.extracted_slots or ExtractedSlots())
        # Booking state is settled before the responder is awaited
        self._store.set_booking(session_id, slots)

        validation = self._validator.validate_booking_state(slots)
        smart_suggestions: list[str] = []
        complete = False
        if validation.valid:
            smart_suggestions = self._validator.generate_smart_suggestions(slots)
            complete = self._validator.is_booking_complete(slots)

        self._logger.info(
            "Booking state validated",
            extra={
                "session_id": session_id,
                "action": "complete" if complete else ("valid" if validation.valid else "invalid"),
                "reason": "; ".join(validation.errors) or None,
                "confidence": f"{classification.confidence:.2f}",
            },
        )
        if not should_advance_booking(classification):
            self._logger.debug("Low-confidence booking message", extra={"session_id": session_id})

        context = build_validation_context(
            slots,
            validation,
            smart_suggestions,
            complete,
            display_names=self._display_names(slots),
        )
        text = await self._respond(message, enrich_message(message, context), session_id)
        return self._reply(text, session_id, classification)

    def _handle_change_mind(
        self,
        message: str,
        session_id: str,
        classification: IntentClassification,
    ) -> ChatReply:
        self._store.clear_booking(session_id)
        self._store.append_message(session_id, "user", message)
        self._store.append_message(session_id, "assistant", RESET_ACKNOWLEDGEMENT)
        self._logger.info("Booking state cleared", extra={"session_id": session_id, "action": "reset"})
        return self._reply(RESET_ACKNOWLEDGEMENT, session_id, classification)

    async def _respond(self, message: str, prompt: str, session_id: str) -> str:
        # The responder sees prior turns only; the current message travels as the prompt
        text = await self._responder.respond(prompt, session_id)
        self._store.append_message(session_id, "user", message)
        self._store.append_message(session_id, "assistant", text)
        return text

    def _merge_extracted(self, slots: BookingSlots, extracted: ExtractedSlots) -> BookingSlots:
        # Free-text names become catalog ids when they resolve; otherwise the raw
        # value is kept so validation reports it as not found.
        if extracted.service:
            service_id = self._catalog.resolve_service_keyword(extracted.service) or extracted.service
            slots = update_booking_slots(slots, SERVICE, service_id)
        if extracted.professional:
            professional_id = (
                self._catalog.resolve_professional_name(extracted.professional) or extracted.professional
            )
            slots = update_booking_slots(slots, PROFESSIONAL, professional_id)
        if extracted.date:
            slots = update_booking_slots(slots, DATE, extracted.date)
        if extracted.time:
            slots = update_booking_slots(slots, TIME, _pad_time(extracted.time))
        return slots

    def _display_names(self, slots: BookingSlots) -> dict[str, str]:
        names: dict[str, str] = {}
        service = self._catalog.get_service(slots.service) if slots.service else None
        if service:
            names[SERVICE] = service.name
        professional = self._catalog.get_professional(slots.professional) if slots.professional else None
        if professional:
            names[PROFESSIONAL] = professional.name
        return names

    def _reply(self, text: str, session_id: str, classification: IntentClassification) -> ChatReply:
        return ChatReply(
            text=text,
            session_id=session_id,
            intent=classification.type,
            confidence=classification.confidence,
            booking=self._store.get_booking(session_id),
        )


def _pad_time(value: str) -> str:
    # "9:00" -> "09:00", matching the catalog's HH:MM slots
    hours, _, minutes = value.partition(":")
    return f"{int(hours):02d}:{minutes}"
