"""
Tests for the per-message chat state machine.
"""

from __future__ import annotations

import pytest

from app.application.exceptions import LLMUpstreamError, MissingSessionError
from app.application.ports.responder import ResponderPort
from app.application.use_cases.classify_intent import IntentClassifier
from app.application.use_cases.orchestrate_chat import RESET_ACKNOWLEDGEMENT, OrchestrateChatUseCase
from app.domain.entities.booking_slots import PROFESSIONAL, SERVICE, BookingSlots
from app.domain.entities.intent import IntentType

pytestmark = pytest.mark.asyncio


class FailingResponder(ResponderPort):
    async def respond(self, text: str, session_id: str) -> str:
        raise LLMUpstreamError("provider down")


async def test_missing_session_id_is_rejected(orchestrator):
    with pytest.raises(MissingSessionError):
        await orchestrator.handle("oi", "")
    with pytest.raises(MissingSessionError):
        await orchestrator.handle("oi", "   ")


async def test_query_goes_straight_to_responder(orchestrator, responder, store):
    reply = await orchestrator.handle("quanto custa a massagem?", "s1")

    assert reply.intent == IntentType.QUERY
    assert reply.booking is None
    assert responder.prompts == [("quanto custa a massagem?", "s1")]
    assert [e.role for e in store.get_history("s1")] == ["user", "assistant"]


async def test_booking_message_resolves_names_to_ids(orchestrator, responder, store):
    reply = await orchestrator.handle("quero agendar um corte com o Carlos", "s1")

    assert reply.intent == IntentType.BOOK_SLOT
    assert reply.booking.service == "serv-001"
    assert reply.booking.professional == "prof-001"
    assert reply.booking.collected == (SERVICE, PROFESSIONAL)
    assert store.get_booking("s1") == reply.booking

    prompt = responder.prompts[-1][0]
    assert prompt.startswith("quero agendar um corte com o Carlos\n\n")
    assert "INFORMAÇÕES PENDENTES:" in prompt
    # History keeps the raw message, not the enriched prompt
    assert store.get_history("s1")[0].content == "quero agendar um corte com o Carlos"


async def test_follow_up_completes_booking(orchestrator, responder):
    await orchestrator.handle("quero agendar um corte com o Carlos", "s1")
    reply = await orchestrator.handle("pode ser 2025-01-07 às 9:00", "s1")

    assert reply.booking.date == "2025-01-07"
    assert reply.booking.time == "09:00"
    assert reply.text == "Perfeito! Posso confirmar o seu agendamento?"

    prompt = responder.prompts[-1][0]
    assert "AGENDAMENTO COMPLETO!" in prompt
    assert "- Profissional: Carlos Silva" in prompt
    assert "- Serviço: Corte de Cabelo Masculino" in prompt


async def test_invalid_pairing_is_reported_to_responder(orchestrator, responder, store):
    reply = await orchestrator.handle("quero agendar uma massagem com o Carlos", "s1")

    assert reply.booking.service == "serv-003"
    prompt = responder.prompts[-1][0]
    assert "VALIDAÇÃO DE AGENDAMENTO:" in prompt
    assert "Profissional Carlos Silva não oferece o serviço Massagem Relaxante" in prompt
    assert "Profissionais disponíveis para Massagem Relaxante: Ana Costa" in prompt
    assert store.has_active_booking("s1")


async def test_change_mind_clears_booking_without_responder(orchestrator, responder, store):
    await orchestrator.handle("quero agendar um corte com o Carlos", "s1")
    calls = len(responder.prompts)

    reply = await orchestrator.handle("cancelar", "s1")

    assert reply.intent == IntentType.CHANGE_MIND
    assert reply.text == RESET_ACKNOWLEDGEMENT
    assert reply.booking == BookingSlots()
    assert reply.booking.collected == ()
    assert store.has_active_booking("s1")
    assert store.get_booking("s1").service is None
    assert len(responder.prompts) == calls
    assert store.get_history("s1")[-1].content == RESET_ACKNOWLEDGEMENT


async def test_sessions_are_isolated(orchestrator, store):
    await orchestrator.handle("quero agendar um corte com o Carlos", "a")
    await orchestrator.handle("quanto custa a massagem?", "b")

    assert store.has_active_booking("a")
    assert not store.has_active_booking("b")


async def test_responder_error_propagates_after_booking_saved(store, catalog, validator):
    orchestrator = OrchestrateChatUseCase(
        store=store,
        catalog=catalog,
        classifier=IntentClassifier(),
        validator=validator,
        responder=FailingResponder(),
    )

    with pytest.raises(LLMUpstreamError):
        await orchestrator.handle("quero agendar um corte com o Carlos", "s1")

    assert store.get_booking("s1").service == "serv-001"


class TranscriptRecordingResponder(ResponderPort):
    """Captures the session transcript as it stands when the responder is called."""

    def __init__(self, store) -> None:
        self._store = store
        self.transcripts: list[str] = []

    async def respond(self, text: str, session_id: str) -> str:
        self.transcripts.append(self._store.get_formatted_context(session_id))
        return "Certo!"


async def test_responder_history_excludes_current_message(store, catalog, validator):
    responder = TranscriptRecordingResponder(store)
    orchestrator = OrchestrateChatUseCase(
        store=store,
        catalog=catalog,
        classifier=IntentClassifier(),
        validator=validator,
        responder=responder,
    )

    await orchestrator.handle("quais serviços vocês têm?", "s1")
    await orchestrator.handle("quanto custa a massagem?", "s1")

    assert responder.transcripts[0] == ""
    assert "quais serviços vocês têm?" in responder.transcripts[1]
    assert "quanto custa a massagem?" not in responder.transcripts[1]
    assert [e.content for e in store.get_history("s1")][-2:] == ["quanto custa a massagem?", "Certo!"]


async def test_failed_reply_leaves_history_untouched(store, catalog, validator):
    orchestrator = OrchestrateChatUseCase(
        store=store,
        catalog=catalog,
        classifier=IntentClassifier(),
        validator=validator,
        responder=FailingResponder(),
    )

    with pytest.raises(LLMUpstreamError):
        await orchestrator.handle("oi", "s1")

    assert store.get_history("s1") == []
