from __future__ import annotations

import logging
import uuid
from typing import Any

from fastapi import APIRouter, Depends, Header, HTTPException

from app.api.schemas import BookingSchema, ChatRequestSchema, ChatResponseSchema, ValidationResponseSchema
from app.application.exceptions import MissingSessionError, ResponderError
from app.application.ports.session_store import SessionStorePort
from app.application.use_cases.booking import BookingValidator
from app.application.use_cases.orchestrate_chat import OrchestrateChatUseCase
from app.wiring.dependencies import get_orchestrator, get_session_store, get_validator

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/chat", response_model=ChatResponseSchema)
async def chat(
    req: ChatRequestSchema,
    x_session_id: str | None = Header(None),
    orchestrator: OrchestrateChatUseCase = Depends(get_orchestrator),
):
    session_id = (x_session_id or "").strip() or str(uuid.uuid4())
    try:
        reply = await orchestrator.handle(req.message, session_id)
    except MissingSessionError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except ResponderError as e:
        logger.exception("Responder failed", extra={"session_id": session_id, "reason": str(e)})
        raise HTTPException(status_code=502, detail="Não foi possível processar sua mensagem")

    return ChatResponseSchema(
        message=reply.text,
        session_id=reply.session_id,
        intent=reply.intent.value,
        confidence=reply.confidence,
        booking=BookingSchema.from_slots(reply.booking),
    )


@router.post("/booking/validate", response_model=ValidationResponseSchema)
def validate_booking(
    req: BookingSchema,
    validator: BookingValidator = Depends(get_validator),
):
    slots = req.to_slots()
    result = validator.validate_booking_state(slots)
    return ValidationResponseSchema(
        valid=result.valid,
        errors=result.errors,
        warnings=result.warnings,
        suggestions=result.suggestions,
        available_options={k: v for k, v in result.to_dict()["available_options"].items() if v is not None},
        complete=validator.is_booking_complete(slots),
        smart_suggestions=validator.generate_smart_suggestions(slots) if result.valid else [],
    )


@router.get("/sessions/stats")
def session_stats(store: SessionStorePort = Depends(get_session_store)) -> dict[str, Any]:
    return store.stats()
