from __future__ import annotations

from app.application.utils.state_helpers import missing_slots
from app.domain.entities.booking_slots import SLOT_LABELS, BookingSlots
from app.domain.entities.validation import ValidationResult


def build_validation_context(
    slots: BookingSlots,
    validation: ValidationResult,
    smart_suggestions: list[str],
    complete: bool,
    display_names: dict[str, str] | None = None,
) -> str:
    """
    Render the instruction block appended to the user's message before it is
    handed to the responder.

    `display_names` maps slot names to human-readable values (e.g. the
    professional's name instead of its id).
    """
    shown = {**slots.to_dict(), **(display_names or {})}
    blocks: list[str] = []
    if not validation.valid:
        blocks += ["VALIDAÇÃO DE AGENDAMENTO:", "Erros encontrados:", _bullets(validation.errors)]
        if validation.suggestions:
            blocks += ["", "Sugestões:", _bullets(validation.suggestions)]
        return "\n".join(blocks)

    if smart_suggestions:
        blocks += ["INFORMAÇÕES DE AGENDAMENTO:", _bullets(smart_suggestions), ""]

    if complete:
        blocks += [
            "AGENDAMENTO COMPLETO!",
            "Todos os dados necessários foram coletados:",
            f"- Serviço: {shown['service']}",
            f"- Profissional: {shown['professional']}",
            f"- Data: {shown['date']}",
            f"- Horário: {shown['time']}",
            "",
            "Confirme com o usuário se está tudo certo e se pode finalizar o agendamento.",
        ]
    else:
        blocks += [
            "INFORMAÇÕES PENDENTES:",
            _bullets(SLOT_LABELS[name] for name in missing_slots(slots)),
            "",
            "Pergunte ao usuário sobre a próxima informação necessária de forma natural.",
        ]
    return "\n".join(blocks)


def enrich_message(message: str, context: str) -> str:
    if not context:
        return message
    return f"{message}\n\n{context}"


def _bullets(items) -> str:
    return "\n".join(f"- {item}" for item in items)
