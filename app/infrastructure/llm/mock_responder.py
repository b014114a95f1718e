from __future__ import annotations

from app.application.ports.responder import ResponderPort


class MockResponder(ResponderPort):
    """Offline responder for dev and tests. Never calls a provider."""

    def __init__(self) -> None:
        self.prompts: list[tuple[str, str]] = []

    async def respond(self, text: str, session_id: str) -> str:
        self.prompts.append((text, session_id))
        first_line = text.strip().splitlines()[0] if text.strip() else ""
        if "AGENDAMENTO COMPLETO" in text:
            return "Perfeito! Posso confirmar o seu agendamento?"
        if "VALIDAÇÃO DE AGENDAMENTO" in text:
            return "Hmm, essa combinação não está disponível. Veja as opções que encontrei."
        if "INFORMAÇÕES PENDENTES" in text:
            return "Certo! Me conta mais alguns detalhes para continuar o agendamento."
        return f"Recebi sua mensagem: {first_line}"
