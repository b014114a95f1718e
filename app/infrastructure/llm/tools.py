from __future__ import annotations

import json
import logging
from typing import Any, Callable

from app.application.use_cases.catalog_queries import CatalogQueries

logger = logging.getLogger(__name__)

CATEGORIES = "Barbearia, Spa, Estética, Cabeleireiro"

TOOL_DEFINITIONS: list[dict[str, Any]] = [
    {
        "type": "function",
        "function": {
            "name": "get_services",
            "description": (
                "Lista todos os serviços disponíveis. Pode filtrar por categoria "
                f"({CATEGORIES}). Use quando o usuário perguntar sobre serviços, preços "
                "ou tipos de atendimento."
            ),
            "parameters": {
                "type": "object",
                "properties": {
                    "category": {"type": "string", "description": f"Categoria do serviço (opcional): {CATEGORIES}"},
                },
                "required": [],
            },
        },
    },
    {
        "type": "function",
        "function": {
            "name": "get_available_professionals",
            "description": (
                "Lista profissionais. Pode filtrar por especialidade ou dia da semana. Use quando o "
                "usuário perguntar quem trabalha no estabelecimento ou qual profissional está disponível."
            ),
            "parameters": {
                "type": "object",
                "properties": {
                    "specialty": {"type": "string", "description": f"Especialidade (opcional): {CATEGORIES}"},
                    "day_of_week": {
                        "type": "string",
                        "description": "Dia da semana (opcional): segunda, terça, quarta, quinta, sexta, sábado, domingo",
                    },
                },
                "required": [],
            },
        },
    },
    {
        "type": "function",
        "function": {
            "name": "get_professionals_services",
            "description": "Retorna os profissionais com os serviços que cada um oferece.",
            "parameters": {
                "type": "object",
                "properties": {
                    "professional_id": {"type": "string", "description": "ID do profissional (opcional). Ex: prof-001"},
                },
                "required": [],
            },
        },
    },
    {
        "type": "function",
        "function": {
            "name": "get_specific_professional_services",
            "description": (
                "Retorna detalhes de um profissional e todos os serviços que ele oferece, "
                "incluindo preços e duração."
            ),
            "parameters": {
                "type": "object",
                "properties": {
                    "professional_id": {"type": "string", "description": "ID do profissional. Ex: prof-001"},
                },
                "required": ["professional_id"],
            },
        },
    },
    {
        "type": "function",
        "function": {
            "name": "will_be_available",
            "description": (
                "Verifica se um profissional estará disponível em uma data e retorna os horários livres. "
                "Use quando o usuário perguntar sobre disponibilidade ou quiser marcar um horário."
            ),
            "parameters": {
                "type": "object",
                "properties": {
                    "professional_id": {"type": "string", "description": "ID do profissional. Ex: prof-001"},
                    "date": {"type": "string", "description": "Data no formato YYYY-MM-DD"},
                },
                "required": ["professional_id", "date"],
            },
        },
    },
    {
        "type": "function",
        "function": {
            "name": "get_professionals_by_service",
            "description": (
                "Encontra os profissionais que oferecem um serviço, ordenados por avaliação. Use quando "
                "o usuário quiser saber quem faz determinado serviço."
            ),
            "parameters": {
                "type": "object",
                "properties": {
                    "service_id": {"type": "string", "description": "ID do serviço. Ex: serv-001"},
                },
                "required": ["service_id"],
            },
        },
    },
]


class CatalogToolbox:
    """Dispatches LLM tool calls to CatalogQueries and serialises the result."""

    def __init__(self, queries: CatalogQueries) -> None:
        self._handlers: dict[str, Callable[..., dict[str, Any]]] = {
            "get_services": queries.get_services,
            "get_available_professionals": queries.get_available_professionals,
            "get_professionals_services": queries.get_professionals_services,
            "get_specific_professional_services": queries.get_specific_professional_services,
            "will_be_available": queries.will_be_available,
            "get_professionals_by_service": queries.get_professionals_by_service,
        }

    @property
    def definitions(self) -> list[dict[str, Any]]:
        return TOOL_DEFINITIONS

    def execute(self, name: str, arguments: str | None) -> str:
        handler = self._handlers.get(name)
        if handler is None:
            return json.dumps({"error": f"Ferramenta desconhecida: {name}"}, ensure_ascii=False)
        try:
            kwargs = json.loads(arguments) if arguments else {}
            if not isinstance(kwargs, dict):
                raise TypeError("tool arguments must be a JSON object")
            result = handler(**kwargs)
        except Exception as e:
            logger.warning("Tool execution failed", extra={"action": name, "reason": str(e)})
            return json.dumps({"error": "Erro ao executar ferramenta"}, ensure_ascii=False)
        return json.dumps(result, ensure_ascii=False, indent=2)
