"""
Tests for the catalog queries exposed to the model and the tool dispatcher.
"""

from __future__ import annotations

import json

import pytest

from app.application.use_cases.catalog_queries import CatalogQueries
from app.infrastructure.llm.tools import TOOL_DEFINITIONS, CatalogToolbox


@pytest.fixture
def queries(catalog) -> CatalogQueries:
    return CatalogQueries(catalog)


def test_get_services_by_category(queries):
    result = queries.get_services("Estética")

    assert result["success"] is True
    assert result["message"] == 'Encontrados 3 serviços na categoria "Estética"'
    assert [s["id"] for s in result["data"]] == ["serv-004", "serv-005", "serv-006"]


def test_available_professionals_echo_filters(queries):
    result = queries.get_available_professionals(day_of_week="domingo")

    assert result["data"] == []
    assert result["filters"] == {"specialty": "todas", "day_of_week": "domingo"}


def test_professionals_services_unknown_id(queries):
    result = queries.get_professionals_services("prof-999")

    assert result["success"] is False


def test_specific_professional_summary(queries):
    result = queries.get_specific_professional_services("prof-002")

    summary = result["data"]["summary"]
    assert summary["total_services"] == 3
    assert summary["total_price"] == "R$ 225.00"
    assert summary["total_duration"] == "175 minutos"
    assert summary["categories"] == ["Estética"]


def test_will_be_available_on_working_day(queries):
    result = queries.will_be_available("prof-001", "2025-01-07")

    assert result["success"] is True
    assert result["data"]["total_slots"] == 6


def test_will_be_available_suggests_next_dates(queries):
    result = queries.will_be_available("prof-003", "2025-01-06")

    assert result["success"] is False
    assert result["data"]["next_available_dates"] == ["2025-01-07", "2025-01-09", "2025-01-11"]


def test_will_be_available_with_no_later_dates(queries):
    result = queries.will_be_available("prof-001", "2025-01-11")

    assert result["data"]["next_available_dates"] == ["Nenhuma data próxima disponível"]


def test_professionals_by_service_sorted_by_rating(queries):
    result = queries.get_professionals_by_service("serv-001")

    assert [p["id"] for p in result["data"]["professionals"]] == ["prof-001", "prof-005"]
    assert result["data"]["best_rated"] == "Carlos Silva"


def test_professionals_by_unknown_service(queries):
    result = queries.get_professionals_by_service("serv-999")

    assert result["success"] is False
    assert len(result["available_service_ids"]) == 8


def test_tool_definitions_match_handlers(queries):
    toolbox = CatalogToolbox(queries)

    names = [tool["function"]["name"] for tool in toolbox.definitions]
    assert names == [tool["function"]["name"] for tool in TOOL_DEFINITIONS]
    for name in names:
        assert "error" not in json.loads(toolbox.execute(name, json.dumps(_sample_args(name))))


def test_execute_returns_json_result(queries):
    payload = json.loads(CatalogToolbox(queries).execute("get_services", '{"category": "Spa"}'))

    assert payload["data"][0]["name"] == "Massagem Relaxante"


def test_execute_unknown_tool(queries):
    payload = json.loads(CatalogToolbox(queries).execute("book_now", "{}"))

    assert payload == {"error": "Ferramenta desconhecida: book_now"}


def test_execute_bad_arguments(queries):
    toolbox = CatalogToolbox(queries)

    assert json.loads(toolbox.execute("will_be_available", "not json")) == {"error": "Erro ao executar ferramenta"}
    assert json.loads(toolbox.execute("will_be_available", '{"date": "2025-01-07"}')) == {
        "error": "Erro ao executar ferramenta"
    }


def _sample_args(name: str) -> dict:
    return {
        "get_services": {},
        "get_available_professionals": {"specialty": "Spa"},
        "get_professionals_services": {},
        "get_specific_professional_services": {"professional_id": "prof-001"},
        "will_be_available": {"professional_id": "prof-001", "date": "2025-01-07"},
        "get_professionals_by_service": {"service_id": "serv-003"},
    }[name]
