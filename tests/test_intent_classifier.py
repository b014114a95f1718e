"""
Tests for the heuristic intent classifier.
"""

from __future__ import annotations

import re

from app.application.use_cases.classify_intent import (
    IntentClassifier,
    IntentPatterns,
    pattern_score,
    should_advance_booking,
    should_clear_booking,
)
from app.domain.entities.intent import IntentClassification, IntentType


def test_booking_request_with_service():
    """'quero agendar um corte' is a booking action carrying the service keyword."""
    result = IntentClassifier().classify("quero agendar um corte")

    assert result.type == IntentType.BOOK_SLOT
    assert result.confidence > 0
    assert result.extracted_slots.service == "corte"


def test_price_question_is_query_with_floor_confidence():
    result = IntentClassifier().classify("quanto custa a massagem?")

    assert result.type == IntentType.QUERY
    assert result.confidence == 0.5
    assert result.extracted_slots is None


def test_cancel_is_change_mind_above_half():
    result = IntentClassifier().classify("cancelar")

    assert result.type == IntentType.CHANGE_MIND
    assert result.confidence > 0.5
    assert should_clear_booking(result)


def test_short_confirmation_needs_active_booking():
    """'sim' only counts as a booking step when a booking is in progress."""
    classifier = IntentClassifier()

    active = classifier.classify("sim", has_active_booking=True)
    idle = classifier.classify("sim", has_active_booking=False)

    assert active.type == IntentType.BOOK_SLOT
    assert active.confidence == 0.7
    assert idle.type == IntentType.QUERY


def test_date_or_time_with_active_booking_extracts_values():
    result = IntentClassifier().classify("pode ser 2025-01-07 às 14:00", has_active_booking=True)

    assert result.type == IntentType.BOOK_SLOT
    assert result.confidence == 0.8
    assert result.extracted_slots.date == "2025-01-07"
    assert result.extracted_slots.time == "14:00"


def test_booking_verb_without_question_mark():
    result = IntentClassifier().classify("Eu gostaria de uma massagem")

    assert result.type == IntentType.BOOK_SLOT
    assert result.confidence == 0.7
    assert result.extracted_slots.service == "massagem"


def test_booking_verb_in_question_stays_query():
    result = IntentClassifier().classify("quero saber o preço?")

    assert result.type == IntentType.QUERY


def test_extract_slots_prefers_longer_professional_name():
    """'juliana' must not be read as 'ana'."""
    slots = IntentClassifier().extract_slots("Quero marcar com a Juliana dia 2025-01-08 às 9:00")

    assert slots.professional == "juliana"
    assert slots.date == "2025-01-08"
    assert slots.time == "9:00"
    assert slots.service is None


def test_extract_slots_empty_message():
    assert IntentClassifier().extract_slots("olá").is_empty()


def test_custom_patterns_change_scores():
    """Scores depend on the size of each pattern group."""
    patterns = IntentPatterns(
        query=(re.compile("info"),),
        booking=(re.compile("book"),),
        change_mind=(re.compile("undo"),),
        date=(re.compile("tomorrow"),),
        time=(re.compile("noon"),),
        short_confirmations=frozenset({"yes"}),
        booking_verbs=re.compile("want"),
    )
    classifier = IntentClassifier(patterns)

    assert classifier.classify("undo").confidence == 1.0
    assert classifier.classify("book it").type == IntentType.BOOK_SLOT
    assert classifier.classify("info please").confidence == 1.0
    assert classifier.classify("yes", has_active_booking=True).type == IntentType.BOOK_SLOT


def test_pattern_score_fraction():
    groups = (re.compile("a"), re.compile("b"), re.compile("c"), re.compile("d"))

    assert pattern_score("ab", groups) == 0.5
    assert pattern_score("xyz", groups) == 0.0
    assert pattern_score("anything", ()) == 0.0


def test_thresholds_are_strict():
    at_threshold = IntentClassification(type=IntentType.BOOK_SLOT, confidence=0.6)
    above = IntentClassification(type=IntentType.BOOK_SLOT, confidence=0.8)
    wrong_type = IntentClassification(type=IntentType.QUERY, confidence=0.9)

    assert not should_advance_booking(at_threshold)
    assert should_advance_booking(above)
    assert not should_advance_booking(wrong_type)
    assert not should_clear_booking(above)


def test_switch_plus_restart_phrase_resets_active_booking():
    """A switch phrase combined with a restart phrase is a change of mind, not a booking step."""
    result = IntentClassifier().classify("quero mudar, deixa pra lá", has_active_booking=True)

    assert result.type == IntentType.CHANGE_MIND
    assert result.confidence > 0.6
    assert should_clear_booking(result)


def test_phrase_group_combinations_score_two_thirds():
    classifier = IntentClassifier()

    for message in ("na verdade, melhor começar de novo", "quero trocar, esqueça", "desistir"):
        result = classifier.classify(message, has_active_booking=True)
        assert result.type == IntentType.CHANGE_MIND, message
        assert round(result.confidence, 2) == 0.67, message


def test_single_switch_phrase_is_not_a_reset():
    result = IntentClassifier().classify("na verdade", has_active_booking=True)

    assert result.type != IntentType.CHANGE_MIND
