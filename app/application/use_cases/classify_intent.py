from __future__ import annotations

import re
from dataclasses import dataclass

from app.domain.entities.intent import ExtractedSlots, IntentClassification, IntentType


def _compile(*patterns: str) -> tuple[re.Pattern[str], ...]:
    return tuple(re.compile(p, re.IGNORECASE) for p in patterns)


@dataclass(frozen=True)
class IntentPatterns:
    """
    Pattern sets driving IntentClassifier.

    Each group is scored as (patterns matched) / (patterns in group), so the
    number of entries in a group matters as much as their content.
    """

    query: tuple[re.Pattern[str], ...]
    booking: tuple[re.Pattern[str], ...]
    change_mind: tuple[re.Pattern[str], ...]
    date: tuple[re.Pattern[str], ...]
    time: tuple[re.Pattern[str], ...]
    short_confirmations: frozenset[str]
    booking_verbs: re.Pattern[str]
    professional_names: tuple[str, ...] = ()
    service_keywords: tuple[str, ...] = ()
    date_value: re.Pattern[str] = re.compile(r"\d{4}-\d{2}-\d{2}")
    time_value: re.Pattern[str] = re.compile(r"\d{1,2}:\d{2}")


DEFAULT_PATTERNS = IntentPatterns(
    query=_compile(
        r"que serviços|quais serviços|o que vocês fazem|preço|quanto custa|valor",
        r"quem trabalha|quem atende|quais profissionais|quem faz",
        r"está disponível|tem horário|trabalha em|atende em",
        r"o que é|como funciona|pode me explicar|me fale sobre",
    ),
    booking=_compile(
        r"quero agendar|gostaria de agendar|queria marcar|quero marcar",
        r"prefiro|escolho|quero com|com o|com a",
        r"esse horário|esse dia|confirmo|pode ser|tá bom",
        r"vou de|escolho o|pode marcar",
    ),
    change_mind=_compile(
        r"cancelar|desistir|não quero mais",
        r"mudar|trocar|alterar|na verdade|melhor não",
        r"começar de novo|recomeçar|esqueça|deixa pra lá|\b(cancel\w*|desist\w*)\b",
    ),
    date=_compile(
        r"hoje|amanhã|depois de amanhã",
        r"segunda|terça|quarta|quinta|sexta|sábado|domingo",
        r"\d{1,2}/\d{1,2}|\d{4}-\d{2}-\d{2}",
    ),
    time=_compile(
        r"\d{1,2}h\d{0,2}|\d{1,2}:\d{2}",
        r"manhã|tarde|noite",
    ),
    short_confirmations=frozenset(
        {"sim", "não", "ok", "tá", "pode ser", "confirmo", "esse mesmo", "esse", "este"}
    ),
    booking_verbs=re.compile(r"quero|gostaria|prefiro"),
    # Not roster order on purpose: first substring hit wins, so "juliana"
    # must be tried before "ana"
    professional_names=("carlos", "maria", "juliana", "ana", "roberto"),
    service_keywords=(
        "corte",
        "barba",
        "massagem",
        "manicure",
        "pedicure",
        "limpeza de pele",
        "coloração",
        "escova",
    ),
)

ADVANCE_THRESHOLD = 0.6
CLEAR_THRESHOLD = 0.6


class IntentClassifier:
    """Heuristic classifier telling informational questions apart from booking actions."""

    def __init__(self, patterns: IntentPatterns = DEFAULT_PATTERNS) -> None:
        self._patterns = patterns

    def classify(self, message: str, has_active_booking: bool = False) -> IntentClassification:
        normalized = message.lower().strip()
        p = self._patterns

        change_mind_score = pattern_score(normalized, p.change_mind)
        if change_mind_score > 0.5:
            return IntentClassification(type=IntentType.CHANGE_MIND, confidence=change_mind_score)

        booking_score = pattern_score(normalized, p.booking)
        query_score = pattern_score(normalized, p.query)

        if has_active_booking:
            mentions_date = any(rx.search(normalized) for rx in p.date)
            mentions_time = any(rx.search(normalized) for rx in p.time)
            if mentions_date or mentions_time:
                return IntentClassification(
                    type=IntentType.BOOK_SLOT,
                    confidence=0.8,
                    extracted_slots=self.extract_slots(message),
                )
            if normalized in p.short_confirmations:
                return IntentClassification(type=IntentType.BOOK_SLOT, confidence=0.7)

        if booking_score > query_score:
            return IntentClassification(
                type=IntentType.BOOK_SLOT,
                confidence=booking_score,
                extracted_slots=self.extract_slots(message),
            )

        if p.booking_verbs.search(normalized) and not normalized.endswith("?"):
            return IntentClassification(
                type=IntentType.BOOK_SLOT,
                confidence=0.7,
                extracted_slots=self.extract_slots(message),
            )

        return IntentClassification(type=IntentType.QUERY, confidence=max(query_score, 0.5))

    def extract_slots(self, message: str) -> ExtractedSlots:
        """Pull raw slot values out of free text. Missing values stay None."""
        p = self._patterns
        lowered = message.lower()

        date_match = p.date_value.search(message)
        time_match = p.time_value.search(message)
        professional = next((name for name in p.professional_names if name in lowered), None)
        service = next((kw for kw in p.service_keywords if kw in lowered), None)

        return ExtractedSlots(
            service=service,
            professional=professional,
            date=date_match.group(0) if date_match else None,
            time=time_match.group(0) if time_match else None,
        )


def pattern_score(text: str, patterns: tuple[re.Pattern[str], ...]) -> float:
    if not patterns:
        return 0.0
    matches = sum(1 for rx in patterns if rx.search(text))
    return matches / len(patterns)


def should_advance_booking(classification: IntentClassification) -> bool:
    return classification.type == IntentType.BOOK_SLOT and classification.confidence > ADVANCE_THRESHOLD


def should_clear_booking(classification: IntentClassification) -> bool:
    return classification.type == IntentType.CHANGE_MIND and classification.confidence > CLEAR_THRESHOLD
