from __future__ import annotations

from datetime import date, datetime
from zoneinfo import ZoneInfo

from app.application.ports.catalog import CatalogPort
from app.application.utils.state_helpers import is_booking_complete, missing_slots
from app.domain.entities.booking_slots import SLOT_LABELS, BookingSlots
from app.domain.entities.validation import ValidationResult

MAX_SUGGESTED_DATES = 3
MAX_SUGGESTED_SERVICES = 3


class BookingValidator:
    """
    Business rules for a booking in progress.

    Cross-checks service <-> professional <-> date <-> time against the catalog.
    Problems are reported in the returned ValidationResult, never raised.
    """

    def __init__(self, catalog: CatalogPort, timezone: ZoneInfo | None = None) -> None:
        self._catalog = catalog
        self._timezone = timezone or ZoneInfo("UTC")

    def validate_booking_state(self, slots: BookingSlots) -> ValidationResult:
        result = ValidationResult()
        options = result.available_options

        # Either field may arrive first, so the service/professional pairing is
        # checked from both sides.
        if slots.service:
            service = self._catalog.get_service(slots.service)
            if not service:
                return result.invalidate(f"Serviço {slots.service} não encontrado")

            offering = self._catalog.professionals_offering(service.id)
            options.professionals = [
                {"id": p.id, "name": p.name, "specialty": p.specialty, "rating": p.rating}
                for p in offering
            ]

            if slots.professional and all(p.id != slots.professional for p in offering):
                return result.invalidate(
                    f"Profissional {self._professional_label(slots.professional)} "
                    f"não oferece o serviço {service.name}",
                    f"Profissionais disponíveis para {service.name}: {_join(p.name for p in offering)}",
                )

        if slots.professional:
            professional = self._catalog.get_professional(slots.professional)
            if not professional:
                return result.invalidate(f"Profissional {slots.professional} não encontrado")

            offered = self._catalog.services_offered_by(professional.id)
            options.services = [
                {"id": s.id, "name": s.name, "price": s.price, "duration": s.duration}
                for s in offered
            ]
            options.dates = self._catalog.available_dates(professional.id)

            if slots.service and not professional.offers(slots.service):
                service = self._catalog.get_service(slots.service)
                service_name = service.name if service else slots.service
                return result.invalidate(
                    f"Profissional {professional.name} não oferece o serviço {service_name}",
                    f"Serviços oferecidos por {professional.name}: {_join(s.name for s in offered)}",
                )

        if slots.date and slots.professional:
            times = self._catalog.get_availability(slots.professional, slots.date)
            if not times:
                next_dates = [
                    d for d in self._catalog.available_dates(slots.professional) if d > slots.date
                ][:MAX_SUGGESTED_DATES]
                suggestion = f"Próximas datas disponíveis: {_join(next_dates)}" if next_dates else None
                return result.invalidate(
                    f"Profissional não está disponível na data {slots.date}",
                    suggestion,
                )

            options.times = times
            if slots.time and slots.time not in times:
                return result.invalidate(
                    f"Horário {slots.time} não está disponível",
                    f"Horários disponíveis: {_join(times)}",
                )

        missing = missing_slots(slots)
        if missing:
            result.warnings.append(f"Informações pendentes: {_join(SLOT_LABELS[m] for m in missing)}")

        return result

    def generate_smart_suggestions(self, slots: BookingSlots, today: date | None = None) -> list[str]:
        suggestions: list[str] = []
        today_iso = (today or datetime.now(self._timezone).date()).isoformat()

        if slots.professional and not slots.service:
            professional = self._catalog.get_professional(slots.professional)
            if professional:
                top = self._catalog.services_offered_by(professional.id)[:MAX_SUGGESTED_SERVICES]
                suggestions.append(
                    f"Serviços mais procurados de {professional.name}: {_join(s.name for s in top)}"
                )

        if slots.service and not slots.professional:
            offering = self._catalog.professionals_offering(slots.service)
            if offering:
                # max() keeps the first of equally rated professionals
                best = max(offering, key=lambda p: p.rating)
                suggestions.append(f"Recomendamos {best.name} (avaliação {best.rating}) para este serviço")

        if slots.professional and slots.service and not slots.date:
            upcoming = [
                d for d in self._catalog.available_dates(slots.professional) if d >= today_iso
            ][:MAX_SUGGESTED_DATES]
            if upcoming:
                suggestions.append(f"Próximas datas disponíveis: {_join(upcoming)}")

        return suggestions

    def is_booking_complete(self, slots: BookingSlots) -> bool:
        return is_booking_complete(slots)

    def _professional_label(self, professional_id: str) -> str:
        professional = self._catalog.get_professional(professional_id)
        return professional.name if professional else professional_id


def _join(items) -> str:
    return ", ".join(items)
