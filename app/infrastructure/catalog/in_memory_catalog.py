from __future__ import annotations

from app.application.ports.catalog import CatalogPort
from app.domain.entities.catalog import Professional, Service
from app.infrastructure.catalog.availability import Availability
from app.infrastructure.catalog.catalog_data import PROFESSIONALS, SERVICES


class InMemoryCatalog(CatalogPort):
    def __init__(
        self,
        availability: Availability,
        services: tuple[Service, ...] = SERVICES,
        professionals: tuple[Professional, ...] = PROFESSIONALS,
    ) -> None:
        self._services = services
        self._professionals = professionals
        self._services_by_id = {s.id: s for s in services}
        self._professionals_by_id = {p.id: p for p in professionals}
        self._availability = availability

    def list_services(self, category: str | None = None) -> list[Service]:
        if not category:
            return list(self._services)
        wanted = category.strip().lower()
        return [s for s in self._services if s.category.lower() == wanted]

    def get_service(self, service_id: str) -> Service | None:
        return self._services_by_id.get(service_id)

    def list_professionals(self, specialty: str | None = None, day_of_week: str | None = None) -> list[Professional]:
        professionals = list(self._professionals)
        if specialty:
            wanted = specialty.strip().lower()
            professionals = [p for p in professionals if p.specialty.lower() == wanted]
        if day_of_week:
            day = day_of_week.strip().lower()
            professionals = [p for p in professionals if day in (d.lower() for d in p.available_days)]
        return professionals

    def get_professional(self, professional_id: str) -> Professional | None:
        return self._professionals_by_id.get(professional_id)

    def professionals_offering(self, service_id: str) -> list[Professional]:
        return [p for p in self._professionals if p.offers(service_id)]

    def services_offered_by(self, professional_id: str) -> list[Service]:
        professional = self.get_professional(professional_id)
        if not professional:
            return []
        return [s for s in self._services if professional.offers(s.id)]

    def get_availability(self, professional_id: str, date: str) -> list[str] | None:
        slots = self._availability.get(professional_id, {}).get(date)
        if not slots:
            return None
        return list(slots)

    def available_dates(self, professional_id: str) -> list[str]:
        per_date = self._availability.get(professional_id, {})
        return sorted(d for d, slots in per_date.items() if slots)

    def resolve_professional_name(self, text: str) -> str | None:
        normalized = " ".join(text.lower().split())
        if not normalized:
            return None
        if normalized in self._professionals_by_id:
            return normalized
        # Whole-word match so "ana" does not hit "Juliana"
        for professional in self._professionals:
            name = professional.name.lower()
            if normalized == name or normalized in name.split():
                return professional.id
        return None

    def resolve_service_keyword(self, text: str) -> str | None:
        normalized = " ".join(text.lower().split())
        if not normalized:
            return None
        if normalized in self._services_by_id:
            return normalized
        for service in self._services:
            if normalized in service.name.lower():
                return service.id
        return None
