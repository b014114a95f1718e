from __future__ import annotations

from abc import ABC, abstractmethod

from app.domain.entities.catalog import Professional, Service


class CatalogPort(ABC):
    @abstractmethod
    def list_services(self, category: str | None = None) -> list[Service]:
        """List services in catalog order, optionally filtered by category (case-insensitive)."""
        raise NotImplementedError

    @abstractmethod
    def get_service(self, service_id: str) -> Service | None:
        raise NotImplementedError

    @abstractmethod
    def list_professionals(self, specialty: str | None = None, day_of_week: str | None = None) -> list[Professional]:
        """List professionals in catalog order, optionally filtered by specialty and working weekday."""
        raise NotImplementedError

    @abstractmethod
    def get_professional(self, professional_id: str) -> Professional | None:
        raise NotImplementedError

    @abstractmethod
    def professionals_offering(self, service_id: str) -> list[Professional]:
        """Professionals offering the service, in catalog order."""
        raise NotImplementedError

    @abstractmethod
    def services_offered_by(self, professional_id: str) -> list[Service]:
        """Services the professional offers, in catalog order. Empty if unknown."""
        raise NotImplementedError

    @abstractmethod
    def get_availability(self, professional_id: str, date: str) -> list[str] | None:
        """
        Ordered HH:MM slots for the professional on the ISO date.
        Returns None when the professional has no availability that day.
        """
        raise NotImplementedError

    @abstractmethod
    def available_dates(self, professional_id: str) -> list[str]:
        """ISO dates with at least one free slot, ascending."""
        raise NotImplementedError

    @abstractmethod
    def resolve_professional_name(self, text: str) -> str | None:
        """Map a (partial) professional name to its id, or None."""
        raise NotImplementedError

    @abstractmethod
    def resolve_service_keyword(self, text: str) -> str | None:
        """Map a service keyword (e.g. "massagem") to its id, or None."""
        raise NotImplementedError
