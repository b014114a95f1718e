from __future__ import annotations

from dataclasses import asdict
from typing import Any

from app.application.ports.catalog import CatalogPort
from app.domain.entities.catalog import Professional, Service

MAX_NEXT_DATES = 3


class CatalogQueries:
    """
    Read-only catalog lookups exposed to the LLM as callable tools.

    Every method returns a JSON-serialisable dict shaped as
    {"success": bool, "message": str, "data": ...}.
    """

    def __init__(self, catalog: CatalogPort) -> None:
        self._catalog = catalog

    def get_services(self, category: str | None = None) -> dict[str, Any]:
        services = self._catalog.list_services(category)
        if category:
            message = f'Encontrados {len(services)} serviços na categoria "{category}"'
        else:
            message = f"Total de {len(services)} serviços disponíveis"
        return {"success": True, "message": message, "data": [_service(s) for s in services]}

    def get_available_professionals(
        self,
        specialty: str | None = None,
        day_of_week: str | None = None,
    ) -> dict[str, Any]:
        professionals = self._catalog.list_professionals(specialty=specialty, day_of_week=day_of_week)
        return {
            "success": True,
            "message": f"Encontrados {len(professionals)} profissionais",
            "filters": {
                "specialty": specialty or "todas",
                "day_of_week": day_of_week or "todos",
            },
            "data": [_professional(p) for p in professionals],
        }

    def get_professionals_services(self, professional_id: str | None = None) -> dict[str, Any]:
        if professional_id:
            professional = self._catalog.get_professional(professional_id)
            if not professional:
                return {"success": False, "message": f'Profissional com ID "{professional_id}" não encontrado'}
            return {
                "success": True,
                "message": f"Serviços oferecidos por {professional.name}",
                "data": {
                    "professional": _professional(professional),
                    "services": [_service(s) for s in self._catalog.services_offered_by(professional.id)],
                },
            }

        return {
            "success": True,
            "message": "Lista completa de profissionais e seus serviços",
            "data": [
                {
                    "professional": _professional(p),
                    "services": [_service(s) for s in self._catalog.services_offered_by(p.id)],
                }
                for p in self._catalog.list_professionals()
            ],
        }

    def get_specific_professional_services(self, professional_id: str) -> dict[str, Any]:
        professional = self._catalog.get_professional(professional_id)
        if not professional:
            return {
                "success": False,
                "message": f'Profissional com ID "{professional_id}" não encontrado',
                "available_professional_ids": [p.id for p in self._catalog.list_professionals()],
            }

        services = self._catalog.services_offered_by(professional.id)
        total_price = sum(s.price for s in services)
        total_duration = sum(s.duration for s in services)
        categories = list(dict.fromkeys(s.category for s in services))

        return {
            "success": True,
            "message": f"{professional.name} oferece {len(services)} serviços",
            "data": {
                "professional_info": {
                    "id": professional.id,
                    "name": professional.name,
                    "specialty": professional.specialty,
                    "experience": professional.experience,
                    "rating": professional.rating,
                    "bio": professional.bio,
                },
                "services": [_service(s) for s in services],
                "summary": {
                    "total_services": len(services),
                    "total_price": f"R$ {total_price:.2f}",
                    "total_duration": f"{total_duration} minutos",
                    "categories": categories,
                },
            },
        }

    def will_be_available(self, professional_id: str, date: str) -> dict[str, Any]:
        professional = self._catalog.get_professional(professional_id)
        if not professional:
            return {
                "success": False,
                "message": f'Profissional com ID "{professional_id}" não encontrado',
                "available_professional_ids": [p.id for p in self._catalog.list_professionals()],
            }

        slots = self._catalog.get_availability(professional.id, date)
        if not slots:
            next_dates = [d for d in self._catalog.available_dates(professional.id) if d > date][:MAX_NEXT_DATES]
            return {
                "success": False,
                "message": f"{professional.name} não está disponível em {date}",
                "data": {
                    "professional": {
                        "id": professional.id,
                        "name": professional.name,
                        "specialty": professional.specialty,
                    },
                    "requested_date": date,
                    "available": False,
                    "next_available_dates": next_dates or ["Nenhuma data próxima disponível"],
                },
            }

        return {
            "success": True,
            "message": f"{professional.name} está disponível em {date} com {len(slots)} horários",
            "data": {
                "professional": {
                    "id": professional.id,
                    "name": professional.name,
                    "specialty": professional.specialty,
                    "rating": professional.rating,
                },
                "date": date,
                "available": True,
                "time_slots": slots,
                "total_slots": len(slots),
            },
        }

    def get_professionals_by_service(self, service_id: str) -> dict[str, Any]:
        service = self._catalog.get_service(service_id)
        if not service:
            return {
                "success": False,
                "message": f'Serviço com ID "{service_id}" não encontrado',
                "available_service_ids": [s.id for s in self._catalog.list_services()],
            }

        # sorted() is stable: equal ratings keep catalog order
        offering = sorted(self._catalog.professionals_offering(service.id), key=lambda p: p.rating, reverse=True)
        if not offering:
            return {"success": False, "message": f'Nenhum profissional disponível para o serviço "{service.name}"'}

        return {
            "success": True,
            "message": f'{len(offering)} profissionais oferecem "{service.name}"',
            "data": {
                "service": _service(service),
                "professionals": [
                    {
                        "id": p.id,
                        "name": p.name,
                        "specialty": p.specialty,
                        "experience": p.experience,
                        "rating": p.rating,
                        "available_days": list(p.available_days),
                    }
                    for p in offering
                ],
                "total_professionals": len(offering),
                "best_rated": offering[0].name,
            },
        }


def _service(service: Service) -> dict[str, Any]:
    return asdict(service)


def _professional(professional: Professional) -> dict[str, Any]:
    data = asdict(professional)
    data["services_offered"] = list(professional.services_offered)
    data["available_days"] = list(professional.available_days)
    return data
