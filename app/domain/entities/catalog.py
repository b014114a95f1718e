from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Service:
    id: str
    name: str
    description: str
    duration: int  # minutes
    price: float  # BRL
    category: str  # "Barbearia", "Spa", "Estética", "Cabeleireiro"


@dataclass(frozen=True)
class Professional:
    id: str
    name: str
    specialty: str
    experience: str
    rating: float  # 0.0 - 5.0
    services_offered: tuple[str, ...] = ()
    available_days: tuple[str, ...] = ()  # Portuguese weekday names, e.g. "segunda"
    bio: str = ""

    @property
    def first_name(self) -> str:
        return self.name.split(" ", 1)[0]

    def offers(self, service_id: str) -> bool:
        return service_id in self.services_offered
