from __future__ import annotations

from app.domain.entities.catalog import Professional, Service

SERVICES: tuple[Service, ...] = (
    Service(
        id="serv-001",
        name="Corte de Cabelo Masculino",
        description="Corte tradicional ou moderno com acabamento profissional",
        duration=30,
        price=45.00,
        category="Barbearia",
    ),
    Service(
        id="serv-002",
        name="Barba Completa",
        description="Aparo e modelagem de barba com navalha",
        duration=20,
        price=30.00,
        category="Barbearia",
    ),
    Service(
        id="serv-003",
        name="Massagem Relaxante",
        description="Massagem terapêutica para alívio de tensões",
        duration=60,
        price=120.00,
        category="Spa",
    ),
    Service(
        id="serv-004",
        name="Manicure",
        description="Cuidados completos para as unhas das mãos",
        duration=40,
        price=35.00,
        category="Estética",
    ),
    Service(
        id="serv-005",
        name="Pedicure",
        description="Cuidados completos para as unhas dos pés",
        duration=45,
        price=40.00,
        category="Estética",
    ),
    Service(
        id="serv-006",
        name="Limpeza de Pele",
        description="Limpeza profunda com extração e hidratação",
        duration=90,
        price=150.00,
        category="Estética",
    ),
    Service(
        id="serv-007",
        name="Coloração de Cabelo",
        description="Coloração completa ou reflexos",
        duration=120,
        price=200.00,
        category="Cabeleireiro",
    ),
    Service(
        id="serv-008",
        name="Escova Progressiva",
        description="Alisamento com redução de volume",
        duration=180,
        price=350.00,
        category="Cabeleireiro",
    ),
)

PROFESSIONALS: tuple[Professional, ...] = (
    Professional(
        id="prof-001",
        name="Carlos Silva",
        specialty="Barbearia",
        experience="8 anos",
        rating=4.9,
        services_offered=("serv-001", "serv-002"),
        available_days=("segunda", "terça", "quarta", "quinta", "sexta"),
        bio="Especialista em cortes masculinos e barbas. Apaixonado pela profissão.",
    ),
    Professional(
        id="prof-002",
        name="Maria Santos",
        specialty="Estética",
        experience="12 anos",
        rating=5.0,
        services_offered=("serv-004", "serv-005", "serv-006"),
        available_days=("segunda", "terça", "quarta", "quinta", "sexta", "sábado"),
        bio="Esteticista formada com especialização em cuidados faciais.",
    ),
    Professional(
        id="prof-003",
        name="Ana Costa",
        specialty="Spa",
        experience="6 anos",
        rating=4.8,
        services_offered=("serv-003",),
        available_days=("terça", "quinta", "sábado"),
        bio="Massoterapeuta certificada em técnicas de relaxamento.",
    ),
    Professional(
        id="prof-004",
        name="Juliana Oliveira",
        specialty="Cabeleireiro",
        experience="10 anos",
        rating=4.9,
        services_offered=("serv-007", "serv-008"),
        available_days=("segunda", "quarta", "quinta", "sexta", "sábado"),
        bio="Cabeleireira profissional especializada em coloração e tratamentos.",
    ),
    Professional(
        id="prof-005",
        name="Roberto Almeida",
        specialty="Barbearia",
        experience="5 anos",
        rating=4.7,
        services_offered=("serv-001", "serv-002"),
        available_days=("terça", "quarta", "quinta", "sexta", "sábado"),
        bio="Barbeiro moderno com técnicas tradicionais e contemporâneas.",
    ),
)

# Daily time grid per professional; working days come from Professional.available_days
TIME_SLOTS: dict[str, tuple[str, ...]] = {
    "prof-001": ("09:00", "10:00", "11:00", "14:00", "15:00", "16:00"),
    "prof-002": ("10:00", "11:30", "14:00", "15:00", "16:30"),
    "prof-003": ("10:00", "14:00", "16:00"),
    "prof-004": ("09:00", "11:00", "14:00", "16:00"),
    "prof-005": ("09:00", "10:00", "11:00", "14:00", "15:00", "16:00", "17:00"),
}

# date.weekday() -> Portuguese weekday name
WEEKDAY_NAMES: tuple[str, ...] = ("segunda", "terça", "quarta", "quinta", "sexta", "sábado", "domingo")
