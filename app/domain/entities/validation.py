from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any


@dataclass
class AvailableOptions:
    professionals: list[dict[str, Any]] | None = None  # id, name, specialty, rating
    services: list[dict[str, Any]] | None = None  # id, name, price, duration
    dates: list[str] | None = None
    times: list[str] | None = None

    def is_empty(self) -> bool:
        return all(v is None for v in (self.professionals, self.services, self.dates, self.times))


@dataclass
class ValidationResult:
    valid: bool = True
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    suggestions: list[str] = field(default_factory=list)
    available_options: AvailableOptions = field(default_factory=AvailableOptions)

    def invalidate(self, error: str, suggestion: str | None = None) -> "ValidationResult":
        self.valid = False
        self.errors.append(error)
        if suggestion:
            self.suggestions.append(suggestion)
        return self

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
