"""Application-level DTOs for cwver workflows."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from cwver.domain.models import CwVersion
from cwver.infrastructure.parsing.tokens import Token


@dataclass(slots=True, frozen=True)
class ConversionResult:
    source: Token
    counterpart: CwVersion | date

    def render_counterpart(self) -> str:
        if isinstance(self.counterpart, CwVersion):
            return self.counterpart.format()
        return self.counterpart.isoformat()
