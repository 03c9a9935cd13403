from __future__ import annotations

from enum import Enum


class ReproEventKind(str, Enum):
    INSEMINATION = "ia"
    SERVICE = "cobertura"
    DIAGNOSIS = "diagnostico"
    CALVING = "parto"

    @property
    def is_service(self) -> bool:
        return self in {ReproEventKind.INSEMINATION, ReproEventKind.SERVICE}


class DiagnosisResult(str, Enum):
    POSITIVE = "positivo"
    NEGATIVE = "negativo"


class CalvingResult(str, Enum):
    ALIVE = "vivo"
    DEAD = "morto"


class ReproStatus(str, Enum):
    EMPTY = "empty"
    SERVICED = "serviced"
    PREGNANT = "pregnant"
