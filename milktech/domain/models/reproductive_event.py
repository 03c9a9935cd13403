from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from uuid import uuid4

from milktech.domain.value_objects.reproduction import DiagnosisResult, ReproEventKind


@dataclass(slots=True)
class ReproductiveEvent:
    id: str
    animal_id: str
    kind: ReproEventKind
    date: date
    # diagnosis: positivo/negativo; calving: vivo/morto
    result: str = ""
    calf_sex: str = ""  # calving: 'M' | 'F' | ''
    notes: str = ""
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        animal_id: str,
        kind: ReproEventKind,
        date: date,
        result: str = "",
        calf_sex: str = "",
        notes: str = "",
    ) -> ReproductiveEvent:
        now = datetime.now(timezone.utc)
        return cls(
            id=str(uuid4()),
            animal_id=animal_id,
            kind=kind,
            date=date,
            result=result,
            calf_sex=calf_sex,
            notes=notes,
            created_at=now,
            updated_at=now,
        )

    @property
    def is_service(self) -> bool:
        return self.kind.is_service

    @property
    def is_positive_diagnosis(self) -> bool:
        return (
            self.kind is ReproEventKind.DIAGNOSIS
            and self.result.strip().lower() == DiagnosisResult.POSITIVE.value
        )
