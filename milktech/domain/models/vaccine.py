from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from uuid import uuid4


@dataclass(slots=True)
class Vaccine:
    id: str
    animal_id: str
    name: str
    applied_at: date | None = None
    next_due_at: date | None = None
    notes: str = ""
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        animal_id: str,
        name: str,
        applied_at: date | None = None,
        next_due_at: date | None = None,
        notes: str = "",
    ) -> Vaccine:
        now = datetime.now(timezone.utc)
        return cls(
            id=str(uuid4()),
            animal_id=animal_id,
            name=name,
            applied_at=applied_at,
            next_due_at=next_due_at,
            notes=notes,
            created_at=now,
            updated_at=now,
        )
