from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from decimal import Decimal
from uuid import uuid4

from milktech.domain.value_objects.movement_type import MovementType


@dataclass(slots=True)
class Movement:
    id: str
    animal_id: str
    type: MovementType
    date: date
    # purchase/sale value; empty for deaths and transfers
    amount: Decimal | None = None
    notes: str = ""
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        animal_id: str,
        type: MovementType,
        date: date,
        amount: Decimal | None = None,
        notes: str = "",
    ) -> Movement:
        now = datetime.now(timezone.utc)
        return cls(
            id=str(uuid4()),
            animal_id=animal_id,
            type=type,
            date=date,
            amount=amount,
            notes=notes,
            created_at=now,
            updated_at=now,
        )
