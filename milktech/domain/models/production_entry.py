from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from decimal import Decimal
from uuid import uuid4

from milktech.domain.value_objects.dairy_type import DairyType
from milktech.domain.value_objects.shift import Shift


@dataclass(slots=True)
class ProductionEntry:
    id: str
    owner_id: str
    date: date
    shift: Shift
    liters: Decimal
    dairy_type: DairyType | None = None
    dairy_id: str | None = None
    unit_price_at_sale: Decimal | None = None
    notes: str = ""
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        *,
        owner_id: str,
        date: date,
        shift: Shift,
        liters: Decimal,
        dairy_type: DairyType | None = None,
        dairy_id: str | None = None,
        unit_price_at_sale: Decimal | None = None,
        notes: str = "",
    ) -> ProductionEntry:
        now = datetime.now(timezone.utc)
        return cls(
            id=str(uuid4()),
            owner_id=owner_id,
            date=date,
            shift=shift,
            liters=liters,
            dairy_type=dairy_type,
            dairy_id=dairy_id,
            unit_price_at_sale=unit_price_at_sale,
            notes=notes,
            created_at=now,
            updated_at=now,
        )

    @property
    def natural_key(self) -> tuple[str, date, Shift]:
        return (self.owner_id, self.date, self.shift)
