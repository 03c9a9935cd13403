from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from decimal import Decimal
from uuid import uuid4

from milktech.utils.dates import local_date, to_utc


@dataclass(slots=True)
class PriceRecord:
    id: str
    dairy_id: str
    price_per_liter: Decimal
    effective_at: datetime
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        *,
        dairy_id: str,
        price_per_liter: Decimal,
        effective_at: datetime,
    ) -> PriceRecord:
        now = datetime.now(timezone.utc)
        return cls(
            id=str(uuid4()),
            dairy_id=dairy_id,
            price_per_liter=price_per_liter,
            effective_at=to_utc(effective_at),
            created_at=now,
            updated_at=now,
        )

    @property
    def effective_date(self) -> date:
        return local_date(self.effective_at)
