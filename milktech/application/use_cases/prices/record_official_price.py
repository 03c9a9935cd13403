from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from milktech.application.errors import NotFound, PermissionDenied, ValidationError
from milktech.application.interfaces.unit_of_work import UnitOfWork
from milktech.domain.coercion import to_decimal
from milktech.domain.models.price_record import PriceRecord
from milktech.domain.services.pricing import OFFICIAL_PRICE_BOUNDS, within_bounds
from milktech.domain.value_objects.user_role import UserRole
from milktech.utils.dates import now_utc

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class RecordOfficialPriceInput:
    dairy_id: str
    price_per_liter: Any
    effective_at: datetime | None = None


def ensure_can_publish(role: UserRole) -> None:
    if not role.can_manage_dairy():
        raise PermissionDenied("Only dairies can publish official prices")


async def execute(
    uow: UnitOfWork, role: UserRole, payload: RecordOfficialPriceInput
) -> PriceRecord:
    ensure_can_publish(role)
    price = to_decimal(payload.price_per_liter)
    low, high = OFFICIAL_PRICE_BOUNDS
    if price is None or not within_bounds(price):
        raise ValidationError(
            f"Price per liter must be between {low} and {high}",
            details={"price_per_liter": payload.price_per_liter},
        )
    dairy = await uow.dairies.get(payload.dairy_id)
    if dairy is None:
        raise NotFound(f"Dairy {payload.dairy_id} not found")

    record = PriceRecord.create(
        dairy_id=dairy.id,
        price_per_liter=price,
        effective_at=payload.effective_at or now_utc(),
    )
    await uow.official_prices.add(record)
    await uow.commit()
    logger.info("Dairy %s published price %s", dairy.id, price)
    return record
