from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from milktech.application.errors import NotFound, ValidationError
from milktech.application.interfaces.unit_of_work import UnitOfWork
from milktech.domain.coercion import to_decimal
from milktech.domain.models.personal_dairy import PersonalDairy
from milktech.domain.models.price_record import PriceRecord
from milktech.domain.services.pricing import effective_datetime, upsert_same_day

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class RecordPersonalPriceInput:
    dairy_id: str
    price_per_liter: Any
    # calendar date or datetime; now when omitted
    effective_at: Any = None


async def get_owned_dairy(uow: UnitOfWork, owner_id: str, dairy_id: str) -> PersonalDairy:
    dairy = await uow.personal_dairies.get(dairy_id)
    if dairy is None or dairy.owner_id != owner_id:
        raise NotFound(f"Dairy {dairy_id} not found")
    return dairy


def parse_price(value: Any) -> Decimal:
    price = to_decimal(value)
    if price is None or price <= 0:
        raise ValidationError(
            "Price per liter must be a positive number", details={"price_per_liter": value}
        )
    return price


async def execute(
    uow: UnitOfWork, owner_id: str, payload: RecordPersonalPriceInput
) -> PriceRecord:
    price = parse_price(payload.price_per_liter)
    dairy = await get_owned_dairy(uow, owner_id, payload.dairy_id)

    records = await uow.personal_prices.list_for_dairy(dairy.id)
    history, record = upsert_same_day(
        records,
        dairy_id=dairy.id,
        price_per_liter=price,
        effective_at=effective_datetime(payload.effective_at),
    )
    await uow.personal_prices.save_for_dairy(dairy.id, history)
    await uow.commit()
    logger.info(
        "Recorded price %s for personal dairy %s on %s", price, dairy.id, record.effective_date
    )
    return record
