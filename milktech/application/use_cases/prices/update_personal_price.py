from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Any

from milktech.application.interfaces.unit_of_work import UnitOfWork
from milktech.application.use_cases.prices.record_personal_price import (
    get_owned_dairy,
    parse_price,
)
from milktech.domain.models.price_record import PriceRecord
from milktech.domain.services.pricing import effective_datetime, replace_record
from milktech.utils.dates import now_utc

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class UpdatePersonalPriceInput:
    price_per_liter: Any = None
    effective_at: Any = None


async def execute(
    uow: UnitOfWork,
    owner_id: str,
    dairy_id: str,
    price_id: str,
    payload: UpdatePersonalPriceInput,
) -> PriceRecord | None:
    """Edit a personal price; a record already on the target day is replaced."""
    dairy = await get_owned_dairy(uow, owner_id, dairy_id)
    records = await uow.personal_prices.list_for_dairy(dairy.id)
    current = next((r for r in records if r.id == price_id), None)
    if current is None:
        return None
    updated = replace(
        current,
        price_per_liter=(
            parse_price(payload.price_per_liter)
            if payload.price_per_liter is not None
            else current.price_per_liter
        ),
        effective_at=(
            effective_datetime(payload.effective_at, default=current.effective_at)
            if payload.effective_at
            else current.effective_at
        ),
        updated_at=now_utc(),
    )
    history = replace_record(records, updated)
    await uow.personal_prices.save_for_dairy(dairy.id, history)
    await uow.commit()
    if len(history) < len(records):
        logger.info("Price %s replaced the record on %s", updated.id, updated.effective_date)
    return updated
