from __future__ import annotations

from datetime import date
from decimal import Decimal

from milktech.application.interfaces.unit_of_work import UnitOfWork
from milktech.domain.services.pricing import resolve_price
from milktech.domain.value_objects.dairy_type import DairyType


async def execute(
    uow: UnitOfWork,
    dairy_id: str,
    on: date,
    dairy_type: DairyType | None = None,
) -> Decimal | None:
    records = await uow.price_history(dairy_type).list_for_dairy(dairy_id)
    return resolve_price(records, on)
